"""Splitting of a glob pattern at its ``**`` recursion markers."""

from __future__ import annotations

import logging

from ._path import MARKER, SEP, split_segments

logger = logging.getLogger(__name__)


def split_pattern(pattern: str) -> list[str]:
    """Split *pattern* at every segment that is exactly ``**``.

    Returns ``count_markers(pattern) + 1`` sub-patterns re-joined with ``/``.
    Segments such as ``a**b`` are kept as ordinary wildcards. ``.`` and
    ``..`` are left untouched.

    >>> split_pattern("a/**/b/**/*.f")
    ['a', 'b', '*.f']
    >>> split_pattern("**")
    ['', '']
    """
    runs: list[list[str]] = [[]]
    for segment in split_segments(pattern):
        if segment == MARKER:
            runs.append([])
        elif segment or len(runs) == 1 or runs[-1]:
            # "a/**//b": empty segments right after a marker are dropped.
            runs[-1].append(segment)
    sub_patterns = [SEP.join(run) for run in runs]
    # "/**/x" must keep its root: the first run is [""] there.
    if len(runs) > 1 and runs[0] == [""]:
        sub_patterns[0] = SEP
    logger.debug("split %r into %r", pattern, sub_patterns)
    return sub_patterns


def count_markers(pattern: str) -> int:
    return sum(1 for segment in split_segments(pattern) if segment == MARKER)

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from itertools import chain

from ._exceptions import GlobAccessError, GlobPatternError
from ._fs import OSFileSystem
from ._path import MARKER, SEP, join_path, join_pattern
from ._split import split_pattern
from ._typing import FileSystemQuery

logger = logging.getLogger(__name__)

_ERROR_MODES = ("strict", "ignore")


def _dedup(paths: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(paths))


def _join_source(sub_patterns: Sequence[str]) -> str:
    parts: list[str] = []
    for i, sub_pattern in enumerate(sub_patterns):
        if i:
            parts.append(MARKER)
        if sub_pattern == SEP:
            parts.append("")
        elif sub_pattern:
            parts.append(sub_pattern)
    return SEP.join(parts)


# ---------------------------------------------------------------------------
#  Globber
# ---------------------------------------------------------------------------


class Globber:
    """Recursive glob matcher understanding ``**`` path segments.

    ``**`` stands for the directory it appears in plus every directory
    below it, at any depth. Everything else in a pattern is handed to the
    single-level matcher of *fs* (``glob.glob`` on the host filesystem by
    default).

    Results are deduplicated and keep first-seen order: candidates found
    earlier precede later ones, and inside one subtree a directory precedes
    its descendants.

    :param fs: filesystem capability, :class:`OSFileSystem` when omitted.
    :param errors: ``"strict"`` raises :class:`GlobAccessError` when a
        directory cannot be read, ``"ignore"`` skips it. Missing paths and
        non-directories are skipped in both modes.
    :param max_workers: walk the subtrees of one expansion step on a thread
        pool of this size. Output order is unchanged.
    """

    def __init__(
        self,
        fs: FileSystemQuery | None = None,
        errors: str = "strict",
        max_workers: int | None = None,
    ) -> None:
        if errors not in _ERROR_MODES:
            raise ValueError(
                f"Invalid errors value: {errors!r}. Expected 'strict' or 'ignore'."
            )
        if max_workers is not None and max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers!r}.")
        self._fs: FileSystemQuery = fs if fs is not None else OSFileSystem()
        self._errors: str = errors
        self._max_workers: int | None = max_workers

    @property
    def fs(self) -> FileSystemQuery:
        return self._fs

    # -- public API --

    def glob(self, pattern: str) -> list[str]:
        """Return the paths matching *pattern*, ``**`` included."""
        sub_patterns = split_pattern(pattern)
        if len(sub_patterns) == 1:
            return self._match(pattern, pattern)
        return self.expand(sub_patterns, source=pattern)

    def glob_many(self, patterns: Iterable[str]) -> list[str]:
        """Expand every pattern and return the ordered union of the matches.

        An error in any pattern aborts the whole batch.
        """
        return _dedup(chain.from_iterable(self.glob(p) for p in patterns))

    def expand(self, sub_patterns: Sequence[str], source: str | None = None) -> list[str]:
        """Fold the sub-patterns produced by :func:`split_pattern` into matches.

        Every boundary between two sub-patterns is a ``**``. An empty
        sequence yields an empty list.
        """
        if not sub_patterns:
            return []
        if source is None:
            source = _join_source(sub_patterns)
        if len(sub_patterns) == 1:
            return self._match(sub_patterns[0], source)

        first = sub_patterns[0]
        # An empty leading fragment ("**/x") starts from the current directory.
        candidates = self._match(first, source) if first else [""]
        last = len(sub_patterns) - 1
        for idx in range(1, len(sub_patterns)):
            if not candidates:
                break
            fragment = sub_patterns[idx]
            is_last = idx == last
            expanded = self._expand_step(candidates, is_last and not fragment, source)
            if not fragment:
                candidates = expanded
                continue
            matches = _dedup(
                chain.from_iterable(
                    self._match(join_pattern(path, fragment), source)
                    for path in expanded
                )
            )
            logger.debug(
                "%r: %d directories searched for %r, %d matched",
                source, len(expanded), fragment, len(matches),
            )
            # Matches of the last fragment are reported with everything below them.
            candidates = self._expand_step(matches, True, source) if is_last else matches
        return [path for path in candidates if path]

    def subtree(self, path: str, include_files: bool = False) -> list[str]:
        """Return *path* followed by every directory below it, depth-first.

        With *include_files*, files are listed too. Children are visited in
        the order the filesystem capability enumerates them. Reported paths
        are cleaned with ``os.path.normpath``, so ``./a`` is listed as ``a``.
        """
        return self._subtree(path, include_files, path)

    # -- internals --

    def _match(self, pattern: str, source: str) -> list[str]:
        try:
            return self._fs.glob(pattern)
        except (ValueError, re.error) as exc:
            raise GlobPatternError(pattern, source, str(exc)) from exc
        except OSError as exc:
            raise GlobAccessError(pattern, source, exc) from exc

    def _scandir(self, path: str, source: str) -> list[tuple[str, bool]]:
        try:
            return self._fs.scandir(path)
        except (FileNotFoundError, NotADirectoryError):
            return []
        except OSError as exc:
            if self._errors == "ignore":
                logger.debug("%r: skipping unreadable directory %r: %s", source, path, exc)
                return []
            raise GlobAccessError(path or os.curdir, source, exc) from exc

    def _subtree(self, root: str, include_files: bool, source: str) -> list[str]:
        if root:
            root = os.path.normpath(root)
        result: list[str] = []
        stack: list[tuple[str, bool]] = [(root, True)]
        while stack:
            path, is_dir = stack.pop()
            result.append(path)
            if not is_dir:
                continue
            children = [
                (join_path(path, name), child_is_dir)
                for name, child_is_dir in self._scandir(path, source)
                if child_is_dir or include_files
            ]
            stack.extend(reversed(children))
        return result

    def _expand_step(
        self, candidates: list[str], include_files: bool, source: str
    ) -> list[str]:
        if self._max_workers is None or len(candidates) < 2:
            trees: Iterable[list[str]] = (
                self._subtree(path, include_files, source) for path in candidates
            )
            return _dedup(chain.from_iterable(trees))
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            # map() yields in submission order, so the merge stays deterministic.
            trees = list(
                pool.map(
                    lambda path: self._subtree(path, include_files, source),
                    candidates,
                )
            )
        return _dedup(chain.from_iterable(trees))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(fs={self._fs!r}, errors={self._errors!r}, "
            f"max_workers={self._max_workers!r})"
        )


# ---------------------------------------------------------------------------
#  Module-level conveniences
# ---------------------------------------------------------------------------


def glob(pattern: str) -> list[str]:
    """Shorthand for ``Globber().glob(pattern)``."""
    return Globber().glob(pattern)


def glob_many(patterns: Iterable[str]) -> list[str]:
    return Globber().glob_many(patterns)


def expand(sub_patterns: Sequence[str]) -> list[str]:
    return Globber().expand(sub_patterns)

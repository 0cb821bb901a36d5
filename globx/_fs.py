from __future__ import annotations

import glob
import os


class OSFileSystem:
    """:class:`~globx._typing.FileSystemQuery` backed by the host filesystem.

    ``glob`` is the standard library's single-level ``glob.glob`` and
    ``scandir`` wraps ``os.scandir``. With *sort_entries* (the default) both
    return their results in lexicographic order, which makes expansion
    output deterministic across platforms; without it the order is whatever
    the operating system reports.
    """

    def __init__(self, sort_entries: bool = True) -> None:
        self._sort_entries: bool = sort_entries

    @property
    def sort_entries(self) -> bool:
        return self._sort_entries

    def glob(self, pattern: str) -> list[str]:
        matches = glob.glob(pattern, recursive=False)
        if self._sort_entries:
            matches.sort()
        return matches

    def scandir(self, path: str) -> list[tuple[str, bool]]:
        entries: list[tuple[str, bool]] = []
        with os.scandir(path or os.curdir) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                entries.append((entry.name, is_dir))
        if self._sort_entries:
            entries.sort()
        return entries

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sort_entries={self._sort_entries!r})"

"""Async wrapper around Globber.

Every expansion is delegated to :func:`asyncio.to_thread`, so directory
reads never block the event-loop thread.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence

from ._expand import Globber
from ._typing import FileSystemQuery


class AsyncGlobber:
    """Thin async facade over :class:`Globber`.

    Cancelling an awaiting task does not stop the worker thread; the
    expansion runs to completion and its result is discarded.
    """

    def __init__(
        self,
        fs: FileSystemQuery | None = None,
        errors: str = "strict",
        max_workers: int | None = None,
    ) -> None:
        self._sync = Globber(fs=fs, errors=errors, max_workers=max_workers)

    @property
    def sync(self) -> Globber:
        return self._sync

    async def glob(self, pattern: str) -> list[str]:
        return await asyncio.to_thread(self._sync.glob, pattern)

    async def glob_many(self, patterns: Iterable[str]) -> list[str]:
        # Materialize first: a lazy iterable must not be consumed off-thread.
        return await asyncio.to_thread(self._sync.glob_many, list(patterns))

    async def expand(
        self, sub_patterns: Sequence[str], source: str | None = None
    ) -> list[str]:
        return await asyncio.to_thread(self._sync.expand, sub_patterns, source)

    async def subtree(self, path: str, include_files: bool = False) -> list[str]:
        return await asyncio.to_thread(self._sync.subtree, path, include_files)

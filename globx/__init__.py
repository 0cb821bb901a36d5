from typing import TYPE_CHECKING

from ._exceptions import GlobAccessError, GlobError, GlobPatternError
from ._expand import Globber, expand, glob, glob_many
from ._fs import OSFileSystem
from ._path import escape, has_magic
from ._split import count_markers, split_pattern
from ._typing import FileSystemQuery

if TYPE_CHECKING:
    from ._async import AsyncGlobber


def __getattr__(name: str):  # type: ignore[no-untyped-def]
    if name == "AsyncGlobber":
        from ._async import AsyncGlobber

        globals()["AsyncGlobber"] = AsyncGlobber
        return AsyncGlobber
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Globber",
    "AsyncGlobber",
    "OSFileSystem",
    "FileSystemQuery",
    "GlobError",
    "GlobPatternError",
    "GlobAccessError",
    "glob",
    "glob_many",
    "expand",
    "split_pattern",
    "count_markers",
    "escape",
    "has_magic",
]
__version__ = "0.1.0"

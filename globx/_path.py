import glob
import os
import re

SEP = "/"
MARKER = "**"

_SEP_RE = re.compile(
    "[" + re.escape(SEP + os.sep + (os.altsep or "")) + "]"
)
_MAGIC_RE = re.compile(r"[*?[\]]")


def split_segments(pattern: str) -> list[str]:
    # On POSIX only "/" delimits; on Windows "\\" does too.
    if os.sep == SEP and os.altsep is None:
        return pattern.split(SEP)
    return _SEP_RE.split(pattern)


def has_magic(s: str) -> bool:
    return _MAGIC_RE.search(s) is not None


def escape(path: str) -> str:
    """Escape glob metacharacters in *path* so it matches only itself."""
    if not has_magic(path):
        return path
    return glob.escape(path)


def join_pattern(base: str, fragment: str) -> str:
    """Join an already-matched *base* path with a glob *fragment*.

    The empty base stands for the current directory.
    """
    if not base:
        return fragment
    if not fragment:
        return escape(base)
    return os.path.join(escape(base), fragment)


def join_path(base: str, name: str) -> str:
    if not base:
        return name
    return os.path.normpath(os.path.join(base, name))

from typing import Protocol


class FileSystemQuery(Protocol):
    """Filesystem capability consumed by :class:`~globx.Globber`."""

    def glob(self, pattern: str) -> list[str]:
        """Return existing paths matching a single-level *pattern*.

        Raises ``ValueError`` (or ``re.error``) for a malformed pattern. Custom
        capabilities may raise ``OSError`` when a directory cannot be read;
        the standard library matcher never does.
        """
        ...

    def scandir(self, path: str) -> list[tuple[str, bool]]:
        """Return the immediate entries of *path* as ``(name, is_dir)`` pairs.

        ``is_dir`` must not follow symbolic links. Raises ``OSError``.
        """
        ...

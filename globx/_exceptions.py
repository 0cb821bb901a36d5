class GlobError(Exception):
    """Base class for every error raised by globx."""


class GlobPatternError(GlobError, ValueError):
    """Raised when the single-level matcher rejects a pattern fragment. Subclass of ValueError."""
    def __init__(self, pattern: str, source: str | None = None, reason: str = "") -> None:
        self.pattern = pattern
        self.source = source if source is not None else pattern
        message = f"Malformed glob pattern: '{pattern}'"
        if self.source != pattern:
            message += f" (from '{self.source}')"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class GlobAccessError(GlobError, OSError):
    """Raised when a directory cannot be read during expansion. Subclass of OSError."""
    def __init__(self, path: str, pattern: str, cause: OSError) -> None:
        self.path = path
        self.pattern = pattern
        super().__init__(
            f"Cannot read directory '{path}' while expanding '{pattern}': "
            f"{cause.strerror or cause}"
        )
        self.errno = cause.errno

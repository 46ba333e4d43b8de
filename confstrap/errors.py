from __future__ import annotations

"""Exception classes for configuration bootstrap operations.

Every failure that happens while touching the file system (or while
encoding/decoding configuration content around it) is reported as a
:class:`ConfigError` carrying the failing step, the associated path and the
underlying exception. Precondition violations detected before any file work
use plain built-in exceptions instead.
"""

from typing import Optional

__all__ = ["ConfigError", "ConfigNotLoadedError"]


class ConfigError(Exception):
    """Configuration failure with operation and path context.

    Attributes:
        operation: Short label of the failing step, e.g. ``"read config"``.
        path: File or directory path involved; empty when not applicable.
        cause: The wrapped exception (also chained as ``__cause__``).
    """

    def __init__(self, operation: str, path: str = "",
                 cause: Optional[BaseException] = None) -> None:
        self.operation = operation
        self.path = str(path) if path else ""
        self.cause = cause
        super().__init__(operation, self.path, cause)
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.path:
            return f'config error: {self.operation} "{self.path}": {self.cause}'
        return f"config error: {self.operation}: {self.cause}"

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(operation={self.operation!r}, "
                f"path={self.path!r}, cause={self.cause!r})")

    def unwrap(self) -> Optional[BaseException]:
        """Return the underlying exception."""
        return self.cause


class ConfigNotLoadedError(RuntimeError):
    """Raised when saving through a manager that has not loaded a file yet."""

    def __init__(self, message: str = "no prior load: call load_config() before save_config()") -> None:
        super().__init__(message)

"""Error kinds and exception types for explorer operations.

Call-level failures are raised as ``ExplorerError`` subclasses and reported
by the REPL with the originating command name. Per-entry failures inside
listing and search never reach this layer.
"""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Coarse classification of a failed operation."""

    PATH_NOT_FOUND = "path_not_found"
    PERMISSION_DENIED = "permission_denied"
    INVALID_PATTERN = "invalid_pattern"
    INVALID_MODE = "invalid_mode"
    NOT_A_DIRECTORY = "not_a_directory"
    IO_FAILURE = "io_failure"


def classify_os_error(exc: OSError) -> ErrorKind:
    """Map an ``OSError`` subclass onto an ``ErrorKind``."""
    if isinstance(exc, FileNotFoundError):
        return ErrorKind.PATH_NOT_FOUND
    if isinstance(exc, PermissionError):
        return ErrorKind.PERMISSION_DENIED
    if isinstance(exc, NotADirectoryError):
        return ErrorKind.NOT_A_DIRECTORY
    return ErrorKind.IO_FAILURE


def os_error_message(exc: OSError) -> str:
    """Return the system message for ``exc`` without the errno/path decoration."""
    return exc.strerror or str(exc)


class ExplorerError(Exception):
    """Failure of a single explorer operation."""

    default_kind = ErrorKind.IO_FAILURE

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind if kind is not None else self.default_kind

    @classmethod
    def from_os_error(cls, exc: OSError, prefix: str = "") -> ExplorerError:
        """Build an error carrying the system message and classified kind of ``exc``."""
        return cls(f"{prefix}{os_error_message(exc)}", classify_os_error(exc))


class DirectoryUnreadable(ExplorerError):
    """A directory could not be opened for listing or traversal."""


class FileUnreadable(ExplorerError):
    """A file could not be opened for reading."""


class InvalidPattern(ExplorerError):
    default_kind = ErrorKind.INVALID_PATTERN


class InvalidMode(ExplorerError):
    default_kind = ErrorKind.INVALID_MODE


__all__ = [
    "ErrorKind",
    "classify_os_error",
    "os_error_message",
    "ExplorerError",
    "DirectoryUnreadable",
    "FileUnreadable",
    "InvalidPattern",
    "InvalidMode",
]

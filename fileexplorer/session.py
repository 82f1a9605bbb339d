"""Per-REPL working-directory context.

A ``Session`` owns the directory that relative command arguments resolve
against. It never touches the process-wide ``os.getcwd()`` state, so several
sessions can coexist in one process.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

from .errors import DirectoryUnreadable, ErrorKind, ExplorerError


def _process_cwd() -> Path | None:
    try:
        return Path.cwd()
    except OSError:
        return None


class Session:
    """Working directory state for one interactive session."""

    def __init__(self, cwd: Path | None = None) -> None:
        self._cwd = Path(os.path.abspath(cwd)) if cwd is not None else _process_cwd()

    @property
    def cwd(self) -> Path | None:
        return self._cwd

    def pwd(self) -> str:
        """Return the working directory, or ``""`` when it could not be determined."""
        return str(self._cwd) if self._cwd is not None else ""

    def resolve(self, raw: str | Path) -> Path:
        """Resolve ``raw`` against the working directory, normalizing ``.``/``..``.

        Raises ``ExplorerError`` for paths no system call can accept and
        ``DirectoryUnreadable`` for relative paths when the working directory
        is unknown.
        """
        if "\0" in os.fspath(raw):
            raise ExplorerError("embedded null byte", ErrorKind.IO_FAILURE)
        candidate = Path(raw)
        if not candidate.is_absolute():
            if self._cwd is None:
                raise DirectoryUnreadable("current directory is unavailable", ErrorKind.PATH_NOT_FOUND)
            candidate = self._cwd / candidate
        return Path(os.path.abspath(candidate))

    def change_directory(self, raw: str | Path) -> Path:
        """Switch to ``raw``; the working directory is unchanged on failure."""
        target = self.resolve(raw)
        try:
            status = os.stat(target)
        except OSError as exc:
            raise DirectoryUnreadable.from_os_error(exc) from exc
        if not stat.S_ISDIR(status.st_mode):
            raise DirectoryUnreadable("Not a directory", ErrorKind.NOT_A_DIRECTORY)
        if not os.access(target, os.X_OK):
            raise DirectoryUnreadable("Permission denied", ErrorKind.PERMISSION_DENIED)
        self._cwd = target
        return target


__all__ = ["Session"]

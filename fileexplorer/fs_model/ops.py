"""Mutating filesystem operations behind the REPL commands.

Each function performs one native operation and raises ``ExplorerError`` on
failure. Paths are expected to be resolved by the caller's ``Session``.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from ..errors import ExplorerError
from .permissions import decode

logger = logging.getLogger(__name__)


def create_file(path: Path) -> None:
    """Create ``path`` as an empty file; existing content is left untouched."""
    try:
        with open(path, "a", encoding="utf-8"):
            pass
    except OSError as exc:
        raise ExplorerError.from_os_error(exc, prefix=f"failed to create {path}: ") from exc


def create_directory(path: Path) -> None:
    """Create ``path`` and any missing parents."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExplorerError.from_os_error(exc) from exc


def remove_path(path: Path) -> bool:
    """Delete ``path`` recursively.

    Returns ``False`` when there was nothing to remove. Symlinks are removed
    themselves, never their targets.
    """
    if not os.path.lexists(path):
        return False
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.unlink(path)
    except OSError as exc:
        raise ExplorerError.from_os_error(exc) from exc
    return True


def _copy_error_message(exc: shutil.Error) -> str:
    """Summarize the per-file failures collected by ``shutil.copytree``."""
    details = exc.args[0] if exc.args else None
    if not isinstance(details, list):
        return str(exc)
    if not details:
        return "copy failed"
    _src, _dst, why = details[0]
    if len(details) == 1:
        return str(why)
    return f"{why} (and {len(details) - 1} more)"


def copy_path(src: Path, dst: Path) -> None:
    """Copy ``src`` to ``dst`` recursively, overwriting existing files.

    A file copied onto an existing directory lands inside it under its own
    name. Directory contents are merged into an existing ``dst`` directory.
    """
    try:
        if os.path.isdir(src):
            shutil.copytree(src, dst, dirs_exist_ok=True, copy_function=shutil.copy)
        else:
            shutil.copy(src, dst)
    except shutil.Error as exc:
        raise ExplorerError(_copy_error_message(exc)) from exc
    except OSError as exc:
        raise ExplorerError.from_os_error(exc) from exc


def move_path(src: Path, dst: Path) -> None:
    """Rename ``src`` to ``dst``, falling back to copy-then-delete.

    The fallback is not atomic: if the delete step fails both copies remain.
    """
    try:
        os.replace(src, dst)
        return
    except OSError as exc:
        logger.debug("rename %s -> %s failed (%s); copying instead", src, dst, exc)
    copy_path(src, dst)
    remove_path(src)


def change_permissions(path: Path, mode: str) -> int:
    """Apply a 3-digit octal ``mode`` to ``path`` and return the applied bits."""
    bits = decode(mode)
    try:
        os.chmod(path, bits)
    except OSError as exc:
        raise ExplorerError.from_os_error(exc) from exc
    return bits


__all__ = [
    "create_file",
    "create_directory",
    "remove_path",
    "copy_path",
    "move_path",
    "change_permissions",
]

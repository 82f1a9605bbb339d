"""Directory listing with per-entry metadata and failure isolation."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..errors import DirectoryUnreadable
from .permissions import SENTINEL_PERMISSIONS, encode
from .types import EntryDescriptor

logger = logging.getLogger(__name__)


def safe_file_size(entry: os.DirEntry) -> int:
    """Return the byte length of a regular file entry, or ``0`` on stat failure."""
    try:
        return int(entry.stat().st_size)
    except OSError:
        return 0


def describe_entry(entry: os.DirEntry) -> EntryDescriptor:
    """Build an ``EntryDescriptor`` from link-aware status of ``entry``.

    Entries whose status cannot be read get the sentinel permission string.
    """
    path = Path(entry.path)
    try:
        status = entry.stat(follow_symlinks=False)
    except OSError as exc:
        logger.debug("cannot stat %s: %s", path, exc)
        return EntryDescriptor(
            name=entry.name,
            path=path,
            is_dir=False,
            size=0,
            permissions=SENTINEL_PERMISSIONS,
        )

    mode = status.st_mode
    size = safe_file_size(entry) if stat.S_ISREG(mode) else 0
    return EntryDescriptor(
        name=entry.name,
        path=path,
        is_dir=stat.S_ISDIR(mode),
        size=size,
        permissions=encode(mode),
    )


def list_directory(directory: Path) -> list[EntryDescriptor]:
    """List immediate children of ``directory`` in filesystem-iteration order.

    Raises ``DirectoryUnreadable`` when the directory itself cannot be opened.
    A child whose metadata cannot be read is still returned, sentineled.
    """
    entries: list[EntryDescriptor] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                entries.append(describe_entry(child))
    except OSError as exc:
        raise DirectoryUnreadable.from_os_error(exc) from exc
    return entries


__all__ = [
    "safe_file_size",
    "describe_entry",
    "list_directory",
]

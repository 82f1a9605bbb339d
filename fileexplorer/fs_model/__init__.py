"""Filesystem model: entry datatypes, listing, permissions, and mutations.

This package contains non-REPL primitives:
- the ``EntryDescriptor`` datatype
- ``rwx``/octal permission conversion
- directory listing with per-entry failure isolation
- create/remove/copy/move/chmod operations
"""

from __future__ import annotations

from .types import EntryDescriptor
from .permissions import PERMISSION_MASK, SENTINEL_PERMISSIONS, decode, encode
from .fs import describe_entry, list_directory, safe_file_size
from .ops import (
    change_permissions,
    copy_path,
    create_directory,
    create_file,
    move_path,
    remove_path,
)

__all__ = [
    "EntryDescriptor",
    "PERMISSION_MASK",
    "SENTINEL_PERMISSIONS",
    "encode",
    "decode",
    "describe_entry",
    "list_directory",
    "safe_file_size",
    "create_file",
    "create_directory",
    "remove_path",
    "copy_path",
    "move_path",
    "change_permissions",
]

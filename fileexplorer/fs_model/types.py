"""Domain datatypes for observed filesystem entries."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class EntryDescriptor:
    """One directory child as observed at listing time.

    ``size`` is the byte length for regular files and ``0`` otherwise.
    ``permissions`` is a 9-char ``rwx`` string or the ``?????????`` sentinel.
    """

    name: str
    path: Path
    is_dir: bool
    size: int
    permissions: str


__all__ = ["EntryDescriptor"]

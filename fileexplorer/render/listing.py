"""Fixed-width listing table for ``ls`` output."""

from __future__ import annotations

from collections.abc import Iterable

from ..fs_model import EntryDescriptor

NAME_WIDTH = 30
TYPE_WIDTH = 8
SIZE_WIDTH = 12


def _row(name: str, kind: str, size: str, perms: str) -> str:
    return f"{name:<{NAME_WIDTH}}{kind:<{TYPE_WIDTH}}{size:<{SIZE_WIDTH}}{perms}"


def format_listing(entries: Iterable[EntryDescriptor]) -> list[str]:
    """Return the header row followed by one row per entry.

    Names longer than the column are not truncated; the row just grows.
    """
    rows = [_row("Name", "Type", "Size", "Perms")]
    for entry in entries:
        rows.append(_row(entry.name, "DIR" if entry.is_dir else "FILE", str(entry.size), entry.permissions))
    return rows


__all__ = ["format_listing"]

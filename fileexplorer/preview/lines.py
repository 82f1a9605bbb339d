"""Bounded head/tail line previews streamed from a text file."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from itertools import islice
from pathlib import Path
from typing import TextIO

from ..errors import FileUnreadable


@contextmanager
def open_text(path: Path) -> Iterator[TextIO]:
    """Open ``path`` for tolerant UTF-8 reading, raising ``FileUnreadable``."""
    try:
        handle = open(path, encoding="utf-8", errors="replace")
    except OSError as exc:
        raise FileUnreadable.from_os_error(exc, prefix=f"cannot open {path}: ") from exc
    with handle:
        try:
            yield handle
        except OSError as exc:
            raise FileUnreadable.from_os_error(exc, prefix=f"cannot read {path}: ") from exc


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def head_lines(path: Path, count: int) -> list[str]:
    """Return up to ``count`` leading lines of ``path`` without terminators."""
    with open_text(path) as handle:
        if count <= 0:
            return []
        return [_strip_newline(line) for line in islice(handle, count)]


def tail_lines(path: Path, count: int) -> list[str]:
    """Return up to ``count`` trailing lines of ``path`` without terminators.

    The whole file is scanned once; only the last ``count`` lines are kept.
    """
    with open_text(path) as handle:
        if count <= 0:
            return []
        window: deque[str] = deque(maxlen=count)
        for line in handle:
            window.append(_strip_newline(line))
    return list(window)


__all__ = [
    "open_text",
    "head_lines",
    "tail_lines",
]

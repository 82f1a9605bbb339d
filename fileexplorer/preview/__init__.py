"""Head/tail file previews and their terminal rendering."""

from __future__ import annotations

from .lines import head_lines, open_text, tail_lines
from .syntax import DEFAULT_STYLE, colorize_lines, normalize_style, sanitize_terminal_text

__all__ = [
    "DEFAULT_STYLE",
    "colorize_lines",
    "head_lines",
    "normalize_style",
    "open_text",
    "sanitize_terminal_text",
    "tail_lines",
]

"""Terminal rendering of preview lines.

Highlights with Pygments and neutralizes terminal control bytes so a
previewed file cannot move the cursor or ring the bell.
"""

from __future__ import annotations

import re
from pathlib import Path

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_FORMATTERS: dict[str, TerminalFormatter] = {}


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = TerminalFormatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def colorize_lines(lines: list[str], path: Path, style: str = DEFAULT_STYLE) -> list[str]:
    """Highlight preview ``lines`` using a lexer picked from ``path``'s name.

    Returns one rendered string per input line. Input is sanitized first.
    """
    if not lines:
        return []
    source = sanitize_terminal_text("\n".join(lines)) + "\n"
    try:
        lexer = get_lexer_for_filename(path.name, source, stripnl=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False)

    rendered = highlight(source, lexer, _formatter_for_style(normalize_style(style)))
    rendered_lines = rendered.split("\n")
    if len(rendered_lines) < len(lines):
        return [sanitize_terminal_text(line) for line in lines]
    return rendered_lines[: len(lines)]


__all__ = [
    "DEFAULT_STYLE",
    "sanitize_terminal_text",
    "normalize_style",
    "colorize_lines",
]

"""Help menu text for the REPL ``help`` command."""

from __future__ import annotations

BANNER = "Type 'help' for menu."

HELP_LINES: tuple[str, ...] = (
    "",
    "===== File Explorer =====",
    "help | pwd | ls [path] | cd <p> | mkfile <p> | mkdir <p> | rm <p>",
    "cp <a> <b> | mv <a> <b> | cathead <f> N | cattail <f> N",
    "search <root> <regex> | chmod <p> <mode> | exit",
)

__all__ = ["BANNER", "HELP_LINES"]

"""Interactive command loop: tokenizing, dispatch, and command handlers."""

from __future__ import annotations

from .commands import ExplorerCommands
from .loop import ExplorerRepl, ReplState
from .registry import (
    CommandBinding,
    CommandInvocation,
    CommandRegistry,
    UnknownCommand,
    UsageError,
    parse_command_line,
)

__all__ = [
    "CommandBinding",
    "CommandInvocation",
    "CommandRegistry",
    "ExplorerCommands",
    "ExplorerRepl",
    "ReplState",
    "UnknownCommand",
    "UsageError",
    "parse_command_line",
]

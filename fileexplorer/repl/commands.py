"""Handlers for every REPL command.

Handlers write results to the output stream and raise ``ExplorerError`` for
failures; the loop prefixes failures with the command name.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from ..errors import ExplorerError
from ..fs_model import (
    change_permissions,
    copy_path,
    create_directory,
    create_file,
    list_directory,
    move_path,
    remove_path,
)
from ..preview import DEFAULT_STYLE, colorize_lines, head_lines, tail_lines
from ..render import HELP_LINES, format_listing
from ..search import search_tree
from ..session import Session
from .registry import CommandBinding, CommandInvocation, UsageError

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


class ExplorerCommands:
    """Command implementations bound to one session and output pair."""

    def __init__(
        self,
        session: Session,
        stdout: TextIO,
        stderr: TextIO,
        color: bool = False,
        style: str = DEFAULT_STYLE,
    ) -> None:
        self.session = session
        self.stdout = stdout
        self.stderr = stderr
        self.color = color
        self.style = style

    def _emit(self, lines: list[str]) -> None:
        for line in lines:
            self.stdout.write(line + "\n")

    def help(self, invocation: CommandInvocation) -> None:
        self._emit(list(HELP_LINES))

    def pwd(self, invocation: CommandInvocation) -> None:
        self._emit([self.session.pwd()])

    def ls(self, invocation: CommandInvocation) -> None:
        """List ``rest`` or the working directory.

        An unreadable directory is reported and an empty table still printed.
        """
        target_text = invocation.rest or self.session.pwd()
        try:
            entries = list_directory(self.session.resolve(target_text))
        except ExplorerError as exc:
            self.stderr.write(f"ls: cannot access '{target_text}': {exc.message}\n")
            entries = []
        self._emit(format_listing(entries))

    def cd(self, invocation: CommandInvocation) -> None:
        self.session.change_directory(invocation.args[0])

    def mkfile(self, invocation: CommandInvocation) -> None:
        create_file(self.session.resolve(invocation.args[0]))

    def mkdir(self, invocation: CommandInvocation) -> None:
        create_directory(self.session.resolve(invocation.args[0]))

    def rm(self, invocation: CommandInvocation) -> bool:
        target = self.session.resolve(invocation.args[0])
        removed = remove_path(target)
        if not removed:
            logger.debug("rm: nothing to remove at %s", target)
        return removed

    def cp(self, invocation: CommandInvocation) -> None:
        src, dst = invocation.args[:2]
        copy_path(self.session.resolve(src), self.session.resolve(dst))

    def mv(self, invocation: CommandInvocation) -> None:
        src, dst = invocation.args[:2]
        move_path(self.session.resolve(src), self.session.resolve(dst))

    def _line_count(self, invocation: CommandInvocation) -> int:
        raw = invocation.args[1]
        try:
            return int(raw)
        except ValueError:
            raise UsageError(f"{invocation.name} <file> <n> (invalid line count '{raw}')") from None

    def _emit_preview(self, path: Path, lines: list[str]) -> None:
        if self.color:
            lines = colorize_lines(lines, path, self.style)
        self._emit(lines)

    def cathead(self, invocation: CommandInvocation) -> None:
        count = self._line_count(invocation)
        path = self.session.resolve(invocation.args[0])
        self._emit_preview(path, head_lines(path, count))

    def cattail(self, invocation: CommandInvocation) -> None:
        count = self._line_count(invocation)
        path = self.session.resolve(invocation.args[0])
        self._emit_preview(path, tail_lines(path, count))

    def search(self, invocation: CommandInvocation) -> None:
        root, pattern = invocation.args[:2]
        self._emit(search_tree(self.session.resolve(root), pattern))

    def chmod(self, invocation: CommandInvocation) -> None:
        path, mode = invocation.args[:2]
        change_permissions(self.session.resolve(path), mode)

    def bindings(self) -> tuple[CommandBinding, ...]:
        """Return bindings for every command except ``exit``, which the loop owns."""
        return (
            CommandBinding(("help",), self.help, "help"),
            CommandBinding(("pwd",), self.pwd, "pwd"),
            CommandBinding(("ls",), self.ls, "ls [path]"),
            CommandBinding(("cd",), self.cd, "cd <path>", min_args=1),
            CommandBinding(("mkfile",), self.mkfile, "mkfile <path>", min_args=1),
            CommandBinding(("mkdir",), self.mkdir, "mkdir <path>", min_args=1),
            CommandBinding(("rm",), self.rm, "rm <path>", min_args=1),
            CommandBinding(("cp",), self.cp, "cp <src> <dst>", min_args=2),
            CommandBinding(("mv",), self.mv, "mv <src> <dst>", min_args=2),
            CommandBinding(("cathead",), self.cathead, "cathead <file> <n>", min_args=2),
            CommandBinding(("cattail",), self.cattail, "cattail <file> <n>", min_args=2),
            CommandBinding(("search",), self.search, "search <root> <regex>", min_args=2),
            CommandBinding(("chmod",), self.chmod, "chmod <path> <mode>", min_args=2),
        )


__all__ = ["EXIT_COMMAND", "ExplorerCommands"]

"""Read-eval-print loop driving one explorer session.

The loop has two states, running and terminated. It only terminates on
end of input or ``exit``; every command failure is reported and the loop
prompts again.
"""

from __future__ import annotations

import enum
import sys
from typing import TextIO

from ..errors import ExplorerError
from ..preview import DEFAULT_STYLE
from ..render import BANNER
from ..session import Session
from .commands import EXIT_COMMAND, ExplorerCommands
from .registry import CommandBinding, CommandRegistry, UnknownCommand, UsageError, parse_command_line


class ReplState(enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class ExplorerRepl:
    """Command loop bound to a ``Session`` and a pair of output streams."""

    def __init__(
        self,
        session: Session | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        prompt: str = "",
        banner: bool = False,
        color: bool = False,
        style: str = DEFAULT_STYLE,
    ) -> None:
        self.session = session if session is not None else Session()
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.prompt = prompt
        self.banner = banner
        self.state = ReplState.RUNNING
        self.commands = ExplorerCommands(self.session, self.stdout, self.stderr, color=color, style=style)
        self.registry = CommandRegistry().register_bindings(
            *self.commands.bindings(),
            CommandBinding((EXIT_COMMAND,), self._exit, EXIT_COMMAND),
        )

    def _exit(self, _invocation: object) -> None:
        self.state = ReplState.TERMINATED

    def _error(self, message: str) -> None:
        self.stderr.write(message + "\n")

    def execute(self, line: str) -> ReplState:
        """Run one input line and return the resulting state."""
        invocation = parse_command_line(line)
        if invocation is None:
            return self.state
        try:
            self.registry.dispatch(invocation)
        except UnknownCommand as exc:
            self._error(f"Unknown command: {exc.name} (type 'help')")
        except UsageError as exc:
            self._error(f"{invocation.name}: usage: {exc}")
        except ExplorerError as exc:
            self._error(f"{invocation.name}: {exc.message}")
        return self.state

    def run(self, stdin: TextIO | None = None) -> int:
        """Read and execute lines until ``exit`` or end of input; returns ``0``."""
        stdin = stdin if stdin is not None else sys.stdin
        if self.banner:
            self.stdout.write(BANNER + "\n")
        while self.state is ReplState.RUNNING:
            if self.prompt:
                self.stdout.write(self.prompt)
                self.stdout.flush()
            line = stdin.readline()
            if not line:
                self.state = ReplState.TERMINATED
                break
            self.execute(line)
        return 0


__all__ = ["ReplState", "ExplorerRepl"]

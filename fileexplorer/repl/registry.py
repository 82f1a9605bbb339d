"""Command-name dispatch table and input-line tokenizing."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class CommandInvocation:
    """One parsed input line.

    ``args`` are whitespace-delimited tokens; ``rest`` is the verbatim
    remainder after the command word, for commands that accept spaces.
    """

    name: str
    args: tuple[str, ...] = ()
    rest: str = ""


class UsageError(ValueError):
    """A command was invoked without the arguments it requires."""


class UnknownCommand(LookupError):
    """No binding exists for the command word."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name


@dataclass(frozen=True)
class CommandBinding:
    """Mapping from one or more command words to a handler."""

    names: tuple[str, ...]
    handler: Callable[[CommandInvocation], object]
    usage: str = ""
    min_args: int = 0

    def invoke(self, invocation: CommandInvocation) -> object:
        """Check arity and run the handler."""
        if len(invocation.args) < self.min_args:
            raise UsageError(self.usage or invocation.name)
        return self.handler(invocation)


def parse_command_line(line: str) -> CommandInvocation | None:
    """Split ``line`` into a command word and arguments.

    Returns ``None`` for blank lines.
    """
    parts = line.rstrip("\r\n").split(maxsplit=1)
    if not parts:
        return None
    rest = parts[1] if len(parts) > 1 else ""
    return CommandInvocation(name=parts[0], args=tuple(rest.split()), rest=rest)


class CommandRegistry:
    """Small command-dispatch table keyed by command word."""

    def __init__(self) -> None:
        self._bindings: dict[str, CommandBinding] = {}

    def register_binding(self, binding: CommandBinding) -> CommandRegistry:
        """Register one binding, overwriting existing handlers for same names."""
        for name in binding.names:
            self._bindings[name] = binding
        return self

    def register_bindings(self, *bindings: CommandBinding) -> CommandRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, name: str) -> CommandBinding | None:
        return self._bindings.get(name)

    def dispatch(self, invocation: CommandInvocation) -> object:
        """Invoke the handler bound to ``invocation.name``.

        Raises ``UnknownCommand`` when nothing is bound and ``UsageError``
        when required arguments are missing.
        """
        binding = self.lookup(invocation.name)
        if binding is None:
            raise UnknownCommand(invocation.name)
        return binding.invoke(invocation)


__all__ = [
    "CommandInvocation",
    "CommandBinding",
    "CommandRegistry",
    "UnknownCommand",
    "UsageError",
    "parse_command_line",
]

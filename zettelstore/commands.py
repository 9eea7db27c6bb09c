"""Registry of sub-commands and their flag parsers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field, replace
from typing import Callable, Optional

from .meta import Meta

CommandFunc = Callable[[Meta], int]
FlagSetup = Callable[[argparse.ArgumentParser], None]


class CommandError(Exception):
    """Raised for invalid command definitions and unparsable flags."""


class _FlagParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise CommandError(message)


@dataclass
class Command:
    """A sub-command: its name, its function and its flag definitions."""

    name: str
    func: Optional[CommandFunc]
    flags: Optional[FlagSetup] = None
    parser: Optional[argparse.ArgumentParser] = field(
        default=None, init=False, repr=False, compare=False
    )


class CommandRegistry:
    """Holds the registered commands by name."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """Register a command; its flag parser is built here."""
        if not command.name or command.func is None:
            raise CommandError("Required command values missing")
        if command.name in self._commands:
            raise CommandError(f"Command already registered: {command.name}")
        parser = _FlagParser(prog=command.name, argument_default=argparse.SUPPRESS)
        if command.flags is not None:
            command.flags(parser)
        parser.add_argument("arguments", nargs=argparse.REMAINDER, default=[])
        registered = replace(command)
        registered.parser = parser
        self._commands[command.name] = registered

    def get(self, name: str) -> Optional[Command]:
        """Return the command with the given name, or None."""
        return self._commands.get(name)

    def names(self) -> list[str]:
        """Return the sorted names of all registered commands."""
        return sorted(self._commands)
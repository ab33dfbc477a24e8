"""
Command Router - Dispatches a command name to its registered handler.

Each command has a unique name, a description shown by `help <command>`,
and a handler that takes the command's parameters and returns an exit
status. The registry is filled once at startup from a static table.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from loguru import logger

from searchsh.errors import UnknownCommand

from .options import ParsedInvocation

Handler = Callable[[Sequence[str]], int]


@dataclass
class Command:
    """A single named subcommand."""
    name: str
    description: str
    handler: Handler


@dataclass
class CommandContext:
    """State shared by handlers for the length of one invocation."""
    program: str = "searchsh"
    settings: dict = field(default_factory=dict)
    invocation: ParsedInvocation = field(default_factory=ParsedInvocation)
    registry: Optional["CommandRegistry"] = None

    @property
    def gui(self) -> bool:
        return self.invocation.gui

    def setting(self, section: str, key: str, default: Any = None) -> Any:
        return self.settings.get(section, {}).get(key, default)


class CommandRegistry:
    """Name → command mapping used for dispatch."""

    def __init__(self):
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """Register a command. Names must be unique."""
        if command.name in self._commands:
            raise ValueError(f"Command already registered: {command.name}")
        self._commands[command.name] = command

    def get(self, name: str) -> Optional[Command]:
        return self._commands.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def names(self) -> list[str]:
        """Registered command names in alphabetical order."""
        return sorted(self._commands)

    def dispatch(self, name: str, parameters: Sequence[str]) -> int:
        """
        Run the handler registered under ``name``.

        Args:
            name: The command name
            parameters: Arguments passed through to the handler

        Returns:
            The handler's exit status.

        Raises:
            UnknownCommand: if no command is registered under ``name``
        """
        command = self._commands.get(name)
        if command is None:
            raise UnknownCommand(name)

        logger.debug(f"dispatch: {name} {list(parameters)}")
        status = command.handler(list(parameters))
        return 0 if status is None else status

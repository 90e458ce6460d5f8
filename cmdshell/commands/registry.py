"""
Command registry and per-invocation context.

A command handler is a plain callable taking a CommandContext. It produces
output by calling ``ctx.reply(text)`` zero or more times; the dispatcher
collects those replies and joins them into the command's textual result.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from cmdshell.system.errors import CommandRegistrationError

logger = logging.getLogger(__name__)


@dataclass
class CommandContext:
    """
    State of a single command invocation.

    Attributes:
        command: The command name that was invoked
        args: Everything after the command name, with leading whitespace removed
        depth: Nesting depth of this invocation; 0 for user input
        replies: Replies collected so far, in order
    """
    command: str
    args: str = ""
    depth: int = 0
    replies: List[str] = field(default_factory=list)

    def reply(self, text: str) -> None:
        self.replies.append(str(text))


CommandHandler = Callable[[CommandContext], None]


@dataclass(frozen=True)
class RegisteredCommand:
    name: str
    handler: CommandHandler
    help_text: str = ""


class CommandRegistry:
    """Maps command names to handlers."""

    def __init__(self):
        self._commands: Dict[str, RegisteredCommand] = {}

    def register(self, name: str, handler: CommandHandler, help_text: str = "") -> None:
        """
        Registers a command handler.

        Args:
            name: Command name; matched case-insensitively, must be a single word.
            handler: Callable invoked with a CommandContext.
            help_text: Text shown by the help command.

        Raises:
            CommandRegistrationError: If the name is empty, contains whitespace or is taken.
        """
        key = name.strip().lower()
        if not key or len(key.split()) != 1:
            raise CommandRegistrationError(f"Invalid command name: '{name}'")
        if key in self._commands:
            raise CommandRegistrationError(f"Command already registered: '{key}'")
        self._commands[key] = RegisteredCommand(name=key, handler=handler, help_text=help_text)
        logger.debug(f"Registered command '{key}'")

    def unregister(self, name: str) -> None:
        self._commands.pop(name.strip().lower(), None)

    def lookup(self, name: str) -> Optional[RegisteredCommand]:
        return self._commands.get(name.strip().lower())

    def list_commands(self) -> List[Tuple[str, str]]:
        """Returns (name, help_text) pairs sorted by name."""
        return [(cmd.name, cmd.help_text) for cmd in sorted(self._commands.values(), key=lambda c: c.name)]

    def __contains__(self, name: str) -> bool:
        return self.lookup(name) is not None

    def __len__(self) -> int:
        return len(self._commands)

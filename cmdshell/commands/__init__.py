"""Command registry and built-in commands."""

from .registry import CommandContext, CommandHandler, CommandRegistry, RegisteredCommand
from .builtin import register_builtin_commands

__all__ = [
    "CommandContext",
    "CommandHandler",
    "CommandRegistry",
    "RegisteredCommand",
    "register_builtin_commands",
]

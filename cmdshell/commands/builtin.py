"""
Built-in commands.

Small text utilities that make interpolation useful from the REPL, e.g.

    shell say #ops $(upper $(echo deploy done))
"""

import sys
from typing import Optional, TextIO

from cmdshell.commands.registry import CommandContext, CommandRegistry


def cmd_ping(ctx: CommandContext) -> None:
    ctx.reply("pong")


def cmd_echo(ctx: CommandContext) -> None:
    ctx.reply(ctx.args)


def cmd_upper(ctx: CommandContext) -> None:
    ctx.reply(ctx.args.upper())


def cmd_lower(ctx: CommandContext) -> None:
    ctx.reply(ctx.args.lower())


def cmd_reverse(ctx: CommandContext) -> None:
    ctx.reply(ctx.args[::-1])


def make_say_command(output: TextIO):
    """
    Builds the ``say <target> <text>`` command.

    say writes straight to `output` instead of replying, so interpolating it
    yields the empty string.
    """
    def cmd_say(ctx: CommandContext) -> None:
        parts = ctx.args.split(maxsplit=1)
        if not parts:
            ctx.reply("Usage: say <target> <text>")
            return
        target = parts[0]
        text = parts[1] if len(parts) > 1 else ""
        print(f"[{target}] {text}", file=output)

    return cmd_say


def make_help_command(registry: CommandRegistry):
    """Builds the ``help [command]`` command over `registry`."""
    def cmd_help(ctx: CommandContext) -> None:
        topic = ctx.args.strip()
        if not topic:
            names = ", ".join(name for name, _ in registry.list_commands())
            ctx.reply(f"Available commands: {names}")
            return
        command = registry.lookup(topic)
        if command is None:
            ctx.reply(f"No help for unknown command '{topic}'")
        elif command.help_text:
            ctx.reply(command.help_text)
        else:
            ctx.reply(f"No help available for '{command.name}'")

    return cmd_help


def register_builtin_commands(registry: CommandRegistry, output: Optional[TextIO] = None) -> CommandRegistry:
    """Registers the built-in commands on `registry` and returns it."""
    registry.register("ping", cmd_ping, "ping: replies pong")
    registry.register("echo", cmd_echo, "echo <text>: replies with <text>")
    registry.register("upper", cmd_upper, "upper <text>: replies with <text> in upper case")
    registry.register("lower", cmd_lower, "lower <text>: replies with <text> in lower case")
    registry.register("reverse", cmd_reverse, "reverse <text>: replies with <text> reversed")
    registry.register(
        "say",
        make_say_command(output or sys.stdout),
        "say <target> <text>: sends <text> to <target>; produces no reply",
    )
    registry.register("help", make_help_command(registry), "help [command]: lists commands or shows a command's help")
    return registry

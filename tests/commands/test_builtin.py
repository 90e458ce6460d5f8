"""Tests for the built-in commands."""

import pytest

from cmdshell.commands.registry import CommandContext


def invoke(registry, name, args=""):
    ctx = CommandContext(command=name, args=args)
    registry.lookup(name).handler(ctx)
    return ctx.replies

def test_builtin_names(registry):
    names = [name for name, _ in registry.list_commands()]
    assert names == ["echo", "help", "lower", "ping", "reverse", "say", "upper"]

def test_ping(registry):
    assert invoke(registry, "ping") == ["pong"]

@pytest.mark.parametrize("name, args, expected", [
    ("echo", "Hello There", "Hello There"),
    ("upper", "Hello", "HELLO"),
    ("lower", "Hello", "hello"),
    ("reverse", "abc", "cba"),
])
def test_text_commands(registry, name, args, expected):
    assert invoke(registry, name, args) == [expected]

def test_say_writes_and_does_not_reply(registry, say_output):
    assert invoke(registry, "say", "#ops deploy done") == []
    assert say_output.getvalue() == "[#ops] deploy done\n"

def test_say_without_text(registry, say_output):
    assert invoke(registry, "say", "#ops") == []
    assert say_output.getvalue() == "[#ops] \n"

def test_say_usage(registry, say_output):
    assert invoke(registry, "say", "") == ["Usage: say <target> <text>"]
    assert say_output.getvalue() == ""

def test_help_lists_commands(registry):
    assert invoke(registry, "help") == ["Available commands: echo, help, lower, ping, reverse, say, upper"]

def test_help_for_command(registry):
    assert invoke(registry, "help", "ping") == ["ping: replies pong"]

def test_help_for_unknown_command(registry):
    assert invoke(registry, "help", "nope") == ["No help for unknown command 'nope'"]

def test_help_without_help_text(registry):
    registry.register("bare", lambda ctx: None)
    assert invoke(registry, "help", "bare") == ["No help available for 'bare'"]

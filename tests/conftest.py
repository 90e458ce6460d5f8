import io

import pytest
from unittest.mock import MagicMock

from cmdshell.commands.builtin import register_builtin_commands
from cmdshell.commands.registry import CommandRegistry
from cmdshell.config.settings import ShellConfig
from cmdshell.dispatcher import ShellDispatcher
from cmdshell.shell_evaluator.shell_evaluator import ShellEvaluator
from cmdshell.shell_parser.shell_parser import ShellParser


# --- Core Components ---

@pytest.fixture
def parser():
    """Provides a ShellParser instance with the default depth limit."""
    return ShellParser()

@pytest.fixture
def evaluator(parser):
    """Provides a ShellEvaluator sharing the parser fixture."""
    return ShellEvaluator(parser)

@pytest.fixture
def upper_run():
    """A run callback that upper-cases its argument and records every call."""
    return MagicMock(name="MockRun", side_effect=lambda text: text.upper())


# --- Command Machinery ---

@pytest.fixture
def say_output():
    """Captures what the 'say' command writes."""
    return io.StringIO()

@pytest.fixture
def registry(say_output):
    """Registry with the built-in commands, 'say' writing to say_output."""
    return register_builtin_commands(CommandRegistry(), output=say_output)

@pytest.fixture
def config():
    return ShellConfig()

@pytest.fixture
def dispatcher(registry, config):
    """ShellDispatcher over the built-in registry (registers 'shell')."""
    return ShellDispatcher(registry, config=config)

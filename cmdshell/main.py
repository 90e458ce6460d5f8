"""
Main application entry point.

Wires the command registry, built-in commands and the shell dispatcher
together, then either runs a single command line (-c) or starts the REPL.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, TextIO

from cmdshell.commands.builtin import register_builtin_commands
from cmdshell.commands.registry import CommandRegistry
from cmdshell.config.logging_config import setup_logging
from cmdshell.config.settings import ENV_LOG_LEVEL, ShellConfig
from cmdshell.dispatcher import ShellDispatcher
from cmdshell.repl.repl import Repl

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Run commands with nested $( ... ) interpolation.")
    parser.add_argument("-c", "--command", type=str, default=None,
                        help="Run a single command line (e.g. 'shell echo $(ping)') and exit.")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="Maximum interpolation nesting depth; 0 disables the limit.")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ERROR). Overrides CMDSHELL_LOG_LEVEL.")
    parser.add_argument("--log-file", type=str, default=None,
                        help="Write logs to this file instead of stdout.")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ShellConfig:
    """Environment config with CLI overrides applied."""
    config = ShellConfig.from_env()
    overrides = {}
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth or None
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if overrides:
        # Re-validate so bad CLI values fail the same way bad env values do
        config = ShellConfig(**{**config.model_dump(), **overrides})
    return config


def build_dispatcher(config: ShellConfig, output: Optional[TextIO] = None) -> ShellDispatcher:
    registry = register_builtin_commands(CommandRegistry(), output=output)
    return ShellDispatcher(registry, config=config)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    config = build_config(args)
    # Quiet by default when running a single command so logs don't mix with the result
    explicit_level = args.log_level is not None or ENV_LOG_LEVEL in os.environ
    level = config.log_level if (explicit_level or args.command is None) else "WARNING"
    setup_logging(level, args.log_file)

    dispatcher = build_dispatcher(config)
    if args.command is not None:
        result = dispatcher.handle(args.command)
        if result.is_error:
            print(f"Error: {result.content}", file=sys.stderr)
            return 1
        if result.content:
            print(result.content)
        return 0

    Repl(dispatcher).start()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Dispatcher module responsible for routing command lines to registered commands.

It also owns the ``shell`` command: the bridge between the interpolation
core (parser + evaluator) and command execution. The evaluator only sees a
``run(str) -> str`` callback; here that callback dispatches the text as an
independent command invocation and joins the replies it produced.
"""

import logging
from typing import List, Optional

from cmdshell.commands.registry import CommandContext, CommandRegistry
from cmdshell.config.settings import ShellConfig
from cmdshell.shell_evaluator.shell_evaluator import ShellEvaluator
from cmdshell.shell_parser.shell_parser import ShellParser
from cmdshell.system.errors import ShellDepthError, ShellEvaluationError, ShellSyntaxError
from cmdshell.system.models import ShellFailure, ShellFailureDetails, ShellFailureReason, ShellResult

# Configure logging for this module
logger = logging.getLogger(__name__)

SHELL_COMMAND = "shell"
SHELL_HELP = (
    'The "shell" command enables interpolation of commands. For example, '
    '"shell say #channel $(ping)" will say the response of the ping command, "pong", in #channel. '
    'Note that not all output of commands is considered a response, only replies. '
    "It's recommended to interpolate only commands that respond quickly."
)


def _create_failed_result(
    reason: ShellFailureReason,
    message: str,
    details_obj: Optional[ShellFailureDetails] = None
) -> ShellResult:
    """
    Creates a FAILED ShellResult with the error nested under notes["error"].
    """
    error_obj = ShellFailure(reason=reason, message=message, details=details_obj)
    return ShellResult(status="FAILED", content=message, notes={"error": error_obj.model_dump(exclude_none=True)})


class ShellDispatcher:
    """
    Runs command lines against a CommandRegistry and provides the ``shell`` command.
    """

    def __init__(
        self,
        registry: CommandRegistry,
        config: Optional[ShellConfig] = None,
        parser: Optional[ShellParser] = None,
        evaluator: Optional[ShellEvaluator] = None,
    ):
        """
        Args:
            registry: Commands available to user input and to interpolations.
            config: Shell settings; defaults to ShellConfig().
            parser: Parser for shell command text; built from config.max_depth if omitted.
            evaluator: Evaluator for parsed trees; built around `parser` if omitted.
        """
        self.registry = registry
        self.config = config or ShellConfig()
        self.parser = parser or ShellParser(max_depth=self.config.max_depth)
        self.evaluator = evaluator or ShellEvaluator(self.parser)
        if SHELL_COMMAND not in registry:
            registry.register(SHELL_COMMAND, self._cmd_shell, SHELL_HELP)

    def dispatch(self, command_text: str, depth: int = 0) -> List[str]:
        """
        Invokes the command named by the first word of `command_text`.

        Args:
            command_text: "<name> <args...>".
            depth: Nesting depth of this invocation; 0 for user input.

        Returns:
            The replies the command produced, in order. Empty for blank input
            or an unknown command.

        Raises:
            ShellDepthError: If depth exceeds config.max_depth.
            Any exception raised by the command handler, unmodified.
        """
        max_depth = self.config.max_depth
        if max_depth is not None and depth > max_depth:
            logger.error(f"Nested invocation depth {depth} exceeds {max_depth}: '{command_text}'")
            raise ShellDepthError(command_text, max_depth, error_details=f"Nested command invocation at depth {depth}")

        parts = command_text.strip().split(maxsplit=1)
        if not parts:
            return []
        name = parts[0]
        args = parts[1] if len(parts) > 1 else ""

        command = self.registry.lookup(name)
        if command is None:
            logger.warning(f"Unknown command '{name}' (depth {depth})")
            return []

        ctx = CommandContext(command=command.name, args=args, depth=depth)
        logger.debug(f"Dispatching '{command.name}' args='{args}' depth={depth}")
        command.handler(ctx)
        return ctx.replies

    def run(self, command_text: str, depth: int = 0) -> str:
        """
        Dispatches `command_text` and joins its replies with config.reply_separator.

        This is the run callback handed to the evaluator.
        """
        replies = self.dispatch(command_text, depth)
        result = self.config.reply_separator.join(replies)
        logger.debug(f"command {command_text} returned {result}")
        return result

    def _cmd_shell(self, ctx: CommandContext) -> None:
        """shell <command>: resolves $( ... ) interpolations, then runs the result."""
        try:
            tree = self.parser.parse_string(ctx.args)
        except ShellDepthError:
            raise
        except ShellSyntaxError as e:
            logger.warning(f"Malformed shell command '{ctx.args}': {e.message}")
            ctx.reply(f"Malformed command {ctx.args}")
            return

        nested_depth = ctx.depth + 1

        def run_nested(command_text: str) -> str:
            return self.run(command_text, nested_depth)

        substituted = self.evaluator.execute(tree, run_nested)
        logger.info(f"shell resolved '{ctx.args}' to '{substituted}'")
        result = self.run(substituted, nested_depth)
        if result or not self.config.suppress_empty_replies:
            ctx.reply(result)

    def handle(self, line: str) -> ShellResult:
        """
        Top-level entry point for one line of user input.

        Unlike dispatch, never raises for command failures: they are reported
        as a FAILED ShellResult.
        """
        logger.info(f"Dispatcher received line: '{line[:100]}'")
        name = line.split(maxsplit=1)[0] if line.strip() else ""
        notes = {"command": name, "known_command": name in self.registry if name else False}

        try:
            replies = self.dispatch(line)
        except ShellDepthError as e:
            logger.warning(f"Depth limit hit for '{line[:50]}': {e.message}")
            details_obj = ShellFailureDetails(failing_command=e.command_text, position=e.position, max_depth=e.max_depth)
            failed = _create_failed_result("depth_exceeded", e.message, details_obj)
            failed.notes.update(notes)
            return failed
        except ShellEvaluationError as e:
            logger.warning(f"Evaluation error for '{line[:50]}': {e}")
            details_obj = ShellFailureDetails(failing_command=e.command_text, exception_type=type(e).__name__)
            failed = _create_failed_result("unexpected_error", f"Evaluation error: {e.args[0]}", details_obj)
            failed.notes.update(notes)
            return failed
        except Exception as e:
            logger.exception(f"Command failed for '{line[:50]}': {e}")
            details_obj = ShellFailureDetails(failing_command=line, exception_type=type(e).__name__)
            failed = _create_failed_result("command_failure", f"Command failed: {e}", details_obj)
            failed.notes.update(notes)
            return failed

        notes["reply_count"] = len(replies)
        return ShellResult(
            status="COMPLETE",
            content=self.config.reply_separator.join(replies),
            replies=replies,
            notes=notes,
        )

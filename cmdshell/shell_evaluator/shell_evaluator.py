"""
Tree-walking evaluator for parsed command strings.

Interpolations are resolved depth-first, left to right: the nested command of
an interpolation is fully substituted before the run callback sees it, and
the callback's return value is spliced in place of the ``$( ... )`` span.
"""

import logging
from typing import Callable, Optional

from cmdshell.shell_parser.nodes import CommandNode, InterpolationNode, LiteralNode, ShellNode
from cmdshell.shell_parser.shell_parser import ShellParser
from cmdshell.system.errors import ShellEvaluationError

logger = logging.getLogger(__name__)

RunCallback = Callable[[str], str]


class ShellEvaluator:
    """
    Resolves every interpolation in a CommandNode through a run callback.

    The evaluator holds no per-call state, so a single instance is safe to
    reuse and to call reentrantly (a callback may itself evaluate another tree).
    Exceptions raised by the callback are not caught: they abort the traversal
    and reach the caller unchanged.
    """

    def __init__(self, parser: Optional[ShellParser] = None):
        """
        Args:
            parser: Parser used by evaluate_string. Defaults to a ShellParser with default limits.
        """
        self.parser = parser or ShellParser()

    def execute(self, tree: CommandNode, run: RunCallback) -> str:
        """
        Returns the command text of `tree` with all interpolations substituted.

        The returned string is not itself passed to `run`; dispatching the
        outer command is left to the caller.

        Args:
            tree: Root node produced by ShellParser.
            run: Takes resolved command text, returns its textual result.

        Returns:
            The fully substituted command string.

        Raises:
            ShellEvaluationError: If `run` returns a non-string value.
            Any exception raised by `run`, unmodified.
        """
        logger.debug(f"Executing command tree with {tree.interpolation_count()} interpolation(s)")
        return self._eval(tree, run)

    def evaluate_string(self, command_text: str, run: RunCallback) -> str:
        """Parses `command_text` and executes the resulting tree."""
        logger.info(f"Evaluating command string: {command_text[:100]}")
        tree = self.parser.parse_string(command_text)
        return self.execute(tree, run)

    def _eval(self, node: ShellNode, run: RunCallback) -> str:
        if isinstance(node, LiteralNode):
            return node.text

        if isinstance(node, InterpolationNode):
            inner_text = self._eval(node.command, run)
            result = run(inner_text)
            if not isinstance(result, str):
                raise ShellEvaluationError(
                    "Run callback must return a string.",
                    command_text=inner_text,
                    error_details=f"Got {type(result).__name__}: {result!r}",
                )
            logger.debug(f"Interpolation '{inner_text}' -> '{result}'")
            return result

        if isinstance(node, CommandNode):
            return "".join(self._eval(child, run) for child in node.children)

        raise ShellEvaluationError(f"Unknown node type: {type(node).__name__}")


def execute(tree: CommandNode, run: RunCallback) -> str:
    """Executes `tree` with a default ShellEvaluator."""
    return ShellEvaluator().execute(tree, run)

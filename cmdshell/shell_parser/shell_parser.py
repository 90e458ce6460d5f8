"""
Recursive-descent parser for command strings with nested ``$( ... )``
interpolations and backslash escapes.

Grammar:

    command       := (interpolation | literal)*
    interpolation := "$(" command ")"
    literal       := (escape | plain)+
    plain         := any char that does not start "$(" and is not ")"
    escape        := "\\" ("$(" | ")" | "\\" | any single char)

At every position an interpolation is tried before a literal, and within a
literal an escape is tried before a plain character.
"""

import logging
from typing import List, Optional, Tuple

from cmdshell.config.settings import DEFAULT_MAX_DEPTH
from cmdshell.shell_parser.nodes import (
    CLOSE, ESCAPE, OPEN, CommandNode, InterpolationNode, LiteralNode,
)
from cmdshell.system.errors import ShellDepthError, ShellSyntaxError

logger = logging.getLogger(__name__)


class ShellParser:
    """
    Parses command strings into CommandNode trees.

    The parser keeps no state between calls; one instance can be shared.
    Failure never yields a partial tree: either a complete CommandNode is
    returned or ShellSyntaxError is raised.
    """

    def __init__(self, max_depth: Optional[int] = DEFAULT_MAX_DEPTH):
        """
        Args:
            max_depth: Deepest allowed interpolation nesting. None disables the
                       check (the interpreter's recursion limit still applies).
        """
        if max_depth is not None and max_depth < 1:
            raise ValueError("max_depth must be a positive integer or None.")
        self.max_depth = max_depth

    def parse_string(self, command_text: str) -> CommandNode:
        """
        Parses a command string.

        Args:
            command_text: Raw command text, after any outer command name has been stripped.

        Returns:
            The root CommandNode. Empty input gives a CommandNode with no children.

        Raises:
            ShellSyntaxError: On an unmatched '$(' or ')', or a dangling trailing backslash.
            ShellDepthError: If interpolations are nested deeper than max_depth.
            TypeError: If the input is not a string.
        """
        if not isinstance(command_text, str):
            raise TypeError("Input must be a string.")

        logger.debug(f"Attempting to parse command string: '{command_text}'")
        try:
            tree, pos = self._parse_command(command_text, 0, 0)
        except RecursionError as e:
            logger.error("Command parsing failed: nesting exhausted the recursion limit.")
            raise ShellDepthError(command_text, self.max_depth, error_details=str(e)) from e

        if pos < len(command_text):
            # _parse_command only stops early on an unescaped CLOSE
            logger.error(f"Unmatched '{CLOSE}' at position {pos} in '{command_text}'")
            raise ShellSyntaxError(
                f"Unmatched '{CLOSE}'.",
                command_text,
                error_details=f"Trailing content: '{command_text[pos:]}'",
                position=pos,
            )

        logger.debug("Parsed command with %d top-level element(s)", len(tree.children))
        return tree

    def _parse_command(self, text: str, pos: int, depth: int) -> Tuple[CommandNode, int]:
        """Parses elements until end of input or an unescaped CLOSE (left unconsumed)."""
        children: List = []
        while pos < len(text):
            if text.startswith(OPEN, pos):
                node, pos = self._parse_interpolation(text, pos, depth + 1)
            elif text[pos] == CLOSE:
                break
            else:
                node, pos = self._parse_literal(text, pos)
            children.append(node)
        return CommandNode(children=children), pos

    def _parse_interpolation(self, text: str, pos: int, depth: int) -> Tuple[InterpolationNode, int]:
        if self.max_depth is not None and depth > self.max_depth:
            logger.error(f"Interpolation at position {pos} exceeds max depth {self.max_depth}")
            raise ShellDepthError(text, self.max_depth, position=pos)

        start = pos
        inner, pos = self._parse_command(text, pos + len(OPEN), depth)
        if pos >= len(text):
            logger.error(f"Unmatched '{OPEN}' at position {start} in '{text}'")
            raise ShellSyntaxError(
                f"Unmatched '{OPEN}'.",
                text,
                error_details=f"No closing '{CLOSE}' for interpolation starting at position {start}",
                position=start,
            )
        return InterpolationNode(command=inner), pos + len(CLOSE)

    def _parse_literal(self, text: str, pos: int) -> Tuple[LiteralNode, int]:
        chars: List[str] = []
        while pos < len(text):
            if text[pos] == ESCAPE:
                if pos + 1 >= len(text):
                    logger.error(f"Dangling escape at end of '{text}'")
                    raise ShellSyntaxError(
                        "Dangling escape.",
                        text,
                        error_details=f"A trailing '{ESCAPE}' must be followed by the character it escapes",
                        position=pos,
                    )
                if text.startswith(OPEN, pos + 1):
                    chars.append(OPEN)
                    pos += 1 + len(OPEN)
                else:
                    chars.append(text[pos + 1])
                    pos += 2
            elif text.startswith(OPEN, pos) or text[pos] == CLOSE:
                break
            else:
                chars.append(text[pos])
                pos += 1
        return LiteralNode(text="".join(chars)), pos


def parse(command_text: str, max_depth: Optional[int] = DEFAULT_MAX_DEPTH) -> CommandNode:
    """Parses `command_text` with a one-off ShellParser."""
    return ShellParser(max_depth=max_depth).parse_string(command_text)

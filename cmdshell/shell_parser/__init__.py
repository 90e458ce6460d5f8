"""Parser for interpolated command strings."""

from .nodes import CommandNode, InterpolationNode, LiteralNode, ShellNode
from .shell_parser import ShellParser, parse

__all__ = [
    "CommandNode",
    "InterpolationNode",
    "LiteralNode",
    "ShellNode",
    "ShellParser",
    "parse",
]

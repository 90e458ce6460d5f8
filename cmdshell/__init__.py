"""cmdshell: nested `$( ... )` command interpolation for chat-style command shells."""

from cmdshell.shell_parser import ShellParser, parse, CommandNode, InterpolationNode, LiteralNode
from cmdshell.shell_evaluator import ShellEvaluator, execute

__all__ = [
    "ShellParser",
    "parse",
    "CommandNode",
    "InterpolationNode",
    "LiteralNode",
    "ShellEvaluator",
    "execute",
]

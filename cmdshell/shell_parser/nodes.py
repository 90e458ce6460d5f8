"""Syntax tree nodes for interpolated command strings.

A command string parses into a CommandNode whose children are LiteralNode
and InterpolationNode instances, in source order. Every InterpolationNode
holds a nested CommandNode, so the tree is recursive:

    "say $(upper $(echo hi))"
    CommandNode(children=(
        LiteralNode(text="say "),
        InterpolationNode(command=CommandNode(children=(
            LiteralNode(text="upper "),
            InterpolationNode(command=CommandNode(children=(LiteralNode(text="echo hi"),))),
        ))),
    ))

Nodes are frozen pydantic models, discriminated by their ``kind`` field.
"""
from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

OPEN = "$("
CLOSE = ")"
ESCAPE = "\\"


def escape_text(text: str) -> str:
    """Escape backslashes and interpolation markers so `text` parses back as one literal."""
    return (
        text.replace(ESCAPE, ESCAPE + ESCAPE)
        .replace(OPEN, ESCAPE + OPEN)
        .replace(CLOSE, ESCAPE + CLOSE)
    )


class LiteralNode(BaseModel):
    """
    Verbatim text with escapes already resolved.

    Attributes:
        kind: Node type identifier, always "literal"
        text: The decoded text fragment
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    text: str

    def to_source(self) -> str:
        """Return the escaped source form of this literal."""
        return escape_text(self.text)

    def __str__(self) -> str:
        return self.text


class InterpolationNode(BaseModel):
    """
    A ``$( ... )`` span. Its value is the result of running the enclosed command.

    Attributes:
        kind: Node type identifier, always "interpolation"
        command: The command between the markers
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["interpolation"] = "interpolation"
    command: "CommandNode"

    def to_source(self) -> str:
        return OPEN + self.command.to_source() + CLOSE


CommandChild = Annotated[Union[LiteralNode, InterpolationNode], Field(discriminator="kind")]


class CommandNode(BaseModel):
    """
    An ordered sequence of literal and interpolation nodes.

    The root of every parse tree, and the payload of every interpolation.
    A command with no children is valid and evaluates to the empty string.

    Attributes:
        kind: Node type identifier, always "command"
        children: Child nodes in left-to-right source order
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["command"] = "command"
    children: Tuple[CommandChild, ...] = ()

    def to_source(self) -> str:
        """Rebuild a source string that parses back to an equal tree."""
        return "".join(child.to_source() for child in self.children)

    def depth(self) -> int:
        """Maximum interpolation nesting depth; 0 when there are no interpolations."""
        return max(
            (1 + child.command.depth() for child in self.children if isinstance(child, InterpolationNode)),
            default=0,
        )

    def interpolation_count(self) -> int:
        """Total number of interpolations in this command, nested ones included."""
        return sum(
            1 + child.command.interpolation_count()
            for child in self.children
            if isinstance(child, InterpolationNode)
        )

    def is_empty(self) -> bool:
        return not self.children


InterpolationNode.model_rebuild()
CommandNode.model_rebuild()

ShellNode = Union[LiteralNode, InterpolationNode, CommandNode]

"""Message-format syntax package.

Provides parser, AST definitions, token log types, visitor pattern and the
compact nested-list form. Consumers that format or translate messages only
need the AST shapes exported here.

Python 3.13+.
"""

from .ast import (
    ASTNode,
    Case,
    Element,
    Message,
    Placeholder,
    PluralPlaceholder,
    PoundSign,
    SelectPlaceholder,
    SimplePlaceholder,
    Text,
    TypedPlaceholder,
)
from .compact import to_compact
from .cursor import Cursor
from .parser import MISSING, MessageFormatParser
from .tokens import Token, TokenSink
from .visitor import ASTVisitor

__all__ = [
    "ASTNode",
    "ASTVisitor",
    "Case",
    "Cursor",
    "Element",
    "Message",
    "MessageFormatParser",
    "Placeholder",
    "PluralPlaceholder",
    "PoundSign",
    "SelectPlaceholder",
    "SimplePlaceholder",
    "Text",
    "Token",
    "TokenSink",
    "TypedPlaceholder",
    "parse",
    "to_compact",
]


def parse(pattern: object = MISSING, tokens: TokenSink | None = None) -> Message:
    """Parse a message pattern into AST.

    Convenience function for MessageFormatParser.parse() with default limits.

    Args:
        pattern: Pattern text (other values are coerced to text first)
        tokens: Optional sink receiving every lexed token, even on failure

    Returns:
        Root Message of the pattern

    Raises:
        MessageFormatSyntaxError: On the first grammar violation

    Example:
        >>> from icumsgparse.syntax import parse
        >>> parse("{n, number}").elements[0]
        TypedPlaceholder(id='n', type='number', style=None)
    """
    parser = MessageFormatParser()
    return parser.parse(pattern, tokens)

"""Argument introspection for parsed message patterns.

Answers the questions a formatter or translation tool asks before it
formats a message: which arguments does the pattern need, how is each one
used, and does the pattern select between sub-messages.

Key features:
- Frozen dataclasses with slots for results
- Visitor-based traversal with depth limiting
- Accepts a parsed Message or raw pattern text

Python 3.13+.
"""

from dataclasses import dataclass

from .enums import ArgumentContext
from .syntax import parse
from .syntax.ast import (
    Message,
    PluralPlaceholder,
    PoundSign,
    SelectPlaceholder,
    SimplePlaceholder,
    TypedPlaceholder,
)
from .syntax.visitor import ASTVisitor

__all__ = [
    "ArgumentInfo",
    "IntrospectionVisitor",
    "MessageIntrospection",
    "extract_arguments",
    "introspect_message",
]


# ==============================================================================
# INTROSPECTION METADATA (Frozen Dataclasses with Slots)
# ==============================================================================


@dataclass(frozen=True, slots=True)
class ArgumentInfo:
    """Immutable metadata about one use of an argument in a message."""

    name: str
    """Argument id as written in the placeholder."""

    type: str | None
    """Argument type (number, plural, select, ...); None for {name}."""

    context: ArgumentContext
    """How the argument is used."""


@dataclass(frozen=True, slots=True)
class MessageIntrospection:
    """Complete introspection result for a message.

    This is the primary result type returned by the introspection API.
    """

    arguments: frozenset[ArgumentInfo]
    """Every distinct (name, type, context) use of an argument."""

    has_selectors: bool
    """Whether the message uses plural, selectordinal, select or custom sub-messages."""

    uses_pound: bool
    """Whether any plural case refers to its number through #."""

    def get_argument_names(self) -> frozenset[str]:
        """Get set of argument names."""
        return frozenset(arg.name for arg in self.arguments)

    def requires_argument(self, name: str) -> bool:
        """Check if message requires a specific argument.

        Args:
            name: Argument id

        Returns:
            True if the argument is used anywhere in the message
        """
        return any(arg.name == name for arg in self.arguments)

    def get_argument_types(self, name: str) -> frozenset[str]:
        """Get the declared types of an argument (empty for untyped uses)."""
        return frozenset(
            arg.type for arg in self.arguments if arg.name == name and arg.type is not None
        )


# ==============================================================================
# AST VISITOR FOR ARGUMENT EXTRACTION
# ==============================================================================


class IntrospectionVisitor(ASTVisitor):
    """AST visitor that collects argument uses from a message.

    Sub-message bodies are walked through generic_visit(), so arguments
    nested in plural and select cases are found at any depth.
    """

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with empty result sets.

        Args:
            max_depth: Maximum traversal depth (default: MAX_TRAVERSAL_DEPTH).
        """
        super().__init__(max_depth=max_depth)
        self.arguments: set[ArgumentInfo] = set()
        self.has_selectors: bool = False
        self.uses_pound: bool = False

    def visit_SimplePlaceholder(self, node: SimplePlaceholder) -> SimplePlaceholder:
        """Record a bare argument."""
        self.arguments.add(ArgumentInfo(node.id, None, ArgumentContext.PATTERN))
        return node

    def visit_TypedPlaceholder(self, node: TypedPlaceholder) -> TypedPlaceholder:
        """Record a formatted argument."""
        self.arguments.add(ArgumentInfo(node.id, node.type, ArgumentContext.PATTERN))
        return node

    def visit_PluralPlaceholder(self, node: PluralPlaceholder) -> PluralPlaceholder:
        """Record a plural selector argument and walk its cases."""
        self.has_selectors = True
        self.arguments.add(ArgumentInfo(node.id, node.type, ArgumentContext.PLURAL))
        self.generic_visit(node)
        return node

    def visit_SelectPlaceholder(self, node: SelectPlaceholder) -> SelectPlaceholder:
        """Record a select selector argument and walk its cases."""
        self.has_selectors = True
        self.arguments.add(ArgumentInfo(node.id, node.type, ArgumentContext.SELECT))
        self.generic_visit(node)
        return node

    def visit_PoundSign(self, node: PoundSign) -> PoundSign:
        """Note that the plural number is rendered through #."""
        self.uses_pound = True
        return node


# ==============================================================================
# PUBLIC API
# ==============================================================================


def introspect_message(message: Message | str) -> MessageIntrospection:
    """Introspect a message and extract argument metadata.

    This is the primary entry point for message introspection.

    Args:
        message: Parsed Message, or pattern text to parse first

    Returns:
        Complete introspection result

    Raises:
        TypeError: If message is neither a Message nor a str
        MessageFormatSyntaxError: If pattern text does not parse

    Example:
        >>> info = introspect_message("{count, plural, one {# file} other {# files}}")
        >>> info.get_argument_names()
        frozenset({'count'})
        >>> info.uses_pound
        True
    """
    if isinstance(message, str):
        message = parse(message)
    if not isinstance(message, Message):
        msg = f"Expected Message or str, got {type(message).__name__}"  # type: ignore[unreachable]
        raise TypeError(msg)

    visitor = IntrospectionVisitor()
    visitor.visit(message)

    return MessageIntrospection(
        arguments=frozenset(visitor.arguments),
        has_selectors=visitor.has_selectors,
        uses_pound=visitor.uses_pound,
    )


def extract_arguments(message: Message | str) -> frozenset[str]:
    """Extract argument names from a message (simplified API).

    This is a convenience function for the most common use case.

    Example:
        >>> sorted(extract_arguments("{host} invited {guest}"))
        ['guest', 'host']
    """
    return introspect_message(message).get_argument_names()

"""Compact nested-list form of a parsed message.

Converts the dataclass tree into plain lists, dicts and strings for JSON
tooling and for comparison with other message-format implementations:

    Text                     -> "text"
    PoundSign                -> ["#"]
    {id}                     -> [id]
    {id, type}               -> [id, type]
    {id, type, style}        -> [id, type, style]
    {id, select, ...}        -> [id, type, {selector: [...], ...}]
    {id, plural, ...}        -> [id, type, offset, {selector: [...], ...}]

Case dicts keep source order.

Python 3.13+.
"""

from icumsgparse.constants import POUND

from .ast import (
    Case,
    Message,
    PluralPlaceholder,
    PoundSign,
    SelectPlaceholder,
    SimplePlaceholder,
    Text,
    TypedPlaceholder,
)
from .visitor import ASTVisitor

__all__ = ["CompactConverter", "to_compact"]

type CompactElement = str | list[object]


class CompactConverter(ASTVisitor[object]):
    """Visitor producing the compact form of each node."""

    __slots__ = ()

    def visit_Message(self, node: Message) -> list[CompactElement]:
        with self._depth_guard:
            return [self.visit(element) for element in node.elements]  # type: ignore[misc]

    def visit_Text(self, node: Text) -> str:
        return node.value

    def visit_PoundSign(self, node: PoundSign) -> list[object]:
        return [POUND]

    def visit_SimplePlaceholder(self, node: SimplePlaceholder) -> list[object]:
        return [node.id]

    def visit_TypedPlaceholder(self, node: TypedPlaceholder) -> list[object]:
        if node.style is None:
            return [node.id, node.type]
        return [node.id, node.type, node.style]

    def visit_PluralPlaceholder(self, node: PluralPlaceholder) -> list[object]:
        return [node.id, node.type, node.offset, self._cases(node.cases)]

    def visit_SelectPlaceholder(self, node: SelectPlaceholder) -> list[object]:
        return [node.id, node.type, self._cases(node.cases)]

    def visit_Case(self, node: Case) -> object:
        return self.visit(node.message)

    def _cases(self, cases: tuple[Case, ...]) -> dict[str, object]:
        with self._depth_guard:
            return {case.selector: self.visit(case.message) for case in cases}


def to_compact(message: Message) -> list[CompactElement]:
    """Convert a parsed message to its compact nested-list form.

    Example:
        >>> to_compact(parse("{n, plural, one {# item} other {# items}}"))
        [['n', 'plural', 0, {'one': [['#'], ' item'], 'other': [['#'], ' items']}]]

    Raises:
        DepthLimitExceededError: Tree nested deeper than any parse produces
    """
    return CompactConverter().visit_Message(message)

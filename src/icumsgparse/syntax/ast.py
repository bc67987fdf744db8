"""Message-format AST (Abstract Syntax Tree) node definitions.

A parsed pattern is a Message: an ordered tuple of elements, each being
literal Text, a PoundSign, or one of four placeholder shapes. Plural and
select placeholders own their sub-messages through ordered Case pairs,
so the tree is strictly tree-shaped and immutable once built.

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeIs

from icumsgparse.constants import OTHER_SELECTOR, PLURAL_TYPES, SELECT_TYPE
from icumsgparse.enums import PluralKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Messages
    "Message",
    "Case",
    # Elements
    "Text",
    "PoundSign",
    # Placeholders
    "SimplePlaceholder",
    "TypedPlaceholder",
    "PluralPlaceholder",
    "SelectPlaceholder",
    # Type aliases
    "Placeholder",
    "Element",
    "ASTNode",
]


def _require_name(value: str, what: str) -> None:
    if not value:
        msg = f"{what} must be a non-empty string"
        raise ValueError(msg)


def _validate_cases(cases: tuple["Case", ...], construct: str, require_other: bool) -> None:
    if not cases:
        msg = f"{construct} placeholder requires at least one case"
        raise ValueError(msg)
    if require_other and all(case.selector != OTHER_SELECTOR for case in cases):
        msg = f'"{OTHER_SELECTOR}" case is required in {construct}'
        raise ValueError(msg)


def _find_case(cases: tuple["Case", ...], selector: str) -> "Message | None":
    for case in cases:
        if case.selector == selector:
            return case.message
    return None


# ============================================================================
# MESSAGES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Message:
    """Root of a parsed pattern and the body of every sub-message.

    Example:
        "Hello, {name}!" parses to
        Message((Text("Hello, "), SimplePlaceholder("name"), Text("!")))
    """

    elements: tuple["Element", ...] = ()

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator["Element"]:
        return iter(self.elements)

    @property
    def text(self) -> str:
        """Concatenated value of the direct Text children."""
        return "".join(elem.value for elem in self.elements if isinstance(elem, Text))

    @staticmethod
    def guard(node: object) -> TypeIs["Message"]:
        """Type guard for Message."""
        return isinstance(node, Message)


@dataclass(frozen=True, slots=True)
class Case:
    """One selector and the sub-message it chooses.

    Example:
        =0 {no photos}  ->  Case("=0", Message((Text("no photos"),)))
    """

    selector: str
    message: Message

    def __post_init__(self) -> None:
        """Validate case invariants."""
        _require_name(self.selector, "Case selector")

    @property
    def is_exact(self) -> bool:
        """True for exact-value selectors such as =0."""
        return self.selector.startswith("=")


# ============================================================================
# TEXT ELEMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text with quote escapes already resolved."""

    value: str

    @staticmethod
    def guard(elem: object) -> TypeIs["Text"]:
        """Type guard for Text.

        Enables type-safe narrowing without circular imports.

        Args:
            elem: Object to check

        Returns:
            True if elem is Text

        Example:
            if Text.guard(elem):
                elem.value  # Type-safe! mypy knows elem is Text
        """
        return isinstance(elem, Text)


@dataclass(frozen=True, slots=True)
class PoundSign:
    """Unescaped # in a plural case: the offset-adjusted number goes here."""

    @staticmethod
    def guard(elem: object) -> TypeIs["PoundSign"]:
        """Type guard for PoundSign."""
        return isinstance(elem, PoundSign)


# ============================================================================
# PLACEHOLDERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class SimplePlaceholder:
    """Bare argument: {name}"""

    id: str

    def __post_init__(self) -> None:
        """Validate placeholder invariants."""
        _require_name(self.id, "Placeholder id")

    @staticmethod
    def guard(elem: object) -> TypeIs["SimplePlaceholder"]:
        """Type guard for SimplePlaceholder."""
        return isinstance(elem, SimplePlaceholder)


@dataclass(frozen=True, slots=True)
class TypedPlaceholder:
    """Formatted argument: {n, number} or {n, number, percent}

    The style is the trimmed raw remainder of the argument and may itself
    contain commas: {a, b, c,d} has style "c,d".
    """

    id: str
    type: str
    style: str | None = None

    def __post_init__(self) -> None:
        """Validate placeholder invariants."""
        _require_name(self.id, "Placeholder id")
        _require_name(self.type, "Placeholder type")
        if self.type in PLURAL_TYPES or self.type == SELECT_TYPE:
            msg = f"'{self.type}' arguments need sub-messages, not a style"
            raise ValueError(msg)
        if self.style == "":
            msg = "Placeholder style must be None or a non-empty string"
            raise ValueError(msg)

    @staticmethod
    def guard(elem: object) -> TypeIs["TypedPlaceholder"]:
        """Type guard for TypedPlaceholder."""
        return isinstance(elem, TypedPlaceholder)


@dataclass(frozen=True, slots=True)
class PluralPlaceholder:
    """Plural or ordinal selection on a number.

    Example:
        {count, plural, offset:1 =0 {nobody} one {# guest} other {# guests}}

    Attributes:
        id: Argument name
        kind: PLURAL (cardinal) or SELECTORDINAL
        cases: Cases in source order; always contains "other"
        offset: Subtracted from the value before category matching
    """

    id: str
    kind: PluralKind
    cases: tuple[Case, ...]
    offset: int = 0

    def __post_init__(self) -> None:
        """Validate placeholder invariants."""
        _require_name(self.id, "Placeholder id")
        if isinstance(self.offset, bool) or self.offset < 0:
            msg = f"Plural offset must be a non-negative integer, got {self.offset!r}"
            raise ValueError(msg)
        _validate_cases(self.cases, str(self.kind), require_other=True)

    @property
    def type(self) -> str:
        """Argument type as written in the pattern."""
        return str(self.kind)

    @property
    def selectors(self) -> tuple[str, ...]:
        """Selector keys in source order."""
        return tuple(case.selector for case in self.cases)

    def get_case(self, selector: str) -> Message | None:
        """Sub-message for a selector, or None when absent."""
        return _find_case(self.cases, selector)

    @staticmethod
    def guard(elem: object) -> TypeIs["PluralPlaceholder"]:
        """Type guard for PluralPlaceholder."""
        return isinstance(elem, PluralPlaceholder)


@dataclass(frozen=True, slots=True)
class SelectPlaceholder:
    """Keyword selection: {gender, select, female {she} other {they}}

    Custom argument types followed by sub-messages share this shape and
    record their type, e.g. {a, <, > {click here}} has type "<". Only the
    built-in "select" type requires an "other" case.
    """

    id: str
    cases: tuple[Case, ...]
    type: str = SELECT_TYPE

    def __post_init__(self) -> None:
        """Validate placeholder invariants."""
        _require_name(self.id, "Placeholder id")
        _require_name(self.type, "Placeholder type")
        if self.type in PLURAL_TYPES:
            msg = f"'{self.type}' arguments are PluralPlaceholder nodes"
            raise ValueError(msg)
        _validate_cases(self.cases, self.type, require_other=self.type == SELECT_TYPE)

    @property
    def selectors(self) -> tuple[str, ...]:
        """Selector keys in source order."""
        return tuple(case.selector for case in self.cases)

    def get_case(self, selector: str) -> Message | None:
        """Sub-message for a selector, or None when absent."""
        return _find_case(self.cases, selector)

    @staticmethod
    def guard(elem: object) -> TypeIs["SelectPlaceholder"]:
        """Type guard for SelectPlaceholder."""
        return isinstance(elem, SelectPlaceholder)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Placeholder = SimplePlaceholder | TypedPlaceholder | PluralPlaceholder | SelectPlaceholder
type Element = Text | PoundSign | Placeholder
type ASTNode = Message | Case | Element

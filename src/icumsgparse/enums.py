"""Enumerations for ICUMsgParse type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so token kinds compare equal to
their plain-string spelling: TokenKind.TEXT == "text".

Python 3.13+.
"""

from enum import StrEnum


class TokenKind(StrEnum):
    """Kind of a lexical token recorded in a token sink.

    Punctuation kinds are spelled as the punctuation itself.
    """

    TEXT = "text"
    """Run of literal message text (raw, escapes unresolved)."""

    OPEN = "{"
    CLOSE = "}"
    COMMA = ","
    COLON = ":"

    ID = "id"
    """Argument name: {name}"""

    TYPE = "type"
    """Argument type: {n, number}"""

    STYLE = "style"
    """Argument style: {n, number, percent}"""

    SELECTOR = "selector"
    """Sub-message selector: one {...}, =0 {...}"""

    OFFSET = "offset"
    """The offset keyword of a plural argument."""

    NUMBER = "number"
    """Decimal integer literal (plural offset value)."""

    SPACE = "space"
    """Whitespace run inside a placeholder."""

    POUND = "#"
    """Numeric value placeholder inside plural sub-messages."""


class PluralKind(StrEnum):
    """Which plural rule set a plural-style placeholder selects with.

    StrEnum provides automatic string conversion: str(PluralKind.PLURAL) == "plural"
    """

    PLURAL = "plural"
    """Cardinal plural categories: {n, plural, one {...} other {...}}"""

    SELECTORDINAL = "selectordinal"
    """Ordinal plural categories: {n, selectordinal, one {#st} other {#th}}"""


class ArgumentContext(StrEnum):
    """Where an argument is referenced within a message.

    StrEnum provides automatic string conversion: str(ArgumentContext.PATTERN) == "pattern"
    """

    PATTERN = "pattern"
    """Argument formatted in place: {name} or {n, number}"""

    PLURAL = "plural"
    """Argument selecting a plural or selectordinal case."""

    SELECT = "select"
    """Argument selecting a select (or custom sub-message) case."""


__all__ = [
    "ArgumentContext",
    "PluralKind",
    "TokenKind",
]

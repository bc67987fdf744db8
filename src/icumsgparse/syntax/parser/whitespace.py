"""Whitespace handling utilities for the message-format parser.

Placeholder whitespace is not limited to ASCII: translators paste patterns
from word processors and spreadsheets, so non-breaking, typographic and
zero-width spaces must separate placeholder tokens just like U+0020.
"""

from icumsgparse.syntax.cursor import Cursor

__all__ = ["WHITESPACE_CHARS", "is_whitespace", "skip_whitespace"]

# Unicode White_Space, plus the retired separator U+180E, the zero-width
# characters U+200B-U+200D, WORD JOINER and ZERO WIDTH NO-BREAK SPACE.
_WHITESPACE_CODE_POINTS: tuple[int, ...] = (
    *range(0x0009, 0x000D + 1),  # TAB, LF, VT, FF, CR
    0x0020,  # SPACE
    0x0085,  # NEXT LINE
    0x00A0,  # NO-BREAK SPACE
    0x1680,  # OGHAM SPACE MARK
    0x180E,  # MONGOLIAN VOWEL SEPARATOR
    *range(0x2000, 0x200D + 1),  # EN QUAD .. ZERO WIDTH JOINER
    0x2028,  # LINE SEPARATOR
    0x2029,  # PARAGRAPH SEPARATOR
    0x202F,  # NARROW NO-BREAK SPACE
    0x205F,  # MEDIUM MATHEMATICAL SPACE
    0x2060,  # WORD JOINER
    0x3000,  # IDEOGRAPHIC SPACE
    0xFEFF,  # ZERO WIDTH NO-BREAK SPACE
)

WHITESPACE_CHARS: frozenset[str] = frozenset(map(chr, _WHITESPACE_CODE_POINTS))


def is_whitespace(ch: str) -> bool:
    """Check whether a single character separates placeholder tokens."""
    return ch in WHITESPACE_CHARS


def skip_whitespace(cursor: Cursor) -> Cursor:
    """Skip a run of whitespace characters.

    Args:
        cursor: Current position in source

    Returns:
        New cursor at first non-whitespace character (or EOF)

    Design:
        Immutable cursor ensures termination.
    """
    while not cursor.is_eof and cursor.current in WHITESPACE_CHARS:
        cursor = cursor.advance()
    return cursor

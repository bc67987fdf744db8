"""Token log entries produced while lexing a pattern.

A token is a (kind, text) pair. Because TokenKind is a StrEnum, tokens
compare equal to plain tuples: Token(TokenKind.ID, "n") == ("id", "n").

Python 3.13+. Zero external dependencies.
"""

from typing import NamedTuple, Protocol

from icumsgparse.enums import TokenKind

__all__ = ["Token", "TokenSink"]


class Token(NamedTuple):
    """One lexical unit, in source order.

    Attributes:
        kind: Token classification
        text: Raw source text of the unit (quote escapes unresolved)
    """

    kind: TokenKind
    text: str


class TokenSink(Protocol):
    """Caller-owned collection receiving every token as it is lexed.

    A plain list satisfies this protocol. Each parse call appends in strict
    source order; do not share one sink between concurrent parses.
    """

    def append(self, token: Token, /) -> None: ...

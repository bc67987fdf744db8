"""Mode-driven lexer for message-format patterns.

The parser picks the lexing mode by calling the matching read operation:

- TEXT: read_text() accumulates literal text up to a syntax character
- PLACEHOLDER: take(), skip_space(), read_word(), read_offset()
- STYLE: scan_style() / commit_style() read a placeholder's style remainder

Every token is appended to the caller's sink before the parser acts on it,
so a failed parse leaves a log of exactly how far lexing progressed.

Quote Escaping:
    Apostrophes follow ICU's optional-apostrophe rules. '' is always one
    literal apostrophe. A ' opens a quoted run only when the next character
    is special where it appears ({ and }, plus # in plural case text); the
    run ends at the next unpaired ' or at end of input. Any other ' is
    literal. Style text is stricter: every ' opens a quoted run.
"""

import sys
from dataclasses import dataclass

from icumsgparse.constants import (
    ARG_CLOSE,
    ARG_OPEN,
    ARG_SEPARATOR,
    OFFSET_KEYWORD,
    OFFSET_SEPARATOR,
    POUND,
    QUOTE,
)
from icumsgparse.diagnostics import ErrorTemplate, MessageFormatSyntaxError
from icumsgparse.enums import TokenKind
from icumsgparse.syntax.cursor import Cursor
from icumsgparse.syntax.parser.whitespace import WHITESPACE_CHARS, skip_whitespace
from icumsgparse.syntax.tokens import Token, TokenSink

__all__ = ["Lexer", "StyleScan"]

# ASCII digits only: str.isdigit() accepts superscripts that int() rejects.
_ASCII_DIGITS: str = "0123456789"

_BRACES: frozenset[str] = frozenset({ARG_OPEN, ARG_CLOSE})
_BRACES_AND_POUND: frozenset[str] = _BRACES | {POUND}

# Characters that end an id, type or selector word.
_WORD_BREAKS: frozenset[str] = (
    _BRACES_AND_POUND | {ARG_SEPARATOR, QUOTE} | WHITESPACE_CHARS
)

_OFFSET_PREFIX: str = OFFSET_KEYWORD + OFFSET_SEPARATOR


@dataclass(frozen=True, slots=True)
class StyleScan:
    """Result of reading a style remainder without consuming it.

    Attributes:
        value: Style with escapes resolved and surrounding whitespace trimmed
        start: Cursor at the first style character
        end: Cursor just past the last significant style character
        stop: Cursor at the unquoted { or } (or EOF) that ended the scan
    """

    value: str
    start: Cursor
    end: Cursor
    stop: Cursor

    @property
    def raw(self) -> str:
        """Source text of the trimmed style."""
        return self.start.slice_to(self.end.pos)

    @property
    def stopped_at_open_brace(self) -> bool:
        """True when an unquoted { follows the style text."""
        return not self.stop.is_eof and self.stop.current == ARG_OPEN


def _read_quoted(cursor: Cursor) -> tuple[str, Cursor]:
    """Read a quoted run starting just after its opening apostrophe.

    Returns the literal text and the cursor after the closing apostrophe
    (or at EOF when the run is unterminated).
    """
    parts: list[str] = []
    while not cursor.is_eof:
        ch = cursor.current
        if ch == QUOTE:
            if cursor.peek(1) == QUOTE:
                parts.append(QUOTE)
                cursor = cursor.advance(2)
                continue
            return "".join(parts), cursor.advance()
        parts.append(ch)
        cursor = cursor.advance()
    return "".join(parts), cursor


class Lexer:
    """Pattern scanner holding the parse position and the token sink.

    One Lexer serves exactly one parse call. It is the only mutable object
    in a parse: the cursor it holds is replaced, never modified.
    """

    __slots__ = ("_sink", "cursor")

    def __init__(self, source: str, sink: TokenSink | None = None) -> None:
        """Initialize lexer at the start of source.

        Args:
            source: Coerced pattern text
            sink: Optional collection receiving every token
        """
        self.cursor = Cursor(source, 0)
        self._sink = sink

    @property
    def source(self) -> str:
        """Pattern being lexed."""
        return self.cursor.source

    @property
    def is_eof(self) -> bool:
        """True when the whole pattern has been consumed."""
        return self.cursor.is_eof

    def at(self, char: str) -> bool:
        """Check whether the next character is char (False at EOF)."""
        return not self.cursor.is_eof and self.cursor.current == char

    def _emit(self, kind: TokenKind, text: str) -> None:
        if self._sink is not None:
            self._sink.append(Token(kind, text))

    # ------------------------------------------------------------------
    # TEXT mode
    # ------------------------------------------------------------------

    def read_text(self, *, pound_is_syntax: bool = False) -> str:
        """Read literal text up to the next syntax character.

        Stops before { and } (and before # when pound_is_syntax) without
        consuming them. Emits one text token holding the raw source slice.

        Args:
            pound_is_syntax: True inside plural/selectordinal case messages

        Returns:
            Text with quote escapes resolved ("" when nothing was read)
        """
        specials = _BRACES_AND_POUND if pound_is_syntax else _BRACES
        start = self.cursor
        cursor = start
        parts: list[str] = []
        while not cursor.is_eof:
            ch = cursor.current
            if ch in specials:
                break
            if ch != QUOTE:
                parts.append(ch)
                cursor = cursor.advance()
                continue
            following = cursor.peek(1)
            if following == QUOTE:
                parts.append(QUOTE)
                cursor = cursor.advance(2)
            elif following is not None and following in specials:
                quoted, cursor = _read_quoted(cursor.advance())
                parts.append(quoted)
            else:
                parts.append(QUOTE)
                cursor = cursor.advance()

        self.cursor = cursor
        if cursor.pos > start.pos:
            self._emit(TokenKind.TEXT, start.slice_to(cursor.pos))
        return "".join(parts)

    # ------------------------------------------------------------------
    # PLACEHOLDER mode
    # ------------------------------------------------------------------

    def take(self, kind: TokenKind) -> None:
        """Consume the current syntax character and log it as kind."""
        self._emit(kind, self.cursor.current)
        self.cursor = self.cursor.advance()

    def skip_space(self) -> None:
        """Consume a whitespace run, logging it as one space token."""
        start = self.cursor
        self.cursor = skip_whitespace(start)
        if self.cursor.pos > start.pos:
            self._emit(TokenKind.SPACE, start.slice_to(self.cursor.pos))

    def read_word(self, kind: TokenKind) -> str:
        """Read an id, type or selector word.

        Words run until { } , # ' or whitespace, so punctuation such as
        <0/> or =1 is a valid word.

        Args:
            kind: Classification the parser assigns to this word

        Returns:
            The word ("" when the next character cannot start a word)
        """
        start = self.cursor
        cursor = start
        while not cursor.is_eof and cursor.current not in _WORD_BREAKS:
            cursor = cursor.advance()
        word = start.slice_to(cursor.pos)
        self.cursor = cursor
        if word:
            self._emit(kind, word)
        return word

    def read_offset(self) -> int | None:
        """Read a plural "offset:N" clause if one starts here.

        Returns:
            The offset value, or None when no offset clause is present

        Raises:
            MessageFormatSyntaxError: offset: is not followed by a number, or the
                number is too long for int()
        """
        if self.cursor.slice_ahead(len(_OFFSET_PREFIX)) != _OFFSET_PREFIX:
            return None
        self._emit(TokenKind.OFFSET, OFFSET_KEYWORD)
        self._emit(TokenKind.COLON, OFFSET_SEPARATOR)
        self.cursor = self.cursor.advance(len(_OFFSET_PREFIX))
        self.skip_space()

        start = self.cursor
        cursor = start
        while not cursor.is_eof and cursor.current in _ASCII_DIGITS:
            cursor = cursor.advance()
        if cursor.pos == start.pos:
            raise self.expected("offset number")
        digits = start.slice_to(cursor.pos)
        # 0 means the interpreter has no conversion limit
        max_digits = sys.get_int_max_str_digits()
        if max_digits and len(digits) > max_digits:
            raise self.offset_out_of_range(max_digits)
        self.cursor = cursor
        self._emit(TokenKind.NUMBER, digits)
        return int(digits)

    # ------------------------------------------------------------------
    # STYLE mode
    # ------------------------------------------------------------------

    def scan_style(self) -> StyleScan:
        """Read the style remainder up to the placeholder's closing brace.

        Nothing is consumed or logged: the parser either commits the scan
        or re-reads the same text as sub-messages.
        """
        start = self.cursor
        cursor = start
        end = start
        parts: list[str] = []
        significant = 0
        while not cursor.is_eof:
            ch = cursor.current
            if ch in _BRACES:
                break
            if ch == QUOTE and cursor.peek(1) == QUOTE:
                parts.append(QUOTE)
                cursor = cursor.advance(2)
            elif ch == QUOTE and cursor.peek(1) is not None:
                quoted, cursor = _read_quoted(cursor.advance())
                parts.append(quoted)
            else:
                parts.append(ch)
                cursor = cursor.advance()
                if ch in WHITESPACE_CHARS:
                    continue
            significant = len(parts)
            end = cursor
        return StyleScan(value="".join(parts[:significant]), start=start, end=end, stop=cursor)

    def commit_style(self, scan: StyleScan) -> str:
        """Consume a scanned style and log it; trailing whitespace stays unread."""
        self.cursor = scan.end
        self._emit(TokenKind.STYLE, scan.raw)
        return scan.value

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def expected(self, what: str) -> MessageFormatSyntaxError:
        """Build an "Expected <what> but found <current>" error."""
        diagnostic = ErrorTemplate.expected_token(what, self.cursor.found, self.cursor.span())
        return MessageFormatSyntaxError(diagnostic, self.source)

    def unexpected(self) -> MessageFormatSyntaxError:
        """Build an "Unexpected <current> found" error."""
        diagnostic = ErrorTemplate.unexpected_token(self.cursor.found, self.cursor.span())
        return MessageFormatSyntaxError(diagnostic, self.source)

    def missing_other(self, construct: str) -> MessageFormatSyntaxError:
        """Build the error for a sub-message list without "other"."""
        diagnostic = ErrorTemplate.missing_other(construct, self.cursor.span())
        return MessageFormatSyntaxError(diagnostic, self.source)

    def too_deep(self, max_depth: int) -> MessageFormatSyntaxError:
        """Build the error for nesting beyond the configured limit."""
        diagnostic = ErrorTemplate.nesting_depth_exceeded(max_depth, self.cursor.span())
        return MessageFormatSyntaxError(diagnostic, self.source)

    def offset_out_of_range(self, max_digits: int) -> MessageFormatSyntaxError:
        """Build the error for an offset too long to convert."""
        diagnostic = ErrorTemplate.offset_out_of_range(max_digits, self.cursor.span())
        return MessageFormatSyntaxError(diagnostic, self.source)

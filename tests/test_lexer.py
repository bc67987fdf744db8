"""Tests for syntax/parser/lexer.py.

The lexer is exercised directly here, one mode at a time, so that quote
handling and position bookkeeping are pinned down independently of the
grammar rules.
"""

from __future__ import annotations

import sys

import pytest

from icumsgparse import MessageFormatSyntaxError, Token
from icumsgparse.enums import TokenKind
from icumsgparse.syntax.parser.lexer import Lexer


def _lexer(source: str) -> tuple[Lexer, list[Token]]:
    tokens: list[Token] = []
    return Lexer(source, tokens), tokens


# ============================================================================
# TEXT MODE
# ============================================================================


class TestReadText:
    """Test literal text reading and quote escapes."""

    def test_stops_before_braces(self) -> None:
        """Text ends before { without consuming it."""
        lexer, tokens = _lexer("abc{x}")

        assert lexer.read_text() == "abc"
        assert lexer.at("{")
        assert tokens == [("text", "abc")]

    def test_empty_read_logs_nothing(self) -> None:
        """No characters read, no token."""
        lexer, tokens = _lexer("}")

        assert lexer.read_text() == ""
        assert tokens == []

    def test_pound_is_text_by_default(self) -> None:
        """# outside plural cases is ordinary text."""
        lexer, _ = _lexer("#1")

        assert lexer.read_text() == "#1"
        assert lexer.is_eof

    def test_pound_stops_when_syntax(self) -> None:
        """# ends text inside plural cases."""
        lexer, _ = _lexer("a#b")

        assert lexer.read_text(pound_is_syntax=True) == "a"
        assert lexer.at("#")

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("it''s", "it's"),
            ("'{'", "{"),
            ("'{a}'", "{a}"),
            ("'{a''b}'", "{a'b}"),
            ("don't", "don't"),
            ("'", "'"),
            ("a'", "a'"),
            ("'{unterminated", "{unterminated"),
            ("'#'", "'#'"),
        ],
    )
    def test_quote_escapes(self, source: str, expected: str) -> None:
        """Apostrophes quote only before special characters."""
        lexer, _ = _lexer(source)

        assert lexer.read_text() == expected
        assert lexer.is_eof

    def test_quoted_pound_in_plural_text(self) -> None:
        """'#' is a literal pound sign where # is syntax."""
        lexer, _ = _lexer("'#' left")

        assert lexer.read_text(pound_is_syntax=True) == "# left"

    def test_token_is_raw_slice(self) -> None:
        """Text tokens keep the escaped source form."""
        lexer, tokens = _lexer("'{'x")

        lexer.read_text()

        assert tokens == [("text", "'{'x")]


# ============================================================================
# PLACEHOLDER MODE
# ============================================================================


class TestPlaceholderMode:
    """Test words, whitespace and single-character tokens."""

    def test_take_logs_kind(self) -> None:
        """take() consumes one character and logs it."""
        lexer, tokens = _lexer("{")

        lexer.take(TokenKind.OPEN)

        assert lexer.is_eof
        assert tokens == [("{", "{")]

    def test_skip_space_logs_run(self) -> None:
        """A whitespace run is one space token."""
        lexer, tokens = _lexer(" \t\nx")

        lexer.skip_space()

        assert lexer.at("x")
        assert tokens == [("space", " \t\n")]

    def test_skip_space_without_space(self) -> None:
        """Nothing to skip, nothing logged."""
        lexer, tokens = _lexer("x")

        lexer.skip_space()

        assert tokens == []

    @pytest.mark.parametrize(
        ("source", "word"),
        [
            ("name}", "name"),
            ("=0{", "=0"),
            ("<0/>,", "<0/>"),
            ("a b", "a"),
            ("a#b", "a"),
            ("a'b", "a"),
            ("::compact-short}", "::compact-short"),
            (",", ""),
        ],
    )
    def test_read_word(self, source: str, word: str) -> None:
        """Words end at braces, comma, pound, apostrophe and whitespace."""
        lexer, _ = _lexer(source)

        assert lexer.read_word(TokenKind.ID) == word

    def test_read_word_logs_kind(self) -> None:
        """The caller decides the word's kind."""
        lexer, tokens = _lexer("one{")

        lexer.read_word(TokenKind.SELECTOR)

        assert tokens == [("selector", "one")]


class TestReadOffset:
    """Test the plural offset clause."""

    def test_no_offset(self) -> None:
        """Anything else returns None without consuming."""
        lexer, tokens = _lexer("one{x}")

        assert lexer.read_offset() is None
        assert lexer.cursor.pos == 0
        assert tokens == []

    def test_offset_value(self) -> None:
        """offset:N yields N and four tokens' worth of log."""
        lexer, tokens = _lexer("offset: 12 other")

        assert lexer.read_offset() == 12
        assert tokens == [
            ("offset", "offset"),
            (":", ":"),
            ("space", " "),
            ("number", "12"),
        ]

    def test_offset_word_alone_is_not_a_clause(self) -> None:
        """'offset' without a colon is an ordinary selector."""
        lexer, _ = _lexer("offset {x}")

        assert lexer.read_offset() is None

    def test_missing_number(self) -> None:
        """offset: needs ASCII digits."""
        lexer, _ = _lexer("offset:x")

        with pytest.raises(MessageFormatSyntaxError, match="Expected offset number but found x"):
            lexer.read_offset()

    def test_non_ascii_digits_rejected(self) -> None:
        """Superscript digits are not offset numbers."""
        lexer, _ = _lexer("offset:" + chr(0xB2))

        with pytest.raises(MessageFormatSyntaxError):
            lexer.read_offset()

    def test_offset_at_digit_limit(self) -> None:
        """The longest convertible offset is read as an int."""
        digits = "9" * sys.get_int_max_str_digits()
        lexer, tokens = _lexer("offset:" + digits + " other")

        assert lexer.read_offset() == int(digits)
        assert tokens[-1] == ("number", digits)

    def test_offset_beyond_digit_limit(self) -> None:
        """A longer offset is a syntax error located at its first digit."""
        max_digits = sys.get_int_max_str_digits()
        lexer, tokens = _lexer("offset: " + "9" * (max_digits + 1))

        message = f"Offset number exceeds {max_digits} digits"
        with pytest.raises(MessageFormatSyntaxError, match=message):
            lexer.read_offset()
        assert lexer.cursor.pos == 8
        assert [token.kind for token in tokens] == [
            TokenKind.OFFSET,
            TokenKind.COLON,
            TokenKind.SPACE,
        ]


# ============================================================================
# STYLE MODE
# ============================================================================


class TestStyleScan:
    """Test style scanning and committing."""

    def test_scan_consumes_nothing(self) -> None:
        """Scanning leaves the cursor and log untouched."""
        lexer, tokens = _lexer("percent }")

        scan = lexer.scan_style()

        assert scan.value == "percent"
        assert lexer.cursor.pos == 0
        assert tokens == []

    def test_trailing_space_excluded(self) -> None:
        """The scan ends after the last significant character."""
        lexer, _ = _lexer("c, d  }")

        scan = lexer.scan_style()

        assert scan.value == "c, d"
        assert scan.raw == "c, d"
        assert scan.stop.pos == 6
        assert not scan.stopped_at_open_brace

    def test_open_brace_detected(self) -> None:
        """A { ending the scan is reported."""
        lexer, _ = _lexer("> {x}")

        assert lexer.scan_style().stopped_at_open_brace

    def test_eof_is_not_open_brace(self) -> None:
        """Unterminated styles stop at EOF."""
        lexer, _ = _lexer("c")

        scan = lexer.scan_style()

        assert scan.stop.is_eof
        assert not scan.stopped_at_open_brace

    def test_every_quote_opens_run(self) -> None:
        """Inside styles, apostrophes always quote."""
        lexer, _ = _lexer("'a}b' x}")

        scan = lexer.scan_style()

        assert scan.value == "a}b x"
        assert scan.raw == "'a}b' x"

    def test_doubled_quote(self) -> None:
        """'' is one apostrophe in styles too."""
        lexer, _ = _lexer("o''clock}")

        assert lexer.scan_style().value == "o'clock"

    def test_commit_consumes_and_logs(self) -> None:
        """commit_style moves to the scan end and logs the raw style."""
        lexer, tokens = _lexer("percent }")

        value = lexer.commit_style(lexer.scan_style())

        assert value == "percent"
        assert lexer.cursor.pos == 7
        assert tokens == [("style", "percent")]


# ============================================================================
# ERROR FACTORIES
# ============================================================================


class TestErrorFactories:
    """Test errors built at the current position."""

    def test_expected_at_eof(self) -> None:
        """At EOF the end-of-pattern sentinel is found."""
        lexer, _ = _lexer("")
        error = lexer.expected("placeholder id")

        assert str(error) == "Expected placeholder id but found end of message pattern"
        assert error.offset == 0

    def test_unexpected(self) -> None:
        """Unexpected names the current character."""
        lexer, _ = _lexer("}")

        assert str(lexer.unexpected()) == "Unexpected } found"

    def test_missing_other(self) -> None:
        """The construct is named in the message."""
        lexer, _ = _lexer("}")

        assert str(lexer.missing_other("plural")) == (
            '"other" sub-message must be specified in plural'
        )

    def test_too_deep(self) -> None:
        """Nesting errors carry the limit."""
        lexer, _ = _lexer("{")
        error = lexer.too_deep(3)

        assert str(error) == "Maximum nesting depth of 3 exceeded"
        assert error.source == "{"

    def test_lexer_without_sink(self) -> None:
        """Lexing works with no sink attached."""
        lexer = Lexer("abc")

        assert lexer.read_text() == "abc"
        assert lexer.source == "abc"

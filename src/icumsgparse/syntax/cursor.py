"""Immutable read position over a message pattern.

The lexer never mutates a position: every move yields a new Cursor, and
the lexer simply keeps the latest one. Backtracking (re-reading a style
remainder as sub-messages) is therefore just holding on to an old cursor.

Line and column are derived only when a diagnostic needs them. Lines end
at LF, so CRLF patterns report the same lines as LF ones; a lone CR does
not start a new line.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from icumsgparse.constants import END_OF_PATTERN
from icumsgparse.diagnostics import ErrorTemplate, SourceSpan

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Character offset into a pattern.

    Example:
        >>> start = Cursor("{n}", 0)
        >>> start.advance().current
        'n'
        >>> start.current
        '{'
        >>> Cursor("{n}", 3).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True once every character has been read."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Character under the cursor.

        Raises:
            EOFError: At end of pattern; loops should test is_eof first
        """
        if self.pos >= len(self.source):
            raise EOFError(ErrorTemplate.unexpected_eof(self.pos).message)
        return self.source[self.pos]

    @property
    def found(self) -> str:
        """Character under the cursor as diagnostics name it.

        Never raises: at end of pattern this is "end of message pattern".
        """
        return END_OF_PATTERN if self.is_eof else self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Character offset positions ahead, or None past the end."""
        index = self.pos + offset
        return self.source[index] if index < len(self.source) else None

    def advance(self, count: int = 1) -> "Cursor":
        """Cursor count characters further on, stopping at end of pattern."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def slice_to(self, end_pos: int) -> str:
        """Pattern text from here up to (not including) end_pos.

        Example:
            >>> Cursor("{name}", 1).slice_to(5)
            'name'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Up to n characters starting here; the cursor does not move.

        Example:
            >>> Cursor("offset:1", 0).slice_ahead(7)
            'offset:'
        """
        return self.source[self.pos : self.pos + n]

    def compute_line_col(self) -> tuple[int, int]:
        """1-indexed (line, column) of this position.

        Scans the pattern up to pos, so keep it to error paths.

        Example:
            >>> Cursor("one\\ntwo", 5).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        line_start = self.source.rfind("\n", 0, self.pos) + 1
        return (line, self.pos - line_start + 1)

    def span(self) -> SourceSpan:
        """Span of the character under the cursor; empty at end of pattern."""
        line, column = self.compute_line_col()
        end = self.pos if self.is_eof else self.pos + 1
        return SourceSpan(start=self.pos, end=end, line=line, column=column)

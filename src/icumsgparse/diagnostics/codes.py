"""Diagnostic data: codes, pattern spans and the Diagnostic record.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers for every diagnostic family.

    Ranges:
        2000-2999: walking an already built message tree
        3000-3999: rejecting a pattern while parsing
    """

    # Tree walking (2000-2999)
    MAX_DEPTH_EXCEEDED = 2010

    # Parsing (3000-3999)
    UNEXPECTED_EOF = 3001
    UNEXPECTED_TOKEN = 3002  # "Unexpected } found"
    EXPECTED_TOKEN = 3003  # "Expected X but found Y"
    MISSING_OTHER_SUB_MESSAGE = 3004
    PARSE_NESTING_DEPTH_EXCEEDED = 3005
    OFFSET_OUT_OF_RANGE = 3006


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Region of a pattern a diagnostic points at.

    Offsets count characters (code points) of the Python string, which is
    also what editors show for a pattern held in a translation file.

    Attributes:
        start: First offset covered (0-indexed)
        end: Offset just past the region; equals start at end of pattern
        line: 1-indexed line of start
        column: 1-indexed column of start
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Reject spans no pattern position could produce.

        Raises:
            ValueError: Negative start, end before start, or a line or
                column below 1
        """
        if self.start < 0:
            msg = f"Span start cannot be negative, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end {self.end} lies before its start {self.start}"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"Span line is 1-indexed, got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"Span column is 1-indexed, got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Everything known about one problem with a pattern.

    str(diagnostic) is the bare message, which is also what the raised
    exception's str() returns.

    Attributes:
        code: Family of the problem
        message: One-line description
        span: Where in the pattern (None when no position applies)
        hint: How a translator could fix the pattern
        help_url: Reference documentation for the family
        expected: What the grammar required, for "Expected ..." errors
        found: Offending character, or "end of message pattern"
        severity: "error" or "warning"
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    expected: str | None = None
    found: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self, source: str | None = None) -> str:
        """Multi-line report with location and, given the pattern, an excerpt.

        Example output:
            error[EXPECTED_TOKEN]: Expected } but found end of message pattern
              --> line 1, column 7
                |
              1 | {a,b,c
                |       ^

        Args:
            source: Pattern the span refers to
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self, source)

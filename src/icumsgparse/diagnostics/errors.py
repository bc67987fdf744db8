"""ICUMsgParse exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic for rich error information, while
str(error) stays the bare one-line message that callers pattern-match on.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MessageFormatError(Exception):
    """Base exception for all ICUMsgParse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def message(self) -> str:
        """One-line error message."""
        return str(self)


class MessageFormatSyntaxError(MessageFormatError):
    """Message pattern violates the message-format grammar.

    Raised at the first violation; no partial tree is returned. The
    position fields describe where parsing stopped.

    Attributes:
        expected: What the grammar required (None for "Unexpected ... found")
        found: Offending character or "end of message pattern"
        offset: Character offset of the failure (0-indexed)
        line: Line of the failure (1-indexed)
        column: Column of the failure (1-indexed)
        source: The coerced pattern being parsed
    """

    def __init__(self, diagnostic: Diagnostic, source: str = "") -> None:
        """Initialize MessageFormatSyntaxError.

        Args:
            diagnostic: Diagnostic describing the violation
            source: Pattern text, kept for source excerpts in format_error()
        """
        super().__init__(diagnostic)
        self.source = source
        self.expected = diagnostic.expected
        self.found = diagnostic.found
        span = diagnostic.span
        self.offset = span.start if span is not None else 0
        self.line = span.line if span is not None else 1
        self.column = span.column if span is not None else 1

    def format_error(self) -> str:
        """Format with location and source excerpt (Rust compiler style)."""
        if self.diagnostic is None:
            return str(self)
        return self.diagnostic.format_error(self.source)

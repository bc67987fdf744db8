"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases

    The syntax message wording is a stable contract: downstream tooling
    pattern-matches on "Expected ... but found ...", "Unexpected ... found"
    and '"other" sub-message must be specified in ...'.
    """

    # Base documentation URL
    _DOCS_BASE = "https://unicode-org.github.io/icu/userguide/format_parse/messages"

    # Fix suggestions keyed by the expectation text the parser reports.
    _EXPECTED_HINTS: dict[str, str] = {
        "placeholder id": "Name the argument right after '{', or quote a literal brace as '{'",
        ", or }": "Separate placeholder parts with commas and close it with '}'",
        "}": "Close every '{' with a matching '}', or quote literal braces as '{'",
        "placeholder type": "Give a type after the comma, e.g. {n, number}",
        "placeholder style name": "Add a style after the second comma, or remove the comma",
        "offset number": "Write the offset as offset:N with N a non-negative integer",
        "sub-message selector": "Start each case with a selector such as one, =0 or other",
        "{ to start sub-message": "Follow each selector with its message in braces: other {...}",
        "} to end sub-message": "Close each case message with '}', or quote literal braces as '}'",
    }

    @staticmethod
    def _expected_hint(expected: str) -> str | None:
        hint = ErrorTemplate._EXPECTED_HINTS.get(expected)
        if hint is None and expected.endswith(" sub-messages"):
            hint = "Add a comma followed by the cases, e.g. {n, plural, other {#}}"
        return hint

    @staticmethod
    def expected_token(expected: str, found: str, span: SourceSpan | None) -> Diagnostic:
        """Grammar expected one thing but the pattern contains another.

        Args:
            expected: Description of the expectation (e.g. "placeholder id")
            found: Offending character or the end-of-pattern sentinel
            span: Location of the offending character

        Returns:
            Diagnostic for EXPECTED_TOKEN, with a hint when one fits the expectation
        """
        msg = f"Expected {expected} but found {found}"
        return Diagnostic(
            code=DiagnosticCode.EXPECTED_TOKEN,
            message=msg,
            span=span,
            hint=ErrorTemplate._expected_hint(expected),
            help_url=f"{ErrorTemplate._DOCS_BASE}/",
            expected=expected,
            found=found,
        )

    @staticmethod
    def unexpected_token(found: str, span: SourceSpan | None) -> Diagnostic:
        """Syntax character with no production that accepts it.

        Args:
            found: Offending character

        Returns:
            Diagnostic for UNEXPECTED_TOKEN
        """
        msg = f"Unexpected {found} found"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TOKEN,
            message=msg,
            span=span,
            hint=f"Remove the stray {found} or escape it as '{found}'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/",
            found=found,
        )

    @staticmethod
    def missing_other(construct: str, span: SourceSpan | None) -> Diagnostic:
        """Sub-message list lacks the mandatory "other" case.

        Args:
            construct: Argument type owning the list (plural, selectordinal, select)

        Returns:
            Diagnostic for MISSING_OTHER_SUB_MESSAGE
        """
        msg = f'"other" sub-message must be specified in {construct}'
        return Diagnostic(
            code=DiagnosticCode.MISSING_OTHER_SUB_MESSAGE,
            message=msg,
            span=span,
            hint="Add an 'other {...}' case used when no other selector matches",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#complex-argument-types",
            expected=f'"other" sub-message in {construct}',
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of the pattern.

        Args:
            position: Character offset of the read

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_EOF, message=msg)

    @staticmethod
    def nesting_depth_exceeded(max_depth: int, span: SourceSpan | None) -> Diagnostic:
        """Placeholder nesting deeper than the parser allows.

        Args:
            max_depth: Configured nesting limit

        Returns:
            Diagnostic for PARSE_NESTING_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth of {max_depth} exceeded"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NESTING_DEPTH_EXCEEDED,
            message=msg,
            span=span,
            hint="Flatten nested plural/select arguments or raise max_nesting_depth",
        )

    @staticmethod
    def traversal_depth_exceeded(max_depth: int) -> Diagnostic:
        """AST walk exceeded the visitor depth limit.

        Args:
            max_depth: Configured traversal limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum traversal depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="The message tree is nested deeper than any parsed pattern can be",
        )

    @staticmethod
    def offset_out_of_range(max_digits: int, span: SourceSpan | None) -> Diagnostic:
        """Plural offset has more digits than can be converted to an int.

        Args:
            max_digits: Interpreter limit on integer string conversion

        Returns:
            Diagnostic for OFFSET_OUT_OF_RANGE
        """
        msg = f"Offset number exceeds {max_digits} digits"
        return Diagnostic(
            code=DiagnosticCode.OFFSET_OUT_OF_RANGE,
            message=msg,
            span=span,
            hint="Use a small non-negative offset, e.g. offset:1",
            help_url=f"{ErrorTemplate._DOCS_BASE}/#complex-argument-types",
        )

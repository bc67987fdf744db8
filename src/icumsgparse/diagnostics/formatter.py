"""Rendering of diagnostics for terminals, logs and tools.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic, SourceSpan

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ANSI_RESET = "\033[0m"
_ANSI_SEVERITY = {
    "error": "\033[1;31m",  # bold red
    "warning": "\033[1;33m",  # bold yellow
}


class OutputFormat(StrEnum):
    """How DiagnosticFormatter lays out a diagnostic."""

    RUST = "rust"  # Multi-line, with pattern excerpt and caret (default)
    SIMPLE = "simple"  # One line, suitable for logs
    JSON = "json"  # One JSON object, for editors and translation tooling


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns Diagnostic objects into text.

    Patterns often come from translators or end users, so ``sanitize``
    truncates messages, hints and excerpt lines to ``max_content_length``
    before they reach logs.

    Attributes:
        output_format: Layout (rust, simple, json)
        sanitize: Truncate user-supplied content
        color: Wrap the severity label in ANSI colors
        max_content_length: Truncation length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.unexpected_token("}", None)))
        UNEXPECTED_TOKEN: Unexpected } found
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic, source: str | None = None) -> str:
        """Render one diagnostic.

        Args:
            diagnostic: Diagnostic to render
            source: Pattern the span points into; RUST output then shows
                    the offending line with a caret under the column

        Returns:
            Rendered text
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic, source)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _severity_label(self, diagnostic: Diagnostic) -> str:
        if not self.color:
            return diagnostic.severity
        return f"{_ANSI_SEVERITY[diagnostic.severity]}{diagnostic.severity}{_ANSI_RESET}"

    def _format_rust(self, diagnostic: Diagnostic, source: str | None) -> str:
        """Multi-line layout.

        Example output:
            error[EXPECTED_TOKEN]: Expected } but found end of message pattern
              --> line 1, column 7
                |
              1 | {a,b,c
                |       ^
              = help: Close every '{' with a matching '}' ...
              = note: see https://...
        """
        label = self._severity_label(diagnostic)
        lines = [f"{label}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"]

        span = diagnostic.span
        if span is not None:
            lines.append(f"  --> line {span.line}, column {span.column}")
            if source is not None:
                lines.extend(self._excerpt(source, span))
        if diagnostic.hint:
            lines.append(f"  = help: {self._clip(diagnostic.hint)}")
        if diagnostic.help_url:
            lines.append(f"  = note: see {diagnostic.help_url}")
        return "\n".join(lines)

    def _excerpt(self, source: str, span: SourceSpan) -> list[str]:
        """Offending pattern line with a caret under the span's column."""
        pattern_lines = source.split("\n")
        if span.line > len(pattern_lines):
            return []
        number = str(span.line)
        gutter = " " * len(number)
        caret = " " * (span.column - 1) + "^"
        return [
            f"  {gutter} |",
            f"  {number} | {self._clip(pattern_lines[span.line - 1])}",
            f"  {gutter} | {caret}",
        ]

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """One-line layout.

        Example output:
            EXPECTED_TOKEN: Expected placeholder id but found }
        """
        return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """JSON layout; absent optional fields are omitted."""
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        span = diagnostic.span
        if span is not None:
            data |= {
                "line": span.line,
                "column": span.column,
                "start": span.start,
                "end": span.end,
            }
        if diagnostic.expected is not None:
            data["expected"] = diagnostic.expected
        if diagnostic.found is not None:
            data["found"] = diagnostic.found
        if diagnostic.hint:
            data["hint"] = self._clip(diagnostic.hint)
        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url
        return json.dumps(data, ensure_ascii=False)

    def _clip(self, text: str) -> str:
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text

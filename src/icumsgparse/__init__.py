"""ICUMsgParse - ICU message-format pattern parser.

Parses ICU-style message patterns (text with {placeholder} arguments,
including plural, selectordinal and select sub-messages) into an immutable
AST, with an optional token log and exact syntax diagnostics.

Public API:
    parse - Parse a pattern into a Message tree
    MessageFormatParser - Parser with configurable size and nesting limits
    to_compact - Convert a Message to nested lists for JSON tooling
    introspect_message / extract_arguments - Argument metadata

Exceptions:
    MessageFormatError - Base exception class
    MessageFormatSyntaxError - Parse errors

Submodules:
    icumsgparse.syntax.ast - AST node types (Message, Text, placeholders, Case)
    icumsgparse.syntax.visitor - Visitor base class for tree walkers
    icumsgparse.introspection - Argument extraction
    icumsgparse.diagnostics - Error types, diagnostic codes and formatting
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import MessageFormatError, MessageFormatSyntaxError
from .introspection import extract_arguments, introspect_message
from .syntax import MessageFormatParser, Token, parse, to_compact

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("icumsgparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "MessageFormatError",
    "MessageFormatParser",
    "MessageFormatSyntaxError",
    "Token",
    "__version__",
    "extract_arguments",
    "introspect_message",
    "parse",
    "to_compact",
]

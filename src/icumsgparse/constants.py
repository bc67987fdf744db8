"""Shared constants for ICUMsgParse.

This module provides centralized configuration constants used across
the syntax, diagnostics and introspection packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for parsing and AST traversal
- Input limits: DoS prevention via size constraints
- Grammar: Syntax characters and reserved argument types

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "MAX_TRAVERSAL_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Grammar
    "ARG_OPEN",
    "ARG_CLOSE",
    "ARG_SEPARATOR",
    "OFFSET_SEPARATOR",
    "POUND",
    "QUOTE",
    "OFFSET_KEYWORD",
    "OTHER_SELECTOR",
    "PLURAL_TYPES",
    "SELECT_TYPE",
    "SUB_MESSAGE_TYPES",
    "SIMPLE_TYPES",
    "END_OF_PATTERN",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================
#
# The parser limits sub-message nesting, one level per `{...}` case body.
# Each nesting level costs a handful of Python frames, so 100 levels stays
# well under the default recursion limit of 1000.

MAX_DEPTH: int = 100

# Visitors count tree levels: the root message, three per sub-message level
# (placeholder, case, message) and the leaf element (text, #, placeholder)
# inside the innermost message. Sized so any parsed tree can be walked.
MAX_TRAVERSAL_DEPTH: int = 3 * MAX_DEPTH + 2

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum pattern size in characters (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# GRAMMAR
# ============================================================================

ARG_OPEN: str = "{"
ARG_CLOSE: str = "}"
ARG_SEPARATOR: str = ","
OFFSET_SEPARATOR: str = ":"
POUND: str = "#"
QUOTE: str = "'"

OFFSET_KEYWORD: str = "offset"

# Sub-message selector every plural/selectordinal/select must define.
OTHER_SELECTOR: str = "other"

PLURAL_TYPES: frozenset[str] = frozenset({"plural", "selectordinal"})
SELECT_TYPE: str = "select"
SUB_MESSAGE_TYPES: frozenset[str] = PLURAL_TYPES | {SELECT_TYPE}

# Argument types whose third argument is always a style, never sub-messages.
SIMPLE_TYPES: frozenset[str] = frozenset(
    {"number", "date", "time", "ordinal", "duration", "spellout"}
)

# Shown in diagnostics in place of the offending character at end of input.
END_OF_PATTERN: str = "end of message pattern"

"""Hypothesis strategies for ICUMsgParse property-based testing.

Usage:
    from tests.strategies import message_patterns, chaos_patterns

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - message_patterns, typed_placeholders, plural_placeholders
"""

from .messages import (
    PLURAL_CATEGORIES,
    SIMPLE_TYPES,
    SYNTAX_CHARS,
    WHITESPACE_ALPHABET,
    arg_names,
    chaos_patterns,
    message_patterns,
    plain_text,
    plural_placeholders,
    select_placeholders,
    simple_placeholders,
    typed_placeholders,
    whitespace_runs,
)

__all__ = [
    "PLURAL_CATEGORIES",
    "SIMPLE_TYPES",
    "SYNTAX_CHARS",
    "WHITESPACE_ALPHABET",
    "arg_names",
    "chaos_patterns",
    "message_patterns",
    "plain_text",
    "plural_placeholders",
    "select_placeholders",
    "simple_placeholders",
    "typed_placeholders",
    "whitespace_runs",
]

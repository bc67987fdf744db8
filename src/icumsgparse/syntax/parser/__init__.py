"""Message-format parser module.

This module provides the main MessageFormatParser class and related
parsing utilities organized into focused submodules.

Module Organization:
- core.py: Main MessageFormatParser class and input coercion
- lexer.py: Mode-driven token scanning and quote escapes
- whitespace.py: Unicode whitespace set used inside placeholders
- rules.py: All grammar rules (message, placeholder, plural, select, sub-messages)

Public API:
    MessageFormatParser: Main parser class
    ParseContext: Parse context for depth tracking (advanced usage)
    coerce_pattern: Pattern-to-text conversion applied before parsing
"""

from icumsgparse.syntax.parser.core import MISSING, MessageFormatParser, coerce_pattern
from icumsgparse.syntax.parser.rules import ParseContext

__all__ = ["MISSING", "MessageFormatParser", "ParseContext", "coerce_pattern"]

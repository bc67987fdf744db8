"""Core message-format parser implementation.

This module provides the main MessageFormatParser class that orchestrates
parsing of message patterns into AST structures defined in :mod:`icumsgparse.syntax.ast`.

Architecture:
    The parser owns nothing but configuration. Each call builds a
    :class:`~icumsgparse.syntax.parser.lexer.Lexer` over the coerced pattern
    and a root :class:`~icumsgparse.syntax.parser.rules.ParseContext`, then
    hands both to :func:`~icumsgparse.syntax.parser.rules.parse_message`.
    The grammar rules either return the finished
    :class:`~icumsgparse.syntax.ast.Message` or raise
    :class:`~icumsgparse.diagnostics.MessageFormatSyntaxError` at the first
    violation (fail fast, no partial tree).

Input Coercion:
    Patterns may be any value; they are converted to text first so callers
    can pass numbers, None or objects with __str__. See :func:`coerce_pattern`.

Security:
    Includes configurable input size limit to prevent DoS attacks via
    unbounded memory allocation from extremely large patterns.

See Also:
    - :mod:`icumsgparse.syntax.ast` - All AST node type definitions
    - :mod:`icumsgparse.syntax.parser.lexer` - Token scanning and quote escapes
    - :mod:`icumsgparse.syntax.parser.rules` - Grammar rules
"""

import logging
import math
from decimal import Decimal
from typing import Final

from icumsgparse.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from icumsgparse.core.depth_guard import depth_clamp
from icumsgparse.diagnostics import MessageFormatSyntaxError
from icumsgparse.syntax.ast import Message
from icumsgparse.syntax.parser.lexer import Lexer
from icumsgparse.syntax.parser.rules import ParseContext, parse_message
from icumsgparse.syntax.tokens import TokenSink

__all__ = ["MISSING", "MessageFormatParser", "coerce_pattern"]

logger = logging.getLogger(__name__)

# Python frames consumed per sub-message level by the recursive rules
# (message -> placeholder -> argument -> sub-messages -> sub-message).
_FRAMES_PER_LEVEL: Final = 5


class _Missing:
    """Sentinel type for an omitted pattern argument."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


def _float_text(value: float) -> str:
    """Shortest round-trip text of a finite float in JavaScript notation.

    Magnitudes from 1e-6 up to 1e21 are written positionally (1e16 ->
    "10000000000000000", 1e-6 -> "0.000001"); anything else uses an
    exponent without zero padding and with an explicit sign (1e-7 ->
    "1e-7", 1e21 -> "1e+21"). Zero of either sign is "0".
    """
    if value == 0:
        return "0"
    text = repr(value)
    if 1e-6 <= abs(value) < 1e21:
        text = format(Decimal(text), "f")
        return text.rstrip("0").rstrip(".") if "." in text else text
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{exponent[0]}{exponent[1:].lstrip('0')}"


def coerce_pattern(value: object) -> str:
    """Convert any pattern value to the text that gets parsed.

    Conversion rules:
        - omitted (MISSING) -> "undefined"
        - None -> "null"
        - True / False -> "true" / "false"
        - floats use JavaScript number text: 3.0 -> "3", 1e-7 -> "1e-7",
          1e21 -> "1e+21"
        - NaN and infinities -> "NaN", "Infinity", "-Infinity"
        - anything else -> str(value)

    Example:
        >>> coerce_pattern(12.34)
        '12.34'
        >>> coerce_pattern(None)
        'null'
    """
    match value:
        case str():
            return value
        case _Missing():
            return "undefined"
        case None:
            return "null"
        case bool():
            return "true" if value else "false"
        case float() if math.isnan(value):
            return "NaN"
        case float() if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        case float():
            return _float_text(value)
        case _:
            return str(value)


class MessageFormatParser:
    """ICU message-format parser using a mode-driven lexer.

    Design:
    - Recursive descent, one function per grammar production
    - Fail fast: the first violation raises MessageFormatSyntaxError
    - Stateless between calls; safe to share across threads

    Security:
    - Configurable max_source_size prevents DoS via large inputs
    - Default limit: 10 MB (far beyond any real message)
    - Configurable max_nesting_depth prevents stack exhaustion via deeply
      nested sub-messages

    Attributes:
        max_source_size: Maximum allowed pattern size in characters (default: 10 MB)
        max_nesting_depth: Maximum allowed sub-message nesting depth (default: 100)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int | None = None,
        max_nesting_depth: int | None = None,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            max_source_size: Maximum pattern size in characters (default: 10 MB).
                            Set to 0 to disable size limit (not recommended).
            max_nesting_depth: Maximum sub-message nesting depth (default: 100).
                              Clamped so parsing cannot hit Python's recursion limit.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        requested_depth = max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        self._max_nesting_depth = depth_clamp(requested_depth, frames_per_level=_FRAMES_PER_LEVEL)

    @property
    def max_source_size(self) -> int:
        """Maximum allowed pattern size in characters."""
        return self._max_source_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed sub-message nesting depth."""
        return self._max_nesting_depth

    def parse(self, pattern: object = MISSING, tokens: TokenSink | None = None) -> Message:
        """Parse a message pattern into its AST.

        Args:
            pattern: Pattern text, or any value coerced via :func:`coerce_pattern`
            tokens: Optional sink receiving every lexed token in source order.
                    On failure it keeps the tokens lexed before the error.

        Returns:
            Root :class:`~icumsgparse.syntax.ast.Message` (empty for empty input)

        Raises:
            ValueError: If the pattern exceeds max_source_size (DoS prevention)
            MessageFormatSyntaxError: On the first grammar violation

        Example:
            >>> parser = MessageFormatParser()
            >>> parser.parse("Hello, {name}!").elements[1]
            SimplePlaceholder(id='name')
        """
        source = coerce_pattern(pattern)

        # Validate input size (DoS prevention)
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            msg = (
                f"Pattern size ({len(source):,} characters) exceeds maximum "
                f"({self._max_source_size:,} characters). "
                "Configure max_source_size in MessageFormatParser constructor to increase limit."
            )
            raise ValueError(msg)

        lexer = Lexer(source, tokens)
        context = ParseContext(max_nesting_depth=self._max_nesting_depth)
        try:
            message = parse_message(lexer, context)
        except MessageFormatSyntaxError as e:
            logger.debug("Pattern rejected at offset %d: %s", e.offset, e)
            raise

        logger.debug("Parsed pattern (%d characters, %d elements)", len(source), len(message))
        return message

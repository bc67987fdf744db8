"""Tests for message introspection.

Validates argument extraction across plain, typed and nested
sub-message placeholders.
"""

from __future__ import annotations

import pytest
from hypothesis import given

from icumsgparse import MessageFormatSyntaxError, extract_arguments, introspect_message, parse
from icumsgparse.constants import MAX_DEPTH
from icumsgparse.enums import ArgumentContext
from icumsgparse.introspection import ArgumentInfo, IntrospectionVisitor
from tests.strategies import arg_names, plain_text

# ============================================================================
# ARGUMENT EXTRACTION
# ============================================================================


class TestArgumentExtraction:
    """Test which arguments are found."""

    def test_no_arguments(self) -> None:
        """Plain text needs no arguments."""
        info = introspect_message("Hello, World!")

        assert info.arguments == frozenset()
        assert not info.has_selectors
        assert not info.uses_pound

    def test_simple_argument(self) -> None:
        """Bare placeholders are untyped pattern uses."""
        info = introspect_message("Hi {name}")

        assert info.arguments == frozenset({ArgumentInfo("name", None, ArgumentContext.PATTERN)})

    def test_typed_argument(self) -> None:
        """Typed placeholders record their type."""
        info = introspect_message("{when, date, short}")

        assert info.get_argument_types("when") == frozenset({"date"})

    def test_plural_and_nested_arguments(self) -> None:
        """Arguments in sub-messages are found at any depth."""
        info = introspect_message(
            "{count, plural, one {{host} invites #} other {{g, select, other {{guest}}}}}"
        )

        assert info.get_argument_names() == frozenset({"count", "host", "g", "guest"})
        assert info.has_selectors
        assert info.uses_pound

    def test_contexts(self) -> None:
        """Selector arguments are tagged with their construct."""
        info = introspect_message("{n, selectordinal, other {#}} {g, select, other {x}}")

        assert ArgumentInfo("n", "selectordinal", ArgumentContext.PLURAL) in info.arguments
        assert ArgumentInfo("g", "select", ArgumentContext.SELECT) in info.arguments

    def test_custom_sub_message_type(self) -> None:
        """Custom sub-message types count as select uses."""
        info = introspect_message("{a, <, > {click}}")

        assert info.arguments == frozenset({ArgumentInfo("a", "<", ArgumentContext.SELECT)})

    def test_same_argument_multiple_uses(self) -> None:
        """One name can be used in several ways."""
        info = introspect_message("{n, plural, other {{n, number}}} {n}")

        assert info.get_argument_types("n") == frozenset({"plural", "number"})
        assert info.requires_argument("n")
        assert not info.requires_argument("m")

    def test_hash_in_select_is_not_pound(self) -> None:
        """# outside plural cases is text."""
        assert not introspect_message("{g, select, other {#1}}").uses_pound


# ============================================================================
# API SURFACE
# ============================================================================


class TestIntrospectionAPI:
    """Test input handling and convenience functions."""

    def test_accepts_parsed_message(self) -> None:
        """Messages and pattern text give the same result."""
        pattern = "{a} {b, number}"

        assert introspect_message(parse(pattern)) == introspect_message(pattern)

    def test_rejects_other_types(self) -> None:
        """Non-message input raises TypeError."""
        with pytest.raises(TypeError, match="Expected Message or str"):
            introspect_message(42)  # type: ignore[arg-type]

    def test_invalid_pattern_raises_syntax_error(self) -> None:
        """Unparseable text propagates the parse error."""
        with pytest.raises(MessageFormatSyntaxError):
            introspect_message("{")

    def test_extract_arguments(self) -> None:
        """extract_arguments returns names only."""
        assert extract_arguments("{host} invited {guest}") == frozenset({"host", "guest"})

    def test_parser_limit_pattern(self) -> None:
        """Arguments are found in the deepest pattern the parser accepts."""
        pattern = "{n} x"
        for _ in range(MAX_DEPTH):
            pattern = "{v, select, other{" + pattern + "}}"

        result = introspect_message(pattern)

        assert result.get_argument_names() == frozenset({"n", "v"})
        assert result.has_selectors
        assert extract_arguments(parse(pattern)) == frozenset({"n", "v"})

    def test_visitor_usable_directly(self) -> None:
        """IntrospectionVisitor collects into its attributes."""
        visitor = IntrospectionVisitor()
        visitor.visit(parse("{n, plural, other {#}}"))

        assert visitor.has_selectors
        assert visitor.uses_pound

    @given(prefix=plain_text(), name=arg_names())
    def test_single_placeholder_property(self, prefix: str, name: str) -> None:
        """PROPERTY: one placeholder yields exactly its name."""
        assert extract_arguments(prefix + "{" + name + "}") == frozenset({name})

"""Hypothesis strategies for generating message-format patterns.

Provides custom strategies for property-based testing of the lexer and
parser.

Strategy Categories:
- Building blocks: argument names, plain text, whitespace runs
- Valid patterns: placeholders and nested plural/select constructs
- Chaos: arbitrary text dense in syntax characters (for error paths)
"""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from icumsgparse.syntax.parser.whitespace import WHITESPACE_CHARS

# =============================================================================
# Constants
# =============================================================================

ARG_NAME_FIRST_CHARS: str = string.ascii_letters + "_"
ARG_NAME_REST_CHARS: str = string.ascii_letters + string.digits + "_"

# Every character with meaning somewhere in the grammar.
SYNTAX_CHARS: str = "{}#',:"

PLURAL_CATEGORIES = ("zero", "one", "two", "few", "many")

SIMPLE_TYPES = ("number", "date", "time", "ordinal", "duration", "spellout")

STYLE_WORDS = ("percent", "integer", "short", "long", "currency", "::compact-short")

# Unicode whitespace, sorted for reproducible shrinking.
WHITESPACE_ALPHABET: str = "".join(sorted(WHITESPACE_CHARS))


# =============================================================================
# Building Blocks
# =============================================================================


@composite
def arg_names(draw: st.DrawFn) -> str:
    """Generate argument names: [A-Za-z_][A-Za-z0-9_]*"""
    first = draw(st.sampled_from(ARG_NAME_FIRST_CHARS))
    rest = draw(st.text(alphabet=ARG_NAME_REST_CHARS, max_size=12))
    return first + rest


def plain_text(min_size: int = 1, max_size: int = 40) -> st.SearchStrategy[str]:
    """Generate text containing no { } # or ' (always parses to itself)."""
    return st.text(
        alphabet=st.characters(
            blacklist_categories=("Cs",),
            blacklist_characters="{}#'",
        ),
        min_size=min_size,
        max_size=max_size,
    )


def whitespace_runs(min_size: int = 1) -> st.SearchStrategy[str]:
    """Generate runs of placeholder whitespace, ASCII and Unicode."""
    return st.text(alphabet=WHITESPACE_ALPHABET, min_size=min_size, max_size=4)


def _optional_space() -> st.SearchStrategy[str]:
    return st.one_of(st.just(""), st.just(" "), whitespace_runs())


# =============================================================================
# Valid Patterns
# =============================================================================


@composite
def simple_placeholders(draw: st.DrawFn) -> str:
    """Generate {name} with optional padding."""
    name = draw(arg_names())
    return "{" + draw(_optional_space()) + name + draw(_optional_space()) + "}"


@composite
def typed_placeholders(draw: st.DrawFn) -> str:
    """Generate {name, type} and {name, type, style}."""
    name = draw(arg_names())
    arg_type = draw(st.sampled_from(SIMPLE_TYPES))
    if draw(st.booleans()):
        event("typed=with_style")
        style = draw(st.sampled_from(STYLE_WORDS))
        return f"{{{name}, {arg_type}, {style}}}"
    event("typed=bare")
    return f"{{{name}, {arg_type}}}"


@composite
def plural_placeholders(draw: st.DrawFn, max_depth: int = 2) -> str:
    """Generate plural/selectordinal placeholders with nested case bodies."""
    name = draw(arg_names())
    kind = draw(st.sampled_from(["plural", "selectordinal"]))
    offset = draw(st.one_of(st.just(""), st.integers(0, 99).map(lambda n: f"offset:{n} ")))
    selectors = draw(
        st.lists(
            st.one_of(st.sampled_from(PLURAL_CATEGORIES), st.integers(0, 20).map(lambda n: f"={n}")),
            max_size=3,
            unique=True,
        )
    )
    selectors.append("other")
    bodies = [draw(message_patterns(max_depth=max_depth - 1, pound=True)) for _ in selectors]
    cases = " ".join(f"{sel} {{{body}}}" for sel, body in zip(selectors, bodies, strict=True))
    event(f"plural={kind}")
    return f"{{{name}, {kind}, {offset}{cases}}}"


@composite
def select_placeholders(draw: st.DrawFn, max_depth: int = 2) -> str:
    """Generate select placeholders with nested case bodies."""
    name = draw(arg_names())
    selectors = draw(st.lists(arg_names().filter(lambda s: s != "other"), max_size=3, unique=True))
    selectors.append("other")
    bodies = [draw(message_patterns(max_depth=max_depth - 1)) for _ in selectors]
    cases = " ".join(f"{sel} {{{body}}}" for sel, body in zip(selectors, bodies, strict=True))
    return f"{{{name}, select, {cases}}}"


@composite
def message_patterns(draw: st.DrawFn, max_depth: int = 2, pound: bool = False) -> str:
    """Generate syntactically valid patterns.

    Args:
        max_depth: Remaining sub-message nesting levels
        pound: Whether # may appear as a PoundSign (plural case body)

    Events emitted:
    - depth={n}: Remaining nesting budget at this level
    """
    event(f"depth={max_depth}")
    parts = [plain_text(), simple_placeholders(), typed_placeholders()]
    if pound:
        parts.append(st.just("#"))
    if max_depth > 0:
        parts.append(plural_placeholders(max_depth=max_depth))
        parts.append(select_placeholders(max_depth=max_depth))
    return "".join(draw(st.lists(st.one_of(*parts), max_size=4)))


# =============================================================================
# Chaos Strategies (parser stress testing)
# =============================================================================


def chaos_patterns() -> st.SearchStrategy[str]:
    """Generate arbitrary text dense in syntax characters.

    WARNING: This generates mostly invalid patterns. Use for error-path
    and token-log properties, never where a successful parse is required.
    """
    fragments = st.one_of(
        st.sampled_from(SYNTAX_CHARS),
        st.sampled_from(["a", "n", "=", "1", " ", "\t"]),
        st.sampled_from(["plural", "select", "other", "offset", "number"]),
    )
    return st.lists(fragments, max_size=30).map("".join)

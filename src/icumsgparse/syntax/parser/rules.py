"""Grammar rules for the message-format parser.

One function per production, all mutually recursive:

    message       := (text | "#" | "{" placeholder)*
    placeholder   := id ("}" | "," type ("}" | "," argument "}"))
    argument      := plural-args | select-args | style | sub-messages
    plural-args   := ("offset:" number)? sub-messages
    sub-messages  := (selector "{" message "}")*

All grammar rules are co-located in a single module to:
1. Eliminate circular imports between interdependent parsing functions
2. Keep the recursion (message -> placeholder -> sub-message -> message)
   readable in one place

Every rule takes the shared Lexer plus an immutable ParseContext and either
returns a finished AST node or raises MessageFormatSyntaxError. Nodes are
only built once all of their children parsed, so a failure never leaves a
partially constructed tree behind.

Security:
    Includes configurable nesting depth limit to prevent stack exhaustion
    from deeply nested sub-messages ({a,select,other{{b,select,other{...}}}}).
"""

from dataclasses import dataclass

from icumsgparse.constants import (
    ARG_CLOSE,
    ARG_OPEN,
    ARG_SEPARATOR,
    MAX_DEPTH,
    OTHER_SELECTOR,
    POUND,
    SELECT_TYPE,
    SIMPLE_TYPES,
    SUB_MESSAGE_TYPES,
)
from icumsgparse.enums import PluralKind, TokenKind
from icumsgparse.syntax.ast import (
    Case,
    Element,
    Message,
    Placeholder,
    PluralPlaceholder,
    PoundSign,
    SelectPlaceholder,
    SimplePlaceholder,
    Text,
    TypedPlaceholder,
)
from icumsgparse.syntax.parser.lexer import Lexer

__all__ = [
    "ParseContext",
    "parse_message",
    "parse_placeholder",
    "parse_sub_message",
    "parse_sub_messages",
]


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Replaces module-level state with explicit parameter passing, so
    concurrent parses never interfere.

    Attributes:
        max_nesting_depth: Maximum allowed sub-message nesting depth
        current_depth: Current nesting depth (0 = top-level message)
        pound_is_syntax: True directly inside a plural/selectordinal case
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0
    pound_is_syntax: bool = False

    @property
    def is_top_level(self) -> bool:
        """True while parsing the root message."""
        return self.current_depth == 0

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been reached."""
        return self.current_depth >= self.max_nesting_depth

    def enter_sub_message(self, *, pound_is_syntax: bool) -> "ParseContext":
        """Create new context one level deeper for a sub-message body.

        The pound flag is set per level, never inherited: a select nested
        inside a plural case treats # as text again.
        """
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
            pound_is_syntax=pound_is_syntax,
        )


# =============================================================================
# Message Parsing
# =============================================================================


def parse_message(lexer: Lexer, context: ParseContext) -> Message:
    """Parse message elements until a closing brace or end of input.

    At top level a bare } is an error. Inside a sub-message the } is left
    unconsumed for parse_sub_message to close the body.

    Examples:
        Hello, {name}! -> Message((Text("Hello, "), SimplePlaceholder("name"), Text("!")))
        # photos       -> Message((PoundSign(), Text(" photos")))  (plural case)

    Raises:
        MessageFormatSyntaxError: On the first grammar violation
    """
    elements: list[Element] = []
    while not lexer.is_eof:
        if lexer.at(ARG_OPEN):
            lexer.take(TokenKind.OPEN)
            elements.append(parse_placeholder(lexer, context))
        elif lexer.at(ARG_CLOSE):
            if context.is_top_level:
                raise lexer.unexpected()
            break
        elif context.pound_is_syntax and lexer.at(POUND):
            lexer.take(TokenKind.POUND)
            elements.append(PoundSign())
        else:
            text = lexer.read_text(pound_is_syntax=context.pound_is_syntax)
            if text:
                elements.append(Text(text))
    return Message(tuple(elements))


# =============================================================================
# Placeholder Parsing
# =============================================================================


def _expect_separator(lexer: Lexer) -> None:
    if not lexer.at(ARG_SEPARATOR):
        raise lexer.expected(f"{ARG_SEPARATOR} or {ARG_CLOSE}")
    lexer.take(TokenKind.COMMA)


def _expect_close(lexer: Lexer) -> None:
    lexer.skip_space()
    if not lexer.at(ARG_CLOSE):
        raise lexer.expected(ARG_CLOSE)
    lexer.take(TokenKind.CLOSE)


def parse_placeholder(lexer: Lexer, context: ParseContext) -> Placeholder:
    """Parse a placeholder body; the opening { is already consumed.

    Shapes by arity:
        {id}                        -> SimplePlaceholder
        {id, type}                  -> TypedPlaceholder
        {id, type, style}           -> TypedPlaceholder with style
        {id, plural|selectordinal, [offset:N] cases}  -> PluralPlaceholder
        {id, select, cases}         -> SelectPlaceholder
        {id, custom, cases}         -> SelectPlaceholder with type="custom"

    Raises:
        MessageFormatSyntaxError: Missing id/type/style, stray {, missing }
    """
    lexer.skip_space()
    arg_id = lexer.read_word(TokenKind.ID)
    if not arg_id:
        raise lexer.expected("placeholder id")

    lexer.skip_space()
    if lexer.at(ARG_CLOSE):
        lexer.take(TokenKind.CLOSE)
        return SimplePlaceholder(arg_id)
    _expect_separator(lexer)

    lexer.skip_space()
    arg_type = lexer.read_word(TokenKind.TYPE)
    if not arg_type:
        raise lexer.expected("placeholder type")

    lexer.skip_space()
    if lexer.at(ARG_CLOSE):
        if arg_type in SUB_MESSAGE_TYPES:
            raise lexer.expected(f"{arg_type} sub-messages")
        lexer.take(TokenKind.CLOSE)
        return TypedPlaceholder(arg_id, arg_type)
    _expect_separator(lexer)

    lexer.skip_space()
    placeholder: Placeholder
    match arg_type:
        case "plural" | "selectordinal":
            placeholder = parse_plural_argument(lexer, context, arg_id, PluralKind(arg_type))
        case "select":
            placeholder = parse_select_argument(lexer, context, arg_id)
        case _:
            placeholder = parse_style_argument(lexer, context, arg_id, arg_type)
    _expect_close(lexer)
    return placeholder


def parse_plural_argument(
    lexer: Lexer, context: ParseContext, arg_id: str, kind: PluralKind
) -> PluralPlaceholder:
    """Parse the arguments of a plural or selectordinal placeholder.

    Example:
        offset:1 =0{nobody} other{# others}

    Raises:
        MessageFormatSyntaxError: Bad offset, malformed cases, missing "other"
    """
    offset = lexer.read_offset()
    if offset is not None:
        lexer.skip_space()
    cases = parse_sub_messages(lexer, context, str(kind), pound_is_syntax=True)
    return PluralPlaceholder(arg_id, kind, cases, offset or 0)


def parse_select_argument(lexer: Lexer, context: ParseContext, arg_id: str) -> SelectPlaceholder:
    """Parse the cases of a select placeholder.

    Example:
        female {she} male {he} other {they}
    """
    cases = parse_sub_messages(lexer, context, SELECT_TYPE, pound_is_syntax=False)
    return SelectPlaceholder(arg_id, cases)


def parse_style_argument(
    lexer: Lexer, context: ParseContext, arg_id: str, arg_type: str
) -> TypedPlaceholder | SelectPlaceholder:
    """Parse the third argument of any other placeholder type.

    Usually a style: everything up to the closing brace, commas included
    ({a, b, c,d} has style "c,d"). A custom type whose remainder runs into
    an unquoted { takes sub-messages instead: {a, <, > {click here}}.
    Built-in formatting types never take sub-messages.

    Raises:
        MessageFormatSyntaxError: Empty style
    """
    scan = lexer.scan_style()
    if scan.stopped_at_open_brace and arg_type not in SIMPLE_TYPES:
        cases = parse_sub_messages(
            lexer, context, arg_type, pound_is_syntax=False, require_other=False
        )
        return SelectPlaceholder(arg_id, cases, type=arg_type)
    if not scan.value:
        raise lexer.expected("placeholder style name")
    return TypedPlaceholder(arg_id, arg_type, lexer.commit_style(scan))


# =============================================================================
# Sub-message Parsing
# =============================================================================


def parse_sub_messages(
    lexer: Lexer,
    context: ParseContext,
    construct: str,
    *,
    pound_is_syntax: bool,
    require_other: bool = True,
) -> tuple[Case, ...]:
    """Parse selector/sub-message pairs up to the enclosing }.

    A repeated selector keeps its first position and takes the later body.

    Args:
        lexer: Shared lexer
        context: Context of the enclosing message
        construct: Argument type named in diagnostics
        pound_is_syntax: Whether case bodies treat # as PoundSign
        require_other: Whether an "other" case is mandatory

    Returns:
        Cases in source order

    Raises:
        MessageFormatSyntaxError: Missing selector, missing braces, missing "other"
    """
    cases: dict[str, Message] = {}
    while not lexer.is_eof and not lexer.at(ARG_CLOSE):
        selector = lexer.read_word(TokenKind.SELECTOR)
        if not selector:
            raise lexer.expected("sub-message selector")
        lexer.skip_space()
        if not lexer.at(ARG_OPEN):
            raise lexer.expected(f"{ARG_OPEN} to start sub-message")
        lexer.take(TokenKind.OPEN)
        cases[selector] = parse_sub_message(lexer, context, pound_is_syntax=pound_is_syntax)
        lexer.skip_space()

    if require_other and OTHER_SELECTOR not in cases:
        raise lexer.missing_other(construct)
    return tuple(Case(selector, message) for selector, message in cases.items())


def parse_sub_message(lexer: Lexer, context: ParseContext, *, pound_is_syntax: bool) -> Message:
    """Parse one sub-message body; the opening { is already consumed.

    Raises:
        MessageFormatSyntaxError: Nesting too deep or body not closed
    """
    if context.is_depth_exceeded():
        raise lexer.too_deep(context.max_nesting_depth)
    message = parse_message(lexer, context.enter_sub_message(pound_is_syntax=pound_is_syntax))
    if not lexer.at(ARG_CLOSE):
        raise lexer.expected(f"{ARG_CLOSE} to end sub-message")
    lexer.take(TokenKind.CLOSE)
    return message

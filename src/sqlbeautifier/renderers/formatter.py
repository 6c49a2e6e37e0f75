"""Indenting SQL formatter.

Renders a token sequence into an indented, line-broken string in a single
left-to-right pass, without building a parse tree.

Nesting is tracked with an explicit stack of frames (SELECT lists, CASE
expressions, parentheses). Every layout decision consults only the top
frame, so a subquery or nested CASE opens its own frame and restores the
enclosing indent when it closes.

Keyword handling is an ordered table of (name, predicate, action) rules
evaluated top to bottom; the first matching rule renders the keyword.

Thread Safety:
All per-call state lives in a FormatContext created fresh for each
render() call. A single SqlFormatter can be shared across threads.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import NamedTuple

from sqlbeautifier.charsets import LINE_BLANKS
from sqlbeautifier.config import CommaPosition, FormatOptions, get_format_options
from sqlbeautifier.scanner import scan
from sqlbeautifier.stringbuilder import StringBuilder
from sqlbeautifier.tokens import Token, TokenKind
from sqlbeautifier.utils.logger import get_logger, log_render
from sqlbeautifier.utils.text import apply_case
from sqlbeautifier.vocabulary import (
    BINARY_OPERATORS,
    CALLABLE_KEYWORDS,
    CLAUSE_KEYWORDS,
    JOIN_QUALIFIERS,
    MAJOR_CLAUSES,
    SET_OPERATIONS,
)

logger = get_logger(__name__)

# Stay on the SELECT line instead of taking the first column's line
SELECT_MODIFIERS = frozenset({"DISTINCT", "ALL"})

_NO_SPACE_BEFORE = frozenset({".", ")", ";", ","})


class FrameKind(Enum):
    """Lexical contexts that affect layout."""

    SELECT_LIST = auto()
    CASE = auto()
    PAREN = auto()


@dataclass(frozen=True, slots=True)
class Frame:
    """An open context and the indent level to restore when it closes."""

    kind: FrameKind
    indent: int
    subquery: bool = False


def _is_callable(token: Token) -> bool:
    """True if a following ``(`` opens an argument list (no space before it)."""
    if token.kind is TokenKind.KEYWORD:
        return token.value in CALLABLE_KEYWORDS
    return token.kind in (TokenKind.FUNCTION, TokenKind.IDENTIFIER)


@dataclass(slots=True)
class FormatContext:
    """Per-render mutable state.

    Created fresh for each render() call; never shared between calls.
    """

    options: FormatOptions
    out: StringBuilder = field(default_factory=StringBuilder)
    level: int = 0
    frames: list[Frame] = field(default_factory=list)
    needs_newline: bool = False
    prev: Token | None = None
    after_between: bool = False
    open_parens: int = 0

    @property
    def top(self) -> Frame | None:
        return self.frames[-1] if self.frames else None

    def top_is(self, kind: FrameKind) -> bool:
        top = self.top
        return top is not None and top.kind is kind

    def in_expanded_select_list(self) -> bool:
        return self.options.expand_comma_lists and self.top_is(FrameKind.SELECT_LIST)

    def in_plain_paren(self) -> bool:
        """Inside parentheses that are not a subquery (call arguments, OVER, ...)."""
        top = self.top
        return top is not None and top.kind is FrameKind.PAREN and not top.subquery

    def push(self, kind: FrameKind, *, subquery: bool = False) -> Frame:
        frame = Frame(kind, self.level, subquery)
        self.frames.append(frame)
        if kind is FrameKind.PAREN:
            self.open_parens += 1
        return frame

    def pop(self) -> Frame:
        frame = self.frames.pop()
        self.level = frame.indent
        if frame.kind is FrameKind.PAREN:
            self.open_parens -= 1
        return frame

    def close_select_lists(self) -> None:
        while self.top_is(FrameKind.SELECT_LIST):
            self.pop()

    def newline(self, level: int) -> None:
        """Start a new line at ``level``; never leaves trailing blanks or blank lines."""
        out = self.out
        out.rstrip(LINE_BLANKS)
        if out:
            if out.last_char() != "\n":
                out.append("\n")
            out.append(self.options.indent(level))
        self.needs_newline = False

    def flush_newline(self) -> None:
        if self.needs_newline:
            self.newline(self.level)

    def needs_space(self, token: Token) -> bool:
        last = self.out.last_char()
        if not last or last in " \t\n":
            return False
        if token.kind is TokenKind.OPERATOR and token.value in _NO_SPACE_BEFORE:
            return False
        if last in ".(":
            return False
        if token.is_operator("("):
            prev = self.prev
            return prev is None or not _is_callable(prev)
        return True

    def write(self, token: Token, text: str | None = None) -> None:
        """Append a token with generic spacing."""
        if self.needs_space(token):
            self.out.append(" ")
        self.out.append(token.value if text is None else text)
        self.prev = token

    def write_word(self, token: Token) -> None:
        """Append a keyword or function name, re-cased per the options."""
        self.write(token, apply_case(token.value, self.options.keyword_case))


def _next(tokens: Sequence[Token], i: int, offset: int = 1) -> Token | None:
    j = i + offset
    return tokens[j] if j < len(tokens) else None


def _next_significant(tokens: Sequence[Token], i: int) -> Token | None:
    for j in range(i + 1, len(tokens)):
        if not tokens[j].is_comment:
            return tokens[j]
    return None


# =============================================================================
# Keyword rules
# =============================================================================

Predicate = Callable[[FormatContext, Sequence[Token], int], bool]
Action = Callable[[FormatContext, Sequence[Token], int], int]


class KeywordRule(NamedTuple):
    """One entry of the keyword dispatch table.

    ``apply`` returns how many tokens it consumed.
    """

    name: str
    matches: Predicate
    apply: Action


def _is_select(ctx: FormatContext, tokens: Sequence[Token], i: int) -> bool:
    return tokens[i].value == "SELECT"


def _render_select(ctx: FormatContext, tokens: Sequence[Token], i: int) -> int:
    # A SELECT outside parentheses starts a sibling query, not a nested one
    ctx.close_select_lists()
    ctx.newline(ctx.level)
    ctx.write_word(tokens[i])
    ctx.after_between = False
    ctx.push(FrameKind.SELECT_LIST)
    if ctx.options.expand_comma_lists:
        ctx.level += 1
        ctx.needs_newline = True
    return 1


def _starts_section(ctx: FormatContext, token: Token) -> bool:
    """Major clause keywords break lines except inside call arguments and similar parens."""
    return token.value in MAJOR_CLAUSES and not ctx.in_plain_paren()


def _is_from(ctx: FormatContext, tokens: Sequence[Token], i: int) -> bool:
    return tokens[i].value == "FROM" and _starts_section(ctx, tokens[i])


def _render_from(ctx: FormatContext, tokens: Sequence[Token], i: int) -> int:
    ctx.close_select_lists()
    ctx.newline(ctx.level)
    ctx.write_word(tokens[i])
    return 1


def _is_clause(ctx: FormatContext, tokens: Sequence[Token], i: int) -> bool:
    return tokens[i].value in CLAUSE_KEYWORDS and _starts_section(ctx, tokens[i])


def _render_clause(ctx: FormatContext, tokens: Sequence[Token], i: int) -> int:
    token = tokens[i]
    ctx.close_select_lists()
    ctx.after_between = False
    ctx.newline(ctx.level)
    ctx.write_word(token)
    following = _next(tokens, i)
    if token.value in ("GROUP", "ORDER") and following is not None and following.is_keyword("BY"):
        ctx.write_word(following)
        return 2
    return 1


def _join_length(tokens: Sequence[Token], i: int) -> int:
    """Number of tokens forming a join introducer at ``i`` (0 if none)."""
    token = tokens[i]
    if token.value == "JOIN":
        return 1
    if token.value not in JOIN_QUALIFIERS:
        return 0
    following = _next(tokens, i)
    if following is not None and following.is_keyword("OUTER"):
        following = _next(tokens, i, 2)
        return 3 if following is not None and following.is_keyword("JOIN") else 0
    return 2 if following is not None and following.is_keyword("JOIN") else 0


def _is_join(ctx: FormatContext, tokens: Sequence[Token], i: int) -> bool:
    return _starts_section(ctx, tokens[i]) and _join_length(tokens, i) > 0


def _render_join(ctx: FormatContext, tokens: Sequence[Token], i: int) -> int:
    length = _join_length(tokens, i)
    ctx.close_select_lists()
    ctx.newline(ctx.level)
    for token in tokens[i : i + length]:
        ctx.write_word(token)
    return length


def _is_set_operation(ctx: FormatContext, tokens: Sequence[Token], i: int) -> bool:
    return tokens[i].value in SET_OPERATIONS and _starts_section(ctx, tokens[i])


def _render_set_operation(ctx: FormatContext, tokens: Sequence[Token], i: int) -> int:
    ctx.close_select_lists()
    ctx.newline(ctx.level)
    ctx.write_word(tokens[i])
    return 1


def _is_on(ctx: FormatContext, tokens: Sequence[Token], i: int) -> bool:
    return tokens[i].value == "ON"


def _render_on(ctx: FormatContext, tokens: Sequence[Token], i: int) -> int:
    ctx.newline(ctx.level + 1)
    ctx.write_word(tokens[i])
    return 1


def _is_boolean(ctx: FormatContext, tokens: Sequence[Token], i: int) -> bool:
    return tokens[i].value in ("AND", "OR") and ctx.options.expand_boolean_expr


def _render_boolean(ctx: FormatContext, tokens: Sequence[Token], i: int) -> int:
    token = tokens[i]
    if ctx.after_between and token.value == "AND":
        # BETWEEN x AND y
        ctx.after_between = False
        ctx.write_word(token)
        return 1
    in_select_list = ctx.top_is(FrameKind.SELECT_LIST)
    ctx.newline(ctx.level if in_select_list else ctx.level + 1)
    ctx.write_word(token)
    return 1


def _is_case(ctx: FormatContext, tokens: Sequence[Token], i: int) -> bool:
    return tokens[i].value == "CASE" and ctx.options.expand_case_statements


def _render_case(ctx: FormatContext, tokens: Sequence[Token], i: int) -> int:
    ctx.write_word(tokens[i])
    ctx.push(FrameKind.CASE)
    ctx.level += 1
    return 1


def _in_case(ctx: FormatContext) -> bool:
    return ctx.options.expand_case_statements and ctx.top_is(FrameKind.CASE)


def _is_when(ctx: FormatContext, tokens: Sequence[Token], i: int) -> bool:
    return tokens[i].value == "WHEN" and _in_case(ctx)


def _is_else(ctx: FormatContext, tokens: Sequence[Token], i: int) -> bool:
    return tokens[i].value == "ELSE" and _in_case(ctx)


def _render_case_branch(ctx: FormatContext, tokens: Sequence[Token], i: int) -> int:
    ctx.after_between = False
    ctx.newline(ctx.level)
    ctx.write_word(tokens[i])
    return 1


def _is_then(ctx: FormatContext, tokens: Sequence[Token], i: int) -> bool:
    return tokens[i].value == "THEN" and _in_case(ctx)


def _render_inline(ctx: FormatContext, tokens: Sequence[Token], i: int) -> int:
    token = tokens[i]
    ctx.write_word(token)
    if token.value == "BETWEEN":
        ctx.after_between = True
    return 1


def _is_end(ctx: FormatContext, tokens: Sequence[Token], i: int) -> bool:
    return tokens[i].value == "END" and _in_case(ctx)


def _render_end(ctx: FormatContext, tokens: Sequence[Token], i: int) -> int:
    ctx.pop()
    ctx.newline(ctx.level)
    ctx.write_word(tokens[i])
    return 1


def _always(ctx: FormatContext, tokens: Sequence[Token], i: int) -> bool:
    return True


KEYWORD_RULES: tuple[KeywordRule, ...] = (
    KeywordRule("select", _is_select, _render_select),
    KeywordRule("from", _is_from, _render_from),
    KeywordRule("clause", _is_clause, _render_clause),
    KeywordRule("join", _is_join, _render_join),
    KeywordRule("set-operation", _is_set_operation, _render_set_operation),
    KeywordRule("on", _is_on, _render_on),
    KeywordRule("boolean", _is_boolean, _render_boolean),
    KeywordRule("case", _is_case, _render_case),
    KeywordRule("when", _is_when, _render_case_branch),
    KeywordRule("then", _is_then, _render_inline),
    KeywordRule("else", _is_else, _render_case_branch),
    KeywordRule("end", _is_end, _render_end),
    KeywordRule("default", _always, _render_inline),
)


def match_keyword_rule(ctx: FormatContext, tokens: Sequence[Token], i: int) -> KeywordRule:
    """Return the first rule whose predicate accepts the keyword at ``i``."""
    for rule in KEYWORD_RULES:
        if rule.matches(ctx, tokens, i):
            return rule
    raise AssertionError("the default rule always matches")


# =============================================================================
# Renderer
# =============================================================================


class SqlFormatter:
    """Render tokens as indented, line-broken SQL.

    Usage:
        >>> SqlFormatter().format("select a,b from t")
        'SELECT\\n    a,\\n    b\\nFROM t'

    Thread Safety:
        Holds only immutable options. Each render() call creates an
        independent FormatContext.
    """

    __slots__ = ("_options",)

    def __init__(self, options: FormatOptions | None = None) -> None:
        """Initialize formatter.

        Args:
            options: Options to use; None reads the current context options
                at render time.
        """
        self._options = options

    @property
    def options(self) -> FormatOptions:
        return self._options if self._options is not None else get_format_options()

    def format(self, text: str) -> str:
        """Scan and format SQL text."""
        return self.render(scan(text))

    def render(self, tokens: Sequence[Token]) -> str:
        """Format a token sequence.

        Never fails, whatever the token sequence; the output is trimmed of
        leading and trailing whitespace.
        """
        ctx = FormatContext(options=self.options)
        i = 0
        count = len(tokens)
        while i < count:
            token = tokens[i]
            kind = token.kind
            if kind is TokenKind.KEYWORD:
                i += self._render_keyword(ctx, tokens, i)
                continue
            if kind is TokenKind.COMMENT:
                self._render_comment(ctx, token)
            elif kind is TokenKind.OPERATOR:
                self._render_operator(ctx, tokens, i)
            else:
                ctx.flush_newline()
                if kind is TokenKind.FUNCTION:
                    ctx.write_word(token)
                else:
                    ctx.write(token)
            i += 1

        result = ctx.out.build().strip()
        log_render(logger, "formatter", count, result)
        return result

    def _render_keyword(self, ctx: FormatContext, tokens: Sequence[Token], i: int) -> int:
        token = tokens[i]
        keeps_select_line = (
            token.value in SELECT_MODIFIERS
            and ctx.prev is not None
            and ctx.prev.is_keyword("SELECT", *SELECT_MODIFIERS)
        )
        if not keeps_select_line:
            ctx.flush_newline()
        rule = match_keyword_rule(ctx, tokens, i)
        return rule.apply(ctx, tokens, i)

    def _render_comment(self, ctx: FormatContext, token: Token) -> None:
        ctx.flush_newline()
        if ctx.needs_space(token):
            ctx.out.append(" ")
        if token.is_line_comment:
            ctx.out.append(token.value.rstrip())
            ctx.newline(ctx.level)
        else:
            ctx.out.append(token.value)

    def _render_operator(self, ctx: FormatContext, tokens: Sequence[Token], i: int) -> None:
        token = tokens[i]
        value = token.value

        if value == ",":
            self._render_comma(ctx, token)
            return
        if value == ";":
            ctx.write(token)
            ctx.frames.clear()
            ctx.open_parens = 0
            ctx.level = 0
            ctx.needs_newline = False
            ctx.after_between = False
            return
        if value == ")":
            self._render_close_paren(ctx, token)
            return

        ctx.flush_newline()
        if value == "(":
            following = _next_significant(tokens, i)
            subquery = following is not None and following.is_keyword("SELECT")
            ctx.write(token)
            ctx.push(FrameKind.PAREN, subquery=subquery)
            if subquery:
                ctx.level += 1
        elif value in BINARY_OPERATORS:
            last = ctx.out.last_char()
            if value == "*" and last in (".", "("):
                # t.* and COUNT(*)
                ctx.out.append(value)
            else:
                if last and last not in " \t\n":
                    ctx.out.append(" ")
                ctx.out.append(value)
                ctx.out.append(" ")
            ctx.prev = token
        else:
            ctx.write(token)

    def _render_comma(self, ctx: FormatContext, token: Token) -> None:
        position = ctx.options.comma_position
        expanded = ctx.in_expanded_select_list()
        ctx.prev = token
        if position is CommaPosition.AFTER:
            ctx.out.rstrip(LINE_BLANKS)
            ctx.out.append(",")
            if expanded:
                ctx.needs_newline = True
            return

        ctx.needs_newline = False
        if expanded:
            level = ctx.level if position is CommaPosition.BEFORE else ctx.level - 1
            ctx.newline(level)
            ctx.out.append(",")
        else:
            ctx.out.rstrip(LINE_BLANKS)
            ctx.out.append(" ,")

    def _render_close_paren(self, ctx: FormatContext, token: Token) -> None:
        ctx.needs_newline = False
        if not ctx.open_parens:
            ctx.write(token)
            return
        while True:
            frame = ctx.pop()
            if frame.kind is FrameKind.PAREN:
                break
        if frame.subquery:
            ctx.newline(ctx.level)
        ctx.write(token)


def format_tokens(tokens: Sequence[Token], options: FormatOptions | None = None) -> str:
    """Format an already scanned token sequence."""
    return SqlFormatter(options).render(tokens)

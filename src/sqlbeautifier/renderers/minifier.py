"""Whitespace- and comment-stripping SQL renderer.

Comments are dropped. A single space separates two adjacent word-like
tokens (keyword, identifier, function, number), since gluing them would
form a different word. All other neighbours are concatenated, unless the
glued text would scan differently (``- -`` becoming a line comment, two
strings becoming one, ``< =`` becoming ``<=``); those keep one space so
that minifying is idempotent and never changes token-level meaning.

Keywords and function names are always upper-case; the keyword casing
option does not apply to minified output.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlbeautifier.scanner import Scanner, scan
from sqlbeautifier.stringbuilder import StringBuilder
from sqlbeautifier.tokens import Token, TokenKind
from sqlbeautifier.utils.logger import get_logger, log_render

logger = get_logger(__name__)


def _minified_text(token: Token) -> str:
    if token.kind in (TokenKind.KEYWORD, TokenKind.FUNCTION):
        return token.value.upper()
    return token.value


def _glues_cleanly(left: str, right: str, left_token: Token, right_token: Token) -> bool:
    """True if ``left + right`` scans back to exactly the two tokens."""
    rescanned = Scanner(left + right).tokenize()
    first = next(rescanned, None)
    if first is None or first.kind is not left_token.kind or first.end != len(left):
        return False
    second = next(rescanned, None)
    return (
        second is not None
        and second.kind is right_token.kind
        and second.end == len(left) + len(right)
    )


class Minifier:
    """Render tokens as compact single-line SQL.

    Usage:
        >>> Minifier().minify("SELECT  a  --comment\\nFROM t")
        'SELECT a FROM t'

    Thread Safety:
        Stateless; safe to share across threads.
    """

    __slots__ = ()

    def minify(self, text: str) -> str:
        """Scan and minify SQL text."""
        return self.render(scan(text))

    def render(self, tokens: Sequence[Token]) -> str:
        sb = StringBuilder()
        prev: Token | None = None
        prev_text = ""
        dropped = 0

        for token in tokens:
            if token.is_comment:
                dropped += 1
                continue

            text = _minified_text(token)
            if prev is not None:
                if prev.is_word_like and token.is_word_like:
                    sb.append(" ")
                elif not _glues_cleanly(prev_text, text, prev, token):
                    sb.append(" ")
            sb.append(text)
            prev, prev_text = token, text

        result = sb.build()
        log_render(logger, "minifier", len(tokens), result, dropped=dropped)
        return result


def minify_tokens(tokens: Sequence[Token]) -> str:
    """Minify an already scanned token sequence."""
    return Minifier().render(tokens)

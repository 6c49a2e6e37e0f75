"""Token and TokenKind definitions for the sqlbeautifier scanner.

The scanner produces a flat sequence of Token objects that the formatter,
minifier and highlighter consume. Each Token has a kind, a value and the
source offsets of the lexeme it was scanned from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Lexical categories assigned by the scanner."""

    KEYWORD = "keyword"
    FUNCTION = "function"
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"
    OPERATOR = "operator"
    COMMENT = "comment"
    UNKNOWN = "unknown"


# Kinds that need a separating space when two of them are adjacent
WORD_LIKE_KINDS = frozenset(
    {
        TokenKind.KEYWORD,
        TokenKind.IDENTIFIER,
        TokenKind.FUNCTION,
        TokenKind.NUMBER,
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        kind: Lexical category (never changes after creation)
        value: Literal text as scanned; keyword and function tokens hold the
            canonical upper-case spelling instead
        start: Absolute start offset in the scanned text
        end: Absolute end offset (exclusive)

    """

    kind: TokenKind
    value: str
    start: int = 0
    end: int = 0

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.start}:{self.end})"

    @property
    def is_word_like(self) -> bool:
        """Keyword, identifier, function or number."""
        return self.kind in WORD_LIKE_KINDS

    @property
    def is_comment(self) -> bool:
        return self.kind is TokenKind.COMMENT

    @property
    def is_line_comment(self) -> bool:
        return self.kind is TokenKind.COMMENT and self.value.startswith("--")

    def is_keyword(self, *words: str) -> bool:
        """True if this is a keyword token spelled as one of ``words``."""
        return self.kind is TokenKind.KEYWORD and self.value in words

    def is_operator(self, *symbols: str) -> bool:
        """True if this is an operator token spelled as one of ``symbols``."""
        return self.kind is TokenKind.OPERATOR and self.value in symbols

    def raw(self, source: str) -> str:
        """Slice the original lexeme out of the scanned source."""
        return source[self.start : self.end]

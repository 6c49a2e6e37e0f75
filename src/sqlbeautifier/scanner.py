"""Single-pass SQL scanner.

Converts raw text into an ordered sequence of typed tokens. At every
position the rules below are tried in a fixed order and the first match
wins:

1. whitespace (skipped, no token)
2. ``--`` line comment, up to but excluding the newline
3. ``/* ... */`` block comment (to end of input when unterminated)
4. single-quoted string, ``''`` is an escaped quote
5. double-quoted identifier, no escapes
6. digit run (digits and dots, greedy, unvalidated)
7. two-character operator
8. single-character operator
9. word run, classified against the vocabulary
10. any other single character as an UNKNOWN token

Scanning is total: every rule consumes at least one character, so the
loop always terminates and never raises.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from sqlbeautifier.charsets import DIGITS, NUMBER_CHARS, WORD_CHARS, WORD_START
from sqlbeautifier.tokens import Token, TokenKind
from sqlbeautifier.utils.logger import get_logger
from sqlbeautifier.vocabulary import SINGLE_CHAR_OPERATORS, TWO_CHAR_OPERATORS, classify_word

logger = get_logger(__name__)


class Scanner:
    """Ordered-rule scanner over a SQL string.

    Usage:
        >>> scanner = Scanner("select a from t")
        >>> [t.value for t in scanner.tokenize()]
        ['SELECT', 'a', 'FROM', 't']

    Thread Safety:
        Scanner instances are single-use. Create one per source string.

    """

    __slots__ = ("_source", "_source_len", "_pos")

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects in scan order

        Complexity: O(n) where n = len(source)
        """
        source = self._source
        source_len = self._source_len
        while self._pos < source_len:
            char = source[self._pos]

            if char.isspace():
                self._skip_whitespace()
                continue

            if source.startswith("--", self._pos):
                yield self._scan_line_comment()
            elif source.startswith("/*", self._pos):
                yield self._scan_block_comment()
            elif char == "'":
                yield self._scan_string()
            elif char == '"':
                yield self._scan_quoted_identifier()
            elif char in DIGITS:
                yield self._scan_run(TokenKind.NUMBER, NUMBER_CHARS)
            elif source.startswith(TWO_CHAR_OPERATORS, self._pos):
                yield self._make_token(TokenKind.OPERATOR, self._pos + 2)
            elif char in SINGLE_CHAR_OPERATORS:
                yield self._make_token(TokenKind.OPERATOR, self._pos + 1)
            elif char in WORD_START:
                yield self._scan_word()
            else:
                yield self._make_token(TokenKind.UNKNOWN, self._pos + 1)

    # =========================================================================
    # Rules
    # =========================================================================

    def _skip_whitespace(self) -> None:
        source = self._source
        pos = self._pos + 1
        while pos < self._source_len and source[pos].isspace():
            pos += 1
        self._pos = pos

    def _scan_line_comment(self) -> Token:
        end = self._source.find("\n", self._pos)
        if end == -1:
            end = self._source_len
        return self._make_token(TokenKind.COMMENT, end)

    def _scan_block_comment(self) -> Token:
        close = self._source.find("*/", self._pos + 2)
        if close == -1:
            logger.debug("Unterminated block comment at offset %d", self._pos)
            end = self._source_len
        else:
            end = close + 2
        return self._make_token(TokenKind.COMMENT, end)

    def _scan_string(self) -> Token:
        source = self._source
        pos = self._pos + 1
        while pos < self._source_len:
            if source[pos] == "'":
                if source.startswith("''", pos):
                    pos += 2
                    continue
                return self._make_token(TokenKind.STRING, pos + 1)
            pos += 1
        logger.debug("Unterminated string literal at offset %d", self._pos)
        return self._make_token(TokenKind.STRING, self._source_len)

    def _scan_quoted_identifier(self) -> Token:
        close = self._source.find('"', self._pos + 1)
        end = self._source_len if close == -1 else close + 1
        return self._make_token(TokenKind.IDENTIFIER, end)

    def _scan_run(self, kind: TokenKind, chars: frozenset[str]) -> Token:
        source = self._source
        pos = self._pos + 1
        while pos < self._source_len and source[pos] in chars:
            pos += 1
        return self._make_token(kind, pos)

    def _scan_word(self) -> Token:
        start = self._pos
        token = self._scan_run(TokenKind.IDENTIFIER, WORD_CHARS)
        kind, value = classify_word(token.value)
        if kind is TokenKind.IDENTIFIER:
            return token
        return Token(kind, value, start, token.end)

    def _make_token(self, kind: TokenKind, end: int) -> Token:
        """Create a Token for source[pos:end] and advance past it."""
        start = self._pos
        self._pos = end
        return Token(kind, self._source[start:end], start, end)


def scan(text: str) -> list[Token]:
    """Scan SQL text into a list of tokens.

    Never fails; always consumes the entire input.

    Args:
        text: Raw SQL text

    Returns:
        Tokens in scan order. Whitespace produces no tokens.

    Example:
        >>> scan("SELECT 'abc")
        [Token(KEYWORD, 'SELECT', 0:6), Token(STRING, "'abc", 7:11)]
    """
    return list(Scanner(text).tokenize())

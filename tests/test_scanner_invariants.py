"""Property-based tests for scanner invariants.

For any input text:
1. Scanning terminates without raising
2. Tokens are ordered and non-overlapping, and the text between them is
   whitespace only
3. Keyword and function values are the upper-cased lexeme; every other
   token's value is the lexeme itself
4. Scanning the same text twice yields the same tokens
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from sqlbeautifier.scanner import scan
from sqlbeautifier.tokens import TokenKind

# Fragments that exercise every scanner rule and their boundaries
SQL_FRAGMENTS = [
    "select", "FROM", "where", "count", "row_number", "a", "t1", "_x", "Users",
    "'", "''", "'str'", '"', '"Col"', "--", "-- c\n", "/*", "*/", "/* c */",
    "1", "2.5", ".", "1.2.3", "<", ">", "=", "!", "|", "&", "<=", "<>", "!=",
    "||", "(", ")", ",", ";", "*", "/", "-", "+", "%", "@", "#", "é",
    " ", "  ", "\n", "\t", "\r\n",
]  # fmt: skip

sql_like_text = st.lists(st.sampled_from(SQL_FRAGMENTS), max_size=40).map("".join)


class TestScannerTotality:
    """Scanning never fails and accounts for every character."""

    @given(st.text(max_size=300))
    @settings(max_examples=300)
    def test_arbitrary_text_is_partitioned(self, text: str) -> None:
        tokens = scan(text)
        pos = 0
        for token in tokens:
            assert token.start >= pos
            assert token.end > token.start
            assert text[pos : token.start].strip() == ""
            pos = token.end
        assert text[pos:].strip() == ""

    @given(sql_like_text)
    @settings(max_examples=300)
    def test_every_visible_character_is_covered(self, text: str) -> None:
        covered = [False] * len(text)
        for token in scan(text):
            for i in range(token.start, token.end):
                assert not covered[i]
                covered[i] = True
        for i, ch in enumerate(text):
            if not ch.isspace():
                assert covered[i]


class TestTokenValues:
    """Token values relate to the scanned lexeme."""

    @given(sql_like_text)
    @settings(max_examples=300)
    def test_values_match_lexemes(self, text: str) -> None:
        for token in scan(text):
            lexeme = token.raw(text)
            if token.kind in (TokenKind.KEYWORD, TokenKind.FUNCTION):
                assert token.value == lexeme.upper()
            else:
                assert token.value == lexeme

    @given(sql_like_text)
    @settings(max_examples=200)
    def test_unknown_tokens_are_single_characters(self, text: str) -> None:
        for token in scan(text):
            if token.kind is TokenKind.UNKNOWN:
                assert len(token.value) == 1


class TestDeterminism:
    """Scanning is a pure function of its input."""

    @given(st.text(max_size=200))
    @settings(max_examples=100)
    def test_repeatable(self, text: str) -> None:
        assert scan(text) == scan(text)

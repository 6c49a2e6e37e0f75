"""Tests for the keyword and function vocabularies."""

from __future__ import annotations

import pytest

from sqlbeautifier.tokens import TokenKind
from sqlbeautifier.vocabulary import (
    BINARY_OPERATORS,
    CALLABLE_KEYWORDS,
    CLAUSE_KEYWORDS,
    FUNCTIONS,
    JOIN_QUALIFIERS,
    KEYWORDS,
    MAJOR_CLAUSES,
    SET_OPERATIONS,
    SINGLE_CHAR_OPERATORS,
    TWO_CHAR_OPERATORS,
    classify_word,
)


class TestTables:
    """Shape of the vocabulary tables."""

    def test_keywords_and_functions_are_disjoint(self) -> None:
        assert KEYWORDS.isdisjoint(FUNCTIONS)

    def test_all_entries_are_upper_case(self) -> None:
        for word in KEYWORDS | FUNCTIONS:
            assert word == word.upper()

    def test_layout_subsets_are_keywords(self) -> None:
        assert JOIN_QUALIFIERS <= KEYWORDS
        assert SET_OPERATIONS <= KEYWORDS
        assert MAJOR_CLAUSES <= KEYWORDS
        assert CLAUSE_KEYWORDS | JOIN_QUALIFIERS | SET_OPERATIONS <= MAJOR_CLAUSES
        assert CALLABLE_KEYWORDS <= KEYWORDS

    def test_binary_operators_are_scannable(self) -> None:
        assert BINARY_OPERATORS <= SINGLE_CHAR_OPERATORS | set(TWO_CHAR_OPERATORS)
        assert all(len(op) == 2 for op in TWO_CHAR_OPERATORS)

    @pytest.mark.parametrize("word", ["COALESCE", "CAST", "NULLIF", "CONVERT"])
    def test_callable_keywords_classify_as_keywords(self, word: str) -> None:
        assert word in KEYWORDS
        assert word not in FUNCTIONS


class TestClassifyWord:
    """Keyword first, then function, then identifier."""

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("select", (TokenKind.KEYWORD, "SELECT")),
            ("Join", (TokenKind.KEYWORD, "JOIN")),
            ("true", (TokenKind.KEYWORD, "TRUE")),
            ("count", (TokenKind.FUNCTION, "COUNT")),
            ("Current_Timestamp", (TokenKind.FUNCTION, "CURRENT_TIMESTAMP")),
            ("customer_id", (TokenKind.IDENTIFIER, "customer_id")),
            ("MixedCase", (TokenKind.IDENTIFIER, "MixedCase")),
        ],
    )
    def test_classification(self, word: str, expected: tuple[TokenKind, str]) -> None:
        assert classify_word(word) == expected

    def test_word_containing_keyword_is_identifier(self) -> None:
        assert classify_word("selection") == (TokenKind.IDENTIFIER, "selection")

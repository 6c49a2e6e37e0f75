"""Tests for the SQL scanner rules and their precedence."""

from __future__ import annotations

import pytest

from sqlbeautifier.scanner import Scanner, scan
from sqlbeautifier.tokens import Token, TokenKind


def kinds_and_values(text: str) -> list[tuple[TokenKind, str]]:
    return [(t.kind, t.value) for t in scan(text)]


class TestBasicScanning:
    """Whitespace, words and vocabulary classification."""

    def test_empty_input(self) -> None:
        assert scan("") == []

    def test_whitespace_only(self) -> None:
        assert scan("  \t\r\n  ") == []

    def test_simple_query(self) -> None:
        assert kinds_and_values("select a from t") == [
            (TokenKind.KEYWORD, "SELECT"),
            (TokenKind.IDENTIFIER, "a"),
            (TokenKind.KEYWORD, "FROM"),
            (TokenKind.IDENTIFIER, "t"),
        ]

    def test_keywords_are_upper_cased(self) -> None:
        assert scan("SeLeCt")[0].value == "SELECT"

    def test_identifier_keeps_spelling(self) -> None:
        assert scan("Users")[0] == Token(TokenKind.IDENTIFIER, "Users", 0, 5)

    def test_function_classification(self) -> None:
        assert kinds_and_values("count(") == [
            (TokenKind.FUNCTION, "COUNT"),
            (TokenKind.OPERATOR, "("),
        ]

    def test_word_with_digits_and_underscores(self) -> None:
        assert kinds_and_values("_tmp1 col_2") == [
            (TokenKind.IDENTIFIER, "_tmp1"),
            (TokenKind.IDENTIFIER, "col_2"),
        ]

    def test_digit_prefix_splits_word(self) -> None:
        assert kinds_and_values("1abc") == [
            (TokenKind.NUMBER, "1"),
            (TokenKind.IDENTIFIER, "abc"),
        ]


class TestComments:
    """Line and block comments."""

    def test_line_comment_excludes_newline(self) -> None:
        assert kinds_and_values("a -- hi\nb") == [
            (TokenKind.IDENTIFIER, "a"),
            (TokenKind.COMMENT, "-- hi"),
            (TokenKind.IDENTIFIER, "b"),
        ]

    def test_line_comment_at_end_of_input(self) -> None:
        assert scan("-- only")[0].value == "-- only"

    def test_line_comment_beats_minus_operator(self) -> None:
        assert kinds_and_values("1--2") == [
            (TokenKind.NUMBER, "1"),
            (TokenKind.COMMENT, "--2"),
        ]

    def test_block_comment(self) -> None:
        assert kinds_and_values("/* x\n y */a") == [
            (TokenKind.COMMENT, "/* x\n y */"),
            (TokenKind.IDENTIFIER, "a"),
        ]

    def test_block_comment_ends_at_first_close(self) -> None:
        tokens = scan("/* a */ b */")
        assert tokens[0].value == "/* a */"
        assert tokens[1].value == "b"

    def test_unterminated_block_comment_runs_to_end(self) -> None:
        tokens = scan("SELECT /* abc\nFROM t")
        assert tokens[-1] == Token(TokenKind.COMMENT, "/* abc\nFROM t", 7, 20)
        assert len(tokens) == 2


class TestStringsAndQuotedIdentifiers:
    """Quoted lexemes."""

    def test_single_quoted_string(self) -> None:
        assert kinds_and_values("'abc'") == [(TokenKind.STRING, "'abc'")]

    def test_doubled_quote_is_escape(self) -> None:
        assert kinds_and_values("'it''s' x") == [
            (TokenKind.STRING, "'it''s'"),
            (TokenKind.IDENTIFIER, "x"),
        ]

    def test_comment_markers_inside_string(self) -> None:
        assert kinds_and_values("'-- no /* no'") == [(TokenKind.STRING, "'-- no /* no'")]

    def test_unterminated_string(self) -> None:
        assert kinds_and_values("SELECT 'abc") == [
            (TokenKind.KEYWORD, "SELECT"),
            (TokenKind.STRING, "'abc"),
        ]

    def test_double_quoted_is_identifier(self) -> None:
        assert kinds_and_values('"My Col" x') == [
            (TokenKind.IDENTIFIER, '"My Col"'),
            (TokenKind.IDENTIFIER, "x"),
        ]

    def test_double_quoted_keyword_stays_identifier(self) -> None:
        assert scan('"select"')[0].kind is TokenKind.IDENTIFIER

    def test_unterminated_double_quote(self) -> None:
        assert kinds_and_values('"abc def') == [(TokenKind.IDENTIFIER, '"abc def')]


class TestNumbers:
    """Permissive digit runs."""

    @pytest.mark.parametrize("text", ["42", "3.14", "1.2.3", "10."])
    def test_digit_and_dot_run(self, text: str) -> None:
        assert kinds_and_values(text) == [(TokenKind.NUMBER, text)]

    def test_exponent_is_not_part_of_number(self) -> None:
        assert kinds_and_values("1e5") == [
            (TokenKind.NUMBER, "1"),
            (TokenKind.IDENTIFIER, "e5"),
        ]

    def test_leading_dot_is_operator(self) -> None:
        assert kinds_and_values(".5") == [
            (TokenKind.OPERATOR, "."),
            (TokenKind.NUMBER, "5"),
        ]


class TestOperators:
    """Two-character operators are tried before single-character ones."""

    @pytest.mark.parametrize("op", ["<=", ">=", "<>", "!=", "||", "&&"])
    def test_two_char_operators(self, op: str) -> None:
        assert kinds_and_values(f"a{op}b") == [
            (TokenKind.IDENTIFIER, "a"),
            (TokenKind.OPERATOR, op),
            (TokenKind.IDENTIFIER, "b"),
        ]

    @pytest.mark.parametrize("op", list("=<>+-*/%(),;."))
    def test_single_char_operators(self, op: str) -> None:
        assert kinds_and_values(op) == [(TokenKind.OPERATOR, op)]

    def test_block_comment_beats_slash(self) -> None:
        assert scan("/*")[0].kind is TokenKind.COMMENT

    def test_separated_pair_is_two_operators(self) -> None:
        assert [t.value for t in scan("< =")] == ["<", "="]


class TestUnknown:
    """Fallback rule."""

    @pytest.mark.parametrize("char", ["@", "#", "!", "|", "&", "$", "é", "?"])
    def test_unknown_single_character(self, char: str) -> None:
        assert kinds_and_values(char) == [(TokenKind.UNKNOWN, char)]

    def test_unknown_followed_by_identifier(self) -> None:
        assert kinds_and_values("@var") == [
            (TokenKind.UNKNOWN, "@"),
            (TokenKind.IDENTIFIER, "var"),
        ]


class TestOffsets:
    """Token offsets point back into the source."""

    def test_raw_slices(self) -> None:
        source = "select  Count(x)"
        tokens = scan(source)
        assert [t.raw(source) for t in tokens] == ["select", "Count", "(", "x", ")"]
        assert tokens[1].start == 8

    def test_scanner_is_lazy_iterator(self) -> None:
        iterator = Scanner("a b c").tokenize()
        assert next(iterator).value == "a"
        assert [t.value for t in iterator] == ["b", "c"]

    def test_scanning_is_repeatable(self) -> None:
        assert scan("select 1 -- x") == scan("select 1 -- x")

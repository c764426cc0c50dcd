"""Tests for the privfields lexers."""

import pytest
from privfields.lexer import Lexer, LexerError
from privfields.lexer_literals import number_value
from privfields.private import PrivateNameLexer
from privfields.tokens import TokenType


def lex(source: str) -> list:
    return PrivateNameLexer(source).tokenize()


def types(source: str) -> list[TokenType]:
    return [t.type for t in lex(source)]


def values(source: str) -> list[str]:
    return [t.value for t in lex(source)]


# --- Basic tokens ---

class TestBasicTokens:
    def test_empty_input(self):
        tokens = lex("")
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF

    def test_keywords_and_names(self):
        assert types("class A extends B") == [
            TokenType.CLASS, TokenType.NAME, TokenType.EXTENDS, TokenType.NAME,
            TokenType.EOF,
        ]

    def test_contextual_words_are_names(self):
        assert types("static async get set") == [TokenType.NAME] * 4 + [TokenType.EOF]

    def test_longest_operator_match(self):
        assert types("a >>>= b") == [
            TokenType.NAME, TokenType.GT_GT_GT_EQ, TokenType.NAME, TokenType.EOF,
        ]
        assert types("a ?? b ** c") == [
            TokenType.NAME, TokenType.QUESTION_QUESTION, TokenType.NAME,
            TokenType.STAR_STAR, TokenType.NAME, TokenType.EOF,
        ]

    def test_ellipsis_and_dot(self):
        assert types("...a.b") == [
            TokenType.ELLIPSIS, TokenType.NAME, TokenType.DOT, TokenType.NAME,
            TokenType.EOF,
        ]

    def test_positions(self):
        tokens = lex("a\n  b")
        assert (tokens[0].line, tokens[0].col) == (1, 1)
        assert (tokens[1].line, tokens[1].col) == (2, 3)


# --- Literals ---

class TestLiterals:
    def test_string_escapes(self):
        assert values(r"'a\nb'")[0] == "a\nb"
        assert values(r'"\x41B\u{43}"')[0] == "ABC"

    def test_unterminated_string(self):
        with pytest.raises(LexerError, match="Unterminated string"):
            lex("'abc")

    def test_numbers(self):
        assert types("42 3.5 .5 1e3 0x1F 0b101 0o17") == [TokenType.NUM] * 7 + [TokenType.EOF]

    def test_number_values(self):
        assert number_value("0x1F") == 31
        assert number_value("0b101") == 5
        assert number_value("1e3") == 1000.0
        assert number_value("42") == 42

    def test_identifier_after_number(self):
        with pytest.raises(LexerError, match="Identifier directly after number"):
            lex("3in x")


# --- Whitespace, comments and line breaks ---

class TestTrivia:
    def test_comments_skipped(self):
        assert types("a // x\n/* y */ b") == [TokenType.NAME, TokenType.NAME, TokenType.EOF]

    def test_newline_flag(self):
        tokens = lex("a\nb c")
        assert tokens[0].nl_before is False
        assert tokens[1].nl_before is True
        assert tokens[2].nl_before is False

    def test_newline_inside_block_comment(self):
        tokens = lex("a /*\n*/ b")
        assert tokens[1].nl_before is True

    def test_unterminated_comment(self):
        with pytest.raises(LexerError, match="Unterminated comment"):
            lex("/* never closed")


# --- Private names ---

class TestPrivateNames:
    def test_private_name_token(self):
        tokens = lex("#count")
        assert tokens[0].type == TokenType.PRIVATE_NAME
        assert tokens[0].value == "count"
        assert (tokens[0].line, tokens[0].col) == (1, 1)

    def test_member_access_tokens(self):
        assert types("this.#x") == [
            TokenType.THIS, TokenType.DOT, TokenType.PRIVATE_NAME, TokenType.EOF,
        ]

    def test_keyword_word_stays_private_name(self):
        tokens = lex("#if")
        assert tokens[0].type == TokenType.PRIVATE_NAME
        assert tokens[0].value == "if"

    def test_bare_hash_has_empty_name(self):
        tokens = lex("# = 1")
        assert tokens[0].type == TokenType.PRIVATE_NAME
        assert tokens[0].value == ""

    def test_base_lexer_rejects_hash(self):
        with pytest.raises(LexerError, match="Unexpected character '#'"):
            Lexer("this.#x").tokenize()

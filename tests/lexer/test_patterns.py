"""Tests for ordered-choice token matching."""

import pytest

from pseudoscss.errors import LexError
from pseudoscss.lexer import TOKEN_PATTERNS, Lexer
from pseudoscss.tokens import TokenType


def lex(source: str) -> list[tuple[TokenType, str]]:
    return [(t.type, t.value) for t in Lexer(source).tokenize()]


class TestSingleTokens:
    """Each pattern in isolation."""

    @pytest.mark.parametrize(
        "source,token_type",
        [
            ("(", TokenType.LPAREN),
            (")", TokenType.RPAREN),
            ("[", TokenType.LBRACKET),
            ("]", TokenType.RBRACKET),
            ("{", TokenType.LCURLY),
            ("}", TokenType.RCURLY),
            ("=", TokenType.EQUAL),
            (";", TokenType.SEMICOLON),
            (":", TokenType.COLON),
            ("// a comment", TokenType.COMMENT),
            ('"""multi\nline"""', TokenType.MULTILINE_STRING),
            ('"text"', TokenType.STRING),
            ("'text'", TokenType.STRING),
            ("#main", TokenType.ID_NAME),
            (".lead-in", TokenType.CLASS_NAME),
            ("data-x_1", TokenType.TAG_NAME),
            (" \t\n", TokenType.WHITESPACE),
        ],
    )
    def test_token_type(self, source: str, token_type: TokenType) -> None:
        assert lex(source) == [(token_type, source)]

    def test_comment_stops_at_newline(self) -> None:
        assert lex("// note\np") == [
            (TokenType.COMMENT, "// note"),
            (TokenType.WHITESPACE, "\n"),
            (TokenType.TAG_NAME, "p"),
        ]

    def test_string_with_escaped_quote(self) -> None:
        assert lex(r'"say \"hi\""') == [(TokenType.STRING, r'"say \"hi\""')]

    def test_string_cannot_span_lines(self) -> None:
        with pytest.raises(LexError):
            lex('"broken\nstring"')

    def test_multiline_string_may_contain_quotes(self) -> None:
        source = '"""say "hi" or ""hey"" """'
        assert lex(source) == [(TokenType.MULTILINE_STRING, source)]

    def test_empty_input(self) -> None:
        assert lex("") == []


class TestOrderedChoice:
    """The first pattern that matches wins, not the longest."""

    def test_pattern_priority(self) -> None:
        types = [token_type for token_type, _ in TOKEN_PATTERNS]
        assert types[0] is None  # begin-raw marker
        assert types.index(TokenType.COMMENT) == 1
        assert types.index(TokenType.MULTILINE_STRING) < types.index(TokenType.STRING)
        assert types.index(TokenType.ID_NAME) < types.index(TokenType.TAG_NAME)
        assert types[-1] is TokenType.WHITESPACE

    def test_selector_parts(self) -> None:
        assert lex("p.a#b[x=1]") == [
            (TokenType.TAG_NAME, "p"),
            (TokenType.CLASS_NAME, ".a"),
            (TokenType.ID_NAME, "#b"),
            (TokenType.LBRACKET, "["),
            (TokenType.TAG_NAME, "x"),
            (TokenType.EQUAL, "="),
            (TokenType.TAG_NAME, "1"),
            (TokenType.RBRACKET, "]"),
        ]

    def test_css_prefix_is_tag_name_without_brace(self) -> None:
        assert lex("cssx;") == [(TokenType.TAG_NAME, "cssx"), (TokenType.SEMICOLON, ";")]
        assert lex("css;") == [(TokenType.TAG_NAME, "css"), (TokenType.SEMICOLON, ";")]

    def test_css_brace_starts_raw_block(self) -> None:
        assert lex("css {a}") == [(TokenType.RAW, "a")]

    def test_content_is_an_ordinary_tag_name_token(self) -> None:
        assert lex("content") == [(TokenType.TAG_NAME, "content")]

    def test_empty_double_quotes_are_a_string(self) -> None:
        assert lex('""') == [(TokenType.STRING, '""')]

    def test_six_quotes_are_a_multiline_string(self) -> None:
        assert lex('""""""') == [(TokenType.MULTILINE_STRING, '""""""')]

    def test_names_are_ascii_only(self) -> None:
        with pytest.raises(LexError):
            lex("café")


class TestLexErrors:
    """Text that matches no pattern."""

    @pytest.mark.parametrize("source", ["@", "p; $x", ".", "#", "!important", "'open"])
    def test_untokenizable(self, source: str) -> None:
        with pytest.raises(LexError):
            lex(source)

    def test_error_carries_remainder(self) -> None:
        with pytest.raises(LexError) as exc_info:
            lex("p { @media }")
        assert exc_info.value.remaining == "@media }"

    def test_tokens_before_error_are_yielded(self) -> None:
        tokens = Lexer("p; @").tokenize()
        assert next(tokens).value == "p"
        assert next(tokens).value == ";"
        assert next(tokens).type is TokenType.WHITESPACE
        with pytest.raises(LexError):
            next(tokens)

    def test_stream_not_restartable(self) -> None:
        lexer = Lexer("p;")
        assert len(list(lexer.tokenize())) == 2
        assert list(lexer.tokenize()) == []

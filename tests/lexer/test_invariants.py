"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from pseudoscss.errors import LexError
from pseudoscss.lexer import Lexer
from pseudoscss.tokens import TokenType

# No "s", so the begin-raw marker can never appear
PLAIN_ALPHABET = "abcp-_.#[]{}=;:() \t\n\"'/"


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(alphabet=PLAIN_ALPHABET, max_size=200))
    @settings(max_examples=200)
    def test_lexemes_cover_source(self, source: str) -> None:
        """Outside raw blocks, concatenated lexemes reproduce the source."""
        try:
            tokens = list(Lexer(source).tokenize())
        except LexError:
            return
        assert "".join(t.value for t in tokens) == source

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_only_lex_error_escapes(self, source: str) -> None:
        """Arbitrary text either tokenizes or raises LexError."""
        try:
            tokens = list(Lexer(source).tokenize())
        except LexError as e:
            assert source.endswith(e.remaining)
            return
        for token in tokens:
            if token.type is not TokenType.RAW:
                assert token.value, f"Empty lexeme for {token!r}"

    @given(st.text(alphabet=PLAIN_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_offsets_are_contiguous(self, source: str) -> None:
        try:
            tokens = list(Lexer(source).tokenize())
        except LexError:
            return
        position = 0
        for token in tokens:
            loc = token.location
            assert loc.offset == position
            assert loc.lineno >= 1
            assert loc.col_offset >= 1
            position = loc.end_offset
        assert position == len(source)


class TestRawBlockInvariants:
    """Verbatim payloads survive untouched."""

    payload_text = st.text(
        alphabet=st.characters(exclude_characters="()[]{}", exclude_categories=("Cs",)),
        max_size=50,
    )

    @given(payload_text)
    def test_bracket_free_payload_roundtrips(self, payload: str) -> None:
        tokens = list(Lexer("css{" + payload + "}").tokenize())
        assert [(t.type, t.value) for t in tokens] == [(TokenType.RAW, payload)]

    @given(payload_text, payload_text)
    def test_balanced_braces_stay_in_payload(self, inner: str, outer: str) -> None:
        payload = outer + "{" + inner + "}" + outer
        tokens = list(Lexer("css {" + payload + "}").tokenize())
        assert tokens[0].value == payload

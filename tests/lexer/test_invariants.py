"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from mdexport.lexer import Lexer, normalize_newlines, split_lines
from mdexport.tokens import TokenType

MARKDOWNISH = st.text(alphabet="#-*_>`[]().0123456789 \t\nabc\r", max_size=300)


class TestBasicInvariants:
    """Test basic invariants that should always hold."""

    @given(st.text(max_size=1000))
    @settings(max_examples=200)
    def test_always_ends_with_eof(self, source: str) -> None:
        """Every tokenization must end with exactly one EOF token."""
        tokens = list(Lexer(source).tokenize())

        assert tokens[-1].type == TokenType.EOF, "Last token must be EOF"
        eof_count = sum(1 for t in tokens if t.type == TokenType.EOF)
        assert eof_count == 1, "Must have exactly one EOF token"

    @given(MARKDOWNISH)
    @settings(max_examples=200)
    def test_one_token_per_line(self, source: str) -> None:
        """Lines and non-EOF tokens correspond one to one."""
        tokens = list(Lexer(source).tokenize())
        lines = split_lines(normalize_newlines(source))
        assert len(tokens) - 1 == len(lines)

    @given(MARKDOWNISH)
    @settings(max_examples=100)
    def test_line_numbers_increase_by_one(self, source: str) -> None:
        tokens = list(Lexer(source).tokenize())
        assert [t.lineno for t in tokens] == list(range(1, len(tokens) + 1))

    @given(MARKDOWNISH)
    @settings(max_examples=100)
    def test_value_matches_offsets(self, source: str) -> None:
        """A token's offsets slice its value out of the normalized source."""
        lexer = Lexer(source)
        for token in lexer.tokenize():
            if token.type in (TokenType.EOF, TokenType.BLANK_LINE, TokenType.THEMATIC_BREAK):
                continue
            loc = token.location
            assert lexer.source[loc.offset : loc.end_offset] == token.value

    @given(MARKDOWNISH)
    @settings(max_examples=100)
    def test_position_never_negative(self, source: str) -> None:
        for token in Lexer(source).tokenize():
            loc = token.location
            assert loc.lineno >= 1
            assert loc.col_offset >= 1
            assert loc.offset >= 0

    @given(st.text(alphabet=" \t\n", max_size=100))
    @settings(max_examples=50)
    def test_whitespace_only_source_is_all_blank(self, source: str) -> None:
        tokens = list(Lexer(source).tokenize())
        assert all(t.type == TokenType.BLANK_LINE for t in tokens[:-1])


class TestHeadingInvariants:
    """Heading tokens always carry a level in range."""

    @given(MARKDOWNISH)
    @settings(max_examples=100)
    def test_heading_levels_in_range(self, source: str) -> None:
        for token in Lexer(source).tokenize():
            if token.type == TokenType.ATX_HEADING:
                assert 1 <= token.level <= 3
            else:
                assert token.level == 0

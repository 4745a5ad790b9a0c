"""Tests for line classification.

Each line is classified on its own, in a fixed precedence order:
blank, heading, bullet, ordered, rule, quote, paragraph.
"""

import pytest

from mdexport.lexer import Lexer, normalize_newlines, split_lines
from mdexport.tokens import Token, TokenType


def classify(line: str) -> Token:
    """Classify a single line and return its token."""
    tokens = list(Lexer(line).tokenize())
    assert len(tokens) == 2, f"Expected one line token plus EOF, got {tokens}"
    return tokens[0]


class TestHeadings:
    """ATX headings, levels 1 to 3."""

    @pytest.mark.parametrize(
        ("line", "level", "value"),
        [
            ("# Title", 1, "Title"),
            ("## Section", 2, "Section"),
            ("### Sub", 3, "Sub"),
            ("#  Two spaces", 1, " Two spaces"),
        ],
    )
    def test_heading_levels(self, line: str, level: int, value: str) -> None:
        token = classify(line)
        assert token.type == TokenType.ATX_HEADING
        assert token.level == level
        assert token.value == value

    @pytest.mark.parametrize("line", ["#NoSpace", "#### Four", "  # Indented", "#"])
    def test_not_headings(self, line: str) -> None:
        """Missing space, level 4+ and indentation fall through to paragraph."""
        assert classify(line).type == TokenType.PARAGRAPH_LINE

    def test_heading_column_points_past_marker(self) -> None:
        token = classify("## Section")
        assert token.col == 4
        assert token.location.offset == 3


class TestListItems:
    """Bullet and ordered list items."""

    @pytest.mark.parametrize("line", ["- item", "* item", "-\titem"])
    def test_bullet_markers(self, line: str) -> None:
        token = classify(line)
        assert token.type == TokenType.BULLET_ITEM
        assert token.value == "item"

    def test_bullet_strips_exactly_two_characters(self) -> None:
        """Extra spaces after the marker stay in the item text."""
        assert classify("-   spaced").value == "  spaced"

    def test_bullet_requires_whitespace(self) -> None:
        assert classify("-item").type == TokenType.PARAGRAPH_LINE

    def test_plus_is_not_a_bullet(self) -> None:
        assert classify("+ item").type == TokenType.PARAGRAPH_LINE

    @pytest.mark.parametrize(
        ("line", "number", "value"),
        [
            ("1. first", "1", "first"),
            ("42. answer", "42", "answer"),
            ("007. agent", "007", "agent"),
        ],
    )
    def test_ordered_items(self, line: str, number: str, value: str) -> None:
        token = classify(line)
        assert token.type == TokenType.ORDERED_ITEM
        assert token.number == number
        assert token.value == value

    @pytest.mark.parametrize("line", ["1.no space", "1) paren", "a. letter", ". dot"])
    def test_not_ordered(self, line: str) -> None:
        assert classify(line).type == TokenType.PARAGRAPH_LINE

    def test_ordered_marker_alone_is_paragraph(self) -> None:
        """A marker with nothing after it has no whitespace to satisfy the rule."""
        assert classify("1.").type == TokenType.PARAGRAPH_LINE


class TestThematicBreaks:
    """Horizontal rules."""

    @pytest.mark.parametrize("line", ["---", "***", "  ---  ", "\t***"])
    def test_rules(self, line: str) -> None:
        token = classify(line)
        assert token.type == TokenType.THEMATIC_BREAK
        assert token.value == ""

    @pytest.mark.parametrize("line", ["----", "___", "- - -", "--"])
    def test_not_rules(self, line: str) -> None:
        assert classify(line).type != TokenType.THEMATIC_BREAK

    def test_star_rule_not_taken_as_bullet(self) -> None:
        """``***`` has no whitespace after the first star."""
        assert classify("***").type == TokenType.THEMATIC_BREAK

    def test_spaced_stars_are_a_bullet(self) -> None:
        """Bullet precedes rule: ``* * *`` is an item whose text is ``* *``."""
        token = classify("* * *")
        assert token.type == TokenType.BULLET_ITEM
        assert token.value == "* *"


class TestBlockQuotes:
    """Single-line block quotes."""

    def test_quote(self) -> None:
        token = classify("> quoted")
        assert token.type == TokenType.BLOCK_QUOTE
        assert token.value == "quoted"

    @pytest.mark.parametrize("line", [">no space", " > indented"])
    def test_not_quotes(self, line: str) -> None:
        assert classify(line).type == TokenType.PARAGRAPH_LINE


class TestBlankAndParagraph:
    """Blank lines and the paragraph fallback."""

    @pytest.mark.parametrize("line", [" ", "\t", "   \t  ", "\u00a0", "\u3000 ", "\ufeff", "\v\f"])
    def test_whitespace_only_is_blank(self, line: str) -> None:
        assert classify(line).type == TokenType.BLANK_LINE

    @pytest.mark.parametrize("line", ["\x1c", "\x1f", "\x85", " \x1d "])
    def test_separator_controls_are_text(self, line: str) -> None:
        """Information separators and NEL are not whitespace in this dialect."""
        token = classify(line)
        assert token.type == TokenType.PARAGRAPH_LINE
        assert token.value == line

    def test_separator_control_does_not_end_marker(self) -> None:
        assert classify("-\x1citem").type == TokenType.PARAGRAPH_LINE
        assert classify("1.\x1citem").type == TokenType.PARAGRAPH_LINE
        assert classify("\x1c---").type == TokenType.PARAGRAPH_LINE

    def test_unicode_space_ends_marker(self) -> None:
        assert classify("-\u00a0item").type == TokenType.BULLET_ITEM
        assert classify("\u3000***").type == TokenType.THEMATIC_BREAK

    def test_paragraph_keeps_whole_line(self) -> None:
        token = classify("  indented text ")
        assert token.type == TokenType.PARAGRAPH_LINE
        assert token.value == "  indented text "


class TestLineSplitting:
    """Newline normalization and splitting."""

    def test_crlf_and_cr_normalized(self) -> None:
        assert normalize_newlines("a\r\nb\rc") == "a\nb\nc"

    def test_empty_source_has_no_lines(self) -> None:
        assert split_lines("") == []

    def test_single_trailing_newline_dropped(self) -> None:
        assert split_lines("a\n") == ["a"]

    def test_second_trailing_newline_is_blank_line(self) -> None:
        assert split_lines("a\n\n") == ["a", ""]

    def test_lone_newline_is_one_blank_line(self) -> None:
        assert split_lines("\n") == [""]

    def test_crlf_source_lexes_like_lf(self) -> None:
        crlf = [(t.type, t.value) for t in Lexer("# A\r\n- b\r\n").tokenize()]
        lf = [(t.type, t.value) for t in Lexer("# A\n- b\n").tokenize()]
        assert crlf == lf


class TestTokenRepr:
    """Token display."""

    def test_repr_format(self) -> None:
        assert repr(classify("# Hello")) == "Token(ATX_HEADING, 'Hello', 1:3)"

    def test_repr_truncates_long_values(self) -> None:
        token = classify("x" * 40)
        assert "..." in repr(token)

    def test_location_is_cached(self) -> None:
        token = classify("text")
        assert token.location is token.location

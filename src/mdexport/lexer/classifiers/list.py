"""List marker classifier mixin."""

from __future__ import annotations

from mdexport.parsing.charsets import WHITESPACE
from mdexport.tokens import Token, TokenType

BULLET_MARKERS = frozenset("-*")
ASCII_DIGITS = frozenset("0123456789")


class ListClassifierMixin:
    """Mixin providing bullet and ordered list item classification."""

    def _make_token(
        self,
        token_type: TokenType,
        value: str,
        line_start: int,
        *,
        marker_len: int = 0,
        level: int = 0,
        number: str = "",
    ) -> Token:
        """Create token with raw coordinates. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_bullet_item(self, line: str, line_start: int) -> Token | None:
        """Try to classify a line as a bullet item.

        A bullet is ``-`` or ``*`` followed by one whitespace character.
        Exactly two characters are stripped; further spaces stay in the
        item text.
        """
        if len(line) < 2 or line[0] not in BULLET_MARKERS or line[1] not in WHITESPACE:
            return None
        return self._make_token(TokenType.BULLET_ITEM, line[2:], line_start, marker_len=2)

    def _try_classify_ordered_item(self, line: str, line_start: int) -> Token | None:
        """Try to classify a line as an ordered item (``<digits>. text``)."""
        pos = 0
        while pos < len(line) and line[pos] in ASCII_DIGITS:
            pos += 1
        if pos == 0:
            return None
        if pos + 1 >= len(line) or line[pos] != "." or line[pos + 1] not in WHITESPACE:
            return None

        marker_len = pos + 2
        return self._make_token(
            TokenType.ORDERED_ITEM,
            line[marker_len:],
            line_start,
            marker_len=marker_len,
            number=line[:pos],
        )

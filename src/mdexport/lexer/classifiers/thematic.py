"""Thematic break classifier mixin."""

from __future__ import annotations

from mdexport.parsing.charsets import strip_whitespace
from mdexport.tokens import Token, TokenType

THEMATIC_BREAKS = frozenset({"---", "***"})


class ThematicClassifierMixin:
    """Mixin providing thematic break classification."""

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

    def _try_classify_thematic_break(self, line: str, line_start: int) -> Token | None:
        """Try to classify a line as a horizontal rule.

        Only ``---`` and ``***`` qualify, with surrounding whitespace allowed.
        Longer runs (``----``) and spaced forms (``- - -``) do not.
        """
        if strip_whitespace(line) not in THEMATIC_BREAKS:
            return None
        return self._make_token(TokenType.THEMATIC_BREAK, "", line_start)

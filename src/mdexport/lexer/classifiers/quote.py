"""Block quote classifier mixin."""

from mdexport.tokens import Token, TokenType


class QuoteClassifierMixin:
    """Mixin providing block quote classification."""

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

    def _try_classify_block_quote(self, line: str, line_start: int) -> Token | None:
        """Try to classify a line as a block quote (``> text``)."""
        if not line.startswith("> "):
            return None
        return self._make_token(TokenType.BLOCK_QUOTE, line[2:], line_start, marker_len=2)

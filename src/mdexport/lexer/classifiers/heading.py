"""ATX heading classifier mixin."""

from mdexport.tokens import Token, TokenType

# Checked in order; "## x" does not start with "# ", so the first hit is exact.
HEADING_PREFIXES: tuple[tuple[int, str], ...] = ((1, "# "), (2, "## "), (3, "### "))


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

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

    def _try_classify_heading(self, line: str, line_start: int) -> Token | None:
        """Try to classify a line as a level 1-3 heading.

        The marker must start the line and be followed by a literal space:
        ``#Text`` and ``  # Text`` are not headings. Four or more ``#`` are
        not headings either.

        Args:
            line: Raw line content
            line_start: Absolute offset of the line in the source

        Returns:
            Token if the line is a heading, None otherwise.
        """
        for level, prefix in HEADING_PREFIXES:
            if line.startswith(prefix):
                return self._make_token(
                    TokenType.ATX_HEADING,
                    line[len(prefix) :],
                    line_start,
                    marker_len=len(prefix),
                    level=level,
                )
        return None

"""Line lexer for the mdexport Markdown dialect.

Every line is classified on its own: the lexer keeps no state between
lines beyond the running offset. Grouping lines into lists and collapsing
blank runs is the parser's job.

Thread Safety:
Lexer instances are single-use. Create one per source string.

"""

from __future__ import annotations

from collections.abc import Iterator

from mdexport.lexer.classifiers import (
    HeadingClassifierMixin,
    ListClassifierMixin,
    QuoteClassifierMixin,
    ThematicClassifierMixin,
)
from mdexport.parsing.charsets import is_blank
from mdexport.tokens import Token, TokenType


def normalize_newlines(source: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return source.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(source: str) -> list[str]:
    """Split normalized source into lines.

    A single final line terminator does not produce an extra empty line,
    so ``"a\\n"`` is one line. An empty source has no lines.
    """
    if not source:
        return []
    lines = source.split("\n")
    if source.endswith("\n"):
        lines.pop()
    return lines


class Lexer(
    HeadingClassifierMixin,
    ListClassifierMixin,
    ThematicClassifierMixin,
    QuoteClassifierMixin,
):
    """Classify Markdown source line by line.

    Usage:
        >>> lexer = Lexer("# Hello\\n\\nWorld")
        >>> for token in lexer.tokenize():
        ...     print(token)
        Token(ATX_HEADING, 'Hello', 1:3)
        Token(BLANK_LINE, '', 2:1)
        Token(PARAGRAPH_LINE, 'World', 3:1)
        Token(EOF, '', 4:1)

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_lineno",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text (any line-ending convention)
            source_file: Optional source file path for locations
        """
        self._source = normalize_newlines(source)
        self._source_file = source_file
        self._lineno = 1

    @property
    def source(self) -> str:
        """The newline-normalized source that offsets refer to."""
        return self._source

    def tokenize(self) -> Iterator[Token]:
        """Yield one token per line, then exactly one EOF token."""
        line_start = 0
        for line in split_lines(self._source):
            yield self._classify_line(line, line_start)
            line_start += len(line) + 1
            self._lineno += 1

        eof_offset = min(line_start, len(self._source))
        yield self._make_token(TokenType.EOF, "", eof_offset)

    def _classify_line(self, line: str, line_start: int) -> Token:
        """Classify one line. Precedence follows the order of the checks."""
        if is_blank(line):
            return self._make_token(TokenType.BLANK_LINE, "", line_start)

        token = (
            self._try_classify_heading(line, line_start)
            or self._try_classify_bullet_item(line, line_start)
            or self._try_classify_ordered_item(line, line_start)
            or self._try_classify_thematic_break(line, line_start)
            or self._try_classify_block_quote(line, line_start)
        )
        if token is not None:
            return token
        return self._make_token(TokenType.PARAGRAPH_LINE, line, line_start)

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
        """Create a token for the current line.

        ``marker_len`` is the number of characters stripped from the start
        of the line to obtain ``value``.
        """
        start = line_start + marker_len
        return Token(
            type=token_type,
            value=value,
            _lineno=self._lineno,
            _col=marker_len + 1,
            _start_offset=start,
            _end_offset=start + len(value),
            level=level,
            number=number,
            _source_file=self._source_file,
        )

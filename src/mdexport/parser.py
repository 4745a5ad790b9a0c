"""Block scanner producing the typed AST.

Consumes the Lexer's line tokens top to bottom and builds block nodes,
calling the inline formatter for every text-bearing line.

Transient state per parse:
- the open list (family + items collected so far)
- the length of the pending blank run

A blank line only increments the pending run. The next content line
closes any open list and flushes the run as a single Spacer before its own
content is handled. Runs at the document boundaries follow ParseConfig.

Thread Safety:
Parser instances are single-use. Configuration is read from a ContextVar.
The resulting AST is immutable.

"""

from __future__ import annotations

from mdexport.config import get_parse_config
from mdexport.lexer import Lexer
from mdexport.location import SourceLocation
from mdexport.nodes import (
    Block,
    BlockQuote,
    Heading,
    Inline,
    Paragraph,
    Spacer,
    ThematicBreak,
)
from mdexport.parsing import OpenList, format_inline
from mdexport.tokens import Token, TokenType
from mdexport.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Line-oriented block parser.

    Usage:
        >>> blocks = Parser("- a\\n- b\\n\\n\\nDone").parse()
        >>> [type(b).__name__ for b in blocks]
        ['List', 'Spacer', 'Paragraph']

    The parser performs no validation and never raises for any input
    string; unmatched inline markers simply stay plain text.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_blocks",
        "_open_list",
        "_blank_run",
        "_blank_location",
        "_seen_content",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Markdown source text
            source_file: Optional source file path recorded in locations
        """
        self._source = source
        self._source_file = source_file
        self._blocks: list[Block] = []
        self._open_list: OpenList | None = None
        self._blank_run = 0
        self._blank_location: SourceLocation | None = None
        self._seen_content = False

    def parse(self) -> list[Block]:
        """Parse the source into an ordered list of block nodes."""
        config = get_parse_config()
        line_count = 0

        for token in Lexer(self._source, self._source_file).tokenize():
            if token.type is TokenType.EOF:
                self._close_list()
                if self._blank_run:
                    self._flush_blank_run(keep=config.trailing_spacer)
                break

            line_count += 1
            if token.type is TokenType.BLANK_LINE:
                if self._blank_run == 0:
                    self._blank_location = token.location
                self._blank_run += 1
                continue

            if self._blank_run:
                self._close_list()
                self._flush_blank_run(keep=self._seen_content or config.leading_spacer)

            self._seen_content = True
            self._handle_content(token)

        logger.debug("Parsed %d block(s) from %d line(s)", len(self._blocks), line_count)
        return self._blocks

    def _handle_content(self, token: Token) -> None:
        """Dispatch a non-blank line token."""
        match token.type:
            case TokenType.ATX_HEADING:
                self._close_list()
                self._blocks.append(
                    Heading(
                        location=token.location,
                        level=token.level,  # type: ignore[arg-type]
                        children=self._inline(token),
                    )
                )
            case TokenType.BULLET_ITEM:
                self._add_list_item(token, ordered=False)
            case TokenType.ORDERED_ITEM:
                self._add_list_item(token, ordered=True)
            case TokenType.THEMATIC_BREAK:
                self._close_list()
                self._blocks.append(ThematicBreak(location=token.location))
            case TokenType.BLOCK_QUOTE:
                self._close_list()
                self._blocks.append(
                    BlockQuote(location=token.location, children=self._inline(token))
                )
            case _:
                self._close_list()
                self._blocks.append(
                    Paragraph(location=token.location, children=self._inline(token))
                )

    def _add_list_item(self, token: Token, *, ordered: bool) -> None:
        """Append an item, opening a new list when the family changes."""
        if self._open_list is not None and not self._open_list.accepts(ordered):
            self._close_list()
        if self._open_list is None:
            self._open_list = OpenList(ordered=ordered, location=token.location)
        self._open_list.add_item(self._inline(token), token.location)

    def _close_list(self) -> None:
        """Emit the open list, if any, as one List node."""
        if self._open_list is not None:
            self._blocks.append(self._open_list.close())
            self._open_list = None

    def _flush_blank_run(self, *, keep: bool) -> None:
        """Emit the pending blank run as one Spacer (or drop it) and reset."""
        if keep:
            location = self._blank_location or SourceLocation.unknown()
            self._blocks.append(Spacer(location=location, count=self._blank_run))
        self._blank_run = 0
        self._blank_location = None

    def _inline(self, token: Token) -> tuple[Inline, ...]:
        return format_inline(token.value, location=token.location)

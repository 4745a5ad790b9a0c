"""Token and TokenType definitions for the mdexport lexer.

The lexer produces one Token per source line plus a final EOF token.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mdexport.location import SourceLocation


class TokenType(Enum):
    """Line classes recognized by the lexer."""

    # Document structure
    EOF = auto()
    BLANK_LINE = auto()

    # Block elements
    ATX_HEADING = auto()  # # , ## , ###
    BULLET_ITEM = auto()  # - item, * item
    ORDERED_ITEM = auto()  # 1. item
    THEMATIC_BREAK = auto()  # --- or ***
    BLOCK_QUOTE = auto()  # > quote

    # Fallback
    PARAGRAPH_LINE = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A classified source line.

    Attributes:
        type: The token type
        value: Line content with the block marker removed
        _lineno: Line number (1-indexed)
        _col: Column where ``value`` starts (1-indexed)
        _start_offset: Absolute offset where ``value`` starts
        _end_offset: Absolute offset where the line ends
        level: Heading level (1-3) for ATX_HEADING, 0 otherwise
        number: Literal digits of an ordered marker, "" otherwise
        _source_file: Optional source file path

    """

    type: TokenType
    value: str
    _lineno: int
    _col: int
    _start_offset: int
    _end_offset: int
    level: int = 0
    number: str = ""
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Source location of the token content (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from mdexport.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        return self._lineno

    @property
    def col(self) -> int:
        return self._col

"""Source positions for AST nodes and tokens.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a node or token came from in the Markdown source.

    Line and column are 1-indexed. Offsets are absolute positions in the
    newline-normalized source buffer.

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=1)
        >>> str(loc)
        '3:1'
        >>> str(SourceLocation(3, 5, source_file="notes.md"))
        'notes.md:3:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def shifted(self, columns: int, length: int = 0) -> SourceLocation:
        """Location of a span starting ``columns`` characters further along the line."""
        start = self.offset + columns
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset + columns,
            offset=start,
            end_offset=start + length,
            source_file=self.source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder for synthetic nodes."""
        return cls(lineno=0, col_offset=0)

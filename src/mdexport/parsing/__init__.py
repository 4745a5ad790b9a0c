"""Parsing helpers for the mdexport parser.

- `charsets`: the whitespace set used by the line classifiers
- `format_inline`: precedence-ordered inline span formatting
- `SPAN_PATTERNS`: the (pattern, constructor) table it consumes
- `OpenList`: accumulator for list grouping

"""

from mdexport.parsing.inline import SPAN_PATTERNS, find_span, format_inline
from mdexport.parsing.lists import OpenList

__all__ = [
    "SPAN_PATTERNS",
    "OpenList",
    "find_span",
    "format_inline",
]

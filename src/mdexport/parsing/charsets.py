"""Character sets for line classification.

``WHITESPACE`` is the set that counts as blank in this dialect: ASCII space
and control whitespace, the Unicode space separators, the line and
paragraph separators, and the byte order mark. ``str.isspace`` differs: it
also accepts the information separators ``\\x1c``-``\\x1f`` and ``\\x85``,
which here are ordinary text.

Usage:
    from mdexport.parsing.charsets import WHITESPACE, is_blank

    if is_blank(line):
        ...
"""

WHITESPACE_CHARS = (
    "\t\n\v\f\r "
    "\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

WHITESPACE: frozenset[str] = frozenset(WHITESPACE_CHARS)


def is_blank(line: str) -> bool:
    """True if ``line`` is empty or made only of WHITESPACE."""
    return not line.strip(WHITESPACE_CHARS)


def strip_whitespace(line: str) -> str:
    """Strip WHITESPACE from both ends of ``line``."""
    return line.strip(WHITESPACE_CHARS)

"""Line lexer for the mdexport Markdown dialect.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + line loop)
└── classifiers/         # One mixin per block form
    ├── heading.py       # # , ## , ###
    ├── list.py          # - , * , 1.
    ├── thematic.py      # --- , ***
    └── quote.py         # >

Usage:
    >>> from mdexport.lexer import Lexer
    >>> [t.type.name for t in Lexer("- a\\n- b").tokenize()]
    ['BULLET_ITEM', 'BULLET_ITEM', 'EOF']

"""

from mdexport.lexer.core import Lexer, normalize_newlines, split_lines

__all__ = ["Lexer", "normalize_newlines", "split_lines"]

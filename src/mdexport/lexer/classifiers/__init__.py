"""Line classifiers for the mdexport lexer.

Each classifier is a mixin that decides whether a single line matches one
block form. Classifiers never look at neighbouring lines.
"""

from mdexport.lexer.classifiers.heading import HeadingClassifierMixin
from mdexport.lexer.classifiers.list import ListClassifierMixin
from mdexport.lexer.classifiers.quote import QuoteClassifierMixin
from mdexport.lexer.classifiers.thematic import ThematicClassifierMixin

__all__ = [
    "HeadingClassifierMixin",
    "ListClassifierMixin",
    "QuoteClassifierMixin",
    "ThematicClassifierMixin",
]

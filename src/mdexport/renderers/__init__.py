"""mdexport renderers.

Projectors turn the AST into output trees; serializers turn output trees
into text.

Available:
- ReflowProjector: AST -> ReflowNode tree (semantic classes)
- FixedProjector: AST -> FixedNode tree (explicit metrics)
- HtmlRenderer: ReflowNode tree -> HTML fragment

"""

from mdexport.renderers.html import HtmlRenderer
from mdexport.renderers.projector import (
    FixedProjector,
    Projector,
    ReflowProjector,
    Target,
    get_projector,
)
from mdexport.renderers.tree import FixedNode, ReflowNode, iter_nodes

__all__ = [
    "FixedNode",
    "FixedProjector",
    "HtmlRenderer",
    "Projector",
    "ReflowNode",
    "ReflowProjector",
    "Target",
    "get_projector",
    "iter_nodes",
]

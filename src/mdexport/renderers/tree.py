"""Output trees produced by the projectors.

Both trees have the same shape: a DOCUMENT root, one child per block, list
containers holding one item per list entry, and inline nodes below. They
differ only in the styling attached to each node.

Thread Safety:
Nodes are frozen dataclasses; trees can be shared across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from mdexport.styles import BoxMetrics, NodeKind


@dataclass(frozen=True, slots=True)
class ReflowNode:
    """Node of the reflow (on-screen) tree.

    Attributes:
        kind: Node kind
        tag: HTML element name ("" for bare text)
        class_name: Semantic class from REFLOW_CLASSES
        children: Child nodes
        text: Leaf text (TEXT and CODE)
        href: Link target (LINK)
        position: 1-based item position (list items)
        height: Spacer height in em (SPACER)

    """

    kind: NodeKind
    tag: str
    class_name: str
    children: tuple[ReflowNode, ...] = ()
    text: str | None = None
    href: str | None = None
    position: int | None = None
    height: float | None = None


@dataclass(frozen=True, slots=True)
class FixedNode:
    """Node of the fixed-layout (paginated export) tree.

    Every node carries a complete BoxMetrics record; nothing is inherited
    from ancestors at layout time.

    Attributes:
        kind: Node kind
        metrics: Explicit metrics for this node
        children: Child nodes
        text: Leaf text (TEXT and CODE)
        href: Link target (LINK)
        position: 1-based item position (list items)
        marker: Visible item marker, "•" or "<n>." (list items)
        height: Spacer height in points (SPACER)

    """

    kind: NodeKind
    metrics: BoxMetrics
    children: tuple[FixedNode, ...] = ()
    text: str | None = None
    href: str | None = None
    position: int | None = None
    marker: str | None = None
    height: float | None = None


type OutputNode = ReflowNode | FixedNode


def iter_nodes(node: OutputNode) -> Iterator[OutputNode]:
    """Yield ``node`` and all of its descendants in document order."""
    yield node
    for child in node.children:
        yield from iter_nodes(child)

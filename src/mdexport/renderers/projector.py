"""Projection of the AST onto the reflow and fixed-layout targets.

One traversal, two targets. ``Projector.project`` walks the Document and
decides the output structure; subclasses only choose the style attached to
each node and build the concrete node type. The two trees therefore always
have the same block count and the same inline count per block.

Thread Safety:
Projectors hold only immutable settings. A single instance can project
many documents concurrently.

"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any, ClassVar

from mdexport.errors import ConfigError, RenderError
from mdexport.nodes import (
    Block,
    BlockQuote,
    CodeSpan,
    Document,
    Emphasis,
    Heading,
    Inline,
    Link,
    List,
    Paragraph,
    Spacer,
    Strong,
    StrongEmphasis,
    Text,
    ThematicBreak,
)
from mdexport.renderers.tree import FixedNode, ReflowNode
from mdexport.styles import (
    FIXED_INLINE_OVERRIDES,
    FIXED_METRICS,
    FIXED_SPACER,
    HEADING_KINDS,
    REFLOW_CLASSES,
    REFLOW_SPACER,
    REFLOW_TAGS,
    BoxMetrics,
    NodeKind,
    scale_overrides,
)
from mdexport.utils.logger import get_logger

logger = get_logger(__name__)


class Target(StrEnum):
    """Output target selector."""

    REFLOW = "reflow"
    FIXED = "fixed"


_EMPHASIS_KINDS: dict[type, NodeKind] = {
    Strong: NodeKind.STRONG,
    Emphasis: NodeKind.EMPHASIS,
    StrongEmphasis: NodeKind.STRONG_EMPHASIS,
}


class Projector[N, S](ABC):
    """Shared traversal from AST to an output tree.

    Type parameters: ``N`` is the output node type, ``S`` the style value
    attached to each node (a class name or a BoxMetrics record).

    Subclasses implement the four hooks: ``_block_style``,
    ``_inline_style``, ``_spacer_height`` and ``_node``.

    """

    __slots__ = ()

    target: ClassVar[Target]

    def project(self, doc: Document) -> N:
        """Project a Document onto this projector's target.

        Raises:
            RenderError: If the tree contains something that is not a node
                this dialect produces.
        """
        if not isinstance(doc, Document):
            raise RenderError("Expected a Document", doc)

        children = tuple(self._project_block(block) for block in doc.children)
        logger.debug("Projected %d block(s) onto %s target", len(children), self.target)
        return self._node(NodeKind.DOCUMENT, self._block_style(NodeKind.DOCUMENT), children=children)

    # =========================================================================
    # Traversal
    # =========================================================================

    def _project_block(self, block: Block) -> N:
        match block:
            case Heading():
                if block.level not in (1, 2, 3):
                    raise RenderError(f"Unsupported heading level {block.level}", block)
                return self._with_inlines(HEADING_KINDS[block.level - 1], block.children)
            case Paragraph():
                return self._with_inlines(NodeKind.PARAGRAPH, block.children)
            case BlockQuote():
                return self._with_inlines(NodeKind.BLOCK_QUOTE, block.children)
            case List():
                return self._project_list(block)
            case ThematicBreak():
                return self._node(NodeKind.RULE, self._block_style(NodeKind.RULE))
            case Spacer():
                return self._node(
                    NodeKind.SPACER,
                    self._block_style(NodeKind.SPACER),
                    height=self._spacer_height(block.count),
                )
            case _:
                raise RenderError("Cannot project block", block)

    def _project_list(self, lst: List) -> N:
        if lst.ordered:
            list_kind, item_kind = NodeKind.ORDERED_LIST, NodeKind.ORDERED_ITEM
        else:
            list_kind, item_kind = NodeKind.BULLET_LIST, NodeKind.BULLET_ITEM

        items = []
        for item in lst.items:
            style = self._block_style(item_kind)
            items.append(
                self._node(
                    item_kind,
                    style,
                    children=self._project_inlines(item.children, style),
                    position=item.position,
                )
            )
        return self._node(list_kind, self._block_style(list_kind), children=tuple(items))

    def _with_inlines(self, kind: NodeKind, inlines: tuple[Inline, ...]) -> N:
        style = self._block_style(kind)
        return self._node(kind, style, children=self._project_inlines(inlines, style))

    def _project_inlines(self, inlines: tuple[Inline, ...], parent: S) -> tuple[N, ...]:
        return tuple(self._project_inline(inline, parent) for inline in inlines)

    def _project_inline(self, inline: Inline, parent: S) -> N:
        match inline:
            case Text():
                return self._node(
                    NodeKind.TEXT, self._inline_style(NodeKind.TEXT, parent), text=inline.content
                )
            case CodeSpan():
                return self._node(
                    NodeKind.CODE, self._inline_style(NodeKind.CODE, parent), text=inline.code
                )
            case Strong() | Emphasis() | StrongEmphasis():
                kind = _EMPHASIS_KINDS[type(inline)]
                style = self._inline_style(kind, parent)
                return self._node(
                    kind, style, children=self._project_inlines(inline.children, style)
                )
            case Link():
                style = self._inline_style(NodeKind.LINK, parent)
                return self._node(
                    NodeKind.LINK,
                    style,
                    children=self._project_inlines(inline.children, style),
                    href=inline.url,
                )
            case _:
                raise RenderError("Cannot project inline", inline)

    # =========================================================================
    # Target hooks
    # =========================================================================

    @abstractmethod
    def _block_style(self, kind: NodeKind) -> S: ...

    @abstractmethod
    def _inline_style(self, kind: NodeKind, parent: S) -> S: ...

    @abstractmethod
    def _spacer_height(self, count: int) -> float: ...

    @abstractmethod
    def _node(
        self,
        kind: NodeKind,
        style: S,
        *,
        children: tuple[N, ...] = (),
        text: str | None = None,
        href: str | None = None,
        position: int | None = None,
        height: float | None = None,
    ) -> N: ...


class ReflowProjector(Projector[ReflowNode, str]):
    """Project onto the reflow target: semantic classes, no metrics.

    Usage:
        >>> from mdexport import parse
        >>> root = ReflowProjector().project(parse("# Hi"))
        >>> root.children[0].tag, root.children[0].class_name
        ('h1', 'text-2xl font-bold my-4')

    """

    __slots__ = ()

    target = Target.REFLOW

    def _block_style(self, kind: NodeKind) -> str:
        return REFLOW_CLASSES[kind]

    def _inline_style(self, kind: NodeKind, parent: str) -> str:
        return REFLOW_CLASSES[kind]

    def _spacer_height(self, count: int) -> float:
        return REFLOW_SPACER.height(count)

    def _node(
        self,
        kind: NodeKind,
        style: str,
        *,
        children: tuple[ReflowNode, ...] = (),
        text: str | None = None,
        href: str | None = None,
        position: int | None = None,
        height: float | None = None,
    ) -> ReflowNode:
        return ReflowNode(
            kind=kind,
            tag=REFLOW_TAGS[kind],
            class_name=style,
            children=children,
            text=text,
            href=href,
            position=position,
            height=height,
        )


class FixedProjector(Projector[FixedNode, BoxMetrics]):
    """Project onto the fixed-layout target: explicit metrics on every node.

    Args:
        scale: Size multiplier applied to every length (fonts, margins,
            paddings, borders, spacer heights). Use it for preview versus
            export sizing; the style tables themselves never change.

    Raises:
        ConfigError: If ``scale`` is not a positive finite number.

    """

    __slots__ = ("_scale", "_block_metrics", "_inline_overrides")

    target = Target.FIXED

    def __init__(self, *, scale: float = 1.0) -> None:
        if (
            isinstance(scale, bool)
            or not isinstance(scale, (int, float))
            or not math.isfinite(scale)
            or scale <= 0
        ):
            raise ConfigError("scale", f"must be a positive number, got {scale!r}")
        self._scale = float(scale)
        self._block_metrics = {
            kind: metrics.scaled(self._scale) for kind, metrics in FIXED_METRICS.items()
        }
        self._inline_overrides: dict[NodeKind, dict[str, Any]] = {
            kind: scale_overrides(overrides, self._scale)
            for kind, overrides in FIXED_INLINE_OVERRIDES.items()
        }

    @property
    def scale(self) -> float:
        return self._scale

    def _block_style(self, kind: NodeKind) -> BoxMetrics:
        return self._block_metrics[kind]

    def _inline_style(self, kind: NodeKind, parent: BoxMetrics) -> BoxMetrics:
        return parent.for_inline().with_overrides(self._inline_overrides[kind])

    def _spacer_height(self, count: int) -> float:
        return FIXED_SPACER.height(count) * self._scale

    def _node(
        self,
        kind: NodeKind,
        style: BoxMetrics,
        *,
        children: tuple[FixedNode, ...] = (),
        text: str | None = None,
        href: str | None = None,
        position: int | None = None,
        height: float | None = None,
    ) -> FixedNode:
        marker = None
        if kind is NodeKind.BULLET_ITEM:
            marker = "•"
        elif kind is NodeKind.ORDERED_ITEM:
            marker = f"{position}."
        return FixedNode(
            kind=kind,
            metrics=style,
            children=children,
            text=text,
            href=href,
            position=position,
            marker=marker,
            height=height,
        )


def get_projector(
    target: Target | str, *, scale: float = 1.0
) -> ReflowProjector | FixedProjector:
    """Create the projector for ``target`` ("reflow" or "fixed").

    ``scale`` only affects the fixed-layout target.

    Raises:
        ConfigError: For an unknown target or an invalid scale.
    """
    try:
        resolved = Target(target)
    except ValueError:
        raise ConfigError("target", f"unknown target {target!r}") from None

    if resolved is Target.REFLOW:
        return ReflowProjector()
    return FixedProjector(scale=scale)


__all__ = [
    "FixedProjector",
    "Projector",
    "ReflowProjector",
    "Target",
    "get_projector",
]

"""Style tables for the two output targets.

Two parallel, read-only tables keyed by NodeKind:

- ``REFLOW_CLASSES``: semantic class names for the reflow target, so the
  embedding environment can restyle the output
- ``FIXED_METRICS``: explicit numeric metrics for the fixed-layout target,
  one complete BoxMetrics per block kind

Inline kinds on the fixed-layout target are resolved against their parent:
``FIXED_INLINE_OVERRIDES`` lists only what an inline kind changes, and the
projector applies it on top of the parent's metrics so every output node
still carries a complete record.

Thread Safety:
All tables are MappingProxyType views over module-private dicts and every
value is frozen. Nothing here changes after import.

"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Literal


class NodeKind(StrEnum):
    """Output node kinds shared by both targets."""

    DOCUMENT = "document"
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    PARAGRAPH = "paragraph"
    BULLET_LIST = "bullet_list"
    ORDERED_LIST = "ordered_list"
    BULLET_ITEM = "bullet_item"
    ORDERED_ITEM = "ordered_item"
    BLOCK_QUOTE = "block_quote"
    RULE = "rule"
    SPACER = "spacer"
    TEXT = "text"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    STRONG_EMPHASIS = "strong_emphasis"
    CODE = "code"
    LINK = "link"


HEADING_KINDS: tuple[NodeKind, NodeKind, NodeKind] = (
    NodeKind.HEADING_1,
    NodeKind.HEADING_2,
    NodeKind.HEADING_3,
)

INLINE_KINDS = frozenset(
    {
        NodeKind.TEXT,
        NodeKind.STRONG,
        NodeKind.EMPHASIS,
        NodeKind.STRONG_EMPHASIS,
        NodeKind.CODE,
        NodeKind.LINK,
    }
)


@dataclass(frozen=True, slots=True)
class BoxMetrics:
    """Explicit layout metrics for one fixed-layout node.

    Lengths are in points. ``line_height`` is a multiple of ``font_size``.
    """

    font_family: str = "Helvetica"
    font_size: float = 12.0
    font_weight: str = "normal"
    font_style: Literal["normal", "italic"] = "normal"
    line_height: float = 1.2
    color: str = "#000000"
    background: str | None = None
    margin_before: float = 0.0
    margin_after: float = 0.0
    margin_left: float = 0.0
    padding: float = 0.0
    padding_left: float = 0.0
    border_side: Literal["none", "left", "bottom"] = "none"
    border_width: float = 0.0
    border_color: str | None = None
    text_decoration: Literal["none", "underline"] = "none"

    def scaled(self, factor: float) -> BoxMetrics:
        """Multiply every length by ``factor``; ratios and colors are kept."""
        if factor == 1.0:
            return self
        return replace(
            self,
            font_size=self.font_size * factor,
            margin_before=self.margin_before * factor,
            margin_after=self.margin_after * factor,
            margin_left=self.margin_left * factor,
            padding=self.padding * factor,
            padding_left=self.padding_left * factor,
            border_width=self.border_width * factor,
        )

    def for_inline(self) -> BoxMetrics:
        """Text properties of this box with all box properties cleared."""
        return replace(
            self,
            background=None,
            margin_before=0.0,
            margin_after=0.0,
            margin_left=0.0,
            padding=0.0,
            padding_left=0.0,
            border_side="none",
            border_width=0.0,
            border_color=None,
        )

    def with_overrides(self, overrides: MappingProxyType[str, Any] | dict[str, Any]) -> BoxMetrics:
        return replace(self, **overrides) if overrides else self


@dataclass(frozen=True, slots=True)
class SpacerUnits:
    """How a blank run is turned into a height on one target.

    A run of one blank line gets ``minimum``; a run of n > 1 lines gets
    ``(n - 1) * unit``.
    """

    unit: float
    minimum: float
    measure: Literal["em", "pt"]

    def height(self, count: int) -> float:
        if count <= 1:
            return self.minimum
        return (count - 1) * self.unit


REFLOW_CLASSES: MappingProxyType[NodeKind, str] = MappingProxyType(
    {
        NodeKind.DOCUMENT: "prose max-w-none p-4",
        NodeKind.HEADING_1: "text-2xl font-bold my-4",
        NodeKind.HEADING_2: "text-xl font-bold my-3",
        NodeKind.HEADING_3: "text-lg font-bold my-2",
        NodeKind.PARAGRAPH: "text-base my-2",
        NodeKind.BULLET_LIST: "list-disc ml-5",
        NodeKind.ORDERED_LIST: "list-decimal ml-5",
        NodeKind.BULLET_ITEM: "list-disc ml-5",
        NodeKind.ORDERED_ITEM: "list-disc ml-5",
        NodeKind.BLOCK_QUOTE: "border-l-4 border-gray-300 pl-4 italic text-gray-600",
        NodeKind.RULE: "my-4 border-t border-gray-300",
        NodeKind.SPACER: "spacer",
        NodeKind.TEXT: "",
        NodeKind.STRONG: "font-bold",
        NodeKind.EMPHASIS: "italic",
        NodeKind.STRONG_EMPHASIS: "font-bold italic",
        NodeKind.CODE: "font-mono bg-gray-100 p-1 rounded",
        NodeKind.LINK: "text-blue-600 underline",
    }
)

# Element names used when a reflow tree is serialized to HTML.
# TEXT has no element: it renders as bare escaped text.
REFLOW_TAGS: MappingProxyType[NodeKind, str] = MappingProxyType(
    {
        NodeKind.DOCUMENT: "div",
        NodeKind.HEADING_1: "h1",
        NodeKind.HEADING_2: "h2",
        NodeKind.HEADING_3: "h3",
        NodeKind.PARAGRAPH: "p",
        NodeKind.BULLET_LIST: "ul",
        NodeKind.ORDERED_LIST: "ol",
        NodeKind.BULLET_ITEM: "li",
        NodeKind.ORDERED_ITEM: "li",
        NodeKind.BLOCK_QUOTE: "blockquote",
        NodeKind.RULE: "hr",
        NodeKind.SPACER: "div",
        NodeKind.TEXT: "",
        NodeKind.STRONG: "span",
        NodeKind.EMPHASIS: "span",
        NodeKind.STRONG_EMPHASIS: "span",
        NodeKind.CODE: "code",
        NodeKind.LINK: "a",
    }
)

_BODY = BoxMetrics()

FIXED_METRICS: MappingProxyType[NodeKind, BoxMetrics] = MappingProxyType(
    {
        NodeKind.DOCUMENT: replace(_BODY, padding=40.0),
        NodeKind.HEADING_1: replace(_BODY, font_size=24.0, font_weight="bold", margin_after=10.0),
        NodeKind.HEADING_2: replace(_BODY, font_size=20.0, font_weight="bold", margin_after=8.0),
        NodeKind.HEADING_3: replace(_BODY, font_size=16.0, font_weight="bold", margin_after=6.0),
        NodeKind.PARAGRAPH: replace(_BODY, margin_after=8.0, line_height=1.5),
        NodeKind.BULLET_LIST: _BODY,
        NodeKind.ORDERED_LIST: _BODY,
        NodeKind.BULLET_ITEM: replace(_BODY, margin_left=12.0, margin_after=4.0),
        NodeKind.ORDERED_ITEM: replace(_BODY, margin_left=12.0, margin_after=4.0),
        NodeKind.BLOCK_QUOTE: replace(
            _BODY,
            font_size=11.0,
            font_style="italic",
            margin_left=8.0,
            padding_left=8.0,
            border_side="left",
            border_width=2.0,
            border_color="#cccccc",
        ),
        NodeKind.RULE: replace(
            _BODY,
            margin_before=10.0,
            margin_after=10.0,
            border_side="bottom",
            border_width=0.5,
            border_color="#888888",
        ),
        NodeKind.SPACER: _BODY,
    }
)

FIXED_INLINE_OVERRIDES: MappingProxyType[NodeKind, MappingProxyType[str, Any]] = MappingProxyType(
    {
        NodeKind.TEXT: MappingProxyType({}),
        NodeKind.STRONG: MappingProxyType({"font_weight": "900"}),
        NodeKind.EMPHASIS: MappingProxyType({"font_style": "italic"}),
        NodeKind.STRONG_EMPHASIS: MappingProxyType({"font_weight": "900", "font_style": "italic"}),
        NodeKind.CODE: MappingProxyType(
            {"font_family": "Courier", "background": "#f5f5f5", "padding": 2.0}
        ),
        NodeKind.LINK: MappingProxyType({"color": "#0000ff", "text_decoration": "underline"}),
    }
)

# BoxMetrics fields measured in points; scaled by the export size multiplier.
LENGTH_FIELDS = frozenset(
    {
        "font_size",
        "margin_before",
        "margin_after",
        "margin_left",
        "padding",
        "padding_left",
        "border_width",
    }
)


def scale_overrides(overrides: MappingProxyType[str, Any], factor: float) -> dict[str, Any]:
    """Copy of an inline override mapping with its lengths multiplied by ``factor``."""
    return {
        name: value * factor if name in LENGTH_FIELDS else value
        for name, value in overrides.items()
    }


REFLOW_SPACER = SpacerUnits(unit=1.5, minimum=0.5, measure="em")
FIXED_SPACER = SpacerUnits(unit=18.0, minimum=6.0, measure="pt")


__all__ = [
    "FIXED_INLINE_OVERRIDES",
    "FIXED_METRICS",
    "FIXED_SPACER",
    "HEADING_KINDS",
    "INLINE_KINDS",
    "LENGTH_FIELDS",
    "REFLOW_CLASSES",
    "REFLOW_SPACER",
    "REFLOW_TAGS",
    "BoxMetrics",
    "NodeKind",
    "SpacerUnits",
    "scale_overrides",
]

"""Typed AST nodes for mdexport.

All AST nodes are frozen dataclasses with slots: immutable once built,
safe to share across threads, and usable with ``match`` statements.

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Heading
│   ├── Paragraph
│   ├── List
│   ├── ListItem
│   ├── BlockQuote
│   ├── ThematicBreak
│   └── Spacer
└── Inline (inline elements)
    ├── Text
    ├── Strong
    ├── Emphasis
    ├── StrongEmphasis
    ├── CodeSpan
    └── Link

The dialect is line-oriented: headings, paragraphs, quotes and list items
each hold the inline content of exactly one source line.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from mdexport.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""

    location: SourceLocation


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content."""

    content: str


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Bold text.

    Markdown: **text**

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Italic text.

    Markdown: *text* or _text_

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class StrongEmphasis(Node):
    """Bold italic text, recognized as one atomic span.

    Markdown: ***text*** or **_text_**

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code.

    Markdown: `code`

    """

    code: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markdown: [text](url)

    """

    url: str
    children: tuple[Inline, ...]


type Inline = Text | Strong | Emphasis | StrongEmphasis | CodeSpan | Link


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """Heading, levels 1 to 3.

    Markdown: # Heading, ## Heading, ### Heading

    """

    level: Literal[1, 2, 3]
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Single-line paragraph."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    ``position`` is the 1-based index of the item within its list. For
    ordered lists it is the visible counter, whatever digits the source used.

    """

    children: tuple[Inline, ...]
    position: int = 1


@dataclass(frozen=True, slots=True)
class List(Node):
    """Bullet or ordered list.

    Markdown: - item, * item or 1. item

    """

    items: tuple[ListItem, ...]
    ordered: bool = False
    start: int = 1

    @property
    def kind(self) -> Literal["bullet", "ordered"]:
        """The list family."""
        return "ordered" if self.ordered else "bullet"


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Single-line block quote.

    Markdown: > quoted text

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class ThematicBreak(Node):
    """Horizontal rule.

    Markdown: --- or *** alone on a line

    """


@dataclass(frozen=True, slots=True)
class Spacer(Node):
    """Vertical gap standing for a run of blank lines.

    ``count`` is the number of consecutive blank source lines (>= 1).

    """

    count: int


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root document node."""

    children: tuple[Block, ...]


type Block = (
    Document
    | Heading
    | Paragraph
    | List
    | ListItem
    | BlockQuote
    | ThematicBreak
    | Spacer
)

"""Inline span formatting.

Turns the text of one line into a tuple of inline nodes by repeatedly
applying a fixed, precedence-ordered table of span patterns.

Precedence is table order, not leftmost match: on each step the first
pattern in ``SPAN_PATTERNS`` that matches anywhere in the remaining text
wins, and its earliest occurrence is used. Text before the match is
emitted as plain text right away, so ``**a** *b*`` yields Strong then
Emphasis, but in ``*b* **a**`` the Strong span wins the first step and
``*b* `` is emitted literally.

Thread Safety:
The pattern table is an immutable module-level tuple of compiled regexes.
All per-call state is local.

"""

from __future__ import annotations

import re
from collections.abc import Callable

from mdexport.location import SourceLocation
from mdexport.nodes import (
    CodeSpan,
    Emphasis,
    Inline,
    Link,
    Strong,
    StrongEmphasis,
    Text,
)

type SpanFactory = Callable[[re.Match[str], SourceLocation], Inline]


def _strong_emphasis(match: re.Match[str], loc: SourceLocation) -> Inline:
    return StrongEmphasis(location=loc, children=(_text_child(match, 1, loc),))


def _strong(match: re.Match[str], loc: SourceLocation) -> Inline:
    return Strong(location=loc, children=(_text_child(match, 1, loc),))


def _emphasis(match: re.Match[str], loc: SourceLocation) -> Inline:
    return Emphasis(location=loc, children=(_text_child(match, 1, loc),))


def _code(match: re.Match[str], loc: SourceLocation) -> Inline:
    return CodeSpan(location=loc, code=match.group(1))


def _link(match: re.Match[str], loc: SourceLocation) -> Inline:
    return Link(location=loc, url=match.group(2), children=(_text_child(match, 1, loc),))


def _text_child(match: re.Match[str], group: int, loc: SourceLocation) -> Text:
    offset = match.start(group) - match.start()
    content = match.group(group)
    return Text(location=loc.shifted(offset, len(content)), content=content)


# Order is precedence. Captures are non-greedy and non-empty, so "**" or
# "``" alone never match and fall through to later patterns or plain text.
SPAN_PATTERNS: tuple[tuple[re.Pattern[str], SpanFactory], ...] = (
    (re.compile(r"\*\*\*(.+?)\*\*\*"), _strong_emphasis),
    (re.compile(r"\*\*_(.+?)_\*\*"), _strong_emphasis),
    (re.compile(r"\*\*(.+?)\*\*"), _strong),
    (re.compile(r"_(.+?)_"), _emphasis),
    (re.compile(r"\*(.+?)\*"), _emphasis),
    (re.compile(r"`(.+?)`"), _code),
    (re.compile(r"\[(.+?)\]\((.+?)\)"), _link),
)


def find_span(text: str) -> tuple[re.Match[str], SpanFactory] | None:
    """Return the winning match for ``text`` and its factory, if any."""
    for pattern, factory in SPAN_PATTERNS:
        match = pattern.search(text)
        if match is not None:
            return match, factory
    return None


def format_inline(
    text: str,
    *,
    location: SourceLocation | None = None,
) -> tuple[Inline, ...]:
    """Format one line of text into inline nodes.

    Args:
        text: Raw line content (block marker already removed)
        location: Location of the first character of ``text``

    Returns:
        Inline nodes in source order. Empty input gives an empty tuple.

    Example:
        >>> [type(n).__name__ for n in format_inline("**a** and *b*")]
        ['Strong', 'Text', 'Emphasis']

    """
    base = location or SourceLocation.unknown()
    nodes: list[Inline] = []
    consumed = 0
    remaining = text

    while remaining:
        found = find_span(remaining)
        if found is None:
            nodes.append(Text(location=base.shifted(consumed, len(remaining)), content=remaining))
            break

        match, factory = found
        start, end = match.span()
        if start > 0:
            nodes.append(
                Text(location=base.shifted(consumed, start), content=remaining[:start])
            )
        nodes.append(factory(match, base.shifted(consumed + start, end - start)))

        consumed += end
        remaining = remaining[end:]

    return tuple(nodes)

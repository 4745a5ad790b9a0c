"""Accumulator for the list currently being grouped.

Consecutive items of the same family are appended to one OpenList; the
parser closes it into an immutable ``List`` node when the family changes,
a non-list line arrives, a blank run is flushed, or input ends.

Thread Safety:
OpenList instances are local to one Parser.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from mdexport.location import SourceLocation
from mdexport.nodes import Inline, List, ListItem


@dataclass(slots=True)
class OpenList:
    """Mutable state of a list that is still accepting items.

    Attributes:
        ordered: List family (True for ``1.`` markers, False for ``-``/``*``)
        location: Location of the first item
        items: Items collected so far

    """

    ordered: bool
    location: SourceLocation
    items: list[ListItem] = field(default_factory=list)

    def accepts(self, ordered: bool) -> bool:
        """Whether an item of the given family continues this list."""
        return self.ordered == ordered

    def add_item(self, children: tuple[Inline, ...], location: SourceLocation) -> ListItem:
        """Append an item; its position is its 1-based index in the list."""
        item = ListItem(location=location, children=children, position=len(self.items) + 1)
        self.items.append(item)
        return item

    def close(self) -> List:
        """Freeze the collected items into a List node."""
        return List(location=self.location, items=tuple(self.items), ordered=self.ordered)

"""HTML parsing with CSS-selector queries for plugins."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag


class Selection:
    """An ordered set of elements matched by a query."""

    def __init__(self, nodes: Iterable[Tag] = ()) -> None:
        unique: list[Tag] = []
        seen: set[int] = set()
        for node in nodes:
            if id(node) not in seen:
                seen.add(id(node))
                unique.append(node)
        self._nodes = tuple(unique)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Selection({len(self._nodes)} nodes)"

    def text(self) -> str:
        """Combined text content of every element, descendants included."""
        return "".join(node.get_text() for node in self._nodes)

    def html(self) -> str:
        """Inner HTML of the first element, or an empty string."""
        if not self._nodes:
            return ""
        return "".join(str(child) for child in self._nodes[0].contents)

    def find(self, selector: str) -> Selection:
        """Descendants of the elements that match ``selector``."""
        return Selection(match for node in self._nodes for match in node.select(selector))

    def first(self) -> Selection:
        return Selection(self._nodes[:1])

    def last(self) -> Selection:
        return Selection(self._nodes[-1:])

    def each(self, func: Callable[[int, Selection], Any]) -> None:
        """Call ``func`` with a 1-based index and a selection of each element."""
        for index, node in enumerate(self._nodes, start=1):
            func(index, Selection([node]))

    def attr(self, name: str) -> Optional[str]:
        """Value of attribute ``name`` on the first element, or None."""
        if not self._nodes:
            return None
        value = self._nodes[0].get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def eq(self, index: int) -> Selection:
        """The element at ``index``; negative indexes count from the end."""
        if index < 0:
            index += len(self._nodes)
        if 0 <= index < len(self._nodes):
            return Selection([self._nodes[index]])
        return Selection()


class Document:
    """A parsed HTML document."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    def find(self, selector: str) -> Selection:
        """Elements of the document that match ``selector``."""
        return Selection(self._soup.select(selector))


def parse(text: str) -> Document:
    """Parse HTML text into a document."""
    return Document(BeautifulSoup(text, "html.parser", multi_valued_attributes=None))
"""Document parser adapter.

Extraction code only talks to parsed markup through :class:`MarkupNode` and
:class:`DocumentParser`, so any tree library offering the same capabilities
can be substituted. The default implementation wraps BeautifulSoup.

Rules:
- Comments, doctypes, CDATA and processing instructions are not content and
  are never exposed as children
- ``remove()`` detaches a subtree; the detached node stays usable
"""

from __future__ import annotations

from typing import Optional, Protocol

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from ..domain.errors import MarkupParseError


class MarkupNode(Protocol):
    @property
    def is_text(self) -> bool: ...

    @property
    def tag_name(self) -> str:
        """Lower-cased tag name; empty for text nodes and the document root."""
        ...

    @property
    def raw_text(self) -> str:
        """Character data of a text node, or the concatenated text of an element."""
        ...

    @property
    def parent(self) -> Optional["MarkupNode"]: ...

    def children(self) -> list["MarkupNode"]: ...

    def get_attribute(self, name: str) -> Optional[str]: ...

    def select(self, selector: str) -> list["MarkupNode"]: ...

    def select_one(self, selector: str) -> Optional["MarkupNode"]: ...

    def remove(self) -> None: ...


class DocumentParser(Protocol):
    def parse(self, markup: str) -> MarkupNode: ...


class SoupNode:
    """:class:`MarkupNode` over a BeautifulSoup element."""

    __slots__ = ("_element",)

    def __init__(self, element: PageElement):
        self._element = element

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SoupNode) and other._element is self._element

    def __hash__(self) -> int:
        return id(self._element)

    def __repr__(self) -> str:
        if self.is_text:
            return f"SoupNode(text={str(self._element)[:40]!r})"
        return f"SoupNode(<{self.tag_name or '#document'}>)"

    @property
    def is_text(self) -> bool:
        return isinstance(self._element, NavigableString)

    @property
    def tag_name(self) -> str:
        el = self._element
        if isinstance(el, BeautifulSoup) or not isinstance(el, Tag):
            return ""
        return (el.name or "").lower()

    @property
    def raw_text(self) -> str:
        el = self._element
        if isinstance(el, NavigableString):
            return str(el)
        return el.get_text()

    @property
    def parent(self) -> Optional["SoupNode"]:
        parent = self._element.parent
        return SoupNode(parent) if parent is not None else None

    def children(self) -> list["SoupNode"]:
        el = self._element
        if not isinstance(el, Tag):
            return []
        return [SoupNode(child) for child in el.children if _is_content(child)]

    def get_attribute(self, name: str) -> Optional[str]:
        el = self._element
        if not isinstance(el, Tag):
            return None
        value = el.get(name)
        if value is None:
            return None
        # Multi-valued attributes (class, rel, ...) come back as lists.
        if isinstance(value, (list, tuple)):
            return " ".join(value)
        return str(value)

    def select(self, selector: str) -> list["SoupNode"]:
        el = self._element
        if not isinstance(el, Tag):
            return []
        return [SoupNode(found) for found in el.select(selector)]

    def select_one(self, selector: str) -> Optional["SoupNode"]:
        el = self._element
        if not isinstance(el, Tag):
            return None
        found = el.select_one(selector)
        return SoupNode(found) if found is not None else None

    def remove(self) -> None:
        self._element.extract()


def _is_content(element: PageElement) -> bool:
    if isinstance(element, Tag):
        return True
    return isinstance(element, NavigableString) and not isinstance(element, PreformattedString)


class SoupDocumentParser:
    """Builds :class:`SoupNode` trees with the given BeautifulSoup tree builder."""

    def __init__(self, features: str = "html.parser"):
        self._features = features

    @property
    def features(self) -> str:
        return self._features

    def parse(self, markup: str) -> SoupNode:
        try:
            soup = BeautifulSoup(markup, self._features)
        except FeatureNotFound as e:
            raise MarkupParseError("parser_unavailable", detail=self._features) from e
        except Exception as e:
            raise MarkupParseError("markup_unparseable", detail=f"{type(e).__name__}: {e}") from e
        return SoupNode(soup)

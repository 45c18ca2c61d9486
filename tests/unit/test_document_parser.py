from __future__ import annotations

import pytest

from eventscan.domain.errors import MarkupParseError
from eventscan.parsing.document import SoupDocumentParser


def test_children_skip_comments_and_keep_text() -> None:
    root = SoupDocumentParser().parse("<div>Hi<!-- hidden --><b>there</b></div>")
    div = root.select_one("div")
    assert div is not None
    kids = div.children()
    assert [k.is_text for k in kids] == [True, False]
    assert kids[0].raw_text == "Hi"
    assert kids[1].tag_name == "b"


def test_document_root_has_no_tag_name() -> None:
    root = SoupDocumentParser().parse("<p>x</p>")
    assert root.tag_name == ""
    assert root.parent is None


def test_get_attribute_joins_multi_valued_attributes() -> None:
    root = SoupDocumentParser().parse('<a class="btn btn-primary" aria-label="Go">x</a>')
    a = root.select_one("a")
    assert a is not None
    assert a.get_attribute("class") == "btn btn-primary"
    assert a.get_attribute("aria-label") == "Go"
    assert a.get_attribute("missing") is None


def test_remove_detaches_subtree() -> None:
    root = SoupDocumentParser().parse("<div><span>gone</span><p>kept</p></div>")
    span = root.select_one("span")
    assert span is not None
    span.remove()
    assert root.select_one("span") is None
    assert span.raw_text == "gone"


def test_unknown_tree_builder_raises_markup_parse_error() -> None:
    with pytest.raises(MarkupParseError):
        SoupDocumentParser("no-such-builder").parse("<p>x</p>")

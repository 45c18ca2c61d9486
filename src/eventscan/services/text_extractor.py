"""Block-aware plain-text rendering of markup trees.

Output follows the visual convention of the events site:
- children of block elements are separated by a blank line (``\\n\\n``)
- children of inline elements are separated by a single space
- every ``<br>`` contributes its own ``\\n``, so ``<br><br>`` yields a blank line
"""

from __future__ import annotations

import re
from typing import Any, Iterator, Optional

from ..parsing.document import MarkupNode
from ..parsing.entities import decode_entities

BLOCK_TAGS = frozenset({"div", "p", "br", "li", "tr", "h1", "h2", "h3", "h4", "h5", "h6"})

BLOCK_SEPARATOR = "\n\n"
INLINE_SEPARATOR = " "

_HORIZONTAL_WS = re.compile(r"[ \t]+")
_WS_AROUND_NEWLINE = re.compile(r"[ \t]*\n[ \t]*")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def _clean_text_node(raw: str) -> str:
    return _HORIZONTAL_WS.sub(" ", raw.replace("\u00a0", " ")).strip()


def _leaf_text(node: MarkupNode) -> Optional[str]:
    """Rendered text for nodes that need no recursion, else ``None``."""
    if node.is_text:
        return _clean_text_node(node.raw_text)
    if node.tag_name == "br":
        return "\n"
    return None


class _Frame:
    __slots__ = ("separator", "parts", "_pending")

    def __init__(self, node: MarkupNode):
        self.separator = BLOCK_SEPARATOR if node.tag_name in BLOCK_TAGS else INLINE_SEPARATOR
        self.parts: list[str] = []
        self._pending: Iterator[MarkupNode] = iter(node.children())

    def next_child(self) -> Optional[MarkupNode]:
        return next(self._pending, None)

    def add(self, text: str) -> None:
        if text:
            self.parts.append(text)

    def render(self) -> str:
        return self.separator.join(self.parts).strip()


def extract_text(node: MarkupNode) -> str:
    """Render ``node`` to plain text without mutating it.

    Walks the tree with an explicit stack, so arbitrarily deep markup does not
    grow the interpreter call stack.
    """
    leaf = _leaf_text(node)
    if leaf is not None:
        return leaf

    stack: list[_Frame] = [_Frame(node)]
    while True:
        frame = stack[-1]
        child = frame.next_child()
        if child is None:
            stack.pop()
            rendered = frame.render()
            if not stack:
                return rendered
            stack[-1].add(rendered)
            continue

        leaf = _leaf_text(child)
        if leaf is None:
            stack.append(_Frame(child))
        else:
            frame.add(leaf)


def _collapse_whitespace(text: str) -> str:
    text = _HORIZONTAL_WS.sub(" ", text)
    text = _WS_AROUND_NEWLINE.sub("\n", text)
    return _EXCESS_NEWLINES.sub("\n\n", text)


def normalize_description(raw_text: Any) -> str:
    """Clean extractor output into the final description text.

    Collapses space/tab runs, trims spaces around newlines, caps newline runs at
    a blank line, then decodes entities. Entities can decode to whitespace
    (``&nbsp;``), so the whitespace pass is repeated afterwards to keep the
    result stable under re-normalization.
    """
    if not isinstance(raw_text, str) or not raw_text:
        return ""
    text = _collapse_whitespace(raw_text)
    text = decode_entities(text)
    return _collapse_whitespace(text).strip()

"""Event category tags from aria-label attributes."""

from __future__ import annotations

import re
from typing import Any, Iterable

from ..parsing.document import DocumentParser, SoupDocumentParser

CATEGORY_SEPARATOR = " / "

_SPOKEN_SLASH = re.compile(r"\s+slash\s+", flags=re.IGNORECASE)
_SLASH = re.compile(r"\s*/\s*")
_WS = re.compile(r"\s+")


def clean_label(label: str) -> str:
    """``"Lecture slash Presentation"`` -> ``"Lecture / Presentation"``."""
    label = _SPOKEN_SLASH.sub(CATEGORY_SEPARATOR, label)
    label = _SLASH.sub(CATEGORY_SEPARATOR, label)
    return _WS.sub(" ", label).strip()


def join_unique_labels(labels: Iterable[str]) -> str:
    """Join labels, dropping case-insensitive repeats; first spelling wins."""
    seen: set[str] = set()
    unique: list[str] = []
    for label in labels:
        key = label.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(label)
    return CATEGORY_SEPARATOR.join(unique)


class CategoryExtractor:
    def __init__(self, parser: DocumentParser | None = None):
        self._parser = parser or SoupDocumentParser()

    def extract(self, html: Any) -> str:
        if not isinstance(html, str) or not html:
            return ""

        root = self._parser.parse(html)
        labels = []
        for el in root.select("[aria-label]"):
            raw = (el.get_attribute("aria-label") or "").strip()
            if raw:
                labels.append(clean_label(raw))
        return join_unique_labels(labels)


def extract_category(html: Any, parser: DocumentParser | None = None) -> str:
    return CategoryExtractor(parser).extract(html)

"""Rule-based event classification (free food, housing-only eligibility)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional

from ..domain.models import ClassificationResult
from .keywords import (
    FREE_FOOD_KEYWORDS,
    HOUSING_CATEGORIES,
    HOUSING_ONLY_MARKERS,
    RA_WORD_PATTERN,
)


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class ClassifierRules:
    """Immutable rule tables; pass a custom instance to swap in fixtures."""

    free_food_keywords: tuple[str, ...] = FREE_FOOD_KEYWORDS
    housing_markers: tuple[str, ...] = HOUSING_ONLY_MARKERS
    housing_categories: tuple[str, ...] = HOUSING_CATEGORIES
    housing_word_pattern: str = RA_WORD_PATTERN
    keyword_needles: tuple[str, ...] = field(init=False, repr=False, compare=False)
    marker_needles: tuple[str, ...] = field(init=False, repr=False, compare=False)
    housing_word: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "keyword_needles", tuple(k.lower() for k in self.free_food_keywords))
        object.__setattr__(self, "marker_needles", tuple(m.lower() for m in self.housing_markers))
        object.__setattr__(self, "housing_word", re.compile(self.housing_word_pattern, re.IGNORECASE))


DEFAULT_RULES = ClassifierRules()


class EventClassifier:
    """Evaluates normalized descriptions against :class:`ClassifierRules`.

    Every method is total: non-string input is treated as empty text.
    """

    def __init__(self, rules: ClassifierRules | None = None):
        self._rules = rules or DEFAULT_RULES

    @property
    def rules(self) -> ClassifierRules:
        return self._rules

    def matched_keywords(self, text: Any) -> tuple[str, ...]:
        lowered = _as_text(text).lower()
        rules = self._rules
        return tuple(
            original
            for original, keyword in zip(rules.free_food_keywords, rules.keyword_needles)
            if keyword in lowered
        )

    def has_free_food(self, text: Any) -> bool:
        lowered = _as_text(text).lower()
        return any(keyword in lowered for keyword in self._rules.keyword_needles)

    def has_housing_marker(self, description: Any) -> bool:
        text = _as_text(description)
        lowered = text.lower()
        if any(marker in lowered for marker in self._rules.marker_needles):
            return True
        return self._rules.housing_word.search(text) is not None

    def is_housing_category(self, category: Any) -> bool:
        # Case-sensitive, unlike the description markers.
        text = _as_text(category)
        if not text:
            return False
        return any(name in text for name in self._rules.housing_categories)

    def is_housing_only(self, description: Any, category: Optional[str] = None) -> bool:
        return self.has_housing_marker(description) or self.is_housing_category(category)

    def classify(self, description: Any, category: Optional[str] = None) -> ClassificationResult:
        matches = self.matched_keywords(description)
        return ClassificationResult(
            has_free_food=bool(matches),
            is_housing_only=self.is_housing_only(description, category),
            matched_keywords=matches,
        )


_default_classifier = EventClassifier()


def has_free_food(text: Any) -> bool:
    return _default_classifier.has_free_food(text)


def matched_keywords(text: Any) -> tuple[str, ...]:
    return _default_classifier.matched_keywords(text)


def is_housing_only(description: Any, category: Optional[str] = None) -> bool:
    return _default_classifier.is_housing_only(description, category)


def is_housing_category(category: Any) -> bool:
    return _default_classifier.is_housing_category(category)

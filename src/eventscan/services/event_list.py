"""Events list endpoint items -> :class:`EventSummary`, plus detail enrichment."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from ..classification.classifier import EventClassifier
from ..domain.models import EnrichedEvent, EventDetails, EventSummary
from .category_extractor import CategoryExtractor
from .date_extractor import DateExtractor

DEFAULT_BASE_URL = "https://engage.usc.edu"


def _str_field(item: Mapping[str, Any], key: str) -> str:
    value = item.get(key)
    if value is None:
        return ""
    return str(value)


def is_valid_event_item(item: Any) -> bool:
    """Real events only: not hidden, has id and title, not a date separator row."""
    if not isinstance(item, Mapping):
        return False
    return (
        item.get("p0") == "false"
        and bool(item.get("p1"))
        and bool(item.get("p3"))
        and item.get("listingSeparator") != "true"
    )


class EventListMapper:
    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        date_extractor: DateExtractor | None = None,
        category_extractor: CategoryExtractor | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._dates = date_extractor or DateExtractor()
        self._categories = category_extractor or CategoryExtractor()

    def map_item(self, item: Mapping[str, Any]) -> EventSummary:
        image_path = _str_field(item, "p11")
        return EventSummary(
            id=_str_field(item, "p1"),
            title=_str_field(item, "p3"),
            dates=self._dates.parse(item.get("p4")).display,
            location=_str_field(item, "p6") or "Location TBA",
            image_url=f"{self._base_url}{image_path}" if image_path else None,
            organizer=_str_field(item, "p9") or "Unknown",
            category=self._categories.extract(item.get("p22")),
            detail_url=f"{self._base_url}{_str_field(item, 'p18')}",
            attendees=_str_field(item, "p10") or "0",
        )

    def map_items(self, items: Iterable[Any]) -> list[EventSummary]:
        return [self.map_item(item) for item in items if is_valid_event_item(item)]


def enrich_event(
    summary: EventSummary,
    details: EventDetails,
    *,
    classifier: EventClassifier | None = None,
    now: datetime | None = None,
) -> EnrichedEvent:
    """Merge a list summary with its detail scan; housing category also marks housing-only."""
    classifier = classifier or EventClassifier()
    scanned_at = now or datetime.now(tz=timezone.utc)
    return EnrichedEvent(
        summary=summary,
        description=details.description,
        has_free_food=details.has_free_food,
        is_housing_only=details.is_housing_only or classifier.is_housing_category(summary.category),
        last_scanned_at=scanned_at.isoformat(),
    )

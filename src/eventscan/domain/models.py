"""Framework-agnostic domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class DateInfo:
    """Parsed event date.

    ``display`` is derived from ``instant`` when parsing succeeded, otherwise it
    is the cleaned, unparsed text of the fragment.
    """

    instant: Optional[datetime]
    display: str


@dataclass(frozen=True)
class ClassificationResult:
    has_free_food: bool
    is_housing_only: bool
    matched_keywords: tuple[str, ...] = ()


@dataclass(frozen=True)
class EventDetails:
    description: str
    has_free_food: bool
    is_housing_only: bool


@dataclass(frozen=True)
class EventSummary:
    """One event from the events list endpoint."""

    id: str
    title: str
    dates: str
    location: str
    image_url: Optional[str]
    organizer: str
    category: str
    detail_url: str
    attendees: str


@dataclass(frozen=True)
class EnrichedEvent:
    summary: EventSummary
    description: str
    has_free_food: bool
    is_housing_only: bool
    last_scanned_at: str
    scanned: bool = True

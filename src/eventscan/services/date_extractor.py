"""Event date text extraction and display formatting."""

from __future__ import annotations

import re
from datetime import datetime, tzinfo
from typing import Any, Optional

from dateutil import parser as date_parser
from dateutil import tz

from ..domain.models import DateInfo
from ..parsing.document import DocumentParser, SoupDocumentParser
from ..parsing.entities import decode_entities

_WS = re.compile(r"\s+")
_TRAILING_DASH = re.compile(r"\s*[–-]\s*$")

# Abbreviations dateutil cannot resolve on its own.
US_TZINFOS: dict[str, tzinfo] = {
    "EST": tz.tzoffset("EST", -5 * 3600),
    "EDT": tz.tzoffset("EDT", -4 * 3600),
    "CST": tz.tzoffset("CST", -6 * 3600),
    "CDT": tz.tzoffset("CDT", -5 * 3600),
    "MST": tz.tzoffset("MST", -7 * 3600),
    "MDT": tz.tzoffset("MDT", -6 * 3600),
    "PST": tz.tzoffset("PST", -8 * 3600),
    "PDT": tz.tzoffset("PDT", -7 * 3600),
}


def format_event_date(value: datetime) -> str:
    """Render like ``Thu, Feb 20, 2025, 6:00 PM``.

    Weekday, month and AM/PM names come from the process locale.
    """
    hour = value.hour % 12 or 12
    return f"{value:%a}, {value:%b} {value.day}, {value.year}, {hour}:{value:%M} {value:%p}"


# dateutil fills absent fields from ``default``. Results that differ between
# these two came partly from the default. Time of day is shared, so date-only
# text still parses (midnight).
_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_event_datetime(text: str) -> Optional[datetime]:
    """Parse ``text`` only if it names a full calendar date.

    Time-only, weekday-only or partial dates yield ``None`` rather than being
    completed from the clock.
    """
    if not text:
        return None
    try:
        first, second = (
            date_parser.parse(text, default=default, tzinfos=US_TZINFOS)
            for default in _FILL_DEFAULTS
        )
    except (ValueError, OverflowError):
        return None
    if first != second:
        return None
    return first


class DateExtractor:
    def __init__(
        self,
        parser: DocumentParser | None = None,
        *,
        display_timezone: str | None = None,
    ):
        self._parser = parser or SoupDocumentParser()
        self._display_tz = tz.gettz(display_timezone) if display_timezone else None

    def extract_text(self, html: Any) -> str:
        """Cleaned date text: paragraphs joined, whitespace collapsed, trailing dash dropped."""
        if not isinstance(html, str) or not html:
            return ""

        # Decode first so &ndash; is a literal dash by the time we strip it.
        root = self._parser.parse(decode_entities(html))
        paragraphs = root.select("p")
        if paragraphs:
            text = " ".join(t for t in (p.raw_text.strip() for p in paragraphs) if t)
        else:
            text = root.raw_text
        text = _WS.sub(" ", text).strip()
        return _TRAILING_DASH.sub("", text).strip()

    def parse(self, html: Any) -> DateInfo:
        cleaned = self.extract_text(html)
        instant = parse_event_datetime(cleaned)
        if instant is None:
            return DateInfo(instant=None, display=cleaned)

        shown = instant
        if instant.tzinfo is not None and self._display_tz is not None:
            shown = instant.astimezone(self._display_tz)
        return DateInfo(instant=instant, display=format_event_date(shown))


def extract_date_text(html: Any, parser: DocumentParser | None = None) -> str:
    return DateExtractor(parser).extract_text(html)


def parse_date_info(html: Any, parser: DocumentParser | None = None) -> DateInfo:
    return DateExtractor(parser).parse(html)

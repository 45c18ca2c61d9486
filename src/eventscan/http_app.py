"""FastAPI app (internal-only).

Thin HTTP surface over the extraction core for the batch scanner and local
debugging. Callers fetch the markup; this service never talks to the events
platform itself.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException

from .config.settings import get_settings
from .domain.errors import InvalidInputError, MarkupParseError
from .domain.models import ClassificationResult, DateInfo, EventDetails, EventSummary
from .lifespan import app_state
from .models.requests import ClassifyRequest, EventDetailsRequest, FragmentRequest, MapEventsRequest
from .observability.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(title="Engage Event Scanner", version="0.1.0")


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


def _service(name: str) -> Any:
    service = app_state.get(name)
    if service is None:
        raise HTTPException(status_code=503, detail=f"{name}_unavailable")
    return service


def _ensure_markup_size(html: str) -> None:
    limit = get_settings().max_markup_bytes
    size = len(html.encode("utf-8"))
    if size > limit:
        raise InvalidInputError("markup_too_large", detail=f"{size} > {limit} bytes")


def _serialize_details(details: EventDetails) -> dict:
    return {
        "description": details.description,
        "hasFreeFood": details.has_free_food,
        "isHousingOnly": details.is_housing_only,
    }


def _serialize_date(info: DateInfo) -> dict:
    return {
        "instant": info.instant.isoformat() if info.instant else None,
        "display": info.display,
    }


def _serialize_classification(result: ClassificationResult) -> dict:
    return {
        "hasFreeFood": result.has_free_food,
        "isHousingOnly": result.is_housing_only,
        "matchedKeywords": list(result.matched_keywords),
    }


def _serialize_summary(summary: EventSummary) -> dict:
    return {
        "id": summary.id,
        "title": summary.title,
        "dates": summary.dates,
        "location": summary.location,
        "imageUrl": summary.image_url,
        "organizer": summary.organizer,
        "category": summary.category,
        "detailUrl": summary.detail_url,
        "attendees": summary.attendees,
    }


def _run(operation: str, fn, *args, **kwargs):
    try:
        return fn(*args, **kwargs)
    except InvalidInputError as exc:
        raise HTTPException(status_code=400, detail=exc.info.message) from exc
    except MarkupParseError as exc:
        logger.warning("markup_parse_failed", operation=operation, error=str(exc), detail=exc.info.detail)
        raise HTTPException(status_code=422, detail=exc.info.message) from exc


def _extract_details(payload: EventDetailsRequest) -> EventDetails:
    _ensure_markup_size(payload.html)
    return _service("event_scanner").scan_html(payload.html, event_id=payload.eventId)


@app.post("/api/v1/extract/event-details")
def extract_event_details(payload: EventDetailsRequest) -> dict:
    details = _run("event_details", _extract_details, payload)
    return _serialize_details(details)


def _extract_category(payload: FragmentRequest) -> str:
    _ensure_markup_size(payload.html)
    return _service("category_extractor").extract(payload.html)


@app.post("/api/v1/extract/category")
def extract_category(payload: FragmentRequest) -> dict:
    return {"category": _run("category", _extract_category, payload)}


def _extract_date(payload: FragmentRequest) -> DateInfo:
    _ensure_markup_size(payload.html)
    return _service("date_extractor").parse(payload.html)


@app.post("/api/v1/extract/date")
def extract_date(payload: FragmentRequest) -> dict:
    return _serialize_date(_run("date", _extract_date, payload))


@app.post("/api/v1/classify")
def classify(payload: ClassifyRequest) -> dict:
    result = _service("classifier").classify(payload.description, payload.category)
    return _serialize_classification(result)


@app.post("/api/v1/events/map")
def map_events(payload: MapEventsRequest) -> dict:
    summaries = _run("events_map", _service("event_list_mapper").map_items, payload.items)
    return {"events": [_serialize_summary(s) for s in summaries]}

"""Request models for the internal extraction API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class EventDetailsRequest(BaseModel):
    html: str
    eventId: Optional[str] = None

    @field_validator("eventId")
    @classmethod
    def validate_event_id(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None


class FragmentRequest(BaseModel):
    html: str = ""


class ClassifyRequest(BaseModel):
    description: str = ""
    category: Optional[str] = None


class MapEventsRequest(BaseModel):
    items: List[Dict[str, Any]] = Field(default_factory=list)

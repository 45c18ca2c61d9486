from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from eventscan.config.settings import get_settings, reset_settings
from eventscan.http_app import app
from eventscan.lifespan import app_state, build_services


@pytest.fixture()
def client():
    reset_settings()
    app_state.update(build_services(get_settings()))
    try:
        yield TestClient(app)
    finally:
        app_state.clear()
        reset_settings()


def test_healthz(client: TestClient) -> None:
    assert client.get("/healthz").json() == {"status": "ok"}


def test_extract_event_details(client: TestClient) -> None:
    html = '<div id="event_details"><div class="card-block"><p>Free boba!</p><button>Go</button></div></div>'
    resp = client.post("/api/v1/extract/event-details", json={"html": html, "eventId": " 77 "})
    assert resp.status_code == 200
    assert resp.json() == {"description": "Free boba!", "hasFreeFood": True, "isHousingOnly": False}


def test_extract_category_and_date(client: TestClient) -> None:
    resp = client.post("/api/v1/extract/category", json={"html": '<b aria-label="Arts slash Crafts"></b>'})
    assert resp.json() == {"category": "Arts / Crafts"}

    resp = client.post("/api/v1/extract/date", json={"html": "<p>TBD</p>"})
    assert resp.json() == {"instant": None, "display": "TBD"}

    resp = client.post("/api/v1/extract/date", json={"html": "<p>Thu, Feb 20, 2025 6:00 PM</p>"})
    assert resp.json() == {"instant": "2025-02-20T18:00:00", "display": "Thu, Feb 20, 2025, 6:00 PM"}


def test_classify(client: TestClient) -> None:
    resp = client.post("/api/v1/classify", json={"description": "Snacks provided", "category": "RA Floor Program"})
    assert resp.json() == {
        "hasFreeFood": True,
        "isHousingOnly": True,
        "matchedKeywords": ["snacks provided", "snacks"],
    }


def test_map_events(client: TestClient) -> None:
    items = [
        {"p0": "false", "p1": "1", "p3": "Mixer", "p4": "<p>TBD</p>", "p18": "/rsvp?id=1"},
        {"p0": "false", "p1": "2", "p3": "Sep", "listingSeparator": "true"},
    ]
    resp = client.post("/api/v1/events/map", json={"items": items})
    events = resp.json()["events"]
    assert len(events) == 1
    assert events[0]["id"] == "1"
    assert events[0]["detailUrl"] == "https://engage.usc.edu/rsvp?id=1"
    assert events[0]["location"] == "Location TBA"


def test_markup_size_limit(client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENTSCAN_MAX_MARKUP_BYTES", "10")
    reset_settings()
    resp = client.post("/api/v1/extract/category", json={"html": "<p aria-label='x'>too long</p>"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "markup_too_large"


def test_missing_services_return_503() -> None:
    app_state.clear()
    resp = TestClient(app).post("/api/v1/classify", json={"description": "x"})
    assert resp.status_code == 503

from __future__ import annotations

import pytest
import structlog

from eventscan.config.settings import reset_settings
from eventscan.observability.logger import configure_logging


@pytest.fixture(autouse=True)
def _restore_structlog():
    reset_settings()
    yield
    structlog.reset_defaults()
    reset_settings()


def _renderer():
    return structlog.get_config()["processors"][-1]


def test_service_logs_are_json_by_default() -> None:
    configure_logging()
    assert isinstance(_renderer(), structlog.processors.JSONRenderer)


def test_console_format_for_local_runs() -> None:
    configure_logging(log_format="console", log_level="DEBUG")
    assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)


def test_log_format_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENTSCAN_LOG_FORMAT", "console")
    reset_settings()
    configure_logging()
    assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)


def test_unknown_log_format_is_rejected() -> None:
    with pytest.raises(ValueError):
        configure_logging(log_format="xml")


def test_service_name_is_added_to_events() -> None:
    configure_logging()
    add_service = structlog.get_config()["processors"][1]
    assert add_service(None, "info", {"event": "x"}) == {"event": "x", "service": "engage-event-scanner"}
    assert add_service(None, "info", {"event": "x", "service": "other"})["service"] == "other"

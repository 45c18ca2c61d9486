"""Structured logging for observability."""

from __future__ import annotations

import logging

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from ..config.settings import get_settings

LOG_FORMATS = ("json", "console")


def _service_name_adder(service_name: str) -> Processor:
    def add_service_name(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service_name)
        return event_dict

    return add_service_name


def configure_logging(*, log_format: str | None = None, log_level: str | None = None) -> None:
    """Configure structured logging.

    The service logs JSON lines (non-ASCII description text kept readable).
    ``console`` is for local runs such as ``scripts/extraction_report.py``.
    Arguments override the corresponding settings.
    """
    settings = get_settings()
    log_format = (log_format or settings.log_format).lower()
    if log_format not in LOG_FORMATS:
        raise ValueError(f"unknown log format: {log_format}")

    level = logging.getLevelName((log_level or settings.log_level).upper())
    if not isinstance(level, int):
        level = logging.INFO

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        _service_name_adder(settings.service_name),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None):
    return structlog.get_logger(name)

"""Application lifespan management (startup/shutdown hooks)."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from .classification.classifier import EventClassifier
from .config.settings import EventScanSettings, get_settings
from .observability.logger import configure_logging, get_logger
from .parsing.document import SoupDocumentParser
from .services.category_extractor import CategoryExtractor
from .services.date_extractor import DateExtractor
from .services.dom_pruner import DomPruner
from .services.event_list import EventListMapper
from .services.event_scanner import EventDetailsScanner

logger = get_logger(__name__)

# Shared, read-only service instances used by the HTTP layer.
app_state: dict[str, Any] = {}


def build_services(settings: EventScanSettings) -> dict[str, Any]:
    fragment_parser = SoupDocumentParser(settings.fragment_parser_features)
    classifier = EventClassifier()
    date_extractor = DateExtractor(fragment_parser, display_timezone=settings.display_timezone)
    category_extractor = CategoryExtractor(fragment_parser)

    return {
        "classifier": classifier,
        "date_extractor": date_extractor,
        "category_extractor": category_extractor,
        "event_scanner": EventDetailsScanner(
            parser=SoupDocumentParser(settings.page_parser_features),
            pruner=DomPruner(),
            classifier=classifier,
            card_selectors=settings.detail_card_selectors,
            missing_placeholder=settings.missing_description_placeholder,
            error_placeholder=settings.error_description_placeholder,
            log_keyword_matches=settings.log_keyword_matches,
        ),
        "event_list_mapper": EventListMapper(
            base_url=settings.engage_base_url,
            date_extractor=date_extractor,
            category_extractor=category_extractor,
        ),
    }


@asynccontextmanager
async def lifespan_manager():
    """Manage application lifespan (startup and shutdown)."""
    settings = get_settings()

    configure_logging()
    logger.info("starting_application", service_name=settings.service_name)

    app_state.update(build_services(settings))
    logger.info(
        "extraction_services_ready",
        page_parser=settings.page_parser_features,
        fragment_parser=settings.fragment_parser_features,
        card_selectors=settings.detail_card_selectors,
    )

    logger.info("application_started")
    try:
        yield
    finally:
        app_state.clear()
        logger.info("application_shutdown_complete")

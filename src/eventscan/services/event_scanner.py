"""Detail-page pipeline: locate card, prune, extract, normalize, classify."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from ..classification.classifier import EventClassifier
from ..classification.keywords import FREE_FOOD_KEYWORD_CONFIDENCE
from ..domain.errors import EventScanDomainError
from ..domain.models import EventDetails
from ..observability.logger import get_logger
from ..parsing.document import DocumentParser, MarkupNode, SoupDocumentParser
from .dom_pruner import DomPruner
from .text_extractor import extract_text, normalize_description

logger = get_logger(__name__)

DEFAULT_CARD_SELECTORS = ("#event_details .card-block",)
# Saved snippets often hold just the card, without the page around it.
SNIPPET_CARD_SELECTORS = DEFAULT_CARD_SELECTORS + (".card-block",)
NO_DESCRIPTION = "No description available"
DESCRIPTION_ERROR = "Error loading description"


class EventDetailsScanner:
    """Turns an event detail page into :class:`EventDetails`.

    Rules:
    - A page without a detail card is not an error (placeholder description)
    - Parser failures degrade to the error placeholder instead of aborting a batch
    """

    def __init__(
        self,
        *,
        parser: DocumentParser | None = None,
        pruner: DomPruner | None = None,
        classifier: EventClassifier | None = None,
        card_selectors: Sequence[str] = DEFAULT_CARD_SELECTORS,
        missing_placeholder: str = NO_DESCRIPTION,
        error_placeholder: str = DESCRIPTION_ERROR,
        log_keyword_matches: bool = False,
    ):
        self._parser = parser or SoupDocumentParser("lxml")
        self._pruner = pruner or DomPruner()
        self._classifier = classifier or EventClassifier()
        self._card_selectors = tuple(card_selectors)
        self._missing_placeholder = missing_placeholder
        self._error_placeholder = error_placeholder
        self._log_keyword_matches = log_keyword_matches

    @property
    def classifier(self) -> EventClassifier:
        return self._classifier

    def find_card(self, root: MarkupNode) -> Optional[MarkupNode]:
        for selector in self._card_selectors:
            card = root.select_one(selector)
            if card is not None:
                return card
        return None

    def describe_card(self, card: MarkupNode) -> str:
        self._pruner.prune(card)
        return normalize_description(extract_text(card))

    def scan_html(self, html: Any, *, event_id: str | None = None) -> EventDetails:
        if not isinstance(html, str) or not html.strip():
            return self._placeholder(self._missing_placeholder)

        try:
            root = self._parser.parse(html)
        except EventScanDomainError as e:
            logger.error("event_details_parse_failed", event_id=event_id, error=str(e))
            return self._placeholder(self._error_placeholder)

        card = self.find_card(root)
        if card is None:
            logger.info("event_details_card_missing", event_id=event_id)
            return self._placeholder(self._missing_placeholder)

        description = self.describe_card(card)
        result = self._classifier.classify(description)

        if self._log_keyword_matches:
            logger.debug(
                "free_food_matches",
                event_id=event_id,
                matches=[
                    {"keyword": k, "confidence": FREE_FOOD_KEYWORD_CONFIDENCE.get(k, "UNKNOWN")}
                    for k in result.matched_keywords
                ],
            )

        return EventDetails(
            description=description,
            has_free_food=result.has_free_food,
            is_housing_only=result.is_housing_only,
        )

    @staticmethod
    def _placeholder(text: str) -> EventDetails:
        return EventDetails(description=text, has_free_food=False, is_housing_only=False)


def scan_event_html(html: Any, *, event_id: str | None = None) -> EventDetails:
    return EventDetailsScanner().scan_html(html, event_id=event_id)

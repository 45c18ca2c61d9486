"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class EventScanSettings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service
    service_name: str = "engage-event-scanner"

    # FastAPI (internal-only extraction endpoints)
    http_enable: bool = True
    http_host: str = "127.0.0.1"
    http_port: int = 8000

    # Upstream events platform (used only to absolutize list-item links)
    engage_base_url: str = "https://engage.usc.edu"

    # Markup parsing
    # Full detail pages go through lxml; small list fragments use html.parser so
    # bare text and inline siblings are not re-wrapped into <p>/<body>.
    page_parser_features: str = "lxml"
    fragment_parser_features: str = "html.parser"
    max_markup_bytes: int = 2 * 1024 * 1024  # 2MB

    # Detail card lookup, first match wins
    detail_card_selectors: list[str] = ["#event_details .card-block"]

    # Placeholders substituted by the detail pipeline
    missing_description_placeholder: str = "No description available"
    error_description_placeholder: str = "Error loading description"

    # Date display (aware instants are converted here before formatting)
    display_timezone: str = "America/Los_Angeles"

    # Diagnostics
    log_keyword_matches: bool = False

    # Logging ("json" for the service, "console" for local runs)
    log_level: str = "INFO"
    log_format: str = "json"

    model_config = SettingsConfigDict(
        env_prefix="EVENTSCAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def validate(self) -> None:
        if self.http_port <= 0:
            raise ValueError("http_port must be > 0")
        if self.max_markup_bytes <= 0:
            raise ValueError("max_markup_bytes must be > 0")
        if not self.page_parser_features.strip():
            raise ValueError("page_parser_features must not be empty")
        if not self.fragment_parser_features.strip():
            raise ValueError("fragment_parser_features must not be empty")
        if not self.detail_card_selectors:
            raise ValueError("detail_card_selectors must not be empty")
        if self.log_format.lower() not in ("json", "console"):
            raise ValueError("log_format must be json or console")
        if not self.engage_base_url.startswith(("http://", "https://")):
            raise ValueError("engage_base_url must start with http:// or https://")


_settings: EventScanSettings | None = None


def get_settings() -> EventScanSettings:
    global _settings
    if _settings is None:
        _settings = EventScanSettings()
        _settings.validate()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None

"""Domain-specific errors.

These errors are mapped to HTTP status codes in the API layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class EventScanDomainError(Exception):
    """Base class for all domain errors."""


@dataclass(frozen=True)
class DomainErrorInfo:
    code: str
    message: str
    detail: Optional[str] = None


class InvalidInputError(EventScanDomainError):
    """Raised when request validation fails."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.info = DomainErrorInfo(code="INVALID_INPUT", message=message, detail=detail)


class MarkupParseError(EventScanDomainError):
    """Raised when the document parser cannot build a tree from the markup."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.info = DomainErrorInfo(code="MARKUP_PARSE_ERROR", message=message, detail=detail)


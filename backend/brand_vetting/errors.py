"""Error taxonomy for the brand vetting pipeline.

Every caller-visible failure derives from ``BrandVettingError`` and
carries the error code and HTTP status the API layer reports.
"""

from __future__ import annotations

from typing import Any, Optional


class BrandVettingError(Exception):
    """Base class for all pipeline failures surfaced to the caller."""

    code: str = "ANALYSIS_FAILED"
    status_code: int = 500

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(BrandVettingError):
    """Brand name is malformed or matches the fictitious-name deny-list.

    Reported as ``BRAND_NOT_FOUND`` with status 400; ``details["reason"]``
    tells the rejection kinds apart.
    """

    code = "BRAND_NOT_FOUND"
    status_code = 400

    def __init__(self, reason: str, message: str):
        super().__init__(message, details={"reason": reason})
        self.reason = reason


class NotFoundError(BrandVettingError):
    """Evidence is insufficient or irrelevant to score the brand."""

    code = "BRAND_NOT_FOUND"
    status_code = 404


class EvidenceGatheringError(BrandVettingError):
    """The evidence source failed for every query (transport-level)."""

    code = "ANALYSIS_FAILED"
    status_code = 500


class EvidenceSourceUnavailable(Exception):
    """Raised by an evidence source when a query cannot be served.

    Distinct from an empty result list, which means "nothing found".
    ``retryable`` marks transient conditions (timeouts, 429, 5xx).
    """

    def __init__(self, message: str, *, retryable: bool = False):
        super().__init__(message)
        self.retryable = retryable

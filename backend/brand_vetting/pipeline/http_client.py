"""
Async HTTP Client Configuration

Provides a shared httpx.AsyncClient with connection pooling, timeout
presets for each evidence provider, and the retry policy applied by the
evidence gatherer.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx

from ..errors import EvidenceSourceUnavailable


# Timeout configurations (in seconds)
class Timeouts:
    """Timeout presets for evidence providers."""
    TAVILY = 15.0
    DUCKDUCKGO = 8.0
    DEFAULT = 10.0
    CONNECT = 5.0


# Retryable status codes
RETRYABLE_CODES = {429, 500, 502, 503, 504}


@dataclass(frozen=True)
class RetryPolicy:
    """Explicit retry policy for outbound evidence queries.

    The default (one attempt) means a failed query is dropped, not retried.
    """

    max_attempts: int = 1
    base_delay: float = 0.5
    max_delay: float = 1.5

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.base_delay < 0 or self.max_delay < 0:
            raise ValueError("retry delays must be non-negative")

    def is_retryable(self, exc: BaseException) -> bool:
        return isinstance(exc, EvidenceSourceUnavailable) and exc.retryable

    def delay_for(self, attempt: int) -> float:
        """Backoff before retry number *attempt* (0-based)."""
        return min(self.base_delay * (2 ** attempt), self.max_delay)

    @classmethod
    def from_env(cls) -> "RetryPolicy":
        return cls(
            max_attempts=int(os.getenv("EVIDENCE_MAX_ATTEMPTS", "1")),
            base_delay=float(os.getenv("EVIDENCE_BASE_BACKOFF", "0.5")),
        )


# Shared client instance (lazily initialized)
_client: Optional[httpx.AsyncClient] = None


async def get_client() -> httpx.AsyncClient:
    """Get the shared async HTTP client."""
    global _client
    if _client is None:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(Timeouts.DEFAULT, connect=Timeouts.CONNECT),
            limits=httpx.Limits(max_keepalive_connections=10, max_connections=20),
            follow_redirects=True,
        )
    return _client


async def close_client():
    """Close the shared client (call on app shutdown)."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


def get_timeout(provider: str) -> httpx.Timeout:
    """Get timeout configuration for a provider."""
    timeouts = {
        "tavily": Timeouts.TAVILY,
        "duckduckgo": Timeouts.DUCKDUCKGO,
    }
    seconds = timeouts.get(provider.lower(), Timeouts.DEFAULT)
    return httpx.Timeout(seconds, connect=Timeouts.CONNECT)


def is_retryable_status(status_code: int) -> bool:
    """Check if an HTTP status is worth retrying."""
    return status_code in RETRYABLE_CODES

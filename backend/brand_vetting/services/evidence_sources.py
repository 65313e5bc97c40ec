"""Pluggable evidence sources.

An evidence source answers one search query with a list of
``{"title", "snippet", "link"}`` dicts.  Contract:

- ``[]`` means "nothing found" and is a normal outcome.
- ``EvidenceSourceUnavailable`` means the query could not be served
  (missing credentials, transport error, HTTP failure).

Sources never fabricate results.
"""

from __future__ import annotations

import abc
import logging
import os
from typing import Any, Dict, List, Optional

import httpx

from ..errors import EvidenceSourceUnavailable
from ..pipeline.http_client import get_client, get_timeout, is_retryable_status

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Tavily API configuration
# ---------------------------------------------------------------------------
_TAVILY_API_URL = "https://api.tavily.com/search"
_TAVILY_MAX_RESULTS = 5

# ---------------------------------------------------------------------------
# DuckDuckGo instant-answer configuration
# ---------------------------------------------------------------------------
_DDG_API_URL = "https://api.duckduckgo.com/"
_DDG_RELATED_TOPICS = 3
_DDG_USER_AGENT = "Mozilla/5.0 (compatible; BrandVettingBot/1.0)"


class EvidenceSource(abc.ABC):
    """Abstract search capability used by the evidence gatherer."""

    name: str = "evidence"

    @abc.abstractmethod
    async def search(self, query: str) -> List[Dict[str, str]]:
        """Return result dicts with ``title``, ``snippet`` and ``link`` keys."""


class _HttpEvidenceSource(EvidenceSource):
    """Shared HTTP plumbing: client injection and status handling."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        return self._client or await get_client()

    async def _send(self, method: str, url: str, **kwargs: Any) -> Any:
        client = await self._get_client()
        try:
            response = await client.request(method, url, timeout=get_timeout(self.name), **kwargs)
        except httpx.TimeoutException as exc:
            raise EvidenceSourceUnavailable(f"{self.name} timeout", retryable=True) from exc
        except httpx.HTTPError as exc:
            raise EvidenceSourceUnavailable(
                f"{self.name} transport error: {type(exc).__name__}", retryable=True
            ) from exc

        if response.status_code != 200:
            raise EvidenceSourceUnavailable(
                f"{self.name} HTTP {response.status_code}",
                retryable=is_retryable_status(response.status_code),
            )

        try:
            return response.json()
        except ValueError as exc:
            raise EvidenceSourceUnavailable(f"{self.name} returned invalid JSON") from exc


class TavilyEvidenceSource(_HttpEvidenceSource):
    """Tavily web search (``TAVILY_API_KEY``)."""

    name = "tavily"

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        max_results: int = _TAVILY_MAX_RESULTS,
    ):
        super().__init__(client)
        self._api_key = api_key
        self.max_results = max_results

    def _get_tavily_key(self) -> str:
        key = (self._api_key or os.getenv("TAVILY_API_KEY", "")).strip()
        if not key:
            raise EvidenceSourceUnavailable("TAVILY_API_KEY not set")
        return key

    async def search(self, query: str) -> List[Dict[str, str]]:
        payload = {
            "api_key": self._get_tavily_key(),
            "query": query,
            "search_depth": "basic",
            "max_results": self.max_results,
            "include_answer": False,
        }
        data = await self._send("POST", _TAVILY_API_URL, json=payload)

        results = []
        for r in data.get("results") or []:
            results.append(
                {
                    "title": r.get("title") or "",
                    "snippet": r.get("content") or "",
                    "link": r.get("url") or "",
                }
            )
        logger.debug("Tavily: %d results for %r", len(results), query)
        return results


class DuckDuckGoEvidenceSource(_HttpEvidenceSource):
    """DuckDuckGo instant-answer API (no key required)."""

    name = "duckduckgo"

    async def search(self, query: str) -> List[Dict[str, str]]:
        params = {
            "q": query,
            "format": "json",
            "no_html": "1",
            "skip_disambig": "1",
        }
        data = await self._send(
            "GET", _DDG_API_URL, params=params, headers={"User-Agent": _DDG_USER_AGENT}
        )
        if not isinstance(data, dict):
            return []

        results: List[Dict[str, str]] = []
        abstract = data.get("Abstract")
        if abstract:
            results.append(
                {
                    "title": data.get("Heading") or query,
                    "snippet": abstract,
                    "link": data.get("AbstractURL") or "",
                }
            )

        topics = data.get("RelatedTopics") or []
        for topic in topics[:_DDG_RELATED_TOPICS]:
            text = topic.get("Text") if isinstance(topic, dict) else None
            url = topic.get("FirstURL") if isinstance(topic, dict) else None
            if text and url:
                results.append(
                    {
                        "title": text.split(" - ")[0] or "Related Topic",
                        "snippet": text,
                        "link": url,
                    }
                )

        logger.debug("DuckDuckGo: %d results for %r", len(results), query)
        return results


class StaticEvidenceSource(EvidenceSource):
    """In-memory source for tests and offline runs.

    ``results`` maps exact query strings to result lists; ``default`` is
    returned for any other query.  Every query is recorded in ``calls``.
    """

    name = "static"

    def __init__(
        self,
        results: Optional[Dict[str, List[Dict[str, str]]]] = None,
        default: Optional[List[Dict[str, str]]] = None,
    ):
        self.results = results or {}
        self.default = default or []
        self.calls: List[str] = []

    async def search(self, query: str) -> List[Dict[str, str]]:
        self.calls.append(query)
        return list(self.results.get(query, self.default))


_PROVIDERS = {
    "tavily": TavilyEvidenceSource,
    "duckduckgo": DuckDuckGoEvidenceSource,
}


def get_evidence_source(provider: Optional[str] = None) -> EvidenceSource:
    """Return the evidence source selected by ``EVIDENCE_PROVIDER``."""
    provider = (provider or os.getenv("EVIDENCE_PROVIDER", "tavily")).strip().lower()
    try:
        return _PROVIDERS[provider]()
    except KeyError:
        raise ValueError(
            f"Unknown EVIDENCE_PROVIDER {provider!r}; expected one of {sorted(_PROVIDERS)}"
        ) from None

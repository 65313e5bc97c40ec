"""Evidence Gatherer.

Issues the 5 topic-scoped queries for a brand against an evidence
source and aggregates the returned snippets into an ``EvidenceBundle``.

Rules
-----
- A failed query is dropped (logged), never fatal on its own
- Only when EVERY query fails is ``EvidenceGatheringError`` raised
- "No results" is a valid outcome: an empty bundle is returned and the
  existence classifier rejects it downstream
- NO synthetic fallback content
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from ..errors import EvidenceGatheringError, EvidenceSourceUnavailable
from ..pipeline.http_client import RetryPolicy
from ..pipeline.timing import async_timer
from ..schemas.evidence_schema import EvidenceBundle, EvidenceItem
from .evidence_sources import EvidenceSource
from .lexicon import DEFAULT_LEXICON, Lexicon
from .query_builder import build_evidence_queries

logger = logging.getLogger(__name__)

_DEFAULT_QUERY_DELAY = 0.1  # seconds between sequential queries

_FAILED = object()


def default_query_delay() -> float:
    return float(os.getenv("EVIDENCE_QUERY_DELAY", str(_DEFAULT_QUERY_DELAY)))


def default_concurrent() -> bool:
    return os.getenv("EVIDENCE_CONCURRENT", "false").lower() == "true"


async def _run_query(
    source: EvidenceSource,
    query: str,
    retry_policy: RetryPolicy,
) -> List[Dict[str, Any]]:
    """Run one query under *retry_policy*.  Re-raises the last failure."""
    attempt = 0
    while True:
        try:
            return await source.search(query)
        except EvidenceSourceUnavailable as exc:
            if attempt + 1 >= retry_policy.max_attempts or not retry_policy.is_retryable(exc):
                raise
            delay = retry_policy.delay_for(attempt)
            attempt += 1
            logger.info(
                "Evidence query retry %d/%d in %.2fs for %r: %s",
                attempt, retry_policy.max_attempts - 1, delay, query, exc,
            )
            await asyncio.sleep(delay)


async def _safe_query(
    source: EvidenceSource,
    query: str,
    retry_policy: RetryPolicy,
) -> Any:
    try:
        return await _run_query(source, query, retry_policy)
    except EvidenceSourceUnavailable as exc:
        logger.warning("Evidence query dropped (%s): %r — %s", source.name, query, exc)
    except Exception:
        logger.exception("Evidence source %s raised unexpectedly for %r", source.name, query)
    return _FAILED


def _to_items(raw_results: List[Any]) -> List[EvidenceItem]:
    items: List[EvidenceItem] = []
    for r in raw_results or []:
        if not isinstance(r, dict):
            continue
        items.append(
            EvidenceItem(
                title=str(r.get("title") or ""),
                snippet=str(r.get("snippet") or ""),
                source_url=str(r.get("link") or ""),
            )
        )
    return items


async def gather_evidence(
    brand_name: str,
    source: EvidenceSource,
    *,
    lexicon: Lexicon = DEFAULT_LEXICON,
    retry_policy: Optional[RetryPolicy] = None,
    query_delay: Optional[float] = None,
    concurrent: Optional[bool] = None,
) -> EvidenceBundle:
    """Gather evidence for *brand_name* from *source*.

    Queries run sequentially with *query_delay* seconds between them, or
    all at once when *concurrent* is true.
    """
    retry_policy = retry_policy or RetryPolicy()
    query_delay = default_query_delay() if query_delay is None else query_delay
    concurrent = default_concurrent() if concurrent is None else concurrent

    queries = build_evidence_queries(brand_name, lexicon)
    outcomes: List[Tuple[str, Any]] = []

    async with async_timer("evidence_gatherer", f"{len(queries)} queries"):
        if concurrent:
            results = await asyncio.gather(
                *(_safe_query(source, q, retry_policy) for q in queries)
            )
            outcomes = list(zip(queries, results))
        else:
            for i, query in enumerate(queries):
                if i and query_delay > 0:
                    await asyncio.sleep(query_delay)
                outcomes.append((query, await _safe_query(source, query, retry_policy)))

    items: List[EvidenceItem] = []
    failed: List[str] = []
    for query, result in outcomes:
        if result is _FAILED:
            failed.append(query)
            continue
        items.extend(_to_items(result))

    if queries and len(failed) == len(queries):
        logger.error(
            "Evidence source %s failed for all %d queries (brand=%r)",
            source.name, len(queries), brand_name,
        )
        raise EvidenceGatheringError("Brand analysis failed: evidence source unavailable")

    bundle = EvidenceBundle(
        brand_name=brand_name,
        queries=queries,
        items=items,
        failed_queries=failed,
    )
    logger.info(
        "Evidence gathered for %r: items=%d, sources=%d, chars=%d, failed_queries=%d",
        brand_name, bundle.item_count, len(bundle.source_hosts), len(bundle.text), len(failed),
    )
    return bundle

"""
Brand Vetting Runner

Single entry point for one vetting request:
validate → run graph → not-found short-circuit → assemble report.
Stateless; nothing is persisted.
"""

import logging
from typing import Optional

from ..errors import NotFoundError
from ..schemas.report_schema import VettingReport
from ..services.evidence_sources import EvidenceSource, get_evidence_source
from ..services.input_validator import validate_brand_name
from ..services.lexicon import DEFAULT_LEXICON, Lexicon
from ..services.report_builder import build_report
from .graph import vetting_graph
from .http_client import RetryPolicy
from .state import VettingState
from .timing import StepTimer

logger = logging.getLogger(__name__)


async def run_vetting(
    brand_name: str,
    brand_url: Optional[str] = None,
    *,
    source: Optional[EvidenceSource] = None,
    lexicon: Optional[Lexicon] = None,
    retry_policy: Optional[RetryPolicy] = None,
) -> VettingReport:
    """Vet *brand_name* and return its report.

    Raises ``ValidationError`` before any evidence query, ``NotFoundError``
    when evidence is insufficient, ``EvidenceGatheringError`` when the
    evidence source failed outright.
    """
    lexicon = lexicon or DEFAULT_LEXICON
    timer = StepTimer("brand_vetting")

    with timer.step("validate"):
        clean_name = validate_brand_name(brand_name, lexicon)

    initial_state: VettingState = {
        "brand_name": clean_name,
        "evidence_source": source or get_evidence_source(),
        "lexicon": lexicon,
        "retry_policy": retry_policy or RetryPolicy(),
    }

    async with timer.async_step("graph"):
        result = await vetting_graph.ainvoke(initial_state)

    if not result.get("brand_exists"):
        bundle = result["evidence"]
        timer.summary()
        raise NotFoundError(
            f'Brand "{clean_name}" could not be found in current news coverage or business '
            "databases. Please verify the company name and try again.",
            details={
                "searchResults": bundle.item_count,
                "contentLength": len(bundle.text),
                "sources": len(bundle.source_hosts),
            },
        )

    report = build_report(
        brand_name=clean_name,
        brand_url=brand_url,
        analysis=result["analysis"],
        breakdown=result["breakdown"],
        insights=result["insights"],
        data_sources=result["evidence"].source_hosts,
    )
    timer.summary()
    return report

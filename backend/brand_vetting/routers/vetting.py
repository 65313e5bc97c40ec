"""
Brand Vetting Router with Timing Instrumentation

Handles the /brand-vetting endpoint.  The route is thin — all business
logic lives in the pipeline and service functions.
"""

import logging
import time

from fastapi import APIRouter, Depends, status

from ..errors import BrandVettingError
from ..pipeline.http_client import RetryPolicy
from ..pipeline.runner import run_vetting
from ..schemas.brand_schema import BrandVettingRequest
from ..schemas.report_schema import ErrorResponse, VettingResponse
from ..services.evidence_sources import EvidenceSource, get_evidence_source
from ..services.lexicon import Lexicon, get_lexicon

logger = logging.getLogger(__name__)


def evidence_source_dependency() -> EvidenceSource:
    return get_evidence_source()


def lexicon_dependency() -> Lexicon:
    return get_lexicon()


def retry_policy_dependency() -> RetryPolicy:
    return RetryPolicy.from_env()


router = APIRouter(
    prefix="/brand-vetting",
    tags=["Brand Vetting"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid or fictitious brand name"},
        404: {"model": ErrorResponse, "description": "Brand not found in gathered evidence"},
        500: {"model": ErrorResponse, "description": "Evidence gathering or analysis failed"},
    },
)


@router.post(
    "",
    response_model=VettingResponse,
    status_code=status.HTTP_200_OK,
    summary="Vet a Brand",
    response_description="Authenticity score, tier, findings and analysis metrics",
)
async def vet_brand(
    request: BrandVettingRequest,
    source: EvidenceSource = Depends(evidence_source_dependency),
    lexicon: Lexicon = Depends(lexicon_dependency),
    retry_policy: RetryPolicy = Depends(retry_policy_dependency),
) -> VettingResponse:
    """Run the brand authenticity pipeline for one brand name."""
    start_time = time.perf_counter()
    logger.info("[TIMING] vet_brand: START — brand=%r", request.brand_name)

    try:
        report = await run_vetting(
            request.brand_name,
            (request.brand_url or "").strip() or None,
            source=source,
            lexicon=lexicon,
            retry_policy=retry_policy,
        )
    except BrandVettingError as exc:
        duration = (time.perf_counter() - start_time) * 1000
        logger.info("[TIMING] vet_brand: %s after %.0fms", exc.code, duration)
        raise
    except Exception as exc:
        logger.exception("Brand vetting crashed for %r", request.brand_name)
        raise BrandVettingError("Brand analysis failed") from exc

    duration = (time.perf_counter() - start_time) * 1000
    logger.info("[TIMING] vet_brand: END — duration=%.0fms", duration)
    return VettingResponse(data=report)


@router.get(
    "/health",
    summary="Health Check",
    description="Check if the brand vetting service is running",
    response_description="Health status",
)
async def health_check():
    """Simple health check endpoint."""
    return {"status": "healthy", "service": "brand-vetting"}

"""Assembles the caller-facing VettingReport from pipeline outputs."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from .. import constants
from ..schemas.analysis_schema import AnalysisResult, ScoreBreakdown
from ..schemas.report_schema import (
    AnalysisMetrics,
    Findings,
    ScoreBreakdownResponse,
    VettingReport,
)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def confidence_level(item_count: int) -> str:
    if item_count >= constants.HIGH_CONFIDENCE_ITEMS:
        return "High"
    if item_count >= constants.MEDIUM_CONFIDENCE_ITEMS:
        return "Medium"
    return "Low"


def analysis_depth(sustainability_mentions: int) -> str:
    if sustainability_mentions >= constants.COMPREHENSIVE_MENTIONS:
        return "Comprehensive"
    return "Standard"


def build_report(
    *,
    brand_name: str,
    analysis: AnalysisResult,
    breakdown: ScoreBreakdown,
    insights: list[str],
    data_sources: list[str],
    brand_url: Optional[str] = None,
) -> VettingReport:
    return VettingReport(
        brand_name=brand_name,
        brand_url=brand_url,
        authenticity_score=breakdown.total_score,
        tier=breakdown.tier,
        tier_description=breakdown.tier_description,
        breakdown=ScoreBreakdownResponse(
            corporate_data=breakdown.corporate_score,
            third_party_ratings=breakdown.certification_score,
            public_sentiment=breakdown.sentiment_score,
            greenwashing_penalty=breakdown.greenwashing_penalty,
        ),
        findings=Findings(
            greenwashing_flags=list(analysis.controversy_flags),
            discrepancies=[],
            certifications=[constants.CERTIFICATION_LABEL] if analysis.is_certified else [],
            transparency_insights=insights,
        ),
        data_sources=list(data_sources),
        last_updated=utc_timestamp(),
        analysis_metrics=AnalysisMetrics(
            total_data_points=analysis.item_count + (1 if analysis.is_certified else 0),
            confidence_level=confidence_level(analysis.item_count),
            analysis_depth=analysis_depth(analysis.sustainability_mention_count),
        ),
    )

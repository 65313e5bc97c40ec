from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .analysis_schema import Tier


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ScoreBreakdownResponse(_CamelModel):
    """Breakdown block of the report, keyed as the dashboard expects."""

    corporate_data: float = Field(..., alias="corporateData")
    third_party_ratings: float = Field(..., alias="thirdPartyRatings")
    public_sentiment: float = Field(..., alias="publicSentiment")
    greenwashing_penalty: float = Field(..., alias="greenwashingPenalty")


class Findings(_CamelModel):
    greenwashing_flags: list[str] = Field(default_factory=list, alias="greenwashingFlags")
    discrepancies: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)
    transparency_insights: list[str] = Field(default_factory=list, alias="transparencyInsights")


class AnalysisMetrics(_CamelModel):
    total_data_points: int = Field(..., ge=0, alias="totalDataPoints")
    confidence_level: Literal["Low", "Medium", "High"] = Field(..., alias="confidenceLevel")
    analysis_depth: Literal["Standard", "Comprehensive"] = Field(..., alias="analysisDepth")


class VettingReport(_CamelModel):
    """Full brand vetting report.  Created fresh per request, never stored."""

    brand_name: str = Field(..., alias="brandName")
    brand_url: Optional[str] = Field(default=None, alias="brandUrl")
    authenticity_score: float = Field(..., ge=5.0, le=100.0, alias="authenticityScore")
    tier: Tier
    tier_description: str = Field(..., alias="tierDescription")
    breakdown: ScoreBreakdownResponse
    findings: Findings
    data_sources: list[str] = Field(default_factory=list, alias="dataSources")
    last_updated: str = Field(..., alias="lastUpdated", description="ISO-8601 timestamp")
    analysis_metrics: AnalysisMetrics = Field(..., alias="analysisMetrics")


class VettingResponse(BaseModel):
    """Success envelope: ``{"data": VettingReport}``."""

    data: VettingReport


class ErrorBody(BaseModel):
    code: str
    message: str
    timestamp: str
    details: Optional[dict[str, Any]] = None


class ErrorResponse(BaseModel):
    """Failure envelope: ``{"error": {code, message, timestamp}}``."""

    error: ErrorBody

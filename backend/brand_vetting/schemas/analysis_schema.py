from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Tier(str, Enum):
    """Three-tier authenticity verdict."""

    GREEN = "Green"
    AMBER = "Amber"
    RED = "Red"


class SentimentAnalysis(BaseModel):
    """Output of the sentiment & controversy analyzer."""

    model_config = ConfigDict(frozen=True)

    sentiment_score: int = Field(..., ge=-100, le=100)
    sustainability_mention_count: int = Field(..., ge=0)
    controversy_flags: list[str] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    """Signals derived once per request from the evidence bundle.

    Immutable after construction; feeds the score aggregator and the
    insight generator.
    """

    model_config = ConfigDict(frozen=True)

    is_certified: bool = Field(..., description="Proximate third-party certification found")
    sentiment_score: int = Field(
        ...,
        ge=-100,
        le=100,
        description="Signed raw sentiment from weighted phrase matches",
    )
    sustainability_mention_count: int = Field(..., ge=0)
    controversy_flags: list[str] = Field(default_factory=list)
    source_count: int = Field(..., ge=0, description="Distinct source hosts")
    item_count: int = Field(..., ge=0, description="Evidence items gathered")


class ScoreBreakdown(BaseModel):
    """Deterministic score contributions and tiered verdict.

    ``sentiment_score`` is the banded contribution (one of -15, 5, 15, 25),
    not the raw signed sentiment.
    """

    model_config = ConfigDict(frozen=True)

    corporate_score: float = Field(..., ge=0.0, le=10.0, description="min(sources * 2, 10)")
    certification_score: float = Field(..., ge=0.0, description="35 if certified, else 0")
    sentiment_score: float = Field(..., description="Banded sentiment contribution")
    greenwashing_penalty: float = Field(..., ge=0.0, le=25.0, description="min(flags * 8, 25)")
    total_score: float = Field(..., ge=5.0, le=100.0)
    tier: Tier
    tier_description: str

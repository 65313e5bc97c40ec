"""Deterministic Scoring Engine.

Combines certification, sentiment, evidence-volume, engagement,
controversy and source-diversity signals into a bounded authenticity
score and a three-tier verdict.

Rules
-----
- NO API calls
- NO LLMs
- NO heuristics beyond the explicit formulas
- Pure deterministic math

Formula
-------
    total = 25                                   (existence base credit)
          + 35 if certified                      (certification_score)
          + band(sentiment)                      (25 / 15 / 5 / -15)
          + 10 if items >= 5                     (evidence volume)
          + 8  if sustainability mentions >= 10  (engagement)
          - min(flags * 8, 25)                   (greenwashing_penalty)
          + min(sources * 2, 10)                 (corporate_score)
    total = round(clamp(total, 5, 100), 1)
"""

from __future__ import annotations

from .. import constants
from ..schemas.analysis_schema import AnalysisResult, ScoreBreakdown, Tier


def _clamp(value: float, lo: float = constants.MIN_TOTAL_SCORE, hi: float = constants.MAX_TOTAL_SCORE) -> float:
    """Clamp *value* to [lo, hi]."""
    return max(lo, min(hi, value))


def sentiment_contribution(raw_sentiment: int) -> int:
    """Map the raw signed sentiment onto one of the fixed bands."""
    for lower_bound, contribution in constants.SENTIMENT_BANDS:
        if raw_sentiment > lower_bound:
            return contribution
    return constants.SENTIMENT_FLOOR_CONTRIBUTION


def classify_tier(total_score: float) -> Tier:
    if total_score >= constants.GREEN_THRESHOLD:
        return Tier.GREEN
    if total_score >= constants.AMBER_THRESHOLD:
        return Tier.AMBER
    return Tier.RED


def tier_description(tier: Tier) -> str:
    return constants.TIER_DESCRIPTIONS[tier.value]


def compute_score_breakdown(analysis: AnalysisResult) -> ScoreBreakdown:
    """Compute the score breakdown and tier for one analysis result."""
    total = constants.BASE_EXISTENCE_SCORE

    certification_score = constants.CERTIFICATION_BONUS if analysis.is_certified else 0.0
    total += certification_score

    sentiment_score = float(sentiment_contribution(analysis.sentiment_score))
    total += sentiment_score

    if analysis.item_count >= constants.EVIDENCE_VOLUME_THRESHOLD:
        total += constants.EVIDENCE_VOLUME_BONUS

    if analysis.sustainability_mention_count >= constants.ENGAGEMENT_MENTION_THRESHOLD:
        total += constants.ENGAGEMENT_BONUS

    greenwashing_penalty = float(
        min(len(analysis.controversy_flags) * constants.PENALTY_PER_FLAG, constants.MAX_GREENWASHING_PENALTY)
    )
    total -= greenwashing_penalty

    corporate_score = float(
        min(analysis.source_count * constants.SCORE_PER_SOURCE, constants.MAX_CORPORATE_SCORE)
    )
    total += corporate_score

    total = round(_clamp(total), 1)
    tier = classify_tier(total)

    return ScoreBreakdown(
        corporate_score=corporate_score,
        certification_score=certification_score,
        sentiment_score=sentiment_score,
        greenwashing_penalty=greenwashing_penalty,
        total_score=total,
        tier=tier,
        tier_description=tier_description(tier),
    )

"""
Brand Vetting Graph Nodes

Each node reads what it needs from ``VettingState`` and returns only the
keys it produces.  The certification and sentiment nodes run in the same
superstep over the same evidence.
"""

import logging

from ..services.certification_detector import detect_certification
from ..services.evidence_gatherer import gather_evidence
from ..services.existence_classifier import brand_exists
from ..services.insight_generator import generate_insights
from ..services.lexicon import DEFAULT_LEXICON
from ..services.scoring_engine import compute_score_breakdown
from ..services.sentiment_analyzer import analyze_sentiment
from ..schemas.analysis_schema import AnalysisResult
from .state import VettingState
from .timing import timed_async, timed_node

logger = logging.getLogger(__name__)


@timed_async("gather_evidence")
async def gather_evidence_node(state: VettingState) -> dict:
    bundle = await gather_evidence(
        state["brand_name"],
        state["evidence_source"],
        lexicon=state.get("lexicon", DEFAULT_LEXICON),
        retry_policy=state.get("retry_policy"),
    )
    return {"evidence": bundle}


@timed_node("classify_existence")
def classify_existence_node(state: VettingState) -> dict:
    bundle = state["evidence"]
    exists = brand_exists(bundle, state["brand_name"], state.get("lexicon", DEFAULT_LEXICON))
    if not exists:
        logger.info(
            "Brand %r not found: items=%d, chars=%d",
            state["brand_name"], bundle.item_count, len(bundle.text),
        )
    return {"brand_exists": exists}


@timed_node("detect_certification")
def detect_certification_node(state: VettingState) -> dict:
    certified = detect_certification(
        state["evidence"].text,
        state["brand_name"],
        state.get("lexicon", DEFAULT_LEXICON),
    )
    return {"is_certified": certified}


@timed_node("analyze_sentiment")
def analyze_sentiment_node(state: VettingState) -> dict:
    sentiment = analyze_sentiment(state["evidence"].text, state.get("lexicon", DEFAULT_LEXICON))
    return {"sentiment": sentiment}


@timed_node("aggregate_scores")
def aggregate_scores_node(state: VettingState) -> dict:
    bundle = state["evidence"]
    sentiment = state["sentiment"]
    analysis = AnalysisResult(
        is_certified=state["is_certified"],
        sentiment_score=sentiment.sentiment_score,
        sustainability_mention_count=sentiment.sustainability_mention_count,
        controversy_flags=list(sentiment.controversy_flags),
        source_count=len(bundle.source_hosts),
        item_count=bundle.item_count,
    )
    breakdown = compute_score_breakdown(analysis)
    logger.info(
        "Scored %r: certified=%s, sentiment=%d, total=%.1f, tier=%s",
        state["brand_name"], analysis.is_certified, analysis.sentiment_score,
        breakdown.total_score, breakdown.tier.value,
    )
    return {"analysis": analysis, "breakdown": breakdown}


@timed_node("generate_insights")
def generate_insights_node(state: VettingState) -> dict:
    return {"insights": generate_insights(state["analysis"])}

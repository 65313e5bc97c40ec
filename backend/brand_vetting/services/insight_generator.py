"""Insight Generator — rule-based prose from already-computed signals.  No LLM."""

from __future__ import annotations

from ..schemas.analysis_schema import AnalysisResult


def generate_insights(analysis: AnalysisResult) -> list[str]:
    insights: list[str] = []

    if analysis.is_certified:
        insights.append("B Corporation certification verified through independent sources")

    mentions = analysis.sustainability_mention_count
    if mentions >= 15:
        insights.append(f"Comprehensive sustainability coverage with {mentions} mentions across sources")
    elif mentions >= 5:
        insights.append(f"Moderate sustainability presence with {mentions} mentions found")
    else:
        insights.append("Limited sustainability information available in current media coverage")

    controversies = len(analysis.controversy_flags)
    if controversies == 0:
        insights.append("No recent environmental controversies detected in search results")
    elif controversies <= 2:
        insights.append("Minor sustainability concerns identified in recent coverage")
    else:
        insights.append("Multiple sustainability concerns and controversies detected")

    if analysis.source_count >= 5:
        insights.append("Analysis based on diverse, credible sources")
    elif analysis.source_count >= 2:
        insights.append("Analysis based on multiple independent sources")
    else:
        insights.append("Limited source diversity - analysis based on available data")

    if analysis.item_count >= 10:
        insights.append("Extensive media coverage provides high-confidence analysis")

    return insights

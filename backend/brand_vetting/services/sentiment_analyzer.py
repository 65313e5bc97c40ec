"""Sentiment & Controversy Analyzer.

Scores the evidence text on a signed [-100, 100] scale from weighted
phrase matches and extracts controversy flags.  All matching is
case-insensitive substring matching.

Weights
-------
    strong positive   +25 per distinct phrase present
    positive           +8 per distinct phrase present
    strong negative   -30 per distinct phrase present  → "Major concern: <phrase>"
    negative          -15 per distinct phrase present  → "Environmental concern: <phrase>"

Strong negatives dominate: one documented scandal outweighs several
generic positive mentions.
"""

from __future__ import annotations

from .. import constants
from ..schemas.analysis_schema import SentimentAnalysis
from .lexicon import DEFAULT_LEXICON, Lexicon


def _clamp(value: int, lo: int = constants.SENTIMENT_MIN, hi: int = constants.SENTIMENT_MAX) -> int:
    return max(lo, min(hi, value))


def count_sustainability_mentions(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    """Sum of non-overlapping occurrences of each sustainability root term."""
    lower_text = text.lower()
    return sum(lower_text.count(term) for term in lexicon.sustainability_terms if term)


def analyze_sentiment(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> SentimentAnalysis:
    lower_text = text.lower()
    score = 0
    flags: list[str] = []

    for phrase in lexicon.strong_positive_phrases:
        if phrase in lower_text:
            score += constants.STRONG_POSITIVE_WEIGHT

    for phrase in lexicon.positive_phrases:
        if phrase in lower_text:
            score += constants.POSITIVE_WEIGHT

    for phrase in lexicon.strong_negative_phrases:
        if phrase in lower_text:
            score += constants.STRONG_NEGATIVE_WEIGHT
            flags.append(f"{constants.MAJOR_CONCERN_PREFIX}: {phrase}")

    for phrase in lexicon.negative_phrases:
        if phrase in lower_text:
            score += constants.NEGATIVE_WEIGHT
            flags.append(f"{constants.ENVIRONMENTAL_CONCERN_PREFIX}: {phrase}")

    return SentimentAnalysis(
        sentiment_score=_clamp(score),
        sustainability_mention_count=count_sustainability_mentions(text, lexicon),
        controversy_flags=flags,
    )

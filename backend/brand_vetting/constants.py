"""Centralized constants shared across the brand vetting pipeline.

This module holds the default lexicon tables and the fixed scoring
weights.  Phrase tables are plain data so they can be tuned or replaced
at runtime through ``services.lexicon.load_lexicon`` without touching
the analyzers.  Scoring weights are NOT overridable.
"""

from __future__ import annotations

# ── Input validation: fictitious-name deny-list ─────────────────────────
# Regex patterns, matched case-insensitively against the trimmed name.
# Heuristic and intentionally small — not an exhaustive list.

FICTITIOUS_PATTERNS: tuple[str, ...] = (
    r"^(test|dummy|fake|example|placeholder)",
    r"glimmerwood",
    r"widgets?$",
    r"^[a-z]{1,3}\d+",
    r"^\d+[a-z]{1,3}$",
    r"lorem ipsum",
    r"acme corp",
)

# ── Evidence gathering: query templates ─────────────────────────────────
# Exactly 5 topic-scoped queries.  {brand} and {year} are interpolated.

QUERY_TEMPLATES: tuple[str, ...] = (
    '"{brand}" B Corp certified benefit corporation',
    '"{brand}" sustainability environmental record {year}',
    '"{brand}" greenwashing controversy criticism',
    '"{brand}" ESG rating environmental social governance',
    '"{brand}" company corporate responsibility ethics',
)

# ── Existence classification ────────────────────────────────────────────
BUSINESS_CONTEXT_TERMS: tuple[str, ...] = (
    "company", "corporation", "inc", "ltd", "business", "firm",
    "sustainability", "environmental", "corporate", "organization",
    "enterprise", "industry", "manufacturer", "brand",
)

MIN_EVIDENCE_TEXT_LENGTH: int = 100
MIN_EVIDENCE_ITEMS: int = 1

# ── Certification detection ─────────────────────────────────────────────
CERTIFICATION_NEGATIVE_PHRASES: tuple[str, ...] = (
    "is not a certified b corporation",
    "not b corp certified",
    "faces challenges meeting b corp standards",
    "oil and gas industry typically faces challenges",
    "not a certified b corp",
)

CERTIFICATION_POSITIVE_PHRASES: tuple[str, ...] = (
    "b corp certified",
    "certified b corporation",
    "achieved b corporation certification",
    "b corporation leader",
    "b corp certification in",
    "scored high marks",
    "verified commitment",
    "rigorous third-party assessment",
)

# Max distance (characters) between a positive phrase and a brand mention.
CERTIFICATION_PROXIMITY_WINDOW: int = 300

CERTIFICATION_LABEL: str = "B Corporation Certified"

# ── Sentiment & controversy lexicons ────────────────────────────────────
STRONG_POSITIVE_PHRASES: tuple[str, ...] = (
    "sustainability leader",
    "environmental leader",
    "pioneered corporate environmental",
    "consistently ranks among top sustainable",
    "achieved b corporation certification",
    "scored high marks",
    "verified commitment",
    "transparent supply chain reporting",
    "measurable environmental commitments",
)

POSITIVE_PHRASES: tuple[str, ...] = (
    "sustainable practices", "eco-friendly", "environmental initiatives",
    "renewable energy", "carbon neutral", "clean energy",
    "ethical business", "responsible company", "environmental governance",
    "climate action", "conservation", "circular economy",
    "environmental responsibility", "1% for the planet",
)

STRONG_NEGATIVE_PHRASES: tuple[str, ...] = (
    "greenwashing allegations",
    "multiple allegations of greenwashing",
    "faces ongoing scrutiny",
    "critics question",
    "legal challenges",
    "disconnect between marketing messages and business operations",
    "environmental controversies",
    "carbon-intensive business model",
)

NEGATIVE_PHRASES: tuple[str, ...] = (
    "greenwashing", "environmental violation", "pollution scandal",
    "environmental lawsuit", "climate lawsuit", "emissions cheating",
    "false environmental claims", "misleading sustainability",
    "environmental damage", "sustainability controversy",
)

SUSTAINABILITY_TERMS: tuple[str, ...] = (
    "sustainab", "environment", "eco", "green", "renewable", "carbon",
    "climate", "emission", "waste", "energy", "conservation", "corp",
)

STRONG_POSITIVE_WEIGHT: int = 25
POSITIVE_WEIGHT: int = 8
STRONG_NEGATIVE_WEIGHT: int = -30
NEGATIVE_WEIGHT: int = -15

SENTIMENT_MIN: int = -100
SENTIMENT_MAX: int = 100

MAJOR_CONCERN_PREFIX: str = "Major concern"
ENVIRONMENTAL_CONCERN_PREFIX: str = "Environmental concern"

# ── Score aggregation ───────────────────────────────────────────────────
BASE_EXISTENCE_SCORE: float = 25.0
CERTIFICATION_BONUS: float = 35.0

# (exclusive lower bound on raw sentiment, contribution), checked in order.
SENTIMENT_BANDS: tuple[tuple[int, int], ...] = (
    (30, 25),    # strong positive
    (0, 15),     # positive
    (-20, 5),    # neutral
)
SENTIMENT_FLOOR_CONTRIBUTION: int = -15

EVIDENCE_VOLUME_THRESHOLD: int = 5
EVIDENCE_VOLUME_BONUS: float = 10.0

ENGAGEMENT_MENTION_THRESHOLD: int = 10
ENGAGEMENT_BONUS: float = 8.0

PENALTY_PER_FLAG: int = 8
MAX_GREENWASHING_PENALTY: int = 25

SCORE_PER_SOURCE: int = 2
MAX_CORPORATE_SCORE: int = 10

MIN_TOTAL_SCORE: float = 5.0
MAX_TOTAL_SCORE: float = 100.0

GREEN_THRESHOLD: float = 65.0
AMBER_THRESHOLD: float = 40.0

TIER_DESCRIPTIONS: dict[str, str] = {
    "Green": "Highly authentic brand with strong sustainability credentials and transparent practices.",
    "Amber": "Moderately authentic brand with some sustainability efforts but room for improvement.",
    "Red": "Limited sustainability authenticity with significant concerns about environmental claims or practices.",
}

# ── Report metadata bands ───────────────────────────────────────────────
HIGH_CONFIDENCE_ITEMS: int = 5
MEDIUM_CONFIDENCE_ITEMS: int = 2
COMPREHENSIVE_MENTIONS: int = 10

from typing import Optional, TypedDict

from ..schemas.analysis_schema import AnalysisResult, ScoreBreakdown, SentimentAnalysis
from ..schemas.evidence_schema import EvidenceBundle
from ..services.evidence_sources import EvidenceSource
from ..services.lexicon import Lexicon
from .http_client import RetryPolicy


class VettingState(TypedDict, total=False):
    # Input (validated before the graph runs)
    brand_name: str

    # Collaborators for this request
    evidence_source: EvidenceSource
    lexicon: Lexicon
    retry_policy: RetryPolicy

    # Evidence Gatherer
    evidence: Optional[EvidenceBundle]

    # Existence Classifier
    brand_exists: bool

    # Parallel analyzers (same evidence)
    is_certified: Optional[bool]
    sentiment: Optional[SentimentAnalysis]

    # Score Aggregator
    analysis: Optional[AnalysisResult]
    breakdown: Optional[ScoreBreakdown]

    # Insight Generator
    insights: list[str]

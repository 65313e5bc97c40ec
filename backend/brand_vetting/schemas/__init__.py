# Schemas package
from .brand_schema import BrandVettingRequest
from .evidence_schema import EvidenceBundle, EvidenceItem
from .analysis_schema import AnalysisResult, ScoreBreakdown, SentimentAnalysis, Tier
from .report_schema import (
    AnalysisMetrics,
    ErrorBody,
    ErrorResponse,
    Findings,
    ScoreBreakdownResponse,
    VettingReport,
    VettingResponse,
)

__all__ = [
    "BrandVettingRequest",
    "EvidenceItem",
    "EvidenceBundle",
    "AnalysisResult",
    "SentimentAnalysis",
    "ScoreBreakdown",
    "Tier",
    "ScoreBreakdownResponse",
    "Findings",
    "AnalysisMetrics",
    "VettingReport",
    "VettingResponse",
    "ErrorBody",
    "ErrorResponse",
]

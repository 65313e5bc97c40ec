from .input_validator import validate_brand_name
from .query_builder import build_evidence_queries
from .evidence_gatherer import gather_evidence
from .existence_classifier import brand_exists
from .certification_detector import detect_certification
from .sentiment_analyzer import analyze_sentiment
from .scoring_engine import compute_score_breakdown
from .insight_generator import generate_insights
from .report_builder import build_report

__all__ = [
    "validate_brand_name",
    "build_evidence_queries",
    "gather_evidence",
    "brand_exists",
    "detect_certification",
    "analyze_sentiment",
    "compute_score_breakdown",
    "generate_insights",
    "build_report",
]

# Models package
from src.models.data_models import (
    SentimentLabel,
    AnalysisStatus,
    AnalysisRequest,
    SentimentSummary,
    AnalysisResult,
    AnalysisOutcome,
    ErrorResponse
)

__all__ = [
    "SentimentLabel",
    "AnalysisStatus",
    "AnalysisRequest",
    "SentimentSummary",
    "AnalysisResult",
    "AnalysisOutcome",
    "ErrorResponse"
]

"""
Data Models Module
Pydantic models for data validation and serialization
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from enum import Enum


class SentimentLabel(str, Enum):
    """Sentiment classification labels"""

    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class AnalysisStatus(str, Enum):
    """How an analysis request ended"""

    COMPLETED = "completed"
    NOT_FOUND = "not_found"


class AnalysisRequest(BaseModel):
    """Model for contest analysis requests"""

    contest: str = Field(..., description="Contest name to analyze")

    @field_validator("contest")
    @classmethod
    def contest_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("contest must not be empty")
        return value


class SentimentSummary(BaseModel):
    """Aggregated VADER scores for a set of comments"""

    label: SentimentLabel = Field(..., description="Sentiment classification")
    mean_compound: float = Field(..., description="Mean compound score (-1 to 1)")
    scores: List[float] = Field(
        default_factory=list, description="Per-comment compound scores"
    )


class AnalysisResult(BaseModel):
    """Model for a completed contest analysis"""

    sentiment: SentimentLabel = Field(..., description="Overall sentiment")
    topics: List[str] = Field(
        default_factory=list, description="Comma-joined top terms per topic"
    )


class AnalysisOutcome(BaseModel):
    """Model for the orchestrator's result, including the not-found case"""

    status: AnalysisStatus
    contest: str
    subreddit: str
    comment_count: int = Field(default=0)
    result: Optional[AnalysisResult] = Field(default=None)


class ErrorResponse(BaseModel):
    """Model for error response bodies"""

    error: str

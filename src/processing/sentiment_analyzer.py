"""
Sentiment Analyzer Module
VADER-based sentiment scoring aggregated over a set of comments
"""

from typing import List, Optional

import nltk
from nltk.sentiment.vader import SentimentIntensityAnalyzer

from src.models.data_models import SentimentLabel, SentimentSummary
from src.utils.logging_config import get_logger


def load_vader() -> SentimentIntensityAnalyzer:
    """Create a VADER analyzer, downloading the lexicon if needed"""
    try:
        nltk.data.find("sentiment/vader_lexicon.zip")
    except LookupError:
        nltk.download("vader_lexicon", quiet=True)
    return SentimentIntensityAnalyzer()


class SentimentScorer:
    """
    Scores comments with VADER and classifies the mean compound score
    """

    def __init__(
        self,
        analyzer: Optional[SentimentIntensityAnalyzer] = None,
        positive_threshold: float = 0.05,
        negative_threshold: float = -0.05,
    ):
        self.logger = get_logger("SentimentScorer")
        self.positive_threshold = positive_threshold
        self.negative_threshold = negative_threshold
        self._analyzer = analyzer

    @property
    def analyzer(self) -> SentimentIntensityAnalyzer:
        # Lazy so the lexicon is only fetched when something is scored
        if self._analyzer is None:
            self._analyzer = load_vader()
            self.logger.info("Loaded VADER sentiment analyzer")
        return self._analyzer

    def _score_to_label(self, score: float) -> SentimentLabel:
        """Convert a mean compound score to a label"""
        if score > self.positive_threshold:
            return SentimentLabel.POSITIVE
        elif score < self.negative_threshold:
            return SentimentLabel.NEGATIVE
        else:
            return SentimentLabel.NEUTRAL

    def score(self, comments: List[str]) -> SentimentSummary:
        """
        Score a set of comments

        Args:
            comments: Non-empty list of comment bodies

        Returns:
            Per-comment compound scores, their mean and the resulting label
        """
        if not comments:
            raise ValueError("Cannot score sentiment of an empty comment list")

        scores = [self.analyzer.polarity_scores(text)["compound"] for text in comments]
        mean_compound = sum(scores) / len(scores)

        return SentimentSummary(
            label=self._score_to_label(mean_compound),
            mean_compound=mean_compound,
            scores=scores,
        )

    def analyze(self, comments: List[str]) -> SentimentLabel:
        """Label for the mean compound score of comments"""
        return self.score(comments).label

"""
Topic Extractor Module
Latent Dirichlet Allocation over comment token counts
"""

from typing import Any, List, Sequence

from sklearn.decomposition import LatentDirichletAllocation
from sklearn.feature_extraction.text import CountVectorizer

from src.errors import TopicInputError
from src.utils.logging_config import get_logger


class TopicExtractor:
    """
    Groups co-occurring comment terms into a fixed number of topics
    """

    def __init__(
        self,
        num_topics: int = 2,
        terms_per_topic: int = 5,
        random_state: int = 0,
    ):
        self.num_topics = num_topics
        self.terms_per_topic = terms_per_topic
        self.random_state = random_state
        self.logger = get_logger("TopicExtractor")

    def _validate(self, comments: Sequence[Any]) -> List[str]:
        for index, comment in enumerate(comments):
            if not isinstance(comment, str):
                self.logger.error(
                    f"Non-string comment at index {index}: {type(comment).__name__}"
                )
                raise TopicInputError(index, comment)
        return list(comments)

    def extract(self, comments: Sequence[Any]) -> List[str]:
        """
        Extract topics from comments

        Args:
            comments: Comment bodies; every element must be a str

        Returns:
            One ", "-joined string of top terms per topic, highest weight first.
            Empty when no vocabulary survives stop-word removal.

        Raises:
            TopicInputError: if an element is not a string
        """
        documents = self._validate(comments)

        vectorizer = CountVectorizer(stop_words="english")
        try:
            counts = vectorizer.fit_transform(documents)
        except ValueError as e:
            # sklearn raises on an empty vocabulary
            self.logger.warning(f"No topic vocabulary in comments: {e}")
            return []

        lda = LatentDirichletAllocation(
            n_components=self.num_topics,
            random_state=self.random_state,
        )
        lda.fit(counts)

        terms = vectorizer.get_feature_names_out()
        topics = []
        for weights in lda.components_:
            top = weights.argsort()[::-1][: self.terms_per_topic]
            topics.append(", ".join(terms[i] for i in top))

        return topics

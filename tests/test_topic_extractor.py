from __future__ import annotations

import pytest

from src.errors import TopicInputError
from src.processing import topic_extractor
from src.processing.topic_extractor import TopicExtractor


COMMENTS = [
    "The goalkeeper made an incredible save in the final minute",
    "That referee decision ruined the match for everyone watching",
    "Messi scored a brilliant goal from outside the box",
    "The defense looked shaky and the goalkeeper was exposed",
    "Penalty shootouts are the most stressful way to end a match",
    "Brilliant passing from the midfield created the winning goal",
    "Fans in the stadium were singing through the whole final",
    "The referee missed an obvious penalty in the second half",
]


def test_extract_returns_two_topics_of_five_terms():
    topics = TopicExtractor().extract(COMMENTS)

    assert len(topics) == 2
    for topic in topics:
        terms = topic.split(", ")
        assert len(terms) == 5
        assert all(terms)


def test_extract_is_deterministic():
    extractor = TopicExtractor()
    assert extractor.extract(COMMENTS) == extractor.extract(COMMENTS)


def test_extract_drops_stop_words():
    topics = TopicExtractor().extract(COMMENTS)
    terms = {t for topic in topics for t in topic.split(", ")}
    assert "the" not in terms
    assert "and" not in terms


def test_non_string_comment_is_rejected_with_index(monkeypatch):
    def _unreachable(*args, **kwargs):
        raise AssertionError("topic model should not run")

    monkeypatch.setattr(topic_extractor, "CountVectorizer", _unreachable)

    with pytest.raises(TopicInputError) as excinfo:
        TopicExtractor().extract(["fine", "also fine", 42, None])

    assert excinfo.value.index == 2
    assert "index 2" in str(excinfo.value)


def test_sparse_vocabulary_yields_shorter_topics():
    topics = TopicExtractor().extract(["goal goal goal", "goal keeper"])

    assert len(topics) == 2
    for topic in topics:
        assert 1 <= len(topic.split(", ")) <= 2


def test_stop_word_only_comments_yield_no_topics():
    assert TopicExtractor().extract(["the and of", "is it"]) == []

"""
Contest Analysis Pipeline
Infers a subreddit, fetches its comments, scores sentiment and extracts topics
"""

import argparse
import sys
from typing import Optional

import openai

from config.settings import AppConfig, get_config
from src.inference.subreddit_inferrer import SubredditInferrer
from src.models.data_models import AnalysisOutcome, AnalysisResult, AnalysisStatus
from src.processing.sentiment_analyzer import SentimentScorer
from src.processing.topic_extractor import TopicExtractor
from src.scraper.reddit_scraper import CommentFetcher, create_reddit_client
from src.utils.logging_config import analysis_context, get_logger, setup_logging


class ContestAnalyzer:
    """
    Runs the four analysis stages for one contest, strictly in sequence
    """

    def __init__(
        self,
        inferrer: SubredditInferrer,
        fetcher: CommentFetcher,
        scorer: SentimentScorer,
        extractor: TopicExtractor,
    ):
        self.inferrer = inferrer
        self.fetcher = fetcher
        self.scorer = scorer
        self.extractor = extractor
        self.logger = get_logger("ContestAnalyzer")

    def analyze(self, contest: str) -> AnalysisOutcome:
        """
        Analyze discussion about a contest

        Inference and fetch failures propagate to the caller. A subreddit
        without comments ends the run with a NOT_FOUND outcome before
        sentiment and topics are computed.

        Args:
            contest: Contest name

        Returns:
            AnalysisOutcome carrying the result when comments were found
        """
        with analysis_context(contest):
            return self._run(contest)

    def _run(self, contest: str) -> AnalysisOutcome:
        self.logger.info(f"Received request to analyze contest: {contest}")

        subreddit = self.inferrer.infer(contest)
        self.logger.info(f"Inferred subreddit: {subreddit}")

        comments = self.fetcher.fetch(subreddit)
        self.logger.info(
            f"Fetched {len(comments)} comments from subreddit: {subreddit}"
        )

        if not comments:
            self.logger.info(f"No comments found in subreddit: {subreddit}")
            return AnalysisOutcome(
                status=AnalysisStatus.NOT_FOUND,
                contest=contest,
                subreddit=subreddit,
            )

        sentiment = self.scorer.analyze(comments)
        self.logger.info(f"Sentiment analysis result: {sentiment.value}")

        topics = self.extractor.extract(comments)
        self.logger.info(f"Extracted topics: {', '.join(topics)}")

        return AnalysisOutcome(
            status=AnalysisStatus.COMPLETED,
            contest=contest,
            subreddit=subreddit,
            comment_count=len(comments),
            result=AnalysisResult(sentiment=sentiment, topics=topics),
        )


def create_contest_analyzer(config: Optional[AppConfig] = None) -> ContestAnalyzer:
    """Build an analyzer with process-wide OpenAI and Reddit clients"""
    config = config or get_config()

    llm_client = openai.OpenAI(api_key=config.openai.api_key)
    reddit = create_reddit_client(
        client_id=config.reddit.client_id,
        client_secret=config.reddit.client_secret,
        user_agent=config.reddit.user_agent,
        username=config.reddit.username,
        password=config.reddit.password,
    )

    return ContestAnalyzer(
        inferrer=SubredditInferrer(llm_client, model=config.openai.model),
        fetcher=CommentFetcher(
            reddit,
            post_limit=config.scraper.post_limit,
            replies_per_post=config.scraper.replies_per_post,
            max_comments=config.scraper.max_comments,
        ),
        scorer=SentimentScorer(
            positive_threshold=config.sentiment.positive_threshold,
            negative_threshold=config.sentiment.negative_threshold,
        ),
        extractor=TopicExtractor(
            num_topics=config.topic.num_topics,
            terms_per_topic=config.topic.terms_per_topic,
            random_state=config.topic.random_state,
        ),
    )


def main(argv: Optional[list] = None) -> int:
    """Analyze one contest from the command line and print the outcome"""
    parser = argparse.ArgumentParser(description="Analyze Reddit discussion of a contest")
    parser.add_argument("contest", nargs="+", help="Contest name")
    args = parser.parse_args(argv)

    config = get_config()
    setup_logging(log_level=config.log_level, json_format=False, service_name="contest-pulse")
    logger = get_logger("main")

    try:
        outcome = create_contest_analyzer(config).analyze(" ".join(args.contest))
    except Exception as e:
        logger.error(f"Error processing request: {e}")
        return 1

    print(outcome.model_dump_json(indent=2))
    return 0 if outcome.status == AnalysisStatus.COMPLETED else 2


if __name__ == "__main__":
    sys.exit(main())

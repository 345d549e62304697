"""
Subreddit Inference Module
Asks a hosted language model which subreddit best matches a contest
"""

import re
from typing import Optional

import openai

from src.errors import InferenceError
from src.utils.logging_config import get_logger


SUBREDDIT_PATTERN = re.compile(r"r/(\w+)")

PROMPT_TEMPLATE = (
    'Given the contest "{contest}", provide only the most relevant '
    "subreddit name, formatted as r/<name>."
)


def extract_subreddit(text: str) -> Optional[str]:
    """Return the name in the first r/<name> mention of text, if any"""
    match = SUBREDDIT_PATTERN.search(text)
    return match.group(1) if match else None


class SubredditInferrer:
    """
    Infers a subreddit for a contest with a single chat completion
    """

    def __init__(self, client: openai.OpenAI, model: str = "gpt-3.5-turbo"):
        self.client = client
        self.model = model
        self.logger = get_logger("SubredditInferrer")

    def build_prompt(self, contest: str) -> str:
        return PROMPT_TEMPLATE.format(contest=contest)

    def infer(self, contest: str) -> str:
        """
        Infer the most relevant subreddit for a contest

        Args:
            contest: Contest name supplied by the caller

        Returns:
            Subreddit name without the r/ prefix

        Raises:
            InferenceError: if the completion fails or names no subreddit
        """
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": self.build_prompt(contest)}],
            )
        except Exception as e:
            self.logger.error(f"Language model request failed: {e}")
            raise InferenceError(f"Failed to infer a valid subreddit: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        text = (content or "").strip()

        subreddit = extract_subreddit(text)
        if subreddit is None:
            self.logger.warning(f"No subreddit in model output: {text!r}")
            raise InferenceError("Failed to infer a valid subreddit.")

        return subreddit

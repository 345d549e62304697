"""
Pipeline Errors
Failures raised by the analysis stages and surfaced at the request boundary
"""

from typing import Any


class ContestPulseError(Exception):
    """Base class for analysis pipeline failures"""


class InferenceError(ContestPulseError):
    """The language model gave no usable subreddit, or the call itself failed"""


class FetchError(ContestPulseError):
    """The Reddit API call failed for a subreddit"""

    def __init__(self, subreddit: str, cause: BaseException):
        self.subreddit = subreddit
        self.cause = cause
        super().__init__(f"Failed to fetch data from subreddit {subreddit}: {cause}")


class TopicInputError(ContestPulseError):
    """A comment handed to the topic model is not text"""

    def __init__(self, index: int, value: Any):
        self.index = index
        self.value = value
        super().__init__(f"Non-string comment at index {index}")

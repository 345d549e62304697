"""
Reddit Scraper Module
Fetches recent comments from a subreddit using PRAW
"""

from typing import List

import praw

from src.errors import FetchError
from src.utils.logging_config import get_logger


def create_reddit_client(
    client_id: str,
    client_secret: str,
    user_agent: str,
    username: str = "",
    password: str = "",
) -> praw.Reddit:
    """Build a Reddit client; script-app credentials are used when given"""
    credentials = {}
    if username and password:
        credentials = {"username": username, "password": password}

    return praw.Reddit(
        client_id=client_id,
        client_secret=client_secret,
        user_agent=user_agent,
        check_for_async=False,
        **credentials,
    )


class CommentFetcher:
    """
    Collects top-level comments from the newest posts of a subreddit
    """

    def __init__(
        self,
        reddit: praw.Reddit,
        post_limit: int = 10,
        replies_per_post: int = 10,
        max_comments: int = 10,
    ):
        self.reddit = reddit
        self.post_limit = post_limit
        self.replies_per_post = replies_per_post
        self.max_comments = max_comments
        self.logger = get_logger("CommentFetcher")

    def _post_replies(self, post) -> List[str]:
        """Bodies of the first top-level replies of a post"""
        # Drop "load more comments" stubs
        post.comments.replace_more(limit=0)

        bodies = []
        for comment in post.comments:
            if len(bodies) >= self.replies_per_post:
                break
            bodies.append(comment.body)
        return bodies

    def fetch(self, subreddit_name: str) -> List[str]:
        """
        Fetch recent comments from a subreddit

        Posts are visited newest first. The cap is checked after each post,
        so the last post visited may overshoot it before the final slice.

        Args:
            subreddit_name: Subreddit name without the r/ prefix

        Returns:
            At most max_comments comment bodies in discovery order

        Raises:
            FetchError: if the subreddit is missing, private or unreachable
        """
        comments: List[str] = []

        try:
            subreddit = self.reddit.subreddit(subreddit_name)

            for post in subreddit.new(limit=self.post_limit):
                comments.extend(self._post_replies(post))
                if len(comments) >= self.max_comments:
                    break

        except Exception as e:
            self.logger.error(f"Error fetching r/{subreddit_name}: {e}")
            raise FetchError(subreddit_name, e) from e

        return comments[: self.max_comments]

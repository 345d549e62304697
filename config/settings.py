"""
Application Configuration Module
Centralized configuration management using Pydantic Settings
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class RedditConfig(BaseSettings):
    """Reddit API Configuration"""
    client_id: str = Field(default="")
    client_secret: str = Field(default="")
    user_agent: str = Field(default="contest-pulse/1.0")
    username: str = Field(default="")
    password: str = Field(default="")

    class Config:
        env_prefix = "REDDIT_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


class OpenAIConfig(BaseSettings):
    """Language model Configuration"""
    api_key: str = Field(default="")
    model: str = Field(default="gpt-3.5-turbo")

    class Config:
        env_prefix = "OPENAI_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


class ScraperConfig(BaseSettings):
    """Comment fetching limits"""
    post_limit: int = Field(default=10)
    replies_per_post: int = Field(default=10)
    max_comments: int = Field(default=10)

    class Config:
        env_prefix = "SCRAPER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


class SentimentConfig(BaseSettings):
    """Sentiment Classification Configuration"""
    positive_threshold: float = Field(default=0.05)
    negative_threshold: float = Field(default=-0.05)

    class Config:
        env_prefix = "SENTIMENT_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


class TopicConfig(BaseSettings):
    """Topic Model Configuration"""
    num_topics: int = Field(default=2)
    terms_per_topic: int = Field(default=5)
    random_state: int = Field(default=0)

    class Config:
        env_prefix = "TOPIC_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


class ServerConfig(BaseSettings):
    """HTTP Server Configuration"""
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, validation_alias="PORT")
    static_dir: str = Field(default="public")

    class Config:
        env_prefix = "SERVER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


class AppConfig(BaseSettings):
    """Main Application Configuration"""
    log_level: str = Field(default="INFO")
    json_logs: bool = Field(default=True)

    # Sub-configurations
    reddit: RedditConfig = Field(default_factory=RedditConfig)
    openai: OpenAIConfig = Field(default_factory=OpenAIConfig)
    scraper: ScraperConfig = Field(default_factory=ScraperConfig)
    sentiment: SentimentConfig = Field(default_factory=SentimentConfig)
    topic: TopicConfig = Field(default_factory=TopicConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_config() -> AppConfig:
    """Get cached application configuration"""
    return AppConfig()

"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from weewxfeed.config.defaults import (
    DEFAULT_FEED_LOCATION,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class FeedConfig(BaseModel):
    model_config = {"extra": "forbid"}

    location: str = Field(default=DEFAULT_FEED_LOCATION, min_length=1)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: LogLevel = LogLevel.INFO


class WeewxConfig(BaseModel):
    model_config = {"extra": "forbid"}

    feed: FeedConfig = FeedConfig()
    logging: LoggingConfig = LoggingConfig()

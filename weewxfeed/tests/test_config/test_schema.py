"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from weewxfeed.config.defaults import DEFAULT_FEED_LOCATION
from weewxfeed.config.schema import FeedConfig, LoggingConfig, LogLevel, WeewxConfig


class TestWeewxConfig:
    def test_defaults(self):
        config = WeewxConfig()
        assert config.feed.location == DEFAULT_FEED_LOCATION
        assert config.feed.timeout_seconds == 15.0
        assert config.logging.level == LogLevel.INFO

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            WeewxConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            FeedConfig(location="http://x", retries=3)


class TestFeedConfig:
    def test_valid(self):
        config = FeedConfig(location="https://wx.example.org/RSS/weewx_rss.xml", timeout_seconds=3)
        assert config.location.endswith("weewx_rss.xml")
        assert config.timeout_seconds == 3.0

    def test_empty_location_rejected(self):
        with pytest.raises(ValidationError):
            FeedConfig(location="")

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            FeedConfig(timeout_seconds=0)


class TestLoggingConfig:
    def test_level_from_string(self):
        assert LoggingConfig(level="DEBUG").level == LogLevel.DEBUG

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

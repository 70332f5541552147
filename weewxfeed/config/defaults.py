"""Default feed settings."""

from weewxfeed.ingest.weewx_client import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

# weewx publishes its RSS skin under <HTML_ROOT>/RSS/weewx_rss.xml
DEFAULT_FEED_LOCATION = "http://localhost/weewx/RSS/weewx_rss.xml"
DEFAULT_TIMEOUT_SECONDS = DEFAULT_TIMEOUT

# Overrides feed.location when set
LOCATION_ENV_VAR = "WEEWXFEED_LOCATION"

__all__ = [
    "DEFAULT_FEED_LOCATION",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_USER_AGENT",
    "LOCATION_ENV_VAR",
]

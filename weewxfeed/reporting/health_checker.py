"""Health checker: feed reachability and envelope sanity."""

from datetime import UTC, datetime

import httpx

from weewxfeed.ingest.rss_document import parse_rss
from weewxfeed.ingest.weewx_client import DEFAULT_USER_AGENT
from weewxfeed.models.feed import FeedParseError
from weewxfeed.models.reporting import FeedHealth


class FeedHealthChecker:
    def __init__(
        self,
        location: str,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
    ):
        self.location = location
        self.user_agent = user_agent
        self.timeout = timeout

    def check(self) -> FeedHealth:
        checked_at = datetime.now(UTC).isoformat()
        try:
            resp = httpx.get(
                self.location,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
                follow_redirects=True,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return FeedHealth(
                location=self.location,
                reachable=False,
                status_code=None,
                items_found=0,
                checked_at=checked_at,
                error=str(e),
            )

        if resp.status_code != 200:
            return FeedHealth(
                location=self.location,
                reachable=False,
                status_code=resp.status_code,
                items_found=0,
                checked_at=checked_at,
                error=f"HTTP {resp.status_code}",
            )

        try:
            items = len(parse_rss(resp.text).items)
            error = None
        except FeedParseError as e:
            items = 0
            error = str(e)

        return FeedHealth(
            location=self.location,
            reachable=True,
            status_code=resp.status_code,
            items_found=items,
            checked_at=checked_at,
            error=error,
        )

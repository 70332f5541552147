"""HTTP client for a weewx station's RSS feed."""

import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "weewxfeed/0.1.0"
DEFAULT_TIMEOUT = 15.0
RSS_ACCEPT = "application/rss+xml, application/xml, text/xml, */*"


class FeedFetchError(Exception):
    """Raised when the feed cannot be retrieved."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class WeewxClient:
    """Single-shot async fetcher; failures are raised, never retried."""

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.user_agent = user_agent
        self.timeout = timeout

    async def fetch(self, location: str) -> str:
        """GET the feed and return its body text."""
        headers = {"User-Agent": self.user_agent, "Accept": RSS_ACCEPT}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(location, headers=headers, follow_redirects=True)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise FeedFetchError(f"HTTP error {status}", status_code=status) from e
        except httpx.TimeoutException as e:
            raise FeedFetchError(f"Request timed out after {self.timeout}s") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise FeedFetchError(f"Request failed: {e}") from e

        logger.debug("Fetched %s (%d bytes)", location, len(resp.content))
        return resp.text

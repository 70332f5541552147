"""weewx RSS weather provider: fetch, parse and normalize one report."""

import asyncio
import logging
from collections.abc import Callable

from weewxfeed.ingest.converter import parse_float
from weewxfeed.ingest.report_normalizer import normalize
from weewxfeed.ingest.rss_document import parse_rss
from weewxfeed.ingest.text_block import parse_item
from weewxfeed.ingest.timezone_resolver import resolve_timezone
from weewxfeed.ingest.weewx_client import FeedFetchError, WeewxClient
from weewxfeed.models.feed import FeedDocument, FeedParseError
from weewxfeed.models.report import REPORT_CHARACTERISTICS, WeatherResult

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[Exception | None, WeatherResult | None], None]


class WeewxRssAPI:
    """Weather provider backed by a weewx station's RSS export.

    The feed's first item holds current conditions (plus the station's
    geo tags), the second the daily summary. No forecasts are published.
    """

    attribution = "Powered by weewx"
    report_characteristics = REPORT_CHARACTERISTICS
    forecast_characteristics: tuple[str, ...] = ()
    forecast_days = 0

    def __init__(
        self,
        location: str,
        client: WeewxClient | None = None,
        timezone_resolver: Callable[[float, float], str] = resolve_timezone,
    ):
        self.location = location
        self.client = client or WeewxClient()
        self.timezone_resolver = timezone_resolver

    async def update(self) -> WeatherResult:
        """Fetch the feed once and return the current report.

        Raises FeedFetchError when the feed is unreachable and
        FeedParseError (or its FeedStructureError subclass) when the body
        is not a usable weewx RSS document.
        """
        logger.debug("Updating weather with weewx")
        try:
            body = await self.client.fetch(self.location)
        except FeedFetchError as e:
            logger.error("Error retrieving weather report")
            logger.error("Error message: %s", e)
            raise

        try:
            return self.parse_report(parse_rss(body))
        except FeedParseError as e:
            logger.error("Error parsing weather feed %s: %s", self.location, e)
            raise

    def parse_report(self, document: FeedDocument) -> WeatherResult:
        conditions_item, daily_item = document.require_items(2)
        conditions = parse_item(conditions_item.require_content())
        daily = parse_item(daily_item.require_content())

        lat, lon = conditions_item.require_coordinates()
        timezone = self.timezone_resolver(parse_float(lat), parse_float(lon))
        logger.debug("Using timezone: %s", timezone)

        return WeatherResult(report=normalize(conditions, daily, timezone), forecasts=[])

    def update_with_callback(self, callback: UpdateCallback) -> None:
        """Run one update and report it as ``callback(error, result)``.

        The callback fires exactly once, with either the error or the result.
        """
        try:
            result = asyncio.run(self.update())
        except (FeedFetchError, FeedParseError) as e:
            callback(e, None)
            return
        callback(None, result)

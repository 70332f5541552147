"""Read the RSS 2.0 envelope of a weewx feed."""

import logging

import feedparser

from weewxfeed.models.feed import (
    FeedDocument,
    FeedItem,
    FeedParseError,
    FeedStructureError,
)

logger = logging.getLogger(__name__)


def parse_rss(body: str | bytes) -> FeedDocument:
    """Parse a feed body into its items.

    Raises FeedParseError when nothing usable could be read and
    FeedStructureError when the document is not an RSS channel.
    """
    # Bytes are always treated as content, never as a URL or file path
    if isinstance(body, str):
        body = body.encode("utf-8")
    parsed = feedparser.parse(body)

    if parsed.bozo and not parsed.entries:
        raise FeedParseError(f"RSS parsing failed: {parsed.bozo_exception}")
    if parsed.bozo:
        logger.warning("RSS feed had parsing issues: %s", parsed.bozo_exception)

    version = parsed.get("version", "")
    if not version.startswith("rss"):
        raise FeedStructureError(f"Expected an RSS feed, got {version or 'unknown format'}")

    items = [_parse_item(entry) for entry in parsed.entries]
    logger.debug("Parsed RSS channel with %d items", len(items))
    return FeedDocument(
        title=parsed.feed.get("title", "").strip(),
        items=items,
    )


def _parse_item(entry) -> FeedItem:
    content = entry.get("content")
    return FeedItem(
        title=entry.get("title", "").strip(),
        content_encoded=content[0].get("value", "") if content else None,
        lat=entry.get("geo_lat"),
        long=entry.get("geo_long"),
    )

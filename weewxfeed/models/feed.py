"""RSS feed envelope models."""

from dataclasses import dataclass, field


class FeedParseError(Exception):
    """Raised when the feed body is not well-formed XML."""


class FeedStructureError(FeedParseError):
    """Raised when the XML lacks the nodes a weewx feed must carry."""


@dataclass(frozen=True)
class FeedItem:
    title: str = ""
    content_encoded: str | None = None
    lat: str | None = None
    long: str | None = None

    def require_content(self) -> str:
        if self.content_encoded is None:
            raise FeedStructureError(
                f"Feed item {self.title!r} has no content:encoded element"
            )
        return self.content_encoded

    def require_coordinates(self) -> tuple[str, str]:
        if self.lat is None or self.long is None:
            raise FeedStructureError(
                f"Feed item {self.title!r} has no geo:lat/geo:long elements"
            )
        return self.lat, self.long


@dataclass(frozen=True)
class FeedDocument:
    title: str = ""
    items: list[FeedItem] = field(default_factory=list)

    def require_items(self, count: int) -> list[FeedItem]:
        """Return the first ``count`` items, raising if the feed is shorter."""
        if len(self.items) < count:
            raise FeedStructureError(
                f"Expected at least {count} feed items, found {len(self.items)}"
            )
        return self.items[:count]

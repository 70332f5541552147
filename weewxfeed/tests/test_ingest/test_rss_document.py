"""Tests for the RSS envelope reader."""

import pytest

from weewxfeed.ingest.rss_document import parse_rss
from weewxfeed.models.feed import FeedItem, FeedParseError, FeedStructureError


class TestParseRss:
    def test_items_parsed(self, weewx_rss_body: str):
        doc = parse_rss(weewx_rss_body)
        assert doc.title == "Berlin Mitte, Germany: Weather Conditions"
        assert len(doc.items) == 3
        assert doc.items[0].title.startswith("Weather Conditions")
        assert doc.items[1].title.startswith("Daily Weather Summary")

    def test_geo_tags(self, weewx_rss_body: str):
        doc = parse_rss(weewx_rss_body)
        assert doc.items[0].lat == "52.5200"
        assert doc.items[0].long == "13.4050"
        assert doc.items[1].lat is None

    def test_content_encoded_text(self, weewx_rss_body: str):
        doc = parse_rss(weewx_rss_body)
        content = doc.items[0].content_encoded
        assert content is not None
        assert "Time: 19.10.2026 14:05:00" in content
        assert "Outside Temperature: 12,3" in content

    def test_bytes_body(self, weewx_rss_body: str):
        doc = parse_rss(weewx_rss_body.encode("utf-8"))
        assert len(doc.items) == 3

    def test_not_xml(self):
        with pytest.raises(FeedParseError):
            parse_rss("not xml at all")

    def test_html_body_is_parse_error(self):
        with pytest.raises(FeedParseError):
            parse_rss("<html><body>Not found<br></body></html>")

    def test_wrong_root(self):
        with pytest.raises(FeedStructureError, match="Expected an RSS feed"):
            parse_rss("<feed><entry/></feed>")

    def test_well_formed_non_feed(self):
        with pytest.raises(FeedParseError):
            parse_rss("<html/>")

    def test_missing_channel_has_no_items(self):
        doc = parse_rss("<rss version='2.0'></rss>")
        assert doc.items == []

    def test_empty_channel(self):
        doc = parse_rss("<rss><channel><title>x</title></channel></rss>")
        assert doc.items == []


class TestFeedDocumentAccess:
    def test_require_items(self, weewx_rss_body: str):
        first, second = parse_rss(weewx_rss_body).require_items(2)
        assert first.lat == "52.5200"
        assert second.lat is None

    def test_require_items_too_few(self, single_item_body: str):
        doc = parse_rss(single_item_body)
        with pytest.raises(FeedStructureError, match="at least 2 feed items, found 1"):
            doc.require_items(2)

    def test_require_content_missing(self):
        with pytest.raises(FeedStructureError, match="content:encoded"):
            FeedItem(title="empty").require_content()

    def test_require_coordinates_missing(self):
        with pytest.raises(FeedStructureError, match="geo:lat"):
            FeedItem(title="no geo", lat="52.5").require_coordinates()

    def test_structure_error_is_parse_error(self):
        assert issubclass(FeedStructureError, FeedParseError)

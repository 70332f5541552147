"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

FEED_URL = "https://station.example.com/weewx/RSS/weewx_rss.xml"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def feed_url() -> str:
    return FEED_URL


@pytest.fixture
def weewx_rss_body(fixtures_dir: Path) -> str:
    """A three-item weewx RSS export for a station in Berlin."""
    return (fixtures_dir / "weewx_rss.xml").read_text(encoding="utf-8")


@pytest.fixture
def single_item_body(fixtures_dir: Path) -> str:
    return (fixtures_dir / "weewx_rss_single_item.xml").read_text(encoding="utf-8")


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "feed": {"location": FEED_URL, "timeout_seconds": 5.0},
        "logging": {"level": "WARNING"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture(autouse=True)
def _no_location_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WEEWXFEED_LOCATION", raising=False)

"""YAML config loader with environment override and dotted lookup."""

import os
from pathlib import Path
from typing import Any

import yaml

from weewxfeed.config.defaults import LOCATION_ENV_VAR
from weewxfeed.config.schema import WeewxConfig


def load_config(path: str | Path | None = None) -> WeewxConfig:
    """Load and validate config from a YAML file.

    A missing path or an empty file yields the defaults. The
    WEEWXFEED_LOCATION environment variable overrides feed.location.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    location = os.environ.get(LOCATION_ENV_VAR)
    if location:
        raw["feed"] = {**(raw.get("feed") or {}), "location": location}

    return WeewxConfig(**raw)


def get_config_value(config: WeewxConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'feed.location'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj

"""Lenient number parsing and unit conversions for weewx feed values."""

import math
import re

from weewxfeed.models.report import UNKNOWN_DIRECTION

KPH_PER_MPS = 3.6
MM_PER_CM = 10.0

COMPASS_SECTORS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
SECTOR_WIDTH = 360.0 / len(COMPASS_SECTORS)

# Longest numeric prefix, e.g. "1013.2 mbar" -> "1013.2"
_FLOAT_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_float(value: str | None) -> float:
    """Parse the leading decimal number of a feed value, NaN if there is none."""
    if value is None:
        return math.nan
    m = _FLOAT_PREFIX_RE.match(value)
    if m is None:
        return math.nan
    return float(m.group(1))


def parse_int(value: str | None) -> float:
    """Parse the leading integer of a feed value.

    Returns a float so that a missing value can be NaN.
    """
    if value is None:
        return math.nan
    m = _INT_PREFIX_RE.match(value)
    if m is None:
        return math.nan
    return float(m.group(1))


def round_half_up(value: float) -> int | float:
    """Round .5 away from negative infinity; NaN and infinities pass through."""
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def kph_to_mps(kph: float) -> float:
    return kph / KPH_PER_MPS


def cm_to_mm(cm: float) -> float:
    return cm * MM_PER_CM


def wind_direction(degrees: float) -> str:
    """Map a bearing in degrees onto one of the 16 compass sectors."""
    if math.isnan(degrees) or math.isinf(degrees):
        return UNKNOWN_DIRECTION
    index = int(math.floor((degrees % 360.0) / SECTOR_WIDTH + 0.5))
    return COMPASS_SECTORS[index % len(COMPASS_SECTORS)]

"""Resolve a station's IANA timezone from its geo coordinates."""

import logging
from functools import lru_cache

from timezonefinder import TimezoneFinder

logger = logging.getLogger(__name__)

FALLBACK_TIMEZONE = "UTC"


@lru_cache(maxsize=1)
def _finder() -> TimezoneFinder:
    # Loading the boundary data is slow, build it once per process
    return TimezoneFinder()


def resolve_timezone(lat: float, lon: float) -> str:
    """Return the zone name for a coordinate, UTC when none is found.

    Raises ValueError for coordinates outside the valid range.
    """
    tz_name = _finder().timezone_at(lng=lon, lat=lat)
    if tz_name is None:
        logger.warning(
            "No timezone found for %.4f,%.4f, using %s",
            lat, lon, FALLBACK_TIMEZONE,
        )
        return FALLBACK_TIMEZONE
    return tz_name

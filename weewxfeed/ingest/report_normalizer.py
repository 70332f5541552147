"""Combine parsed weewx field maps into a normalized WeatherReport."""

import logging
import math
import re
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from weewxfeed.ingest.converter import (
    cm_to_mm,
    kph_to_mps,
    parse_float,
    parse_int,
    round_half_up,
    wind_direction,
)
from weewxfeed.models.report import INVALID_TIME, WeatherReport

logger = logging.getLogger(__name__)

# weewx renders $current.dateTime with the station locale, e.g. "19.10.2026 14:05:00"
OBSERVATION_TIME_FORMATS = ("%d.%m.%Y %H:%M:%S", "%d.%m.%Y %H:%M")
# Trailing text such as a zone abbreviation is ignored
_OBSERVATION_TIME_RE = re.compile(r"^\s*(\d{1,2}\.\d{1,2}\.\d{4})\s+(\d{1,2}:\d{2}(?::\d{2})?)")
WIND_SEPARATOR = " kph from "


def normalize(
    conditions: dict[str, str], daily: dict[str, str], timezone: str
) -> WeatherReport:
    """Build a report from the current-conditions and daily-summary blocks.

    Missing or malformed fields never raise: numbers become NaN and the
    observation time becomes "Invalid date".
    """
    wind_speed, direction = _parse_wind(conditions.get("Wind"))

    return WeatherReport(
        observation_time=format_observation_time(conditions.get("Time"), timezone),
        temperature=parse_float(conditions.get("OutsideTemperature")),
        dew_point=parse_float(conditions.get("Dewpoint")),
        humidity=parse_float(conditions.get("Humidity")),
        air_pressure=round_half_up(parse_float(conditions.get("Barometer"))),
        rain_1h=cm_to_mm(parse_float(conditions.get("RainRate"))),
        rain_day=cm_to_mm(parse_float(daily.get("Raintoday"))),
        wind_speed=wind_speed,
        wind_direction=direction,
        wind_speed_max=kph_to_mps(parse_float(daily.get("MaxWind"))),
    )


def format_observation_time(value: str | None, timezone: str) -> str:
    """Localize a ``DD.MM.YYYY HH:mm:ss`` stamp to ``timezone`` as ``HH:MM:SS``."""
    if value is None:
        return INVALID_TIME
    try:
        tz = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, observation time unavailable", timezone)
        return INVALID_TIME

    m = _OBSERVATION_TIME_RE.match(value)
    if m is None:
        return INVALID_TIME
    stamp = f"{m.group(1)} {m.group(2)}"
    for fmt in OBSERVATION_TIME_FORMATS:
        try:
            observed = datetime.strptime(stamp, fmt)
        except ValueError:
            continue
        return observed.replace(tzinfo=tz).strftime("%H:%M:%S")
    return INVALID_TIME


def _parse_wind(value: str | None) -> tuple[float, str]:
    """Split ``"<speed> kph from <degrees>"`` into m/s and a compass label."""
    if value is None:
        return math.nan, wind_direction(math.nan)
    speed, _, degrees = value.partition(WIND_SEPARATOR)
    return kph_to_mps(parse_float(speed)), wind_direction(parse_int(degrees))

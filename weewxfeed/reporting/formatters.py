"""Output formatters for weather reports."""

import json
import math

from weewxfeed.models.report import WeatherResult

NOT_AVAILABLE = "n/a"


def _fmt(value: float, spec: str, unit: str) -> str:
    if math.isnan(value):
        return NOT_AVAILABLE
    return f"{value:{spec}} {unit}"


def format_report_text(result: WeatherResult, attribution: str = "") -> str:
    """Plain text report for the terminal."""
    r = result.report
    lines = [
        f"=== Weather Report | {r.observation_time} ===",
        f"Temperature: {_fmt(r.temperature, '.1f', '°C')} | "
        f"Dew point: {_fmt(r.dew_point, '.1f', '°C')}",
        f"Humidity: {_fmt(r.humidity, '.0f', '%')} | "
        f"Pressure: {_fmt(r.air_pressure, '.0f', 'hPa')}",
        f"Rain: {_fmt(r.rain_1h, '.1f', 'mm/h')} | "
        f"Today: {_fmt(r.rain_day, '.1f', 'mm')}",
        f"Wind: {_fmt(r.wind_speed, '.1f', 'm/s')} {r.wind_direction} | "
        f"Max: {_fmt(r.wind_speed_max, '.1f', 'm/s')}",
    ]
    if attribution:
        lines.append(attribution)
    return "\n".join(lines)


def format_report_json(result: WeatherResult) -> str:
    """JSON report keyed by characteristic name, NaN rendered as null."""
    report = {
        key: None if isinstance(value, float) and math.isnan(value) else value
        for key, value in result.report.to_characteristics().items()
    }
    data = {"report": report, "forecasts": list(result.forecasts)}
    return json.dumps(data, indent=2, ensure_ascii=False)

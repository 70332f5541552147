"""Normalized weather report models."""

from dataclasses import dataclass, field

# Characteristic names exposed by the weewx provider, in report order
REPORT_CHARACTERISTICS: tuple[str, ...] = (
    "ObservationTime",
    "Temperature",
    "DewPoint",
    "Humidity",
    "AirPressure",
    "Rain1h",
    "RainDay",
    "WindSpeed",
    "WindDirection",
    "WindSpeedMax",
)

INVALID_TIME = "Invalid date"
UNKNOWN_DIRECTION = "Unknown"


@dataclass(frozen=True)
class WeatherReport:
    """Current conditions in metric units.

    Numeric fields are NaN when the feed did not carry a parseable value.
    """

    observation_time: str  # HH:MM:SS local to the station
    temperature: float  # °C
    dew_point: float  # °C
    humidity: float  # %
    air_pressure: int | float  # hPa, float only when NaN
    rain_1h: float  # mm/h
    rain_day: float  # mm
    wind_speed: float  # m/s
    wind_direction: str
    wind_speed_max: float  # m/s

    def to_characteristics(self) -> dict[str, float | int | str]:
        return {
            "ObservationTime": self.observation_time,
            "Temperature": self.temperature,
            "DewPoint": self.dew_point,
            "Humidity": self.humidity,
            "AirPressure": self.air_pressure,
            "Rain1h": self.rain_1h,
            "RainDay": self.rain_day,
            "WindSpeed": self.wind_speed,
            "WindDirection": self.wind_direction,
            "WindSpeedMax": self.wind_speed_max,
        }


@dataclass(frozen=True)
class WeatherResult:
    report: WeatherReport
    forecasts: list = field(default_factory=list)  # weewx feeds carry none

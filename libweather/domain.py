"""Forecast data model shared by drivers, cache consumers and the CLI.

A Forecast owns its days and every day owns its hours; nothing points
back up the tree. Numeric fields that the provider omitted (or sent in a
form we could not convert) hold the sentinels below instead of a guess.
"""
from __future__ import annotations

import datetime as dt
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

# Sentinel for int fields (weather code, temperatures, wind, humidity, pressure).
MISSING_INT = -2147483648
# Sentinel for float fields (rain).
MISSING_FLOAT = -sys.float_info.max


def is_missing(value) -> bool:
    """Return True if `value` is a missing-field sentinel (or None)."""
    if value is None:
        return True
    if isinstance(value, float):
        return value == MISSING_FLOAT
    if isinstance(value, int):
        return value == MISSING_INT
    return False


class WeatherCondition(IntEnum):
    """Weather condition codes used by the provider's `symbol` elements."""
    UNDEFINED = 0
    CLEAR = 1
    SCATTERED_CLOUDS = 2
    CLOUDY = 3
    OVERCAST = 4
    SCATTERED_CLOUDS_LIGHT_RAIN = 5
    CLOUDY_LIGHT_RAIN = 6
    OVERCAST_LIGHT_RAIN = 7
    SCATTERED_CLOUDS_MODERATE_RAIN = 8
    CLOUDY_MODERATE_RAIN = 9
    OVERCAST_MODERATE_RAIN = 10
    SCATTERED_CLOUDS_THUNDERSTORM = 11
    CLOUDY_THUNDERSTORM = 12
    OVERCAST_THUNDERSTORM = 13
    SCATTERED_CLOUDS_THUNDERSTORM_HAIL = 14
    CLOUDY_THUNDERSTORM_HAIL = 15
    OVERCAST_THUNDERSTORM_HAIL = 16
    SCATTERED_CLOUDS_SNOW = 17
    CLOUDY_SNOW = 18
    OVERCAST_SNOW = 19
    SCATTERED_CLOUDS_SLEET = 20
    CLOUDY_SLEET = 21
    OVERCAST_SLEET = 22


_SKY = ("Clear", "Scattered clouds", "Cloudy", "Overcast")

_PRECIPITATION = (
    "light rain",
    "moderate rain",
    "thunderstorms",
    "thunderstorms and hailstorms",
    "snow",
    "sleet",
)


def describe_weather(code: int) -> str:
    """Return an English description of a weather code ("Unknown" if unrecognized)."""
    if code is None or not WeatherCondition.CLEAR <= code <= WeatherCondition.OVERCAST_SLEET:
        return "Unknown"
    if code <= WeatherCondition.OVERCAST:
        return _SKY[code - 1]
    # Codes 5..22 come in groups of three: scattered clouds, cloudy, overcast.
    group, sky = divmod(code - WeatherCondition.SCATTERED_CLOUDS_LIGHT_RAIN, 3)
    return f"{_SKY[sky + 1]} with {_PRECIPITATION[group]}"


@dataclass(frozen=True)
class Location:
    """A place the provider publishes forecasts for."""
    name: str  # uppercase
    province: str
    latitude: float
    longitude: float
    code: str  # provider location code


@dataclass
class ForecastHour:
    """Forecast for one hour (or a 3 hour slot on later days)."""
    timestamp: Optional[dt.datetime]  # timezone-aware, provider timezone
    weather: int = MISSING_INT
    temperature: int = MISSING_INT
    wind_speed: int = MISSING_INT
    wind_direction: Optional[str] = None
    rain: float = MISSING_FLOAT
    humidity: int = MISSING_INT
    pressure: int = MISSING_INT

    @property
    def description(self) -> str:
        return describe_weather(self.weather)


@dataclass
class ForecastDay:
    """Daily summary plus the hourly breakdown, when the provider sends one."""
    date: Optional[dt.date]
    weather: int = MISSING_INT
    temp_min: int = MISSING_INT
    temp_max: int = MISSING_INT
    wind_speed: int = MISSING_INT
    rain: float = MISSING_FLOAT
    humidity: int = MISSING_INT
    pressure: int = MISSING_INT
    hours: List[ForecastHour] = field(default_factory=list)

    @property
    def description(self) -> str:
        return describe_weather(self.weather)


@dataclass
class Forecast:
    """Days in document order, which is chronological order."""
    days: List[ForecastDay] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self):
        return iter(self.days)

"""Weather forecasts from the Tiempo (ilmeteo.net) API with a per-day local cache."""

from .domain import (
    MISSING_FLOAT,
    MISSING_INT,
    Forecast,
    ForecastDay,
    ForecastHour,
    Location,
    WeatherCondition,
    describe_weather,
    is_missing,
)
from .errors import ForecastParseError, WeatherError

__all__ = [
    "MISSING_FLOAT",
    "MISSING_INT",
    "Forecast",
    "ForecastDay",
    "ForecastHour",
    "ForecastParseError",
    "Location",
    "WeatherCondition",
    "WeatherError",
    "describe_weather",
    "is_missing",
]

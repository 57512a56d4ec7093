"""Exceptions raised inside libweather."""


class WeatherError(Exception):
    """Base class for libweather errors."""


class ForecastParseError(WeatherError):
    """The provider document is not a forecast we know how to read."""

"""Forecast drivers (provider-specific fetch and parse logic)."""

from .base import CallableForecastDriver, ForecastDriver
from .factory import build_driver
from .tiempo import ForecastResult, fetch_forecast, forecast_url, parse_forecast

__all__ = [
    "build_driver",
    "CallableForecastDriver",
    "ForecastDriver",
    "ForecastResult",
    "fetch_forecast",
    "forecast_url",
    "parse_forecast",
]

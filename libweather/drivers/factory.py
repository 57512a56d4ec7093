"""Factory helpers for choosing the forecast driver at startup."""

from __future__ import annotations

from libweather import config
from libweather.drivers import tiempo
from libweather.drivers.base import CallableForecastDriver, ForecastDriver
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="drivers/factory")


DEFAULT_DRIVER_NAME = tiempo.DRIVER_NAME


def build_driver(settings: config.Settings | None = None) -> ForecastDriver:
    """Instantiate the configured forecast driver."""
    settings = settings or config.settings
    name = (settings.driver or DEFAULT_DRIVER_NAME).lower()

    if name == tiempo.DRIVER_NAME:
        logger.debug("Using Tiempo driver")
        return CallableForecastDriver(name=tiempo.DRIVER_NAME, fetch=tiempo.fetch_forecast)

    raise ValueError(f"Unknown forecast driver '{name}'")

"""Interface for forecast drivers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from libweather.drivers.tiempo import ForecastResult


class ForecastDriver(Protocol):
    """Anything that can turn a provider location code into a ForecastResult."""

    name: str

    def fetch_forecast(self, code: str, **kwargs) -> ForecastResult:
        """Return the forecast for `code`, or an error result."""
        ...


@dataclass
class CallableForecastDriver(ForecastDriver):
    """Wrap a fetch callable under a driver name."""

    name: str
    fetch: Callable[..., ForecastResult]

    def fetch_forecast(self, code: str, **kwargs) -> ForecastResult:
        """Delegate to the configured fetch callable."""
        return self.fetch(code, **kwargs)

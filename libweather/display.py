"""Plain-text rendering of locations and forecasts for the CLI."""
from __future__ import annotations

from typing import List

from libweather.domain import Forecast, Location, is_missing

MISSING_TEXT = "-"


def _fmt(value, fmt: str = "{}") -> str:
    """Format a field, rendering sentinels as MISSING_TEXT."""
    if is_missing(value):
        return MISSING_TEXT
    return fmt.format(value)


def format_location(location: Location) -> str:
    return (
        f"Location   : {location.name} ({location.province})\n"
        f"Coordinates: {location.latitude:f}, {location.longitude:f}\n"
        f"Code       : {location.code}\n"
    )


def format_forecast(forecast: Forecast, details: bool = False) -> str:
    """Return the daily table and, with `details`, one hourly table per day."""
    lines: List[str] = [
        "Date   Min (°) Max (°) Humidity (%) Wind(km/h) Weather",
        "----   ------- ------- ------------ ---------- -------",
    ]
    for day in forecast.days:
        date_str = day.date.strftime("%a %d") if day.date else MISSING_TEXT
        lines.append(
            f"{date_str:<6} {_fmt(day.temp_min):>7} {_fmt(day.temp_max):>7} "
            f"{_fmt(day.humidity):>12} {_fmt(day.wind_speed):>10} {day.description}"
        )

    if details:
        for day in forecast.days:
            date_str = day.date.strftime("%A, %d %B") if day.date else MISSING_TEXT
            lines.extend(["", "", date_str, "", "Time  Temp (°) Wind       Weather", "----  -------- ---------- -------"])
            for hour in day.hours:
                time_str = hour.timestamp.strftime("%H:%M") if hour.timestamp else MISSING_TEXT
                wind = _fmt(hour.wind_speed)
                if hour.wind_direction:
                    wind = f"{wind} {hour.wind_direction}"
                lines.append(f"{time_str:<5} {_fmt(hour.temperature):>8} {wind:<10} {hour.description}")

    return "\n".join(lines) + "\n"

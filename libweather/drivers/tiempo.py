"""Tiempo (ilmeteo.net) driver: URL, XML parsing and the cached fetch.

The API answers with a five day forecast: daily summaries for every day,
hour-by-hour details for the first two and 3 hour slots for the rest.

    <report>
      <location city="...">
        <interesting>...</interesting>
        <day value="20180312" name="...">
          <symbol value="3" desc="..."/>
          <tempmin value="5"/> <tempmax value="12"/>
          <wind value="19" dir="N"/> <rain value="0.4"/>
          <humidity value="80"/> <pressure value="1012"/>
          <hour value="06:00">
            <symbol value="2"/> <temp value="6"/> <wind value="10" dir="NE"/> ...
          </hour>
        </day>
      </location>
    </report>
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Optional, Union
from xml.etree import ElementTree
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from libweather import config
from libweather.cache import cache_base_dir, cache_get, cache_set
from libweather.conversions import get_prop_float, get_prop_int, parse_date, parse_time
from libweather.domain import Forecast, ForecastDay, ForecastHour
from libweather.errors import ForecastParseError
from libweather.net import http_get
from utils.logging_utils import get_tagged_logger, mask_url
logger = get_tagged_logger(__name__, tag="drivers/tiempo")

DRIVER_NAME = "tiempo"

TIEMPO_URL_TEMPLATE = (
    "http://{host}/index.php?api_lang=it&localidad={code}&affiliate_id={affiliate_id}&v=2&h=1"
)

REPORT_TAG = "report"
LOCATION_TAG = "location"
DAY_TAG = "day"
HOUR_TAG = "hour"


@dataclass
class ForecastResult:
    """Outcome of `fetch_forecast`: a Forecast, or None plus a diagnostic."""
    forecast: Optional[Forecast]
    error: Optional[str] = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return self.forecast is not None


def forecast_url(code: str, settings: config.Settings | None = None) -> str:
    """Return the Tiempo endpoint for the Italian location `code`."""
    settings = settings or config.settings
    return TIEMPO_URL_TEMPLATE.format(
        host=settings.tiempo_api_host,
        code=code,
        affiliate_id=settings.tiempo_affiliate_id,
    )


def parse_hour(element: ElementTree.Element, day: ForecastDay, tz: dt.tzinfo) -> ForecastHour:
    """Convert an ``<hour>`` element; its timestamp is the parent day's date at ``HH:MM``."""
    time_of_day = parse_time(element.get("value"))
    timestamp = None
    if day.date is not None and time_of_day is not None:
        timestamp = dt.datetime.combine(day.date, time_of_day, tzinfo=tz)
    else:
        logger.warning("Hour without a usable timestamp on %s: %r", day.date, element.get("value"))

    hour = ForecastHour(timestamp=timestamp)
    for child in element:
        if child.tag == "symbol":
            hour.weather = get_prop_int(child)
        elif child.tag == "temp":
            hour.temperature = get_prop_int(child)
        elif child.tag == "wind":
            hour.wind_speed = get_prop_int(child)
            hour.wind_direction = child.get("dir")
        elif child.tag == "rain":
            hour.rain = get_prop_float(child)
        elif child.tag == "humidity":
            hour.humidity = get_prop_int(child)
        elif child.tag == "pressure":
            hour.pressure = get_prop_int(child)
    return hour


def parse_day(element: ElementTree.Element, tz: dt.tzinfo) -> ForecastDay:
    """Convert a ``<day>`` element together with its ``<hour>`` children."""
    day = ForecastDay(date=parse_date(element.get("value")))
    if day.date is None:
        logger.warning("Day with an unparsable date: %r", element.get("value"))

    for child in element:
        if child.tag == "symbol":
            day.weather = get_prop_int(child)
        elif child.tag == "tempmin":
            day.temp_min = get_prop_int(child)
        elif child.tag == "tempmax":
            day.temp_max = get_prop_int(child)
        elif child.tag == "wind":
            day.wind_speed = get_prop_int(child)
        elif child.tag == "rain":
            day.rain = get_prop_float(child)
        elif child.tag == "humidity":
            day.humidity = get_prop_int(child)
        elif child.tag == "pressure":
            day.pressure = get_prop_int(child)
        elif child.tag == HOUR_TAG:
            hour = parse_hour(child, day, tz)
            previous = day.hours[-1].timestamp if day.hours else None
            if previous is not None and hour.timestamp is not None and hour.timestamp <= previous:
                logger.warning("Hours out of order on %s: %s after %s", day.date, hour.timestamp, previous)
            day.hours.append(hour)
    return day


def resolve_timezone(timezone: Union[str, dt.tzinfo, None] = None) -> dt.tzinfo:
    """Return the tzinfo for an IANA key (default ``settings.timezone``); ValueError if unknown."""
    if isinstance(timezone, dt.tzinfo):
        return timezone
    key = timezone or config.settings.timezone
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone '{key}'") from e


def parse_forecast(
    content: Union[bytes, str],
    *,
    timezone: Union[str, dt.tzinfo, None] = None,
) -> Forecast:
    """
    Parse a Tiempo XML document into a Forecast.

    Raises ForecastParseError when the document is not well formed, the
    root is not ``<report>`` or its first child is not ``<location>``.
    Bad or missing values inside days and hours never raise: the
    affected fields keep their sentinels. An unknown `timezone` raises
    ValueError before the document is read.
    """
    tz = resolve_timezone(timezone)
    try:
        report = ElementTree.fromstring(content)
    except ElementTree.ParseError as e:
        raise ForecastParseError(f"Failed to parse document: {e}") from e

    if report.tag != REPORT_TAG:
        raise ForecastParseError(
            f"Tiempo XML parsing error: root element {REPORT_TAG} not found (got {report.tag})."
        )
    location = next(iter(report), None)
    if location is None or location.tag != LOCATION_TAG:
        raise ForecastParseError(
            f"Tiempo XML parsing error: {LOCATION_TAG} element inside {REPORT_TAG} not found."
        )

    forecast = Forecast()
    for child in location:
        # <location> also carries siblings such as <interesting>.
        if child.tag != DAY_TAG:
            continue
        forecast.days.append(parse_day(child, tz))

    logger.debug(
        "Parsed forecast: %d days, %d hours",
        len(forecast.days),
        sum(len(d.hours) for d in forecast.days),
    )
    return forecast


def fetch_forecast(
    code: str,
    *,
    settings: config.Settings | None = None,
    today: dt.date | None = None,
) -> ForecastResult:
    """
    Return the Tiempo forecast for location `code`, using today's cache entry when present.

    Cache hit: the cached payload is parsed and returned; if it no longer
    parses the error is returned as is (no network fallback). Cache miss:
    one GET; transport errors and non-200 statuses produce an error
    result and leave the cache untouched; the raw body is cached only
    after it parsed successfully.
    """
    settings = settings or config.settings
    try:
        tz = resolve_timezone(settings.timezone)
    except ValueError as e:
        logger.error("Cannot fetch forecast for %s: %s", code, e)
        return ForecastResult(forecast=None, error=str(e))
    base_dir = cache_base_dir(settings)

    if settings.cache_enabled:
        cached = cache_get(DRIVER_NAME, code, today=today, base_dir=base_dir)
        if cached is not None:
            logger.info("Using cached forecast for %s", code)
            try:
                forecast = parse_forecast(cached, timezone=tz)
            except ForecastParseError as e:
                logger.error("Cached forecast for %s is unreadable: %s", code, e)
                return ForecastResult(forecast=None, error=str(e), from_cache=True)
            return ForecastResult(forecast=forecast, from_cache=True)

    url = forecast_url(code, settings)
    logger.info("Fetching forecast for %s from %s", code, mask_url(url))
    data = http_get(url, timeout=settings.http_timeout_seconds)

    if data.transport_code:
        message = f"fetch_forecast transport error {int(data.transport_code)}: {data.transport_error}"
        logger.error(message)
        return ForecastResult(forecast=None, error=message)
    if data.http_status != 200:
        message = f"fetch_forecast HTTP status code {data.http_status}"
        logger.error(message)
        return ForecastResult(forecast=None, error=message)

    payload = data.content
    try:
        forecast = parse_forecast(payload, timezone=tz)
    except ForecastParseError as e:
        logger.error("Downloaded forecast for %s is unreadable: %s", code, e)
        return ForecastResult(forecast=None, error=str(e))

    if settings.cache_enabled:
        # A failed write is logged by cache_set; the next call downloads again.
        cache_set(DRIVER_NAME, code, payload, today=today, base_dir=base_dir)
    return ForecastResult(forecast=forecast)

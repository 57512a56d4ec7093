"""wtrc: command line client for the Tiempo weather forecasts."""

import argparse
import sys
from typing import List, Optional

from libweather import config
from libweather.conversions import is_number
from libweather.display import format_forecast, format_location
from libweather.drivers import build_driver
from libweather.locations import LOCATIONS, SearchType, find_location, search_locations
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wtrc", description="Get weather forecasts.")
    parser.add_argument("-s", "--search", metavar="L", help="Search a location whose name contains L")
    parser.add_argument(
        "-l",
        "--location",
        metavar="L",
        help="Get weather forecasts for the location L (location code or name, if unique)",
    )
    parser.add_argument("-H", "--hour", action="store_true", help="Show hourly forecast")
    parser.add_argument("--no-cache", action="store_true", help="Neither read nor write the daily cache")
    parser.add_argument("--log-level", default=None, help="Log level (default: WTR_LOG_LEVEL or WARNING)")
    return parser


def search_location(query: str) -> int:
    """Print every location whose name contains `query`."""
    results = search_locations(query, SearchType.PARTIAL_NAME)
    for location in results:
        print(format_location(location))
    count = len(results)
    print(f"{count} location{'s' if count != 1 else ''} found ({len(LOCATIONS)} locations available).\n")
    return 0


def get_forecasts(query: str, *, hourly: bool = False, settings: Optional[config.Settings] = None) -> int:
    """Print the forecast for the location with code or exact name `query`."""
    settings = settings or config.settings
    location = find_location(query)
    if location is None:
        attribute = "code" if is_number(query) else "name"
        print(f"Location with {attribute} '{query}' not found.", file=sys.stderr)
        return 1

    print(f"Weather forecasts for {location.name} ({location.province})\n")
    try:
        driver = build_driver(settings)
    except ValueError as e:
        logger.error("No forecast driver: %s", e)
        print(f"Unable to get the forecast: {e}", file=sys.stderr)
        return 1
    result = driver.fetch_forecast(location.code, settings=settings)
    if not result.ok:
        print(f"Unable to get the forecast: {result.error}", file=sys.stderr)
        return 1
    print(format_forecast(result.forecast, details=hourly), end="")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = config.settings
    if args.no_cache:
        settings = settings.model_copy(update={"cache_enabled": False})
    setup_logging(level=args.log_level or settings.log_level, job_name="wtrc")

    if args.search is None and args.location is None:
        print("Incorrect usage, try --help.", file=sys.stderr)
        return 1
    if args.search is not None:
        return search_location(args.search)
    return get_forecasts(args.location, hourly=args.hour, settings=settings)


if __name__ == "__main__":
    sys.exit(main())

"""Static registry of the Italian locations the Tiempo driver knows about."""
from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from libweather.conversions import is_number
from libweather.domain import Location


class SearchType(str, Enum):
    """How `search_locations` compares the query to the registry."""
    PARTIAL_NAME = "partial_name"
    EXACT_NAME = "exact_name"
    EXACT_CODE = "exact_code"


LOCATIONS: Tuple[Location, ...] = (
    Location(name="ACQUASPARTA", province="TR", latitude=42.6911449, longitude=12.5464788, code="28756"),
    Location(name="MONTECASTRILLI", province="TR", latitude=42.652434, longitude=12.488567, code="30429"),
    Location(name="ORVIETO", province="TR", latitude=42.7186152, longitude=12.1087907, code="30625"),
    Location(name="TERNI", province="TR", latitude=42.5641417, longitude=12.6405466, code="31553"),
    Location(name="PERUGIA", province="PG", latitude=43.1119613, longitude=12.3890104, code="30721"),
)


def search_locations(query: str, search_type: SearchType = SearchType.PARTIAL_NAME) -> List[Location]:
    """Return registry entries matching `query`, in registry order."""
    needle = query.upper()
    if search_type is SearchType.PARTIAL_NAME:
        return [loc for loc in LOCATIONS if needle in loc.name]
    if search_type is SearchType.EXACT_NAME:
        return [loc for loc in LOCATIONS if loc.name == needle]
    if search_type is SearchType.EXACT_CODE:
        return [loc for loc in LOCATIONS if loc.code == needle]
    raise ValueError(f"Unknown search type '{search_type}'")


def find_location(query: str) -> Optional[Location]:
    """Look a location up by code (all digits) or else by exact name."""
    search_type = SearchType.EXACT_CODE if is_number(query) else SearchType.EXACT_NAME
    matches = search_locations(query, search_type)
    return matches[0] if matches else None

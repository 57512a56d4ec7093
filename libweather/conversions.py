"""Safe conversions used while reading provider XML.

None of these raise on bad input: a value that cannot be converted comes
back as the matching sentinel from `libweather.domain` (or None), so one
malformed attribute never aborts a whole forecast.
"""
from __future__ import annotations

import datetime as dt
import math
from typing import Optional
from xml.etree.ElementTree import Element

from libweather.domain import MISSING_FLOAT, MISSING_INT

INT32_MIN = -2147483648
INT32_MAX = 2147483647


def str_to_int(value: Optional[str]) -> int:
    """Convert a base-10 string to int; MISSING_INT when empty, malformed or out of int32 range."""
    if not value or value != value.strip() or not value.isascii() or "_" in value:
        return MISSING_INT
    try:
        number = int(value, 10)
    except ValueError:
        return MISSING_INT
    if not INT32_MIN <= number <= INT32_MAX:
        return MISSING_INT
    return number


def str_to_float(value: Optional[str]) -> float:
    """Convert a string to float; MISSING_FLOAT when empty, malformed or not finite."""
    if not value or value != value.strip() or not value.isascii() or "_" in value:
        return MISSING_FLOAT
    try:
        number = float(value)
    except ValueError:
        return MISSING_FLOAT
    if not math.isfinite(number):
        return MISSING_FLOAT
    return number


def get_prop_int(element: Optional[Element], name: str = "value") -> int:
    """Read attribute `name` of `element` as int (MISSING_INT if absent/bad)."""
    if element is None:
        return MISSING_INT
    return str_to_int(element.get(name))


def get_prop_float(element: Optional[Element], name: str = "value") -> float:
    """Read attribute `name` of `element` as float (MISSING_FLOAT if absent/bad)."""
    if element is None:
        return MISSING_FLOAT
    return str_to_float(element.get(name))


def parse_date(value: Optional[str], fmt: str = "%Y%m%d") -> Optional[dt.date]:
    """Parse a calendar date such as "20180312"; None when it does not match `fmt`."""
    if not value:
        return None
    try:
        return dt.datetime.strptime(value.strip(), fmt).date()
    except ValueError:
        return None


def parse_time(value: Optional[str], fmt: str = "%H:%M") -> Optional[dt.time]:
    """Parse a time of day such as "06:00"; None when it does not match `fmt`."""
    if not value:
        return None
    try:
        return dt.datetime.strptime(value.strip(), fmt).time()
    except ValueError:
        return None


def is_number(value: str) -> bool:
    """True if `value` consists of ASCII digits only (the empty string counts)."""
    return all("0" <= ch <= "9" for ch in value)

"""Per-day filesystem cache of raw provider responses.

Layout: ``<base>/<YYYYMMDD>/<driver>-<location code>`` where ``<base>``
defaults to ``<tempdir>/libweather``. A new day means a new directory, so
yesterday's entries are simply never looked at again (nothing deletes
them). There is no locking; concurrent writers of the same key overwrite
each other with same-day data.

Neither `cache_get` nor `cache_set` raises on I/O problems: an unreadable
entry is a miss and a failed write is logged and reported as False.
"""
from __future__ import annotations

import datetime as dt
import tempfile
from pathlib import Path
from typing import Optional

from libweather import config
from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="cache")

CACHE_DIR_NAME = "libweather"
DATE_FORMAT = "%Y%m%d"


def cache_base_dir(settings: config.Settings | None = None) -> Path:
    """Return the cache root (``settings.cache_dir`` or ``<tempdir>/libweather``)."""
    settings = settings or config.settings
    if settings.cache_dir is not None:
        return Path(settings.cache_dir)
    return Path(tempfile.gettempdir()) / CACHE_DIR_NAME


def cache_dir_for(today: dt.date | None = None, *, base_dir: Path | None = None) -> Path:
    """Return the directory holding the entries of `today` (local date by default)."""
    today = today or dt.date.today()
    base = Path(base_dir) if base_dir is not None else cache_base_dir()
    return base / today.strftime(DATE_FORMAT)


def cache_file(
    driver: str,
    location_code: str,
    *,
    today: dt.date | None = None,
    base_dir: Path | None = None,
) -> Path:
    """Return the cache path for (driver, location code, day), creating its directory."""
    day_dir = cache_dir_for(today, base_dir=base_dir)
    day_dir.mkdir(parents=True, exist_ok=True)
    return day_dir / f"{driver}-{location_code}"


def cache_get(
    driver: str,
    location_code: str,
    *,
    today: dt.date | None = None,
    base_dir: Path | None = None,
) -> Optional[bytes]:
    """Return the cached payload, or None on a miss or any read error."""
    try:
        path = cache_file(driver, location_code, today=today, base_dir=base_dir)
        payload = path.read_bytes()
    except FileNotFoundError:
        logger.debug("Cache miss for %s-%s", driver, location_code)
        return None
    except OSError as e:
        logger.warning("Cache read failed, treating as miss: %s", e)
        return None
    logger.debug("Cache hit %s (%d bytes)", path, len(payload))
    return payload


def cache_set(
    driver: str,
    location_code: str,
    payload: bytes,
    *,
    today: dt.date | None = None,
    base_dir: Path | None = None,
) -> bool:
    """Store `payload` for today's key; returns False (and logs) if it could not be written."""
    try:
        path = cache_file(driver, location_code, today=today, base_dir=base_dir)
        path.write_bytes(payload)
    except OSError as e:
        logger.warning("Cache write failed, ignoring: %s", e)
        return False
    logger.debug("Cached %d bytes in %s", len(payload), path)
    return True

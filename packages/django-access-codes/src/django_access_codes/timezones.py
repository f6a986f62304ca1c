"""Coordinate to IANA timezone lookup."""
from functools import lru_cache
from typing import Callable, Optional

from django.utils.module_loading import import_string

from .conf import get_setting
from .exceptions import AccessCodesConfigError

TimezoneLookup = Callable[[float, float], Optional[str]]


@lru_cache(maxsize=1)
def _get_finder():
    """Build the shared TimezoneFinder once per process.

    Loading the boundary dataset is the expensive part; lookups against the
    finder are read-only.
    """
    from timezonefinder import TimezoneFinder

    return TimezoneFinder()


def get_timezone_name(latitude: float, longitude: float) -> Optional[str]:
    """Return the IANA timezone covering a point, or None over open ocean.

    Raises:
        ValueError: If the coordinates are outside the valid range.
    """
    return _get_finder().timezone_at(lat=latitude, lng=longitude)


def get_timezone_lookup() -> TimezoneLookup:
    """Return the configured timezone lookup callable.

    Uses ACCESS_CODES_TIMEZONE_LOOKUP when set, else get_timezone_name.

    Raises:
        AccessCodesConfigError: If the configured path cannot be imported.
    """
    path = get_setting('TIMEZONE_LOOKUP')
    if not path:
        return get_timezone_name

    try:
        lookup = import_string(path)
    except ImportError as e:
        raise AccessCodesConfigError(path, str(e)) from e

    if not callable(lookup):
        raise AccessCodesConfigError(path, 'not callable')
    return lookup

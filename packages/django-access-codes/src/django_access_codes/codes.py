"""Daily access codes derived from a location and its local calendar date.

A code is never stored. It is recomputed on demand from the location id, its
coordinates and today's date at those coordinates, so it rotates at local
midnight. Four digits is a deliberately small space: the code gates in-person,
same-day check-in and is not a credential.

Usage:
    from django_access_codes.codes import generate_access_code, validate_access_code

    code = generate_access_code(str(hospital.pk), '35.6895000', '139.6917000')
    validate_access_code('0421', str(hospital.pk), '35.6895000', '139.6917000')
"""
import hashlib
import logging
from dataclasses import dataclass
from datetime import datetime, timezone as dt_timezone
from typing import Optional
from zoneinfo import ZoneInfo

from django.utils import timezone

from .timezones import TimezoneLookup, get_timezone_lookup

logger = logging.getLogger(__name__)

# Hash input token for a missing coordinate. Codes already issued for
# locations without coordinates depend on this exact value.
MISSING_COORDINATE = '0'

CODE_LENGTH = 4
CODE_SPACE = 10 ** CODE_LENGTH

# 8 hex chars = 32 bits, comfortably larger than CODE_SPACE.
HASH_PREFIX_LENGTH = 8

UTC = ZoneInfo('UTC')


def _resolve_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return timezone.now()
    if timezone.is_naive(now):
        return timezone.make_aware(now, dt_timezone.utc)
    return now


def get_hospital_timezone(
    latitude: Optional[str],
    longitude: Optional[str],
    lookup: Optional[TimezoneLookup] = None,
) -> ZoneInfo:
    """Return the timezone at a location, falling back to UTC.

    Missing coordinates, an empty lookup result, unparseable coordinates,
    lookup errors and a misconfigured lookup all resolve to UTC. Only the
    empty result and missing coordinates go unlogged.
    """
    if not latitude or not longitude:
        return UTC

    try:
        if lookup is None:
            lookup = get_timezone_lookup()
        name = lookup(float(latitude), float(longitude))
        return ZoneInfo(name or 'UTC')
    except Exception as e:
        logger.warning(
            "Error getting timezone for coordinates (%s, %s): %s",
            latitude, longitude, e,
        )
        return UTC


def get_hospital_local_date(
    latitude: Optional[str],
    longitude: Optional[str],
    now: Optional[datetime] = None,
    lookup: Optional[TimezoneLookup] = None,
) -> str:
    """Return today's date at a location as YYYY-MM-DD.

    Args:
        latitude: Latitude in degrees as text, or None.
        longitude: Longitude in degrees as text, or None.
        now: Instant to evaluate (defaults to timezone.now()). Naive values
            are taken as UTC.
        lookup: Coordinate to timezone callable (defaults to the configured one).

    Returns:
        The calendar date in the location's timezone, or the UTC date when
        the timezone cannot be determined. Never raises for bad coordinates.
    """
    zone = get_hospital_timezone(latitude, longitude, lookup=lookup)
    return _resolve_now(now).astimezone(zone).date().isoformat()


def build_hash_input(
    hospital_id: str,
    latitude: Optional[str],
    longitude: Optional[str],
    local_date: str,
) -> str:
    """Return the canonical string hashed into a code."""
    return '-'.join([
        hospital_id,
        latitude or MISSING_COORDINATE,
        longitude or MISSING_COORDINATE,
        local_date,
    ])


def code_from_hash_input(hash_input: str) -> str:
    """Reduce a canonical string to a zero-padded numeric code."""
    digest = hashlib.sha256(hash_input.encode('utf-8')).hexdigest()
    number = int(digest[:HASH_PREFIX_LENGTH], 16)
    return str(number % CODE_SPACE).zfill(CODE_LENGTH)


@dataclass(frozen=True)
class DailyAccessCode:
    """A location's code together with the zone and date it was derived from."""

    code: str
    local_date: str
    timezone: ZoneInfo


def get_daily_access_code(
    hospital_id: str,
    latitude: Optional[str],
    longitude: Optional[str],
    *,
    now: Optional[datetime] = None,
    lookup: Optional[TimezoneLookup] = None,
) -> DailyAccessCode:
    """Derive today's code for a location, resolving its timezone once.

    Args:
        hospital_id: Stable identifier of the location.
        latitude: Latitude as text, or None.
        longitude: Longitude as text, or None.
        now: Instant to evaluate (defaults to timezone.now()). Naive values
            are taken as UTC.
        lookup: Coordinate to timezone callable (defaults to the configured one).
    """
    zone = get_hospital_timezone(latitude, longitude, lookup=lookup)
    local_date = _resolve_now(now).astimezone(zone).date().isoformat()
    code = code_from_hash_input(
        build_hash_input(hospital_id, latitude, longitude, local_date)
    )
    return DailyAccessCode(code=code, local_date=local_date, timezone=zone)


def generate_access_code(
    hospital_id: str,
    latitude: Optional[str],
    longitude: Optional[str],
    *,
    now: Optional[datetime] = None,
    lookup: Optional[TimezoneLookup] = None,
) -> str:
    """Generate the 4-digit access code for a location for its current local day.

    Returns:
        A string of exactly four digits, '0000' to '9999'.
    """
    return get_daily_access_code(
        hospital_id, latitude, longitude, now=now, lookup=lookup,
    ).code


def validate_access_code(
    code: str,
    hospital_id: str,
    latitude: Optional[str],
    longitude: Optional[str],
    *,
    now: Optional[datetime] = None,
    lookup: Optional[TimezoneLookup] = None,
) -> bool:
    """Check a submitted code against the location's current code.

    Comparison is on the exact string, so '42' does not match '0042'.
    """
    expected = generate_access_code(
        hospital_id, latitude, longitude, now=now, lookup=lookup,
    )
    return code == expected

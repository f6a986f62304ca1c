"""Services for hospital access codes.

Provides functions for:
- Reading a hospital's current access code for staff
- Gating visit registration on the access code
"""
import logging
import re
from datetime import datetime
from typing import Optional

from django_access_codes.codes import get_daily_access_code

from .exceptions import (
    AccessCodeRequiredError,
    InvalidAccessCodeError,
    UnauthorizedRoleError,
)
from .models import Hospital

logger = logging.getLogger(__name__)

ROLE_PARENT = 'parent'
ROLE_NURSE = 'nurse'
ROLE_ADMIN = 'admin'

# Staff register visits on a parent's behalf without a code
CODE_EXEMPT_ROLES = frozenset({ROLE_NURSE, ROLE_ADMIN})

ACCESS_CODE_PATTERN = re.compile(r'[0-9]{4}')


def get_access_code(hospital: Hospital) -> str:
    """Return the hospital's access code for its current local day."""
    return hospital.access_code


def describe_access_code(hospital: Hospital, *, now: Optional[datetime] = None) -> dict:
    """Return today's code together with the date and zone it was derived from."""
    latitude, longitude = hospital.coordinates
    daily = get_daily_access_code(str(hospital.pk), latitude, longitude, now=now)
    return {
        "hospital_id": str(hospital.pk),
        "hospital_name": hospital.name,
        "code": daily.code,
        "local_date": daily.local_date,
        "timezone": daily.timezone.key,
    }


def require_access_code(hospital: Hospital, code: Optional[str], *, role: str) -> None:
    """Check that a visit may be registered at a hospital.

    Parents must present today's code. Nurses and admins are exempt.

    Args:
        hospital: The hospital the visit is for.
        code: The code the user submitted, if any.
        role: The registering user's role.

    Raises:
        UnauthorizedRoleError: If role may not register visits.
        AccessCodeRequiredError: If a parent submitted no code.
        InvalidAccessCodeError: If a parent's code is not today's code.
    """
    if role in CODE_EXEMPT_ROLES:
        return
    if role != ROLE_PARENT:
        raise UnauthorizedRoleError(role)

    if not code:
        raise AccessCodeRequiredError()

    if not ACCESS_CODE_PATTERN.fullmatch(code) or not hospital.check_access_code(code):
        logger.info("Rejected access code for hospital %s", hospital.pk)
        raise InvalidAccessCodeError(hospital.pk)

"""System checks for django-access-codes."""
from django.core.checks import Error

from .exceptions import AccessCodesConfigError
from .timezones import get_timezone_lookup


def check_timezone_lookup(app_configs=None, **kwargs):
    """Report an ACCESS_CODES_TIMEZONE_LOOKUP that cannot be loaded.

    At runtime a bad path only degrades codes to the UTC date, so it is
    reported here where it cannot go unnoticed.
    """
    try:
        get_timezone_lookup()
    except AccessCodesConfigError as e:
        return [
            Error(
                str(e),
                hint="Set ACCESS_CODES_TIMEZONE_LOOKUP to the dotted path of a "
                     "callable taking (latitude, longitude), or remove it.",
                obj='settings.ACCESS_CODES_TIMEZONE_LOOKUP',
                id='django_access_codes.E001',
            )
        ]
    return []

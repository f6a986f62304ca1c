"""Django Access Codes configuration.

All settings can be overridden in your Django settings.py.

Example:
    # settings.py
    ACCESS_CODES_TIMEZONE_LOOKUP = 'myproject.geo.timezone_for_point'

The lookup is a callable taking ``(latitude, longitude)`` floats and returning
an IANA timezone name, or None/'' when the point has no zone.
"""

from django.conf import settings


def get_setting(name: str, default=None):
    """Get a setting with ACCESS_CODES_ prefix."""
    return getattr(settings, f"ACCESS_CODES_{name}", default)


# =============================================================================
# DEFAULT SETTINGS REFERENCE
# =============================================================================

# ACCESS_CODES_TIMEZONE_LOOKUP = None  # Optional - defaults to timezonefinder

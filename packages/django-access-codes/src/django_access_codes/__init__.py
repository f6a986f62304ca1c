"""Django Access Codes - Rotating daily access codes for physical locations."""

__version__ = '0.1.0'

__all__ = [
    'generate_access_code',
    'validate_access_code',
    'get_hospital_local_date',
    'get_daily_access_code',
    'get_timezone_lookup',
    'AccessCodesConfigError',
]


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name in ('generate_access_code', 'validate_access_code',
                'get_hospital_local_date', 'get_daily_access_code'):
        from . import codes
        return getattr(codes, name)
    if name == 'get_timezone_lookup':
        from .timezones import get_timezone_lookup
        return get_timezone_lookup
    if name == 'AccessCodesConfigError':
        from .exceptions import AccessCodesConfigError
        return AccessCodesConfigError
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

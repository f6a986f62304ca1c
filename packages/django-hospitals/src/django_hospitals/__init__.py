"""Django Hospitals - Hospitals gated by a daily access code."""

__version__ = '0.1.0'

__all__ = [
    'Hospital',
    'HospitalAccessError',
    'AccessCodeRequiredError',
    'InvalidAccessCodeError',
    'UnauthorizedRoleError',
]


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name == 'Hospital':
        from .models import Hospital
        return Hospital
    if name in __all__:
        from . import exceptions
        return getattr(exceptions, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

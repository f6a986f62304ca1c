"""Exceptions for django-access-codes."""


class AccessCodesError(Exception):
    """Base exception for access code errors."""
    pass


class AccessCodesConfigError(AccessCodesError):
    """Raised when the configured timezone lookup cannot be loaded."""

    def __init__(self, path: str, reason: str = ''):
        self.path = path
        message = f"ACCESS_CODES_TIMEZONE_LOOKUP {path!r} could not be imported"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)

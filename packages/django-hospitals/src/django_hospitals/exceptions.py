"""Exceptions for django-hospitals."""


class HospitalAccessError(Exception):
    """Base exception for hospital access errors."""
    pass


class AccessCodeRequiredError(HospitalAccessError):
    """Raised when a parent registers a visit without an access code."""

    def __init__(self):
        super().__init__("Access code is required")


class InvalidAccessCodeError(HospitalAccessError):
    """Raised when the submitted access code does not match today's code."""

    def __init__(self, hospital_id):
        self.hospital_id = hospital_id
        super().__init__("Invalid access code")


class UnauthorizedRoleError(HospitalAccessError):
    """Raised when the role may not register visits at all."""

    def __init__(self, role):
        self.role = role
        super().__init__(f"Unauthorized: Invalid role for creating visits: {role!r}")

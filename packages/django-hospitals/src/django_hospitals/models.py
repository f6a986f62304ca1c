"""Models for django-hospitals package."""
import uuid
from decimal import Decimal
from typing import Optional, Tuple

from django.core.validators import MinValueValidator
from django.db import models

from django_access_codes.codes import generate_access_code, validate_access_code

# Coordinates are hashed as the text a numeric(10, 7) column renders,
# e.g. "35.6895000", so ORM values and raw column values agree.
COORDINATE_DECIMAL_PLACES = 7


def format_coordinate(value) -> Optional[str]:
    """Render a coordinate with fixed precision, or None if unset."""
    if value is None or value == '':
        return None
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return f"{value:.{COORDINATE_DECIMAL_PLACES}f}"


class Hospital(models.Model):
    """A daycare hospital that children are checked into.

    Parents registering a visit must present the hospital's access code for
    the current local day. The code is derived from the hospital id and
    coordinates and is never stored.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255, db_index=True)
    address = models.TextField()

    # Coordinates (10 digits, 7 decimal places); optional
    latitude = models.DecimalField(
        max_digits=10, decimal_places=COORDINATE_DECIMAL_PLACES, null=True, blank=True,
    )
    longitude = models.DecimalField(
        max_digits=10, decimal_places=COORDINATE_DECIMAL_PLACES, null=True, blank=True,
    )

    capacity = models.PositiveIntegerField(default=20, help_text="Maximum children per day")
    pricing = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Daily cost",
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def __str__(self) -> str:
        return self.name

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def coordinates(self) -> Tuple[Optional[str], Optional[str]]:
        """Return (latitude, longitude) as fixed-precision strings."""
        return format_coordinate(self.latitude), format_coordinate(self.longitude)

    @property
    def access_code(self) -> str:
        """Today's access code at this hospital's local date."""
        latitude, longitude = self.coordinates
        return generate_access_code(str(self.pk), latitude, longitude)

    def check_access_code(self, code: str) -> bool:
        """Return True if code is this hospital's current access code."""
        latitude, longitude = self.coordinates
        return validate_access_code(code, str(self.pk), latitude, longitude)

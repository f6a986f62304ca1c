"""Pytest configuration for django-hospitals tests."""
import uuid
from decimal import Decimal

import pytest

UNLOCATED_ID = uuid.UUID('6f1c1f4e-2d6a-4c1b-9a51-3f1d2b7c9e10')
TOKYO_ID = uuid.UUID('3b2a1d5c-8e7f-4a60-b1c2-d3e4f5a6b7c8')


@pytest.fixture
def unlocated_hospital(db):
    """A hospital without coordinates."""
    from django_hospitals.models import Hospital

    return Hospital.objects.create(
        id=UNLOCATED_ID,
        name='Harbour Children\'s Daycare',
        address='1 Harbour Rd',
        pricing=Decimal('85.00'),
    )


@pytest.fixture
def tokyo_hospital(db):
    """A hospital in central Tokyo."""
    from django_hospitals.models import Hospital

    return Hospital.objects.create(
        id=TOKYO_ID,
        name='Shinjuku Kids Clinic',
        address='2-8-1 Nishi-Shinjuku, Tokyo',
        latitude=Decimal('35.6895'),
        longitude=Decimal('139.6917'),
        capacity=12,
        pricing=Decimal('6000.00'),
    )

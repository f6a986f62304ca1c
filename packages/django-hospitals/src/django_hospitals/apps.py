"""Django app configuration for django-hospitals."""
from django.apps import AppConfig


class DjangoHospitalsConfig(AppConfig):
    """App configuration for django-hospitals."""

    name = 'django_hospitals'
    verbose_name = 'Hospitals'
    default_auto_field = 'django.db.models.BigAutoField'

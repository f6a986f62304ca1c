"""Django app configuration for django-access-codes."""
from django.apps import AppConfig


class DjangoAccessCodesConfig(AppConfig):
    """App configuration for django-access-codes."""

    name = 'django_access_codes'
    verbose_name = 'Access Codes'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        """Register the timezone lookup system check."""
        from django.core import checks

        from .checks import check_timezone_lookup

        checks.register(check_timezone_lookup)

"""Config for the wrestler app."""

from django.apps import AppConfig


class WrestlerConfig(AppConfig):
    """Config for the wrestler app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.wrestler"

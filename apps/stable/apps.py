"""Config for the stable app."""

from django.apps import AppConfig


class StableConfig(AppConfig):
    """Config for the stable app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.stable"

"""Config for the referee app."""

from django.apps import AppConfig


class RefereeConfig(AppConfig):
    """Config for the referee app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.referee"

"""Common app configuration."""

from django.apps import AppConfig


class CommonConfig(AppConfig):
    """App configuration for the shared roster lifecycle building blocks."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.common"

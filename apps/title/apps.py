"""Config for the title app."""

from django.apps import AppConfig


class TitleConfig(AppConfig):
    """Config for the title app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.title"

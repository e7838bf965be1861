"""Config for the manager app."""

from django.apps import AppConfig


class ManagerConfig(AppConfig):
    """Config for the manager app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.manager"

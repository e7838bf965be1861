"""Config for the schedule app (events and their match cards)."""

from django.apps import AppConfig


class ScheduleConfig(AppConfig):
    """Config for the schedule app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.schedule"

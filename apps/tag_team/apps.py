"""Config for the tag_team app."""

from django.apps import AppConfig


class TagTeamConfig(AppConfig):
    """Config for the tag_team app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.tag_team"

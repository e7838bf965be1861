"""Core Django configuration (installed apps, primary keys)."""

from __future__ import annotations


INSTALLED_APPS = [
    "apps.common",
    "apps.wrestler",
    "apps.tag_team",
    "apps.manager",
    "apps.referee",
    "apps.title",
    "apps.stable",
    "apps.schedule",
]

# Roster models declare UUIDv7 primary keys explicitly; this only applies to
# models that do not.
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

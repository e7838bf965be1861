"""Runtime environment flags (environment name, DEBUG, SECRET_KEY)."""

from __future__ import annotations

from .env import env, env_bool


DJANGO_ENV = env("DJANGO_ENV", "development").lower()
DEBUG = env_bool("DEBUG", DJANGO_ENV != "production")
SECRET_KEY = env("SECRET_KEY", "change-me" if DEBUG else None, required=not DEBUG)

"""Logging configuration."""

from __future__ import annotations

from .env import env
from .runtime import DEBUG


RINGSIDE_LOG_LEVEL = env("RINGSIDE_LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "apps": {
            "handlers": ["console"],
            "level": RINGSIDE_LOG_LEVEL,
            "propagate": True,
        },
    },
}

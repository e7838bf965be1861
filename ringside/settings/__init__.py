"""Django settings entrypoint for the ringside project.

Settings are split into small modules per concern (runtime, database, roster
rules, logging) and re-exported here.

The public entrypoint is `DJANGO_SETTINGS_MODULE=ringside.settings`.
"""

from __future__ import annotations

# Core Django configuration
from .django_core import DEFAULT_AUTO_FIELD, INSTALLED_APPS  # noqa: F401

# i18n
from .i18n import *  # noqa: F403

# Logging
from .observability import LOGGING, RINGSIDE_LOG_LEVEL  # noqa: F401

# Roster behaviour switches
from .roster import (  # noqa: F401
    RINGSIDE_ALLOW_DUPLICATE_COMPETITORS,
    RINGSIDE_SYNC_KEEPS_CONTINUING_MEMBERS,
)

# Runtime flags (DEBUG, SECRET_KEY, etc.)
from .runtime import *  # noqa: F403

# Services
from .services import DATABASES  # noqa: F401

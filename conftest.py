"""Pytest configuration for the ringside Django project.

Local `.env` files may flip the roster switches (sync behaviour, duplicate
competitors). Tests assert the defaults, so they are pinned here; individual
tests that cover the alternative behaviour override them explicitly.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pytest_django.fixtures import SettingsWrapper


@pytest.fixture(autouse=True)
def _pin_roster_switches(settings: SettingsWrapper) -> None:
    settings.RINGSIDE_SYNC_KEEPS_CONTINUING_MEMBERS = False
    settings.RINGSIDE_ALLOW_DUPLICATE_COMPETITORS = True


@pytest.fixture
def now() -> datetime:
    """A fixed "current" instant; roster code never reads the clock itself."""
    return datetime(2024, 6, 1, 12, 0, tzinfo=UTC)

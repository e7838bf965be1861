"""Tests for wrestler status derived from periods."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from apps.common.services import lifecycle
from apps.title.models import Title
from apps.title.services.championships import award_title
from apps.wrestler.models import Wrestler, WrestlerInjury


@pytest.mark.django_db
def test_new_wrestler_has_no_status(now: datetime) -> None:
    """A new wrestler answers False to every status question."""
    wrestler = Wrestler.objects.create(name="Blank Slate")

    assert wrestler.is_unemployed()
    assert not wrestler.is_released()
    assert not wrestler.is_employed()
    assert not wrestler.is_suspended()
    assert not wrestler.is_injured()
    assert not wrestler.is_retired()
    assert not wrestler.has_employment_history()
    assert wrestler.current_employment() is None
    assert wrestler.first_employment() is None
    assert not wrestler.is_bookable(now)


@pytest.mark.django_db
def test_status_mirrors_open_and_closed_periods(now: datetime) -> None:
    """Status flags follow open and closed injury periods."""
    wrestler = Wrestler.objects.create(name="Mirror")

    lifecycle.injure(wrestler, now - timedelta(days=20))
    assert wrestler.is_injured()
    assert not wrestler.has_injury_history()

    lifecycle.heal(wrestler, now - timedelta(days=10))
    assert not wrestler.is_injured()
    assert wrestler.has_injury_history()

    lifecycle.injure(wrestler, now)
    assert wrestler.is_injured()
    assert wrestler.has_injury_history()
    assert WrestlerInjury.objects.filter(wrestler=wrestler).count() == 2


@pytest.mark.django_db
def test_released_means_history_without_current_employment(now: datetime) -> None:
    """Released means past employment, no contract and not retired."""
    wrestler = Wrestler.objects.create(name="Free Agent")
    lifecycle.employ(wrestler, now - timedelta(days=100))
    lifecycle.release(wrestler, now - timedelta(days=1))

    assert wrestler.is_released()
    assert not wrestler.is_unemployed()

    lifecycle.retire(wrestler, now)

    assert not wrestler.is_released()


@pytest.mark.django_db
def test_bookable_needs_a_started_and_unhindered_employment(now: datetime) -> None:
    """Bookable needs a started contract and no injury or suspension."""
    wrestler = Wrestler.objects.create(name="Bookable")
    lifecycle.employ(wrestler, now + timedelta(days=1))

    assert wrestler.is_employed()
    assert wrestler.has_future_employment(now)
    assert wrestler.future_employment(now) == wrestler.current_employment()
    assert not wrestler.is_bookable(now)

    lifecycle.employ(wrestler, now - timedelta(days=1))
    assert wrestler.is_bookable(now)

    lifecycle.injure(wrestler, now)
    assert not wrestler.is_bookable(now)

    lifecycle.heal(wrestler, now)
    lifecycle.suspend(wrestler, now)
    assert not wrestler.is_bookable(now)


@pytest.mark.django_db
def test_championship_predicates(now: datetime) -> None:
    """Championship predicates follow the wrestler's reigns."""
    wrestler = Wrestler.objects.create(name="Champ")
    title = Title.objects.create(name="Intercontinental Championship")
    lifecycle.debut(title, now - timedelta(days=365))

    assert not wrestler.is_champion()

    award_title(title, wrestler, now - timedelta(days=30))

    assert wrestler.is_champion()
    assert [reign.title for reign in wrestler.current_championships()] == [title]

    award_title(title, Wrestler.objects.create(name="Challenger"), now)

    assert not wrestler.is_champion()
    assert wrestler.previous_championships().get().lost_at == now

"""Tests for the unconditional open/close status transitions."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from apps.common.exceptions import InvalidRosterArgument
from apps.common.services import lifecycle
from apps.stable.models import Stable
from apps.tag_team.models import TagTeam
from apps.title.models import Title
from apps.wrestler.models import Wrestler


@pytest.mark.django_db
def test_employ_then_release_records_previous_employment() -> None:
    """Releasing closes the employment at the release date."""
    wrestler = Wrestler.objects.create(name="Rowdy Rhodes")
    hired = datetime(2024, 1, 1, tzinfo=UTC)
    released = datetime(2024, 6, 1, tzinfo=UTC)

    lifecycle.employ(wrestler, hired)
    assert wrestler.is_employed()

    lifecycle.release(wrestler, released)
    assert not wrestler.is_employed()
    assert wrestler.previous_employment().started_at == hired
    assert wrestler.previous_employment().ended_at == released


@pytest.mark.django_db
def test_retiring_a_stable_ends_its_activity_at_the_same_instant(now: datetime) -> None:
    """Retirement and the end of activity share one timestamp."""
    stable = Stable.objects.create(name="The Syndicate")
    established = now + timedelta(days=10)
    retired = now + timedelta(days=50)
    lifecycle.establish(stable, established)

    retirement = lifecycle.retire(stable, retired)

    activity = stable.previous_activity()
    assert activity.started_at == established
    assert activity.ended_at == retired
    assert retirement.started_at == retired
    assert retirement.ended_at is None
    assert stable.is_retired()
    assert not stable.is_currently_active()


@pytest.mark.django_db
def test_retiring_a_title_ends_its_activity(now: datetime) -> None:
    """A retired title is no longer active."""
    title = Title.objects.create(name="Television Championship")
    lifecycle.debut(title, now - timedelta(days=100))

    lifecycle.retire(title, now)

    assert title.previous_activity().ended_at == now
    assert title.is_retired()
    assert title.is_inactive()


@pytest.mark.django_db
def test_retiring_an_entity_without_activity_periods_only_opens_retirement(
    now: datetime,
) -> None:
    """Entities without activity periods just get a retirement."""
    wrestler = Wrestler.objects.create(name="Old Timer")

    lifecycle.retire(wrestler, now)

    assert wrestler.is_retired()
    assert wrestler.current_retirement().started_at == now


@pytest.mark.django_db
def test_transitions_require_the_period_kind(now: datetime) -> None:
    """Transitions on a missing period kind raise instead of passing silently."""
    tag_team = TagTeam.objects.create(name="Twin Towers")
    wrestler = Wrestler.objects.create(name="No Activity")

    with pytest.raises(InvalidRosterArgument) as excinfo:
        lifecycle.injure(tag_team, now)
    assert excinfo.value.code == "unsupported_transition"

    with pytest.raises(InvalidRosterArgument):
        lifecycle.activate(wrestler, now)


@pytest.mark.django_db
def test_close_transitions_without_open_period_return_none(now: datetime) -> None:
    """Closing with nothing open is a no-op returning None."""
    wrestler = Wrestler.objects.create(name="Clean Record")
    title = Title.objects.create(name="Hardcore Championship")

    assert lifecycle.release(wrestler, now) is None
    assert lifecycle.reinstate(wrestler, now) is None
    assert lifecycle.heal(wrestler, now) is None
    assert lifecycle.unretire(wrestler, now) is None
    assert lifecycle.pull(title, now) is None
    assert not wrestler.retirement.exists()


@pytest.mark.django_db
def test_transitions_do_not_check_business_rules(now: datetime) -> None:
    """The core suspends even a never-employed wrestler; guards live elsewhere."""
    wrestler = Wrestler.objects.create(name="Unsigned Upstart")

    lifecycle.suspend(wrestler, now)

    assert wrestler.is_suspended()
    assert wrestler.is_unemployed()


def test_activity_aliases_point_at_activate_and_deactivate() -> None:
    """debut, establish and pull are plain aliases."""
    assert lifecycle.debut is lifecycle.activate
    assert lifecycle.establish is lifecycle.activate
    assert lifecycle.pull is lifecycle.deactivate

"""Tests for tag team partner changes and team availability."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from apps.common.exceptions import InvalidRosterArgument
from apps.common.services import lifecycle
from apps.manager.models import Manager
from apps.schedule.models import Event
from apps.tag_team.models import TagTeam, TagTeamWrestler
from apps.tag_team.services.members import (
    add_partner,
    add_partners,
    remove_partner,
    remove_partners,
    sync_partners,
)
from apps.wrestler.models import Wrestler


def _signed(name: str, at: datetime) -> Wrestler:
    wrestler = Wrestler.objects.create(name=name)
    lifecycle.employ(wrestler, at)
    return wrestler


@pytest.mark.django_db
def test_only_wrestlers_become_partners(now: datetime) -> None:
    """Only wrestlers can join a tag team."""
    team = TagTeam.objects.create(name="Legion of Doom")
    manager = Manager.objects.create(first_name="Paul", last_name="Ellering")

    assert add_partner(team, manager, now) is None
    assert remove_partner(team, manager, now) is None
    assert not TagTeamWrestler.objects.exists()

    with pytest.raises(InvalidRosterArgument):
        add_partner(team, Event.objects.create(name="SummerSlam"), now)


@pytest.mark.django_db
def test_add_and_remove_partners(now: datetime) -> None:
    """Partners can be added and removed in bulk."""
    team = TagTeam.objects.create(name="Steiner Brothers")
    rick = Wrestler.objects.create(name="Rick Steiner")
    scott = Wrestler.objects.create(name="Scott Steiner")

    add_partners(team, [rick, scott], now)
    assert {w.pk for w in team.wrestlers.current_members()} == {rick.pk, scott.pk}

    remove_partners(team, [scott], now + timedelta(days=1))
    assert team.wrestlers.current_members() == [rick]
    assert scott.tag_teams.previous_members() == [team]


@pytest.mark.django_db
def test_sync_partners_ignores_non_wrestlers(now: datetime) -> None:
    """Partner sync ignores non-wrestlers."""
    team = TagTeam.objects.create(name="Harlem Heat")
    booker = Wrestler.objects.create(name="Booker T")
    stevie = Wrestler.objects.create(name="Stevie Ray")
    sister = Manager.objects.create(first_name="Sister", last_name="Sherri")
    add_partner(team, booker, now - timedelta(days=5))

    sync_partners(team, [booker], [stevie, sister], now)

    assert team.wrestlers.current_members() == [stevie]
    assert team.wrestlers.previous().get().wrestler == booker


@pytest.mark.django_db
def test_team_is_bookable_only_with_bookable_partners(now: datetime) -> None:
    """A team needs bookable partners to be bookable."""
    start = now - timedelta(days=30)
    team = TagTeam.objects.create(name="British Bulldogs")
    lifecycle.employ(team, start)

    assert not team.is_bookable(now)

    davey = _signed("Davey Boy Smith", start)
    dynamite = _signed("Dynamite Kid", start)
    add_partners(team, [davey, dynamite], start)
    assert team.is_bookable(now)

    lifecycle.injure(dynamite, now)
    assert not team.is_bookable(now)

    lifecycle.heal(dynamite, now)
    lifecycle.suspend(team, now)
    assert not team.is_bookable(now)

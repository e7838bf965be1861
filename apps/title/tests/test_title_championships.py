"""Tests for title reigns."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from apps.common.exceptions import InvalidRosterArgument, TransitionNotAllowed
from apps.common.services import lifecycle
from apps.referee.models import Referee
from apps.tag_team.models import TagTeam
from apps.title.models import Title, TitleChampionship
from apps.title.services.championships import award_title, current_champion, vacate_title
from apps.wrestler.models import Wrestler


@pytest.fixture
def title(now: datetime) -> Title:
    title = Title.objects.create(name="World Tag Team Championship")
    lifecycle.debut(title, now - timedelta(days=365))
    return title


@pytest.mark.django_db
def test_new_title_is_vacant_without_reigns(now: datetime) -> None:
    """A title never won is vacant and has no longest reign."""
    title = Title.objects.create(name="Unclaimed Championship")

    assert title.is_vacant()
    assert title.longest_reign(now) is None
    assert title.first_championship() is None
    assert current_champion(title) is None


@pytest.mark.django_db
def test_longest_reign_counts_open_reign_up_to_now(title: Title) -> None:
    """The open reign is measured up to `now`."""
    day_0 = datetime.fromisoformat("2024-01-01T00:00:00+00:00")
    first = Wrestler.objects.create(name="Champion A")
    second = Wrestler.objects.create(name="Champion B")

    award_title(title, first, day_0)
    award_title(title, second, day_0 + timedelta(days=90))

    longest = title.longest_reign(day_0 + timedelta(days=120))
    assert longest.champion == first
    assert longest.length(day_0 + timedelta(days=120)) == timedelta(days=90)
    assert current_champion(title) == second
    assert title.previous_championship().lost_at == day_0 + timedelta(days=90)


@pytest.mark.django_db
def test_longest_reign_ties_go_to_the_earlier_reign(title: Title, now: datetime) -> None:
    """Equal reigns resolve to the earlier one."""
    start = now - timedelta(days=20)
    first = Wrestler.objects.create(name="First")
    second = Wrestler.objects.create(name="Second")
    award_title(title, first, start)
    award_title(title, second, start + timedelta(days=10))

    assert title.longest_reign(now).champion == first


@pytest.mark.django_db
def test_tag_teams_can_hold_titles(title: Title, now: datetime) -> None:
    """Tag teams can hold titles."""
    team = TagTeam.objects.create(name="Demolition")

    reign = award_title(title, team, now)

    assert reign.champion == team
    assert str(reign.champion_ref) == f"tag_team:{team.pk}"
    assert team.is_champion()
    assert not title.is_vacant()


@pytest.mark.django_db
def test_only_wrestlers_and_tag_teams_can_win(title: Title, now: datetime) -> None:
    """Other roster kinds cannot win a title."""
    referee = Referee.objects.create(first_name="Mike", last_name="Chioda")

    with pytest.raises(InvalidRosterArgument) as excinfo:
        award_title(title, referee, now)

    assert excinfo.value.code == "invalid_champion"
    assert not TitleChampionship.objects.exists()


@pytest.mark.django_db
def test_inactive_titles_cannot_be_awarded(now: datetime) -> None:
    """Titles that are not active cannot change hands."""
    title = Title.objects.create(name="Shelved Championship")

    with pytest.raises(TransitionNotAllowed) as excinfo:
        award_title(title, Wrestler.objects.create(name="Hopeful"), now)

    assert excinfo.value.code == "inactive"


@pytest.mark.django_db
def test_vacate_ends_the_reign(title: Title, now: datetime) -> None:
    """Vacating ends the reign; vacating again is a no-op."""
    award_title(title, Wrestler.objects.create(name="Stripped"), now - timedelta(days=5))

    reign = vacate_title(title, now)

    assert reign.lost_at == now
    assert title.is_vacant()
    assert vacate_title(title, now) is None


@pytest.mark.django_db
def test_reign_lengths_need_an_aware_now(title: Title, now: datetime) -> None:
    """Measuring reigns against a naive `now` is rejected, not miscomputed."""
    first = award_title(
        title, Wrestler.objects.create(name="Early Champ"), now - timedelta(days=9)
    )
    award_title(title, Wrestler.objects.create(name="Later Champ"), now - timedelta(days=3))
    naive_now = now.replace(tzinfo=None)

    with pytest.raises(InvalidRosterArgument) as excinfo:
        title.longest_reign(naive_now)
    assert excinfo.value.code == "naive_timestamp"

    with pytest.raises(InvalidRosterArgument):
        first.length(naive_now)

"""Tests for booking matches onto an event card."""

from __future__ import annotations

from datetime import datetime, timedelta
import logging

import pytest
from pytest_django.fixtures import SettingsWrapper

from apps.common.exceptions import (
    CompetitorConflictError,
    InvalidRosterArgument,
    RosterValidationError,
)
from apps.common.roster_types import RosterRef
from apps.common.services import lifecycle
from apps.referee.models import Referee
from apps.schedule.models import (
    Event,
    EventMatch,
    EventMatchCompetitor,
    EventMatchReferee,
    MatchType,
)
from apps.schedule.services import matches
from apps.schedule.services.matches import add_match_for_event
from apps.tag_team.models import TagTeam
from apps.title.models import Title
from apps.wrestler.models import Wrestler


@pytest.fixture
def event() -> Event:
    return Event.objects.create(name="WrestleMania")


@pytest.fixture
def singles() -> MatchType:
    return MatchType.objects.create(name="Singles", slug="singles")


@pytest.fixture
def hired(now: datetime) -> datetime:
    return now - timedelta(days=30)


def _wrestler(name: str, hired: datetime) -> Wrestler:
    wrestler = Wrestler.objects.create(name=name)
    lifecycle.employ(wrestler, hired)
    return wrestler


def _referee(last_name: str, hired: datetime) -> Referee:
    referee = Referee.objects.create(first_name="Ref", last_name=last_name)
    lifecycle.employ(referee, hired)
    return referee


@pytest.mark.django_db
def test_singles_match_is_created_with_its_roster(
    event: Event,
    singles: MatchType,
    hired: datetime,
    now: datetime,
) -> None:
    """A singles booking creates the match with its roster rows."""
    x = _wrestler("Wrestler X", hired)
    y = _wrestler("Wrestler Y", hired)
    referee = _referee("A", hired)

    match = add_match_for_event(
        event=event,
        match_type=singles,
        competitors={1: [x], 2: [y]},
        referees=[referee],
        now=now,
    )

    assert match.match_number == 1
    assert match.sides() == {1: [RosterRef.of(x)], 2: [RosterRef.of(y)]}
    assert match.referees() == [referee]
    assert match.titles() == []
    assert EventMatchCompetitor.objects.filter(match=match).count() == 2


@pytest.mark.django_db
def test_empty_competitors_fail_without_writing(
    event: Event,
    singles: MatchType,
    hired: datetime,
    now: datetime,
) -> None:
    """Booking without competitors writes nothing."""
    with pytest.raises(RosterValidationError) as excinfo:
        add_match_for_event(
            event=event,
            match_type=singles,
            competitors={1: []},
            referees=[_referee("A", hired)],
            now=now,
        )

    assert excinfo.value.code == "no_competitors"
    assert not EventMatch.objects.exists()


@pytest.mark.django_db
def test_missing_referees_fail(
    event: Event,
    singles: MatchType,
    hired: datetime,
    now: datetime,
) -> None:
    """Booking without referees is refused."""
    with pytest.raises(RosterValidationError) as excinfo:
        add_match_for_event(
            event=event,
            match_type=singles,
            competitors={1: [_wrestler("X", hired)], 2: [_wrestler("Y", hired)]},
            referees=[],
            now=now,
        )

    assert excinfo.value.code == "no_referees"


@pytest.mark.django_db
def test_match_numbers_follow_existing_matches(
    event: Event,
    singles: MatchType,
    hired: datetime,
    now: datetime,
) -> None:
    """Match numbers continue from the event's existing card."""
    EventMatch.objects.create(event=event, match_type=singles, match_number=1)
    x = _wrestler("X", hired)
    y = _wrestler("Y", hired)
    referee = _referee("A", hired)

    numbers = [
        add_match_for_event(
            event=event,
            match_type=singles,
            competitors={1: [x], 2: [y]},
            referees=[referee],
            now=now,
        ).match_number
        for _ in range(3)
    ]

    assert numbers == [2, 3, 4]
    other = Event.objects.create(name="Royal Rumble")
    assert (
        add_match_for_event(
            event=other,
            match_type=singles,
            competitors={1: [x], 2: [y]},
            referees=[referee],
            now=now,
        ).match_number
        == 1
    )


@pytest.mark.django_db
def test_one_populated_side_is_not_a_match(
    event: Event,
    singles: MatchType,
    hired: datetime,
    now: datetime,
) -> None:
    """A booking left with one populated side is refused."""
    injured = _wrestler("Injured", hired)
    lifecycle.injure(injured, now - timedelta(days=1))

    with pytest.raises(RosterValidationError) as excinfo:
        add_match_for_event(
            event=event,
            match_type=singles,
            competitors={1: [_wrestler("Healthy", hired)], 2: [injured]},
            referees=[_referee("A", hired)],
            now=now,
        )

    assert excinfo.value.code == "not_enough_sides"
    assert not EventMatch.objects.exists()


@pytest.mark.django_db
def test_ineligible_candidates_are_dropped(
    event: Event,
    singles: MatchType,
    hired: datetime,
    now: datetime,
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Ineligible candidates are dropped with a warning."""
    x = _wrestler("X", hired)
    y = _wrestler("Y", hired)
    suspended = _wrestler("Suspended", hired)
    lifecycle.suspend(suspended, now - timedelta(days=1))
    unsigned = Wrestler.objects.create(name="Unsigned")
    referee = _referee("Active", hired)
    injured_referee = _referee("Injured", hired)
    lifecycle.injure(injured_referee, now - timedelta(days=1))
    active_title = Title.objects.create(name="Active Title")
    lifecycle.debut(active_title, hired)
    pulled_title = Title.objects.create(name="Pulled Title")

    with caplog.at_level(logging.WARNING, logger="apps.schedule.services.matches"):
        match = add_match_for_event(
            event=event,
            match_type=singles,
            competitors={1: [x, suspended], 2: [y, unsigned]},
            referees=[referee, injured_referee],
            titles=[active_title, pulled_title],
            now=now,
        )

    assert match.sides() == {1: [RosterRef.of(x)], 2: [RosterRef.of(y)]}
    assert match.referees() == [referee]
    assert match.titles() == [active_title]
    assert "Dropping ineligible competitor Suspended" in caplog.text
    assert "Dropping ineligible title Pulled Title" in caplog.text


@pytest.mark.parametrize(
    ("role", "code"),
    [
        ("competitors", "no_eligible_competitors"),
        ("referees", "no_eligible_referees"),
        ("titles", "no_eligible_titles"),
    ],
)
@pytest.mark.django_db
def test_all_candidates_ineligible_fails(
    role: str,
    code: str,
    event: Event,
    singles: MatchType,
    hired: datetime,
    now: datetime,
) -> None:
    """A role with no eligible candidates fails the booking."""
    booking = {
        "competitors": {1: [_wrestler("X", hired)], 2: [_wrestler("Y", hired)]},
        "referees": [_referee("A", hired)],
        "titles": [],
    }
    if role == "competitors":
        booking["competitors"] = {1: [Wrestler.objects.create(name="Unsigned")]}
    elif role == "referees":
        booking["referees"] = [Referee.objects.create(first_name="Un", last_name="Signed")]
    else:
        booking["titles"] = [Title.objects.create(name="Never Debuted")]

    with pytest.raises(RosterValidationError) as excinfo:
        add_match_for_event(event=event, match_type=singles, now=now, **booking)

    assert excinfo.value.code == code
    assert not EventMatch.objects.exists()


@pytest.mark.parametrize("side_number", [0, -1, "1", True])
@pytest.mark.django_db
def test_side_numbers_must_be_positive_integers(
    side_number: object,
    event: Event,
    singles: MatchType,
    hired: datetime,
    now: datetime,
) -> None:
    """Side numbers must be positive integers."""
    with pytest.raises(InvalidRosterArgument) as excinfo:
        add_match_for_event(
            event=event,
            match_type=singles,
            competitors={side_number: [_wrestler("X", hired)], 2: [_wrestler("Y", hired)]},
            referees=[_referee("A", hired)],
            now=now,
        )

    assert excinfo.value.code == "invalid_side"


@pytest.mark.django_db
def test_referees_cannot_compete(
    event: Event,
    singles: MatchType,
    hired: datetime,
    now: datetime,
) -> None:
    """Referees cannot be booked as competitors."""
    with pytest.raises(InvalidRosterArgument) as excinfo:
        add_match_for_event(
            event=event,
            match_type=singles,
            competitors={1: [_wrestler("X", hired)], 2: [_referee("B", hired)]},
            referees=[_referee("A", hired)],
            now=now,
        )

    assert excinfo.value.code == "invalid_competitor"


@pytest.mark.django_db
def test_multi_way_and_handicap_matches(
    event: Event,
    hired: datetime,
    now: datetime,
) -> None:
    """Any number of sides and competitors per side is accepted."""
    handicap = MatchType.objects.create(name="Handicap", slug="handicap")
    team = TagTeam.objects.create(name="Hardy Boyz")
    lifecycle.employ(team, hired)
    team.wrestlers.add_many([_wrestler("Matt", hired), _wrestler("Jeff", hired)], hired)
    big_show = _wrestler("Big Show", hired)
    edge = _wrestler("Edge", hired)
    christian = _wrestler("Christian", hired)

    match = add_match_for_event(
        event=event,
        match_type=handicap,
        competitors={1: [big_show], 2: [edge, christian], 5: [team]},
        referees=[_referee("A", hired)],
        now=now,
    )

    sides = match.sides()
    assert list(sides) == [1, 2, 5]
    assert set(sides[2]) == {RosterRef.of(edge), RosterRef.of(christian)}
    assert sides[5] == [RosterRef.of(team)]


@pytest.mark.django_db
def test_duplicate_competitors_follow_the_setting(
    event: Event,
    singles: MatchType,
    hired: datetime,
    now: datetime,
    settings: SettingsWrapper,
) -> None:
    """Cross-side duplicates are allowed unless switched off."""
    x = _wrestler("X", hired)
    y = _wrestler("Y", hired)
    referee = _referee("A", hired)

    match = add_match_for_event(
        event=event,
        match_type=singles,
        competitors={1: [x, x], 2: [y, x]},
        referees=[referee],
        now=now,
    )
    sides = match.sides()
    assert sides[1] == [RosterRef.of(x)]
    assert set(sides[2]) == {RosterRef.of(y), RosterRef.of(x)}

    settings.RINGSIDE_ALLOW_DUPLICATE_COMPETITORS = False
    with pytest.raises(CompetitorConflictError):
        add_match_for_event(
            event=event,
            match_type=singles,
            competitors={1: [x], 2: [y, x]},
            referees=[referee],
            now=now,
        )
    assert EventMatch.objects.count() == 1


@pytest.mark.django_db
def test_failure_while_attaching_rolls_back_the_match(
    event: Event,
    singles: MatchType,
    hired: datetime,
    now: datetime,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A failure while attaching rolls back the match row."""
    def _fail(*args: object, **kwargs: object) -> None:
        raise RuntimeError("storage failure")

    monkeypatch.setattr(matches, "add_competitors_to_match", _fail)

    with pytest.raises(RuntimeError, match="storage failure"):
        add_match_for_event(
            event=event,
            match_type=singles,
            competitors={1: [_wrestler("X", hired)], 2: [_wrestler("Y", hired)]},
            referees=[_referee("A", hired)],
            now=now,
        )

    assert not EventMatch.objects.exists()
    assert not EventMatchReferee.objects.exists()


@pytest.mark.django_db
def test_naive_now_is_rejected(event: Event, singles: MatchType) -> None:
    """Booking with a naive `now` is refused."""
    with pytest.raises(InvalidRosterArgument) as excinfo:
        add_match_for_event(
            event=event,
            match_type=singles,
            competitors={1: [], 2: []},
            referees=[],
            now=datetime(2024, 6, 1),  # noqa: DTZ001
        )

    assert excinfo.value.code == "naive_timestamp"

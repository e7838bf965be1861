"""Booking matches onto an event card.

`add_match_for_event` is the single entry point: it validates the requested
card, drops entities that cannot be booked right now, and writes the match with
its referees, titles and side-numbered competitors in one transaction.

Competitors are passed as a mapping of side number to the wrestlers and tag
teams on that side::

    add_match_for_event(
        event=event,
        match_type=singles,
        competitors={1: [wrestler_a], 2: [wrestler_b]},
        referees=[referee],
        now=timezone.now(),
    )

Any number of sides (triple threats, fatal four-ways) and any number of
competitors per side (handicap matches) is allowed, as long as at least two
sides end up populated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import datetime
import logging
from typing import Any

from django.conf import settings
from django.db import transaction

from apps.common.exceptions import (
    CompetitorConflictError,
    InvalidRosterArgument,
    RosterValidationError,
)
from apps.common.roster_types import RosterMemberType, RosterRef
from apps.common.utils import ensure_aware
from apps.schedule.models import (
    Event,
    EventMatch,
    EventMatchCompetitor,
    EventMatchReferee,
    EventMatchTitle,
    MatchType,
)


logger = logging.getLogger(__name__)

MIN_POPULATED_SIDES = 2

CompetitorSides = Mapping[int, Sequence[Any]]


def _require_kind(entity: Any, allowed: set[RosterMemberType], role: str) -> RosterRef:
    ref = RosterRef.of(entity)
    if ref.type not in allowed:
        raise InvalidRosterArgument(
            f"A {ref.type.label.lower()} cannot be booked as a {role}.",
            code=f"invalid_{role}",
        )
    return ref


def _filter_eligible(
    candidates: Iterable[Any],
    is_eligible: Callable[[Any], bool],
    role: str,
) -> list[Any]:
    """Keep eligible candidates, logging the ones that are dropped."""
    kept: list[Any] = []
    for candidate in candidates:
        if is_eligible(candidate):
            kept.append(candidate)
        else:
            logger.warning("Dropping ineligible %s %s from match booking.", role, candidate)
    return kept


def _validate_side_numbers(competitors: CompetitorSides) -> None:
    for side_number in competitors:
        if isinstance(side_number, bool) or not isinstance(side_number, int):
            raise InvalidRosterArgument(
                f"Side number must be an integer, got {side_number!r}.",
                code="invalid_side",
            )
        if side_number < 1:
            raise InvalidRosterArgument(
                "Side number must be positive.",
                code="invalid_side",
            )


def _eligible_sides(competitors: CompetitorSides, now: datetime) -> dict[int, list[Any]]:
    """Return the bookable competitors of every side that still has one.

    Duplicates within one side are collapsed.
    """
    allowed = {RosterMemberType.WRESTLER, RosterMemberType.TAG_TEAM}
    sides: dict[int, list[Any]] = {}
    for side_number in sorted(competitors):
        seen: set[RosterRef] = set()
        unique: list[Any] = []
        for competitor in competitors[side_number]:
            ref = _require_kind(competitor, allowed, "competitor")
            if ref not in seen:
                seen.add(ref)
                unique.append(competitor)
        kept = _filter_eligible(unique, lambda c: c.is_bookable(now), "competitor")
        if kept:
            sides[side_number] = kept
    return sides


def _check_duplicate_competitors(sides: Mapping[int, Sequence[Any]]) -> None:
    if getattr(settings, "RINGSIDE_ALLOW_DUPLICATE_COMPETITORS", True):
        return
    booked: dict[RosterRef, int] = {}
    for side_number, side in sides.items():
        for competitor in side:
            ref = RosterRef.of(competitor)
            if ref in booked:
                raise CompetitorConflictError(
                    f"{competitor} is booked on sides {booked[ref]} and {side_number}.",
                )
            booked[ref] = side_number


def add_referees_to_match(
    match: EventMatch,
    referees: Iterable[Any],
) -> list[EventMatchReferee]:
    """Assign referees to `match`; a referee listed twice is assigned once."""
    unique = {referee.pk: referee for referee in referees}
    return EventMatchReferee.objects.bulk_create(
        [EventMatchReferee(match=match, referee=referee) for referee in unique.values()],
    )


def add_titles_to_match(match: EventMatch, titles: Iterable[Any]) -> list[EventMatchTitle]:
    """Put titles on the line in `match`."""
    unique = {title.pk: title for title in titles}
    return EventMatchTitle.objects.bulk_create(
        [EventMatchTitle(match=match, title=title) for title in unique.values()],
    )


def add_competitors_to_match(
    match: EventMatch,
    competitors: CompetitorSides,
) -> list[EventMatchCompetitor]:
    """Book wrestlers and tag teams on their sides of `match`."""
    _validate_side_numbers(competitors)
    allowed = {RosterMemberType.WRESTLER, RosterMemberType.TAG_TEAM}
    links = []
    for side_number, side in competitors.items():
        for competitor in side:
            ref = _require_kind(competitor, allowed, "competitor")
            links.append(
                EventMatchCompetitor(
                    match=match,
                    competitor_type=ref.type,
                    competitor_id=ref.id,
                    side_number=side_number,
                ),
            )
    return EventMatchCompetitor.objects.bulk_create(links)


def add_match_for_event(
    *,
    event: Event,
    match_type: MatchType,
    competitors: CompetitorSides,
    referees: Sequence[Any],
    titles: Sequence[Any] = (),
    preview: str | None = None,
    now: datetime,
) -> EventMatch:
    """Create the next match on `event`'s card.

    Entities that cannot be booked at `now` are left out: wrestlers, tag teams
    and referees must be bookable, titles must be active.

    Raises:
        RosterValidationError: No competitors or referees were given, every
            candidate for a role was ineligible, or fewer than two sides have
            an eligible competitor.
        InvalidRosterArgument: A side number is not a positive integer, or an
            entity cannot fill the role it was passed for.
        CompetitorConflictError: A competitor is on more than one side while
            `RINGSIDE_ALLOW_DUPLICATE_COMPETITORS` is disabled.

    Returns:
        The created match.

    """
    ensure_aware(now, name="now")
    if not any(competitors.values()):
        raise RosterValidationError("No competitors provided.", code="no_competitors")
    if not referees:
        raise RosterValidationError("No referees provided.", code="no_referees")
    _validate_side_numbers(competitors)

    sides = _eligible_sides(competitors, now)
    if not sides:
        raise RosterValidationError(
            "No eligible competitors provided.",
            code="no_eligible_competitors",
        )

    for referee in referees:
        _require_kind(referee, {RosterMemberType.REFEREE}, "referee")
    eligible_referees = _filter_eligible(referees, lambda r: r.is_bookable(now), "referee")
    if not eligible_referees:
        raise RosterValidationError(
            "No eligible referees provided.",
            code="no_eligible_referees",
        )

    for title in titles:
        _require_kind(title, {RosterMemberType.TITLE}, "title")
    eligible_titles = _filter_eligible(titles, lambda t: t.is_currently_active(), "title")
    if titles and not eligible_titles:
        raise RosterValidationError("No eligible titles provided.", code="no_eligible_titles")

    if len(sides) < MIN_POPULATED_SIDES:
        raise RosterValidationError(
            "Match must have at least 2 sides with competitors.",
            code="not_enough_sides",
        )
    _check_duplicate_competitors(sides)

    with transaction.atomic():
        # Serialise numbering per event; the unique constraint backs this up on
        # backends without row locks.
        locked_event = Event.objects.select_for_update().get(pk=event.pk)
        match_number = EventMatch.objects.filter(event=locked_event).count() + 1
        match = EventMatch.objects.create(
            event=locked_event,
            match_type=match_type,
            match_number=match_number,
            preview=preview,
        )
        add_referees_to_match(match, eligible_referees)
        add_titles_to_match(match, eligible_titles)
        add_competitors_to_match(match, sides)

    logger.info(
        "Booked match %d on %s with %d sides.",
        match_number,
        event,
        len(sides),
    )
    return match

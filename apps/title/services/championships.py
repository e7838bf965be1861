"""Awarding and vacating titles."""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Any

from django.db import transaction

from apps.common.exceptions import InvalidRosterArgument, TransitionNotAllowed
from apps.common.roster_types import RosterRef
from apps.common.utils import ensure_aware
from apps.title.models import Title, TitleChampionship


logger = logging.getLogger(__name__)


def award_title(title: Title, champion: Any, at: datetime) -> TitleChampionship:
    """Crown `champion` as the new holder of `title` at `at`.

    The current reign, if any, ends at the same instant.

    Raises:
        InvalidRosterArgument: If `champion` is not a wrestler or tag team.
        TransitionNotAllowed: If the title is not active.

    """
    ensure_aware(at)
    ref = RosterRef.of(champion)
    if not ref.type.can_win_titles():
        raise InvalidRosterArgument(
            f"A {ref.type.label.lower()} cannot hold a title.",
            code="invalid_champion",
        )
    if not title.is_currently_active():
        raise TransitionNotAllowed(
            f"{title} cannot be awarded: not active.",
            code="inactive",
        )
    with transaction.atomic():
        title.championships.close(at)
        reign = TitleChampionship.objects.create(
            title=title,
            champion_type=ref.type,
            champion_id=ref.id,
            won_at=at,
        )
    logger.info("Awarded %s to %s at %s.", title, ref, at.isoformat())
    return reign


def vacate_title(title: Title, at: datetime) -> TitleChampionship | None:
    """End the current reign without a new champion.

    Returns:
        The ended reign, or None if the title was already vacant.

    """
    reign = title.championships.close(at)
    if reign is not None:
        logger.info("Vacated %s at %s.", title, at.isoformat())
    return reign


def current_champion(title: Title) -> Any | None:
    """Return the wrestler or tag team holding `title`, if anyone does."""
    reign = title.current_championship()
    return reign.champion if reign is not None else None

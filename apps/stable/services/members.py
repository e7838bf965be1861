"""Stable roster changes.

Stables hold wrestlers and tag teams in separate tables. Callers pass any
roster member; the member's kind picks the table. Other roster kinds
(managers, referees, titles, stables) are skipped with a debug log, while
objects that are not roster members at all are rejected.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
import logging
from typing import Any

from django.db import transaction

from apps.common.memberships import BoundMemberships
from apps.common.roster_types import RosterMemberType
from apps.common.utils import ensure_aware
from apps.stable.models import Stable


logger = logging.getLogger(__name__)


def _memberships_for(stable: Stable, member: Any) -> BoundMemberships | None:
    """Return the membership table `member` belongs in, or None if unsupported.

    Raises:
        InvalidRosterArgument: If `member` is not a roster member.

    """
    kind = RosterMemberType.from_model(member)
    if kind is RosterMemberType.WRESTLER:
        return stable.wrestlers
    if kind is RosterMemberType.TAG_TEAM:
        return stable.tag_teams
    logger.debug("Stables do not hold %s members; ignoring %s.", kind.value, member.pk)
    return None


def _split_by_kind(members: Iterable[Any]) -> tuple[list[Any], list[Any]]:
    wrestlers: list[Any] = []
    tag_teams: list[Any] = []
    for member in members:
        kind = RosterMemberType.from_model(member)
        if kind is RosterMemberType.WRESTLER:
            wrestlers.append(member)
        elif kind is RosterMemberType.TAG_TEAM:
            tag_teams.append(member)
        else:
            logger.debug("Stables do not hold %s members; ignoring %s.", kind.value, member.pk)
    return wrestlers, tag_teams


def add_member(stable: Stable, member: Any, at: datetime) -> Any | None:
    """Add a wrestler or tag team to `stable` at `at`."""
    memberships = _memberships_for(stable, member)
    if memberships is None:
        return None
    return memberships.add(member, at)


def remove_member(stable: Stable, member: Any, at: datetime) -> Any | None:
    """Remove a wrestler or tag team from `stable` at `at`."""
    memberships = _memberships_for(stable, member)
    if memberships is None:
        return None
    return memberships.remove(member, at)


def add_members(stable: Stable, members: Iterable[Any], at: datetime) -> None:
    with transaction.atomic():
        for member in members:
            add_member(stable, member, at)


def remove_members(stable: Stable, members: Iterable[Any], at: datetime) -> None:
    with transaction.atomic():
        for member in members:
            remove_member(stable, member, at)


def sync_members(
    stable: Stable,
    old_members: Iterable[Any],
    new_members: Iterable[Any],
    at: datetime,
) -> None:
    """Replace the stable's roster with `new_members` in one step.

    Wrestlers and tag teams are synced independently; see
    `BoundMemberships.sync` for how members in both sets are treated.
    """
    old_wrestlers, old_tag_teams = _split_by_kind(old_members)
    new_wrestlers, new_tag_teams = _split_by_kind(new_members)
    with transaction.atomic():
        stable.wrestlers.sync(old_wrestlers, new_wrestlers, at)
        stable.tag_teams.sync(old_tag_teams, new_tag_teams, at)


def disband_all(stable: Stable, at: datetime) -> int:
    """Close every open wrestler and tag team membership of `stable`.

    Returns:
        The number of memberships closed.

    """
    ensure_aware(at)
    with transaction.atomic():
        closed = stable.wrestlers.close_all(at) + stable.tag_teams.close_all(at)
    logger.info("Disbanded %s at %s (%d memberships closed).", stable, at.isoformat(), closed)
    return closed

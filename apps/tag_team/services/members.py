"""Tag team roster changes (partners joining and leaving)."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
import logging
from typing import Any

from django.db import transaction

from apps.common.roster_types import RosterMemberType
from apps.tag_team.models import TagTeam, TagTeamWrestler


logger = logging.getLogger(__name__)


def _is_partner(member: Any) -> bool:
    kind = RosterMemberType.from_model(member)
    if kind is RosterMemberType.WRESTLER:
        return True
    logger.debug("Tag teams only hold wrestlers; ignoring %s %s.", kind.value, member.pk)
    return False


def add_partner(tag_team: TagTeam, member: Any, at: datetime) -> TagTeamWrestler | None:
    """Add a wrestler to the team at `at`.

    Other roster members are ignored (None is returned); objects that are not
    roster members at all raise `InvalidRosterArgument`.
    """
    if not _is_partner(member):
        return None
    return tag_team.wrestlers.add(member, at)


def remove_partner(tag_team: TagTeam, member: Any, at: datetime) -> TagTeamWrestler | None:
    if not _is_partner(member):
        return None
    return tag_team.wrestlers.remove(member, at)


def add_partners(tag_team: TagTeam, members: Iterable[Any], at: datetime) -> None:
    with transaction.atomic():
        for member in members:
            add_partner(tag_team, member, at)


def remove_partners(tag_team: TagTeam, members: Iterable[Any], at: datetime) -> None:
    with transaction.atomic():
        for member in members:
            remove_partner(tag_team, member, at)


def sync_partners(
    tag_team: TagTeam,
    old_members: Iterable[Any],
    new_members: Iterable[Any],
    at: datetime,
) -> None:
    """Replace the team's partners in one step."""
    tag_team.wrestlers.sync(
        [member for member in old_members if _is_partner(member)],
        [member for member in new_members if _is_partner(member)],
        at,
    )

"""Guarded roster actions.

An action is what the application layer calls to change a roster member's
status. Each one:

1. checks the eligibility rules (`ensure_can_be_*`),
2. applies the core transition,
3. applies the follow-up transitions on related periods (ending a suspension
   on release, leaving stables on retirement, ...),

all inside one transaction, so a failure anywhere leaves nothing behind.
"""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Any

from django.db import transaction
from django.utils import timezone

from apps.common.roster_types import RosterMemberType
from apps.common.services import eligibility, lifecycle
from apps.common.status import Employable, Injurable, Retirable, Suspendable
from apps.common.utils import ensure_aware


logger = logging.getLogger(__name__)


def _resolve_at(at: datetime | None) -> datetime:
    return timezone.now() if at is None else ensure_aware(at)


def _kind(entity: Any) -> RosterMemberType:
    return RosterMemberType.from_model(entity)


def _end_unavailability(entity: Any, at: datetime) -> None:
    if isinstance(entity, Suspendable):
        lifecycle.reinstate(entity, at)
    if isinstance(entity, Injurable):
        lifecycle.heal(entity, at)


def _leave_affiliations(entity: Any, at: datetime) -> None:
    """Close the entity's memberships in managers, tag teams and stables."""
    for name in getattr(entity, "affiliations", ()):
        getattr(entity, name).close_all(at)


def _current_managers(entity: Any) -> list[Any]:
    if _kind(entity) not in {RosterMemberType.WRESTLER, RosterMemberType.TAG_TEAM}:
        return []
    return entity.managers.current_members()


def _suspend_if_active(entity: Any, at: datetime) -> None:
    if entity.is_employed() and not entity.is_suspended():
        lifecycle.suspend(entity, at)


def employ_member(entity: Any, *, at: datetime | None = None) -> Any:
    """Employ a roster member.

    A retired member comes out of retirement at the same instant. Employing a
    tag team also employs its current wrestlers that are not employed yet, and
    employing a wrestler or tag team employs its unemployed current managers.

    Returns:
        The open employment period.

    """
    at = _resolve_at(at)
    eligibility.ensure_can_be_employed(entity, at)
    with transaction.atomic():
        if isinstance(entity, Retirable) and entity.is_retired():
            lifecycle.unretire(entity, at)
        employment = lifecycle.employ(entity, at)
        if _kind(entity) is RosterMemberType.TAG_TEAM:
            for wrestler in entity.wrestlers.current_members():
                if eligibility.can_be_employed(wrestler, at):
                    employ_member(wrestler, at=at)
        for manager in _current_managers(entity):
            if eligibility.can_be_employed(manager, at):
                employ_member(manager, at=at)
    logger.info("Employed %s at %s.", entity, at.isoformat())
    return employment


def release_member(entity: Any, *, at: datetime | None = None) -> Any | None:
    """Release a roster member from their contract.

    Ends any suspension or injury first and drops the member from their
    managers, tag team and stable.
    """
    at = _resolve_at(at)
    eligibility.ensure_can_be_released(entity, at)
    with transaction.atomic():
        _leave_affiliations(entity, at)
        _end_unavailability(entity, at)
        employment = lifecycle.release(entity, at)
    logger.info("Released %s at %s.", entity, at.isoformat())
    return employment


def suspend_member(entity: Any, *, at: datetime | None = None) -> Any:
    """Suspend a roster member.

    A tag team's employed wrestlers are suspended with it. The employed current
    managers of a wrestler or tag team are suspended too.
    """
    at = _resolve_at(at)
    eligibility.ensure_can_be_suspended(entity, at)
    with transaction.atomic():
        suspension = lifecycle.suspend(entity, at)
        if _kind(entity) is RosterMemberType.TAG_TEAM:
            for wrestler in entity.wrestlers.current_members():
                _suspend_if_active(wrestler, at)
        for manager in _current_managers(entity):
            _suspend_if_active(manager, at)
    logger.info("Suspended %s at %s.", entity, at.isoformat())
    return suspension


def reinstate_member(entity: Any, *, at: datetime | None = None) -> Any | None:
    """Lift a suspension; suspended partners and managers are reinstated too."""
    at = _resolve_at(at)
    eligibility.ensure_can_be_reinstated(entity, at)
    with transaction.atomic():
        suspension = lifecycle.reinstate(entity, at)
        if _kind(entity) is RosterMemberType.TAG_TEAM:
            for wrestler in entity.wrestlers.current_members():
                if wrestler.is_suspended():
                    lifecycle.reinstate(wrestler, at)
        for manager in _current_managers(entity):
            if manager.is_suspended():
                lifecycle.reinstate(manager, at)
    logger.info("Reinstated %s at %s.", entity, at.isoformat())
    return suspension


def injure_member(entity: Any, *, at: datetime | None = None) -> Any:
    at = _resolve_at(at)
    eligibility.ensure_can_be_injured(entity, at)
    with transaction.atomic():
        injury = lifecycle.injure(entity, at)
    logger.info("Injured %s at %s.", entity, at.isoformat())
    return injury


def heal_member(entity: Any, *, at: datetime | None = None) -> Any | None:
    at = _resolve_at(at)
    eligibility.ensure_can_be_healed(entity, at)
    with transaction.atomic():
        injury = lifecycle.heal(entity, at)
    logger.info("Cleared %s from injury at %s.", entity, at.isoformat())
    return injury


def retire_member(entity: Any, *, at: datetime | None = None) -> Any:
    """Retire a roster member.

    Retirement ends any suspension, injury, employment and activity at the
    same instant and drops the member from their managers, tag team and
    stable. Retiring a title ends its current reign. Retiring a stable also
    retires its current wrestlers and tag teams (those that can be retired) and
    then disbands it.

    Returns:
        The open retirement period.

    """
    at = _resolve_at(at)
    eligibility.ensure_can_be_retired(entity, at)
    with transaction.atomic():
        if _kind(entity) is RosterMemberType.STABLE:
            members = [
                *entity.wrestlers.current_members(),
                *entity.tag_teams.current_members(),
            ]
            for member in members:
                if eligibility.can_be_retired(member, at):
                    retire_member(member, at=at)
            entity.wrestlers.close_all(at)
            entity.tag_teams.close_all(at)
        if _kind(entity) is RosterMemberType.TITLE:
            entity.championships.close(at)
        _leave_affiliations(entity, at)
        _end_unavailability(entity, at)
        if isinstance(entity, Employable):
            lifecycle.release(entity, at)
        retirement = lifecycle.retire(entity, at)
    logger.info("Retired %s at %s.", entity, at.isoformat())
    return retirement


def unretire_member(entity: Any, *, at: datetime | None = None) -> Any | None:
    """End a retirement; titles and stables become active again."""
    at = _resolve_at(at)
    eligibility.ensure_can_be_unretired(entity, at)
    with transaction.atomic():
        retirement = lifecycle.unretire(entity, at)
        if _kind(entity).can_be_activated():
            lifecycle.activate(entity, at)
    logger.info("Unretired %s at %s.", entity, at.isoformat())
    return retirement


def activate_member(entity: Any, *, at: datetime | None = None) -> Any:
    """Debut a title or establish a stable."""
    at = _resolve_at(at)
    eligibility.ensure_can_be_activated(entity, at)
    with transaction.atomic():
        activity = lifecycle.activate(entity, at)
    logger.info("Activated %s at %s.", entity, at.isoformat())
    return activity


def deactivate_member(entity: Any, *, at: datetime | None = None) -> Any | None:
    """Pull a title or deactivate a stable; a stable loses all its members."""
    at = _resolve_at(at)
    eligibility.ensure_can_be_deactivated(entity, at)
    with transaction.atomic():
        activity = lifecycle.deactivate(entity, at)
        if _kind(entity) is RosterMemberType.STABLE:
            entity.wrestlers.close_all(at)
            entity.tag_teams.close_all(at)
    logger.info("Deactivated %s at %s.", entity, at.isoformat())
    return activity

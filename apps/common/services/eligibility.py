"""Business rules deciding whether a status transition is allowed.

Every rule comes in two flavours:

- `ensure_can_be_<x>(entity, now)` raises `TransitionNotAllowed` with a short
  `code` naming the first rule that failed.
- `can_be_<x>(entity, now)` answers the same question with a bool.

`now` is the moment the transition would take effect; it only matters for
"signed/debuted but not started yet" checks.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Any

from apps.common.exceptions import TransitionNotAllowed
from apps.common.roster_types import RosterMemberType
from apps.common.status import (
    Activatable,
    Employable,
    Injurable,
    Retirable,
    Suspendable,
)


Guard = Callable[[Any, datetime], None]


def _deny(entity: Any, action: str, reason: str, code: str) -> TransitionNotAllowed:
    return TransitionNotAllowed(f"{entity} cannot be {action}: {reason}.", code=code)


def _require(entity: Any, capability: type, action: str) -> None:
    if not isinstance(entity, capability):
        raise _deny(
            entity,
            action,
            f"{type(entity).__name__} has no {capability.__name__.lower()} status",
            f"not_{capability.__name__.lower()}",
        )


def _is_tag_team(entity: Any) -> bool:
    return RosterMemberType.from_model(entity) is RosterMemberType.TAG_TEAM


def _check_employment_standing(entity: Any, action: str, now: datetime) -> None:
    """Reject entities that are not on the active roster right now."""
    if entity.is_unemployed():
        raise _deny(entity, action, "never employed", "unemployed")
    if entity.is_retired():
        raise _deny(entity, action, "retired", "retired")
    if entity.is_released():
        raise _deny(entity, action, "released", "released")
    if entity.has_future_employment(now):
        raise _deny(entity, action, "employment has not started yet", "has_future_employment")


def _check_tag_team_wrestlers(entity: Any, action: str) -> None:
    wrestlers = entity.wrestlers.current_members()
    if not wrestlers:
        raise _deny(entity, action, "no current wrestlers", "no_active_wrestlers")
    for wrestler in wrestlers:
        if wrestler.is_suspended():
            raise _deny(entity, action, f"{wrestler} is suspended", "wrestler_suspended")
        if wrestler.is_injured():
            raise _deny(entity, action, f"{wrestler} is injured", "wrestler_injured")


# --- employment -------------------------------------------------------------


def ensure_can_be_employed(entity: Any, now: datetime) -> None:
    """Allow employing anyone not already employed (retired members included)."""
    _require(entity, Employable, "employed")
    if entity.has_future_employment(now):
        raise _deny(entity, "employed", "already signed to start later", "has_future_employment")
    if entity.is_employed():
        raise _deny(entity, "employed", "already employed", "employed")


def ensure_can_be_released(entity: Any, now: datetime) -> None:
    _require(entity, Employable, "released")
    if entity.has_future_employment(now):
        raise _deny(entity, "released", "employment has not started yet", "has_future_employment")
    if entity.is_retired():
        raise _deny(entity, "released", "retired", "retired")
    if not entity.is_employed():
        code = "released" if entity.has_employment_history() else "unemployed"
        raise _deny(entity, "released", "not employed", code)


# --- suspension -------------------------------------------------------------


def ensure_can_be_suspended(entity: Any, now: datetime) -> None:
    """Only employed, active roster members can be suspended.

    Tag teams additionally need current wrestlers, none of them suspended or
    injured.
    """
    _require(entity, Suspendable, "suspended")
    _check_employment_standing(entity, "suspended", now)
    if entity.is_suspended():
        raise _deny(entity, "suspended", "already suspended", "suspended")
    if isinstance(entity, Injurable) and entity.is_injured():
        raise _deny(entity, "suspended", "injured", "injured")
    if _is_tag_team(entity):
        _check_tag_team_wrestlers(entity, "suspended")


def ensure_can_be_reinstated(entity: Any, now: datetime) -> None:
    _require(entity, Suspendable, "reinstated")
    if not entity.is_suspended():
        raise _deny(entity, "reinstated", "not suspended", "not_suspended")


# --- injury -----------------------------------------------------------------


def ensure_can_be_injured(entity: Any, now: datetime) -> None:
    _require(entity, Injurable, "injured")
    _check_employment_standing(entity, "injured", now)
    if entity.is_injured():
        raise _deny(entity, "injured", "already injured", "injured")
    if entity.is_suspended():
        raise _deny(entity, "injured", "suspended", "suspended")


def ensure_can_be_healed(entity: Any, now: datetime) -> None:
    _require(entity, Injurable, "healed")
    if not entity.is_injured():
        raise _deny(entity, "healed", "not injured", "not_injured")


# --- retirement -------------------------------------------------------------


def ensure_can_be_retired(entity: Any, now: datetime) -> None:
    """Check retirement rules.

    Employable members must have been employed at some point (released members
    may retire) and not be signed for a later date. Titles and stables must
    have debuted. Tag teams need healthy, unsuspended current wrestlers.
    """
    _require(entity, Retirable, "retired")
    if isinstance(entity, Employable):
        if entity.is_unemployed():
            raise _deny(entity, "retired", "never employed", "unemployed")
        if entity.has_future_employment(now):
            raise _deny(
                entity, "retired", "employment has not started yet", "has_future_employment"
            )
    if isinstance(entity, Activatable):
        if entity.is_unactivated():
            raise _deny(entity, "retired", "never activated", "unactivated")
        if entity.has_future_activity(now):
            raise _deny(entity, "retired", "activation has not started yet", "has_future_activity")
    if entity.is_retired():
        raise _deny(entity, "retired", "already retired", "retired")
    if _is_tag_team(entity):
        _check_tag_team_wrestlers(entity, "retired")


def ensure_can_be_unretired(entity: Any, now: datetime) -> None:
    _require(entity, Retirable, "unretired")
    if not entity.is_retired():
        raise _deny(entity, "unretired", "not retired", "not_retired")


# --- activity ---------------------------------------------------------------


def ensure_can_be_activated(entity: Any, now: datetime) -> None:
    _require(entity, Activatable, "activated")
    if entity.is_currently_active():
        raise _deny(entity, "activated", "already active", "active")
    if entity.is_retired():
        raise _deny(entity, "activated", "retired", "retired")


def ensure_can_be_deactivated(entity: Any, now: datetime) -> None:
    _require(entity, Activatable, "deactivated")
    if entity.is_unactivated():
        raise _deny(entity, "deactivated", "never activated", "unactivated")
    if entity.has_future_activity(now):
        raise _deny(entity, "deactivated", "activation has not started yet", "has_future_activity")
    if not entity.is_currently_active():
        raise _deny(entity, "deactivated", "already inactive", "inactive")
    if entity.is_retired():
        raise _deny(entity, "deactivated", "retired", "retired")


def _allowed(guard: Guard, entity: Any, now: datetime) -> bool:
    try:
        guard(entity, now)
    except TransitionNotAllowed:
        return False
    return True


def can_be_employed(entity: Any, now: datetime) -> bool:
    return _allowed(ensure_can_be_employed, entity, now)


def can_be_released(entity: Any, now: datetime) -> bool:
    return _allowed(ensure_can_be_released, entity, now)


def can_be_suspended(entity: Any, now: datetime) -> bool:
    return _allowed(ensure_can_be_suspended, entity, now)


def can_be_reinstated(entity: Any, now: datetime) -> bool:
    return _allowed(ensure_can_be_reinstated, entity, now)


def can_be_injured(entity: Any, now: datetime) -> bool:
    return _allowed(ensure_can_be_injured, entity, now)


def can_be_healed(entity: Any, now: datetime) -> bool:
    return _allowed(ensure_can_be_healed, entity, now)


def can_be_retired(entity: Any, now: datetime) -> bool:
    return _allowed(ensure_can_be_retired, entity, now)


def can_be_unretired(entity: Any, now: datetime) -> bool:
    return _allowed(ensure_can_be_unretired, entity, now)


def can_be_activated(entity: Any, now: datetime) -> bool:
    return _allowed(ensure_can_be_activated, entity, now)


def can_be_deactivated(entity: Any, now: datetime) -> bool:
    return _allowed(ensure_can_be_deactivated, entity, now)

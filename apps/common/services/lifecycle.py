"""Core status transitions.

Each transition opens or closes one kind of period on a roster entity at a
caller-supplied, timezone-aware timestamp. Opening an already open period moves
its start; closing when nothing is open does nothing. No business rules are
checked here; see `eligibility` and `actions` for that.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from django.db import transaction

from apps.common.exceptions import InvalidRosterArgument
from apps.common.trackers import BoundPeriods


def _periods(entity: Any, kind: str) -> BoundPeriods:
    periods = getattr(entity, kind, None)
    if not isinstance(periods, BoundPeriods):
        raise InvalidRosterArgument(
            f"{type(entity).__name__} has no {kind} periods.",
            code="unsupported_transition",
        )
    return periods


def employ(entity: Any, at: datetime) -> Any:
    """Open the employment of `entity` at `at`."""
    return _periods(entity, "employment").open(at)


def release(entity: Any, at: datetime) -> Any | None:
    """Close the employment of `entity` at `at`."""
    return _periods(entity, "employment").close(at)


def suspend(entity: Any, at: datetime) -> Any:
    return _periods(entity, "suspension").open(at)


def reinstate(entity: Any, at: datetime) -> Any | None:
    return _periods(entity, "suspension").close(at)


def injure(entity: Any, at: datetime) -> Any:
    return _periods(entity, "injury").open(at)


def heal(entity: Any, at: datetime) -> Any | None:
    return _periods(entity, "injury").close(at)


def activate(entity: Any, at: datetime) -> Any:
    """Open the activity period of a title or stable at `at`."""
    return _periods(entity, "activity").open(at)


def deactivate(entity: Any, at: datetime) -> Any | None:
    """Close the activity period of a title or stable at `at`."""
    return _periods(entity, "activity").close(at)


def retire(entity: Any, at: datetime) -> Any:
    """Open the retirement of `entity` at `at`.

    Retiring also ends the entity's open activity period at the same instant.
    """
    retirement = _periods(entity, "retirement")
    with transaction.atomic():
        if isinstance(getattr(entity, "activity", None), BoundPeriods):
            entity.activity.close(at)
        return retirement.open(at)


def unretire(entity: Any, at: datetime) -> Any | None:
    return _periods(entity, "retirement").close(at)


# Titles debut, stables are established, both are pulled when deactivated.
debut = activate
establish = activate
pull = deactivate

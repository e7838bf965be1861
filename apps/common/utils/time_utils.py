"""Timestamp helpers shared by the roster lifecycle code."""

from __future__ import annotations

from datetime import datetime

from django.utils import timezone

from apps.common.exceptions import InvalidRosterArgument


def ensure_aware(value: datetime, *, name: str = "at") -> datetime:
    """Return `value` unchanged if it is timezone-aware.

    Raises:
        InvalidRosterArgument: If `value` is not a datetime or is naive.

    """
    if not isinstance(value, datetime):
        raise InvalidRosterArgument(
            f"`{name}` must be a datetime, got {type(value).__name__}.",
            code="invalid_timestamp",
        )
    if timezone.is_naive(value):
        raise InvalidRosterArgument(
            f"`{name}` must be timezone-aware.",
            code="naive_timestamp",
        )
    return value

"""Abstract models for time-bounded roster periods.

Every status a roster entity can be in (employed, suspended, injured, retired,
active) and every tenure it can hold (a championship reign, a spot in a stable)
is stored as a period: a start timestamp and a nullable end timestamp. A NULL
end means the period is still open.

Concrete period models name their timestamp columns through
`period_start_field` / `period_end_field` so the query helpers below work for
`started_at`/`ended_at`, `joined_at`/`left_at`, `hired_at`/`fired_at` and
`won_at`/`lost_at` alike.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta
from typing import Any, ClassVar

from django.db import models
from django.db.models import Q
from uuid6 import uuid7

from apps.common.utils import ensure_aware


class PeriodQuerySet(models.QuerySet[Any]):
    """Query helpers shared by every period model."""

    def _start(self) -> str:
        return self.model.period_start_field

    def _end(self) -> str:
        return self.model.period_end_field

    def current(self) -> PeriodQuerySet:
        """Return open periods (no end timestamp)."""
        return self.filter(**{f"{self._end()}__isnull": True})

    def closed(self) -> PeriodQuerySet:
        """Return periods that have ended."""
        return self.filter(**{f"{self._end()}__isnull": False})

    def previous(self) -> PeriodQuerySet:
        """Return closed periods, most recently ended first."""
        return self.closed().order_by(f"-{self._end()}", f"-{self._start()}")

    def future(self, now: datetime) -> PeriodQuerySet:
        """Return open periods that start after `now`."""
        return self.current().filter(**{f"{self._start()}__gt": now})

    def chronological(self) -> PeriodQuerySet:
        """Return periods ordered by start, oldest first."""
        return self.order_by(self._start(), "created_at")


class BasePeriod(models.Model):
    """Fields and accessors common to every period model."""

    period_start_field: ClassVar[str]
    period_end_field: ClassVar[str]

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )

    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)
    updated_at: models.DateTimeField = models.DateTimeField(auto_now=True)

    objects = PeriodQuerySet.as_manager()

    class Meta:
        """Model metadata."""

        abstract = True

    @property
    def start(self) -> datetime:
        """Return the start timestamp, whatever the column is called."""
        return getattr(self, self.period_start_field)

    @property
    def end(self) -> datetime | None:
        """Return the end timestamp, or None while the period is open."""
        return getattr(self, self.period_end_field)

    def is_open(self) -> bool:
        """Return whether the period has not ended yet."""
        return self.end is None

    def length(self, now: datetime) -> timedelta:
        """Return the duration of the period, counting open periods up to `now`."""
        ensure_aware(now, name="now")
        return (self.end or now) - self.start

    def __str__(self) -> str:
        """Return a friendly label for debugging."""
        end = self.end.isoformat() if self.end else "present"
        return f"{self._meta.verbose_name} ({self.start.isoformat()} - {end})"


class Period(BasePeriod):
    """A status period with `started_at` / `ended_at` columns."""

    period_start_field: ClassVar[str] = "started_at"
    period_end_field: ClassVar[str] = "ended_at"

    started_at: models.DateTimeField = models.DateTimeField()
    ended_at: models.DateTimeField | None = models.DateTimeField(blank=True, null=True)

    class Meta(BasePeriod.Meta):
        """Model metadata."""

        abstract = True


class MembershipPeriod(BasePeriod):
    """A group membership with `joined_at` / `left_at` columns."""

    period_start_field: ClassVar[str] = "joined_at"
    period_end_field: ClassVar[str] = "left_at"

    joined_at: models.DateTimeField = models.DateTimeField()
    left_at: models.DateTimeField | None = models.DateTimeField(blank=True, null=True)

    class Meta(BasePeriod.Meta):
        """Model metadata."""

        abstract = True


class HirePeriod(BasePeriod):
    """A manager engagement with `hired_at` / `fired_at` columns."""

    period_start_field: ClassVar[str] = "hired_at"
    period_end_field: ClassVar[str] = "fired_at"

    hired_at: models.DateTimeField = models.DateTimeField()
    fired_at: models.DateTimeField | None = models.DateTimeField(blank=True, null=True)

    class Meta(BasePeriod.Meta):
        """Model metadata."""

        abstract = True


def period_constraints(
    *,
    name: str,
    owner_fields: Sequence[str],
    start: str = "started_at",
    end: str = "ended_at",
) -> list[Any]:
    """Return the constraints every period table carries.

    - the end timestamp is not before the start timestamp (or is NULL)
    - only one open row exists per owner (or per group/member pair)
    """
    return [
        models.CheckConstraint(
            condition=Q(**{f"{end}__isnull": True})
            | Q(**{f"{end}__gte": models.F(start)}),
            name=f"{name}_end_after_start",
        ),
        models.UniqueConstraint(
            fields=list(owner_fields),
            condition=Q(**{f"{end}__isnull": True}),
            name=f"{name}_unique_open",
        ),
    ]


def period_indexes(
    *,
    prefix: str,
    owner_field: str,
    start: str = "started_at",
    end: str = "ended_at",
) -> list[Any]:
    """Return the lookup indexes every period table carries."""
    return [
        models.Index(fields=[owner_field, end], name=f"{prefix}_owner_end_idx"),
        models.Index(fields=[start], name=f"{prefix}_start_idx"),
    ]

"""Per-owner access to one kind of period.

A roster model declares one `PeriodTracker` per kind of period it carries::

    class Wrestler(Employable, models.Model):
        employment = PeriodTracker("wrestler.WrestlerEmployment", owner_field="wrestler")

`wrestler.employment` then returns a `BoundPeriods` view that answers the
current/previous/first/future questions and opens or closes the period.
"""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Any

from django.apps import apps
from django.db import models, transaction

from apps.common.exceptions import InvalidRosterArgument
from apps.common.periods import BasePeriod, PeriodQuerySet
from apps.common.utils import ensure_aware


logger = logging.getLogger(__name__)


class PeriodTracker:
    """Descriptor binding a period model to its owner instances."""

    def __init__(self, model: str, *, owner_field: str) -> None:
        """Track periods stored in `model` (an `app_label.ModelName` label)."""
        self.model_label = model
        self.owner_field = owner_field
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return BoundPeriods(self, instance)

    @property
    def model(self) -> type[BasePeriod]:
        """Return the period model class."""
        return apps.get_model(self.model_label)


class BoundPeriods:
    """The periods of one kind belonging to one owner."""

    def __init__(self, tracker: PeriodTracker, owner: models.Model) -> None:
        self.tracker = tracker
        self.owner = owner

    @property
    def model(self) -> type[BasePeriod]:
        return self.tracker.model

    @property
    def kind(self) -> str:
        """Return the tracker name, e.g. `employment`."""
        return self.tracker.name

    def all(self) -> PeriodQuerySet:
        """Return every period of this owner."""
        return self.model.objects.filter(**{self.tracker.owner_field: self.owner})

    def current(self) -> Any | None:
        """Return the open period, if any."""
        return self.all().current().first()

    def previous(self) -> PeriodQuerySet:
        """Return closed periods, most recently ended first."""
        return self.all().previous()

    def latest_previous(self) -> Any | None:
        """Return the most recently ended period, if any."""
        return self.previous().first()

    def first(self) -> Any | None:
        """Return the earliest period, open or closed."""
        return self.all().chronological().first()

    def future(self, now: datetime) -> Any | None:
        """Return the open period that starts after `now`, if any."""
        return self.all().future(ensure_aware(now, name="now")).first()

    def exists(self) -> bool:
        """Return whether the owner has any period of this kind."""
        return self.all().exists()

    def has_current(self) -> bool:
        return self.all().current().exists()

    def has_history(self) -> bool:
        """Return whether at least one period of this kind has ended."""
        return self.all().closed().exists()

    def has_future(self, now: datetime) -> bool:
        return self.all().future(ensure_aware(now, name="now")).exists()

    def open(self, at: datetime) -> Any:
        """Open a period at `at`.

        An already open period is moved to start at `at` instead of adding a
        second open row.

        Returns:
            The open period.

        """
        ensure_aware(at)
        model = self.model
        with transaction.atomic():
            period, created = model.objects.update_or_create(
                **{
                    self.tracker.owner_field: self.owner,
                    f"{model.period_end_field}__isnull": True,
                },
                defaults={model.period_start_field: at},
            )
        logger.debug(
            "%s %s for %s at %s.",
            "Opened" if created else "Restarted",
            self.kind,
            self.owner.pk,
            at.isoformat(),
        )
        return period

    def close(self, at: datetime) -> Any | None:
        """Close the open period at `at`.

        Closing without an open period does nothing.

        Returns:
            The closed period, or None when nothing was open.

        Raises:
            InvalidRosterArgument: If `at` is before the open period's start.

        """
        ensure_aware(at)
        period = self.current()
        if period is None:
            logger.debug("No open %s for %s; nothing to close.", self.kind, self.owner.pk)
            return None
        end_period(period, at, kind=self.kind)
        logger.debug("Closed %s for %s at %s.", self.kind, self.owner.pk, at.isoformat())
        return period


def end_period(period: BasePeriod, at: datetime, *, kind: str) -> BasePeriod:
    """Set the end timestamp of an open `period` and save it.

    Raises:
        InvalidRosterArgument: If `at` is before the period's start.

    """
    if at < period.start:
        raise InvalidRosterArgument(
            f"Cannot end {kind} at {at.isoformat()}: "
            f"it started at {period.start.isoformat()}.",
            code="ends_before_start",
        )
    setattr(period, period.period_end_field, at)
    period.save(update_fields=[period.period_end_field, "updated_at"])
    return period

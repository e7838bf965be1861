"""Model for Referee."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models
from uuid6 import uuid7

from apps.common.status import Bookable, Injurable
from apps.common.trackers import PeriodTracker


class Referee(Bookable, Injurable, models.Model):
    """A referee who can officiate matches while bookable."""

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    first_name: models.CharField[str, str] = models.CharField(max_length=255)
    last_name: models.CharField[str, str] = models.CharField(max_length=255)

    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)
    updated_at: models.DateTimeField = models.DateTimeField(auto_now=True)

    employment = PeriodTracker("referee.RefereeEmployment", owner_field="referee")
    suspension = PeriodTracker("referee.RefereeSuspension", owner_field="referee")
    injury = PeriodTracker("referee.RefereeInjury", owner_field="referee")
    retirement = PeriodTracker("referee.RefereeRetirement", owner_field="referee")

    class Meta:
        """Model metadata."""

        ordering: ClassVar[list[str]] = ["last_name", "first_name"]
        indexes: ClassVar[list[Any]] = [
            models.Index(fields=["last_name", "first_name"], name="referee_name_idx"),
        ]

    def __str__(self) -> str:
        """Return the full name."""
        return f"{self.first_name} {self.last_name}"

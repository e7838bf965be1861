"""Model for Title."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar

from django.db import models
from uuid6 import uuid7

from apps.common.status import Activatable, Retirable
from apps.common.trackers import PeriodTracker
from apps.common.utils import ensure_aware


if TYPE_CHECKING:
    from .title_championship import TitleChampionship


class Title(Activatable, Retirable, models.Model):
    """A championship belt.

    A title is active between its debut and being pulled (or retired) and is
    vacant whenever no reign is open.
    """

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    name: models.CharField[str, str] = models.CharField(max_length=255, unique=True)

    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)
    updated_at: models.DateTimeField = models.DateTimeField(auto_now=True)

    activity = PeriodTracker("title.TitleActivation", owner_field="title")
    retirement = PeriodTracker("title.TitleRetirement", owner_field="title")
    championships = PeriodTracker("title.TitleChampionship", owner_field="title")

    class Meta:
        """Model metadata."""

        ordering: ClassVar[list[str]] = ["name"]
        indexes: ClassVar[list[Any]] = [
            models.Index(fields=["name"], name="title_name_idx"),
        ]

    def __str__(self) -> str:
        """Return the title name."""
        return str(self.name)

    def is_vacant(self) -> bool:
        """Return whether nobody holds the title right now."""
        return not self.championships.has_current()

    def current_championship(self) -> TitleChampionship | None:
        return self.championships.current()

    def previous_championship(self) -> TitleChampionship | None:
        """Return the most recently ended reign."""
        return self.championships.latest_previous()

    def first_championship(self) -> TitleChampionship | None:
        return self.championships.first()

    def longest_reign(self, now: datetime) -> TitleChampionship | None:
        """Return the longest reign, counting an open reign up to `now`.

        Ties go to the earlier reign. Returns None for a title never held.
        """
        ensure_aware(now, name="now")
        longest: TitleChampionship | None = None
        for reign in self.championships.all().chronological():
            if longest is None or reign.length(now) > longest.length(now):
                longest = reign
        return longest

"""Model for Stable."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models
from uuid6 import uuid7

from apps.common.memberships import MembershipTracker
from apps.common.status import Activatable, Retirable
from apps.common.trackers import PeriodTracker


class Stable(Activatable, Retirable, models.Model):
    """A faction of wrestlers and tag teams."""

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    name: models.CharField[str, str] = models.CharField(max_length=255, unique=True)

    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)
    updated_at: models.DateTimeField = models.DateTimeField(auto_now=True)

    activity = PeriodTracker("stable.StableActivation", owner_field="stable")
    retirement = PeriodTracker("stable.StableRetirement", owner_field="stable")

    wrestlers = MembershipTracker(
        "stable.StableWrestler",
        group_field="stable",
        member_field="wrestler",
    )
    tag_teams = MembershipTracker(
        "stable.StableTagTeam",
        group_field="stable",
        member_field="tag_team",
    )

    class Meta:
        """Model metadata."""

        ordering: ClassVar[list[str]] = ["name"]
        indexes: ClassVar[list[Any]] = [
            models.Index(fields=["name"], name="stable_name_idx"),
        ]

    def __str__(self) -> str:
        """Return the stable name."""
        return str(self.name)

    def current_members(self) -> list[Any]:
        """Return current wrestlers followed by current tag teams."""
        return [*self.wrestlers.current_members(), *self.tag_teams.current_members()]

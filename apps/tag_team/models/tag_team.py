"""Model for TagTeam."""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from django.db import models
from uuid6 import uuid7

from apps.common.champions import TitleHolder
from apps.common.memberships import MembershipTracker
from apps.common.status import Bookable
from apps.common.trackers import PeriodTracker


class TagTeam(Bookable, TitleHolder, models.Model):
    """A tag team: a named pairing of wrestlers with its own contract.

    Tag teams cannot be injured; an injured partner makes the team unbookable
    instead.
    """

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    name: models.CharField[str, str] = models.CharField(max_length=255, unique=True)
    signature_move: models.CharField[str, str] = models.CharField(
        max_length=255,
        blank=True,
        default="",
    )

    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)
    updated_at: models.DateTimeField = models.DateTimeField(auto_now=True)

    employment = PeriodTracker("tag_team.TagTeamEmployment", owner_field="tag_team")
    suspension = PeriodTracker("tag_team.TagTeamSuspension", owner_field="tag_team")
    retirement = PeriodTracker("tag_team.TagTeamRetirement", owner_field="tag_team")

    wrestlers = MembershipTracker(
        "tag_team.TagTeamWrestler",
        group_field="tag_team",
        member_field="wrestler",
    )
    stables = MembershipTracker(
        "stable.StableTagTeam",
        group_field="tag_team",
        member_field="stable",
    )
    managers = MembershipTracker(
        "manager.TagTeamManager",
        group_field="tag_team",
        member_field="manager",
    )

    # Memberships a tag team leaves when released or retired.
    affiliations: ClassVar[tuple[str, ...]] = ("managers", "stables")

    class Meta:
        """Model metadata."""

        ordering: ClassVar[list[str]] = ["name"]
        indexes: ClassVar[list[Any]] = [
            models.Index(fields=["name"], name="tag_team_name_idx"),
        ]

    def __str__(self) -> str:
        """Return the team name."""
        return str(self.name)

    def is_bookable(self, now: datetime) -> bool:
        """Return whether the team and every current partner can be booked."""
        if not super().is_bookable(now):
            return False
        partners = self.wrestlers.current_members()
        return bool(partners) and all(partner.is_bookable(now) for partner in partners)

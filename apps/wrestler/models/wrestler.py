"""Model for Wrestler."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models
from uuid6 import uuid7

from apps.common.champions import TitleHolder
from apps.common.memberships import MembershipTracker
from apps.common.status import Bookable, Injurable
from apps.common.trackers import PeriodTracker


class Wrestler(Bookable, Injurable, TitleHolder, models.Model):
    """A singles wrestler on the roster.

    Status (employed, suspended, injured, retired) is not stored on the row; it
    is derived from the wrestler's periods through the trackers below.
    """

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    name: models.CharField[str, str] = models.CharField(max_length=255, unique=True)
    hometown: models.CharField[str, str] = models.CharField(
        max_length=255,
        blank=True,
        default="",
    )
    signature_move: models.CharField[str, str] = models.CharField(
        max_length=255,
        blank=True,
        default="",
    )

    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)
    updated_at: models.DateTimeField = models.DateTimeField(auto_now=True)

    employment = PeriodTracker("wrestler.WrestlerEmployment", owner_field="wrestler")
    suspension = PeriodTracker("wrestler.WrestlerSuspension", owner_field="wrestler")
    injury = PeriodTracker("wrestler.WrestlerInjury", owner_field="wrestler")
    retirement = PeriodTracker("wrestler.WrestlerRetirement", owner_field="wrestler")

    tag_teams = MembershipTracker(
        "tag_team.TagTeamWrestler",
        group_field="wrestler",
        member_field="tag_team",
    )
    stables = MembershipTracker(
        "stable.StableWrestler",
        group_field="wrestler",
        member_field="stable",
    )
    managers = MembershipTracker(
        "manager.WrestlerManager",
        group_field="wrestler",
        member_field="manager",
    )

    # Memberships a wrestler leaves when released or retired.
    affiliations: ClassVar[tuple[str, ...]] = ("managers", "tag_teams", "stables")

    class Meta:
        """Model metadata."""

        ordering: ClassVar[list[str]] = ["name"]
        indexes: ClassVar[list[Any]] = [
            models.Index(fields=["name"], name="wrestler_name_idx"),
        ]

    def __str__(self) -> str:
        """Return the ring name."""
        return str(self.name)

"""Model for Manager."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models
from uuid6 import uuid7

from apps.common.memberships import MembershipTracker
from apps.common.status import Employable, Injurable, Retirable, Suspendable
from apps.common.trackers import PeriodTracker


class Manager(Employable, Suspendable, Injurable, Retirable, models.Model):
    """A manager who can be hired by wrestlers and tag teams."""

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    first_name: models.CharField[str, str] = models.CharField(max_length=255)
    last_name: models.CharField[str, str] = models.CharField(max_length=255)

    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)
    updated_at: models.DateTimeField = models.DateTimeField(auto_now=True)

    employment = PeriodTracker("manager.ManagerEmployment", owner_field="manager")
    suspension = PeriodTracker("manager.ManagerSuspension", owner_field="manager")
    injury = PeriodTracker("manager.ManagerInjury", owner_field="manager")
    retirement = PeriodTracker("manager.ManagerRetirement", owner_field="manager")

    wrestlers = MembershipTracker(
        "manager.WrestlerManager",
        group_field="manager",
        member_field="wrestler",
    )
    tag_teams = MembershipTracker(
        "manager.TagTeamManager",
        group_field="manager",
        member_field="tag_team",
    )

    # A released or retired manager stops managing all clients.
    affiliations: ClassVar[tuple[str, ...]] = ("wrestlers", "tag_teams")

    class Meta:
        """Model metadata."""

        ordering: ClassVar[list[str]] = ["last_name", "first_name"]
        indexes: ClassVar[list[Any]] = [
            models.Index(fields=["last_name", "first_name"], name="manager_name_idx"),
        ]

    def __str__(self) -> str:
        """Return the full name."""
        return f"{self.first_name} {self.last_name}"

    def is_available(self) -> bool:
        """Return whether the manager can accompany clients right now."""
        if not self.is_employed():
            return False
        return not (self.is_suspended() or self.is_injured() or self.is_retired())

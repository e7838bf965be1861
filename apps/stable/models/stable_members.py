"""Models for historical stable membership."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models

from apps.common.periods import MembershipPeriod, period_constraints, period_indexes


class StableWrestler(MembershipPeriod):
    """Time-bounded membership of a wrestler in a stable."""

    stable: models.ForeignKey[Any, Any] = models.ForeignKey(
        "stable.Stable",
        on_delete=models.CASCADE,
        related_name="wrestler_memberships",
    )
    wrestler: models.ForeignKey[Any, Any] = models.ForeignKey(
        "wrestler.Wrestler",
        on_delete=models.CASCADE,
        related_name="stable_memberships",
    )

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = [
            *period_indexes(
                prefix="stw",
                owner_field="stable",
                start="joined_at",
                end="left_at",
            ),
            models.Index(fields=["wrestler", "left_at"], name="stw_wrestler_end_idx"),
        ]
        constraints: ClassVar[list[Any]] = period_constraints(
            name="stablewrestler",
            owner_fields=["stable", "wrestler"],
            start="joined_at",
            end="left_at",
        )

    def __str__(self) -> str:
        """Return a friendly label for debugging."""
        end = self.left_at.isoformat() if self.left_at else "present"
        return f"{self.wrestler} @ {self.stable} ({self.joined_at.isoformat()} - {end})"


class StableTagTeam(MembershipPeriod):
    """Time-bounded membership of a tag team in a stable."""

    stable: models.ForeignKey[Any, Any] = models.ForeignKey(
        "stable.Stable",
        on_delete=models.CASCADE,
        related_name="tag_team_memberships",
    )
    tag_team: models.ForeignKey[Any, Any] = models.ForeignKey(
        "tag_team.TagTeam",
        on_delete=models.CASCADE,
        related_name="stable_memberships",
    )

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = [
            *period_indexes(
                prefix="stt",
                owner_field="stable",
                start="joined_at",
                end="left_at",
            ),
            models.Index(fields=["tag_team", "left_at"], name="stt_tag_team_end_idx"),
        ]
        constraints: ClassVar[list[Any]] = period_constraints(
            name="stabletagteam",
            owner_fields=["stable", "tag_team"],
            start="joined_at",
            end="left_at",
        )

    def __str__(self) -> str:
        """Return a friendly label for debugging."""
        end = self.left_at.isoformat() if self.left_at else "present"
        return f"{self.tag_team} @ {self.stable} ({self.joined_at.isoformat()} - {end})"

"""Model for historical TagTeam\N{RIGHTWARDS ARROW}Wrestler membership."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models

from apps.common.periods import MembershipPeriod, period_constraints, period_indexes


class TagTeamWrestler(MembershipPeriod):
    """Time-bounded membership of a wrestler in a tag team.

    Notes:
        - Partners come and go; rows are closed with `left_at`, never deleted.
        - A wrestler can be in several tag teams over time, even at once.

    """

    tag_team: models.ForeignKey[Any, Any] = models.ForeignKey(
        "tag_team.TagTeam",
        on_delete=models.CASCADE,
        related_name="wrestler_memberships",
    )
    wrestler: models.ForeignKey[Any, Any] = models.ForeignKey(
        "wrestler.Wrestler",
        on_delete=models.CASCADE,
        related_name="tag_team_memberships",
    )

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = [
            *period_indexes(
                prefix="ttw",
                owner_field="tag_team",
                start="joined_at",
                end="left_at",
            ),
            models.Index(fields=["wrestler", "left_at"], name="ttw_wrestler_end_idx"),
        ]
        constraints: ClassVar[list[Any]] = period_constraints(
            name="tagteamwrestler",
            owner_fields=["tag_team", "wrestler"],
            start="joined_at",
            end="left_at",
        )

    def __str__(self) -> str:
        """Return a friendly label for debugging."""
        end = self.left_at.isoformat() if self.left_at else "present"
        return f"{self.wrestler} @ {self.tag_team} ({self.joined_at.isoformat()} - {end})"

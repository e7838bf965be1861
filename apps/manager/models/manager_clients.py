"""Models for managers hired by wrestlers and tag teams."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models

from apps.common.periods import HirePeriod, period_constraints, period_indexes


class WrestlerManager(HirePeriod):
    """A manager engaged by a wrestler between `hired_at` and `fired_at`."""

    wrestler: models.ForeignKey[Any, Any] = models.ForeignKey(
        "wrestler.Wrestler",
        on_delete=models.CASCADE,
        related_name="manager_hires",
    )
    manager: models.ForeignKey[Any, Any] = models.ForeignKey(
        "manager.Manager",
        on_delete=models.CASCADE,
        related_name="wrestler_hires",
    )

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = [
            *period_indexes(
                prefix="wm",
                owner_field="wrestler",
                start="hired_at",
                end="fired_at",
            ),
            models.Index(fields=["manager", "fired_at"], name="wm_manager_end_idx"),
        ]
        constraints: ClassVar[list[Any]] = period_constraints(
            name="wrestlermanager",
            owner_fields=["wrestler", "manager"],
            start="hired_at",
            end="fired_at",
        )

    def __str__(self) -> str:
        """Return a friendly label for debugging."""
        end = self.fired_at.isoformat() if self.fired_at else "present"
        return f"{self.manager} for {self.wrestler} ({self.hired_at.isoformat()} - {end})"


class TagTeamManager(HirePeriod):
    """A manager engaged by a tag team between `hired_at` and `fired_at`."""

    tag_team: models.ForeignKey[Any, Any] = models.ForeignKey(
        "tag_team.TagTeam",
        on_delete=models.CASCADE,
        related_name="manager_hires",
    )
    manager: models.ForeignKey[Any, Any] = models.ForeignKey(
        "manager.Manager",
        on_delete=models.CASCADE,
        related_name="tag_team_hires",
    )

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = [
            *period_indexes(
                prefix="ttm",
                owner_field="tag_team",
                start="hired_at",
                end="fired_at",
            ),
            models.Index(fields=["manager", "fired_at"], name="ttm_manager_end_idx"),
        ]
        constraints: ClassVar[list[Any]] = period_constraints(
            name="tagteammanager",
            owner_fields=["tag_team", "manager"],
            start="hired_at",
            end="fired_at",
        )

    def __str__(self) -> str:
        """Return a friendly label for debugging."""
        end = self.fired_at.isoformat() if self.fired_at else "present"
        return f"{self.manager} for {self.tag_team} ({self.hired_at.isoformat()} - {end})"

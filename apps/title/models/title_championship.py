"""Model for title reigns."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models
from django.db.models import Q

from apps.common.periods import BasePeriod, PeriodQuerySet, period_constraints
from apps.common.roster_types import RosterMemberType, RosterRef


CHAMPION_TYPES = [RosterMemberType.WRESTLER, RosterMemberType.TAG_TEAM]


class ChampionshipQuerySet(PeriodQuerySet):
    """Reign lookups."""

    def held_by(self, champion: Any) -> ChampionshipQuerySet:
        """Return the reigns of one wrestler or tag team."""
        ref = RosterRef.of(champion)
        return self.filter(champion_type=ref.type, champion_id=ref.id)


class TitleChampionship(BasePeriod):
    """A reign: `champion` held `title` from `won_at` until `lost_at`.

    The champion is polymorphic (wrestler or tag team) and stored as a
    (`champion_type`, `champion_id`) pair.
    """

    period_start_field: ClassVar[str] = "won_at"
    period_end_field: ClassVar[str] = "lost_at"

    title: models.ForeignKey[Any, Any] = models.ForeignKey(
        "title.Title",
        on_delete=models.CASCADE,
        related_name="championship_periods",
    )
    champion_type: models.CharField[str, str] = models.CharField(
        max_length=32,
        choices=[(kind.value, kind.label) for kind in CHAMPION_TYPES],
    )
    champion_id: models.UUIDField[str, str] = models.UUIDField()

    won_at: models.DateTimeField = models.DateTimeField()
    lost_at: models.DateTimeField | None = models.DateTimeField(blank=True, null=True)

    objects = ChampionshipQuerySet.as_manager()

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = [
            models.Index(fields=["title", "lost_at"], name="tc_title_end_idx"),
            models.Index(fields=["champion_type", "champion_id"], name="tc_champion_idx"),
            models.Index(fields=["won_at"], name="tc_won_at_idx"),
        ]
        constraints: ClassVar[list[Any]] = [
            *period_constraints(
                name="titlechampionship",
                owner_fields=["title"],
                start="won_at",
                end="lost_at",
            ),
            models.CheckConstraint(
                condition=Q(champion_type__in=[kind.value for kind in CHAMPION_TYPES]),
                name="titlechampionship_champion_type_valid",
            ),
        ]

    def __str__(self) -> str:
        """Return a friendly label for debugging."""
        end = self.lost_at.isoformat() if self.lost_at else "present"
        return (
            f"{self.title}: {self.champion_type}:{self.champion_id} "
            f"({self.won_at.isoformat()} - {end})"
        )

    @property
    def champion_ref(self) -> RosterRef:
        return RosterRef(type=RosterMemberType(self.champion_type), id=self.champion_id)

    @property
    def champion(self) -> Any:
        """Load the wrestler or tag team holding this reign."""
        return self.champion_ref.resolve()

"""Status periods of a tag team."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models

from apps.common.periods import Period, period_constraints, period_indexes


def _tag_team_fk(related_name: str) -> models.ForeignKey[Any, Any]:
    return models.ForeignKey(
        "tag_team.TagTeam",
        on_delete=models.CASCADE,
        related_name=related_name,
    )


class TagTeamEmployment(Period):
    """Contract period of a tag team."""

    tag_team: models.ForeignKey[Any, Any] = _tag_team_fk("employment_periods")

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="tt_emp", owner_field="tag_team")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="tagteamemployment",
            owner_fields=["tag_team"],
        )


class TagTeamSuspension(Period):
    """Suspension of a tag team."""

    tag_team: models.ForeignKey[Any, Any] = _tag_team_fk("suspension_periods")

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="tt_susp", owner_field="tag_team")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="tagteamsuspension",
            owner_fields=["tag_team"],
        )


class TagTeamRetirement(Period):
    """Retirement of a tag team."""

    tag_team: models.ForeignKey[Any, Any] = _tag_team_fk("retirement_periods")

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="tt_ret", owner_field="tag_team")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="tagteamretirement",
            owner_fields=["tag_team"],
        )

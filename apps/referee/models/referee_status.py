"""Status periods of a referee."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models

from apps.common.periods import Period, period_constraints, period_indexes


def _referee_fk(related_name: str) -> models.ForeignKey[Any, Any]:
    return models.ForeignKey(
        "referee.Referee",
        on_delete=models.CASCADE,
        related_name=related_name,
    )


class RefereeEmployment(Period):
    referee: models.ForeignKey[Any, Any] = _referee_fk("employment_periods")

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="rf_emp", owner_field="referee")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="refereeemployment",
            owner_fields=["referee"],
        )


class RefereeSuspension(Period):
    referee: models.ForeignKey[Any, Any] = _referee_fk("suspension_periods")

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="rf_susp", owner_field="referee")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="refereesuspension",
            owner_fields=["referee"],
        )


class RefereeInjury(Period):
    referee: models.ForeignKey[Any, Any] = _referee_fk("injury_periods")

    class Meta:
        """Model metadata."""

        verbose_name_plural = "referee injuries"
        indexes: ClassVar[list[Any]] = period_indexes(prefix="rf_inj", owner_field="referee")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="refereeinjury",
            owner_fields=["referee"],
        )


class RefereeRetirement(Period):
    referee: models.ForeignKey[Any, Any] = _referee_fk("retirement_periods")

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="rf_ret", owner_field="referee")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="refereeretirement",
            owner_fields=["referee"],
        )

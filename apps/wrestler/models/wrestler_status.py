"""Status periods of a wrestler."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models

from apps.common.periods import Period, period_constraints, period_indexes


def _wrestler_fk(related_name: str) -> models.ForeignKey[Any, Any]:
    return models.ForeignKey(
        "wrestler.Wrestler",
        on_delete=models.CASCADE,
        related_name=related_name,
    )


class WrestlerEmployment(Period):
    """Contract period of a wrestler."""

    wrestler: models.ForeignKey[Any, Any] = _wrestler_fk("employment_periods")

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="wr_emp", owner_field="wrestler")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="wrestleremployment",
            owner_fields=["wrestler"],
        )


class WrestlerSuspension(Period):
    """Suspension of a wrestler."""

    wrestler: models.ForeignKey[Any, Any] = _wrestler_fk("suspension_periods")

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="wr_susp", owner_field="wrestler")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="wrestlersuspension",
            owner_fields=["wrestler"],
        )


class WrestlerInjury(Period):
    """Injury layoff of a wrestler."""

    wrestler: models.ForeignKey[Any, Any] = _wrestler_fk("injury_periods")

    class Meta:
        """Model metadata."""

        verbose_name_plural = "wrestler injuries"
        indexes: ClassVar[list[Any]] = period_indexes(prefix="wr_inj", owner_field="wrestler")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="wrestlerinjury",
            owner_fields=["wrestler"],
        )


class WrestlerRetirement(Period):
    """Retirement of a wrestler; closed when the wrestler comes back."""

    wrestler: models.ForeignKey[Any, Any] = _wrestler_fk("retirement_periods")

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="wr_ret", owner_field="wrestler")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="wrestlerretirement",
            owner_fields=["wrestler"],
        )

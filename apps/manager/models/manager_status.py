"""Status periods of a manager."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models

from apps.common.periods import Period, period_constraints, period_indexes


def _manager_fk(related_name: str) -> models.ForeignKey[Any, Any]:
    return models.ForeignKey(
        "manager.Manager",
        on_delete=models.CASCADE,
        related_name=related_name,
    )


class ManagerEmployment(Period):
    manager: models.ForeignKey[Any, Any] = _manager_fk("employment_periods")

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="mg_emp", owner_field="manager")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="manageremployment",
            owner_fields=["manager"],
        )


class ManagerSuspension(Period):
    manager: models.ForeignKey[Any, Any] = _manager_fk("suspension_periods")

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="mg_susp", owner_field="manager")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="managersuspension",
            owner_fields=["manager"],
        )


class ManagerInjury(Period):
    manager: models.ForeignKey[Any, Any] = _manager_fk("injury_periods")

    class Meta:
        """Model metadata."""

        verbose_name_plural = "manager injuries"
        indexes: ClassVar[list[Any]] = period_indexes(prefix="mg_inj", owner_field="manager")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="managerinjury",
            owner_fields=["manager"],
        )


class ManagerRetirement(Period):
    manager: models.ForeignKey[Any, Any] = _manager_fk("retirement_periods")

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="mg_ret", owner_field="manager")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="managerretirement",
            owner_fields=["manager"],
        )

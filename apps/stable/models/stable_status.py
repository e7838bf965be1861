"""Activity and retirement periods of a stable."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models

from apps.common.periods import Period, period_constraints, period_indexes


class StableActivation(Period):
    """A stretch during which the stable is established and active."""

    stable: models.ForeignKey[Any, Any] = models.ForeignKey(
        "stable.Stable",
        on_delete=models.CASCADE,
        related_name="activity_periods",
    )

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="st_act", owner_field="stable")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="stableactivation",
            owner_fields=["stable"],
        )


class StableRetirement(Period):
    stable: models.ForeignKey[Any, Any] = models.ForeignKey(
        "stable.Stable",
        on_delete=models.CASCADE,
        related_name="retirement_periods",
    )

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="st_ret", owner_field="stable")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="stableretirement",
            owner_fields=["stable"],
        )

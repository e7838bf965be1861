"""Activity and retirement periods of a title."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models

from apps.common.periods import Period, period_constraints, period_indexes


class TitleActivation(Period):
    """A stretch during which the title is defended."""

    title: models.ForeignKey[Any, Any] = models.ForeignKey(
        "title.Title",
        on_delete=models.CASCADE,
        related_name="activity_periods",
    )

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="ti_act", owner_field="title")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="titleactivation",
            owner_fields=["title"],
        )


class TitleRetirement(Period):
    title: models.ForeignKey[Any, Any] = models.ForeignKey(
        "title.Title",
        on_delete=models.CASCADE,
        related_name="retirement_periods",
    )

    class Meta:
        """Model metadata."""

        indexes: ClassVar[list[Any]] = period_indexes(prefix="ti_ret", owner_field="title")
        constraints: ClassVar[list[Any]] = period_constraints(
            name="titleretirement",
            owner_fields=["title"],
        )

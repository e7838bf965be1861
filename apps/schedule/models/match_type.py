"""Module contains the MatchType model."""

from __future__ import annotations

from typing import Any, ClassVar

from django.db import models
from uuid6 import uuid7


class MatchType(models.Model):
    """Kind of match (singles, tag team, triple threat, battle royal, ...)."""

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    name: models.CharField[str, str] = models.CharField(max_length=255, unique=True)
    slug: models.SlugField[str, str] = models.SlugField(max_length=255, unique=True)

    class Meta:
        """Meta class for MatchType model."""

        ordering: ClassVar[list[Any]] = ["name"]

    def __str__(self) -> str:
        """Get the string representation of the match type.

        Returns:
            str: The match type name.

        """
        return str(self.name)

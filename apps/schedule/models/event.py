"""Module contains the Event model."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar

from django.db import models
from uuid6 import uuid7


if TYPE_CHECKING:
    from .event_match import EventMatch


class Event(models.Model):
    """A show on the calendar; its card is made of numbered matches."""

    if TYPE_CHECKING:
        matches: models.Manager[EventMatch]

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    name: models.CharField[str, str] = models.CharField(max_length=255)
    date: models.DateTimeField[datetime, datetime] | None = models.DateTimeField(
        blank=True,
        null=True,
    )
    venue_name: models.CharField[str, str] = models.CharField(
        max_length=255,
        blank=True,
        default="",
    )
    preview: models.TextField[str, str] | None = models.TextField(blank=True, null=True)

    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)
    updated_at: models.DateTimeField = models.DateTimeField(auto_now=True)

    class Meta:
        """Meta class for Event model."""

        indexes: ClassVar[list[Any]] = [
            models.Index(fields=["date"], name="event_date_idx"),
        ]

    def __str__(self) -> str:
        """Get the string representation of the event.

        Returns:
            str: The event name.

        """
        return str(self.name)

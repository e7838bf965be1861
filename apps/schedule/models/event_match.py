"""Module contains the EventMatch model and its roster links."""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, Any, ClassVar

from django.db import models
from django.db.models import Q
from uuid6 import uuid7

from apps.common.roster_types import RosterMemberType, RosterRef


if TYPE_CHECKING:
    from apps.referee.models import Referee
    from apps.title.models import Title


COMPETITOR_TYPES = [RosterMemberType.WRESTLER, RosterMemberType.TAG_TEAM]


class EventMatch(models.Model):
    """One match on an event card.

    `match_number` is the 1-based position of the match on the card.
    """

    if TYPE_CHECKING:
        competitors: models.Manager[EventMatchCompetitor]
        referee_links: models.Manager[EventMatchReferee]
        title_links: models.Manager[EventMatchTitle]

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    event: models.ForeignKey[Any, Any] = models.ForeignKey(
        "schedule.Event",
        on_delete=models.CASCADE,
        related_name="matches",
    )
    match_type: models.ForeignKey[Any, Any] = models.ForeignKey(
        "schedule.MatchType",
        on_delete=models.PROTECT,
        related_name="matches",
    )
    match_number: models.PositiveIntegerField = models.PositiveIntegerField()
    preview: models.TextField[str, str] | None = models.TextField(blank=True, null=True)

    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Meta class for EventMatch model."""

        ordering: ClassVar[list[Any]] = ["event", "match_number"]
        constraints: ClassVar[list[Any]] = [
            models.UniqueConstraint(
                fields=["event", "match_number"],
                name="eventmatch_unique_number_per_event",
            ),
            models.CheckConstraint(
                condition=Q(match_number__gte=1),
                name="eventmatch_number_positive",
            ),
        ]

    def __str__(self) -> str:
        """Get the string representation of the match.

        Returns:
            str: The event name and the match position on the card.

        """
        return f"{self.event} - match {self.match_number}"

    def sides(self) -> dict[int, list[RosterRef]]:
        """Return competitor references grouped by side number, sides ascending."""
        grouped: dict[int, list[RosterRef]] = defaultdict(list)
        for link in self.competitors.order_by("side_number", "id_uuid"):
            grouped[link.side_number].append(link.competitor_ref)
        return dict(sorted(grouped.items()))

    def referees(self) -> list[Referee]:
        return [link.referee for link in self.referee_links.select_related("referee")]

    def titles(self) -> list[Title]:
        return [link.title for link in self.title_links.select_related("title")]


class EventMatchCompetitor(models.Model):
    """A wrestler or tag team booked on one side of a match."""

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    match: models.ForeignKey[Any, Any] = models.ForeignKey(
        "schedule.EventMatch",
        on_delete=models.CASCADE,
        related_name="competitors",
    )
    competitor_type: models.CharField[str, str] = models.CharField(
        max_length=32,
        choices=[(kind.value, kind.label) for kind in COMPETITOR_TYPES],
    )
    competitor_id: models.UUIDField[str, str] = models.UUIDField()
    side_number: models.PositiveSmallIntegerField = models.PositiveSmallIntegerField()

    created_at: models.DateTimeField = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Meta class for EventMatchCompetitor model."""

        indexes: ClassVar[list[Any]] = [
            models.Index(fields=["match", "side_number"], name="emc_match_side_idx"),
            models.Index(fields=["competitor_type", "competitor_id"], name="emc_competitor_idx"),
        ]
        constraints: ClassVar[list[Any]] = [
            models.CheckConstraint(
                condition=Q(side_number__gte=1),
                name="eventmatchcompetitor_side_positive",
            ),
            models.CheckConstraint(
                condition=Q(competitor_type__in=[kind.value for kind in COMPETITOR_TYPES]),
                name="eventmatchcompetitor_type_valid",
            ),
        ]

    def __str__(self) -> str:
        """Return a friendly label for debugging."""
        return f"{self.match} side {self.side_number}: {self.competitor_ref}"

    @property
    def competitor_ref(self) -> RosterRef:
        return RosterRef(type=RosterMemberType(self.competitor_type), id=self.competitor_id)

    @property
    def competitor(self) -> Any:
        """Load the wrestler or tag team."""
        return self.competitor_ref.resolve()


class EventMatchReferee(models.Model):
    """A referee assigned to a match."""

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    match: models.ForeignKey[Any, Any] = models.ForeignKey(
        "schedule.EventMatch",
        on_delete=models.CASCADE,
        related_name="referee_links",
    )
    referee: models.ForeignKey[Any, Any] = models.ForeignKey(
        "referee.Referee",
        on_delete=models.CASCADE,
        related_name="match_assignments",
    )

    class Meta:
        """Meta class for EventMatchReferee model."""

        constraints: ClassVar[list[Any]] = [
            models.UniqueConstraint(
                fields=["match", "referee"],
                name="eventmatchreferee_unique",
            ),
        ]

    def __str__(self) -> str:
        """Return a friendly label for debugging."""
        return f"{self.referee} @ {self.match}"


class EventMatchTitle(models.Model):
    """A title defended in a match."""

    id_uuid: models.UUIDField[str, str] = models.UUIDField(
        primary_key=True,
        default=uuid7,
        editable=False,
    )
    match: models.ForeignKey[Any, Any] = models.ForeignKey(
        "schedule.EventMatch",
        on_delete=models.CASCADE,
        related_name="title_links",
    )
    title: models.ForeignKey[Any, Any] = models.ForeignKey(
        "title.Title",
        on_delete=models.CASCADE,
        related_name="match_defenses",
    )

    class Meta:
        """Meta class for EventMatchTitle model."""

        constraints: ClassVar[list[Any]] = [
            models.UniqueConstraint(
                fields=["match", "title"],
                name="eventmatchtitle_unique",
            ),
        ]

    def __str__(self) -> str:
        """Return a friendly label for debugging."""
        return f"{self.title} @ {self.match}"

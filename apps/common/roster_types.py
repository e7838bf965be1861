"""Roster member kinds and polymorphic references.

Championship holders, stable members and match competitors are stored as a
(`*_type`, `*_id`) pair. `RosterMemberType` is the discriminator stored in the
`*_type` column and `RosterRef` is the resolved pair used at the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from django.apps import apps
from django.db import models

from .exceptions import InvalidRosterArgument


class RosterMemberType(models.TextChoices):
    """Kinds of roster entities."""

    WRESTLER = "wrestler", "Wrestler"
    TAG_TEAM = "tag_team", "Tag team"
    MANAGER = "manager", "Manager"
    REFEREE = "referee", "Referee"
    TITLE = "title", "Title"
    STABLE = "stable", "Stable"

    @property
    def model_label(self) -> str:
        """Return the `app_label.ModelName` label backing this kind."""
        return MODEL_LABELS[self]

    def model(self) -> type[models.Model]:
        """Return the model class backing this kind."""
        return apps.get_model(self.model_label)

    @classmethod
    def from_model(cls, obj: Any) -> RosterMemberType:
        """Resolve the kind of a roster model instance.

        Raises:
            InvalidRosterArgument: If `obj` is not a roster entity.

        """
        label = obj._meta.label if isinstance(obj, models.Model) else None
        for member in cls:
            if MODEL_LABELS[member] == label:
                return member
        raise InvalidRosterArgument(
            f"{type(obj).__name__} is not a roster member.",
            code="unsupported_roster_type",
        )

    def can_be_employed(self) -> bool:
        """Return whether this kind carries employment periods."""
        return self not in {RosterMemberType.TITLE, RosterMemberType.STABLE}

    def can_be_injured(self) -> bool:
        """Return whether this kind carries injury periods."""
        return self in {
            RosterMemberType.WRESTLER,
            RosterMemberType.MANAGER,
            RosterMemberType.REFEREE,
        }

    def can_be_activated(self) -> bool:
        """Return whether this kind carries activity periods."""
        return self in {RosterMemberType.TITLE, RosterMemberType.STABLE}

    def can_win_titles(self) -> bool:
        """Return whether this kind can hold a championship."""
        return self in {RosterMemberType.WRESTLER, RosterMemberType.TAG_TEAM}


MODEL_LABELS: dict[RosterMemberType, str] = {
    RosterMemberType.WRESTLER: "wrestler.Wrestler",
    RosterMemberType.TAG_TEAM: "tag_team.TagTeam",
    RosterMemberType.MANAGER: "manager.Manager",
    RosterMemberType.REFEREE: "referee.Referee",
    RosterMemberType.TITLE: "title.Title",
    RosterMemberType.STABLE: "stable.Stable",
}


@dataclass(frozen=True)
class RosterRef:
    """A typed reference to one roster entity."""

    type: RosterMemberType
    id: UUID

    @classmethod
    def of(cls, obj: Any) -> RosterRef:
        """Build a reference from a roster model instance."""
        return cls(type=RosterMemberType.from_model(obj), id=obj.pk)

    def resolve(self) -> Any:
        """Load the referenced entity.

        Raises:
            ObjectDoesNotExist: If the entity has been deleted.

        """
        return self.type.model()._default_manager.get(pk=self.id)

    def __str__(self) -> str:
        """Return `type:id` for logs."""
        return f"{self.type.value}:{self.id}"

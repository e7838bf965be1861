"""Group membership periods (tag teams, stables, manager engagements).

A membership is a period keyed by a (group, member) pair rather than by a
single owner. `MembershipTracker` is declared on both sides of the pair, so
`tag_team.wrestlers` and `wrestler.tag_teams` read and write the same rows::

    class TagTeam(models.Model):
        wrestlers = MembershipTracker(
            "tag_team.TagTeamWrestler", group_field="tag_team", member_field="wrestler"
        )

    class Wrestler(models.Model):
        tag_teams = MembershipTracker(
            "tag_team.TagTeamWrestler", group_field="wrestler", member_field="tag_team"
        )
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
import logging
from typing import Any

from django.apps import apps
from django.conf import settings
from django.db import models, transaction

from apps.common.periods import BasePeriod, PeriodQuerySet
from apps.common.trackers import end_period
from apps.common.utils import ensure_aware


logger = logging.getLogger(__name__)


class MembershipTracker:
    """Descriptor binding a membership model to one side of the pair."""

    def __init__(self, model: str, *, group_field: str, member_field: str) -> None:
        """Track memberships stored in `model` from the `group_field` side."""
        self.model_label = model
        self.group_field = group_field
        self.member_field = member_field
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return BoundMemberships(self, instance)

    @property
    def model(self) -> type[BasePeriod]:
        return apps.get_model(self.model_label)


class BoundMemberships:
    """The memberships held by (or in) one group."""

    def __init__(self, tracker: MembershipTracker, group: models.Model) -> None:
        self.tracker = tracker
        self.group = group

    @property
    def model(self) -> type[BasePeriod]:
        return self.tracker.model

    def all(self) -> PeriodQuerySet:
        """Return every membership row of the group."""
        return self.model.objects.filter(**{self.tracker.group_field: self.group})

    def current(self) -> PeriodQuerySet:
        """Return the open membership rows."""
        return self.all().current()

    def previous(self) -> PeriodQuerySet:
        """Return the closed membership rows, most recently ended first."""
        return self.all().previous()

    def current_members(self) -> list[Any]:
        """Return the members with an open membership, earliest joiner first."""
        member_field = self.tracker.member_field
        rows = self.current().select_related(member_field).chronological()
        return [getattr(row, member_field) for row in rows]

    def previous_members(self) -> list[Any]:
        """Return members whose membership has ended, most recent leaver first.

        A member that left more than once is listed once.
        """
        member_field = self.tracker.member_field
        members: dict[Any, Any] = {}
        for row in self.previous().select_related(member_field):
            member = getattr(row, member_field)
            members.setdefault(member.pk, member)
        return list(members.values())

    def includes(self, member: models.Model) -> bool:
        """Return whether `member` currently belongs to the group."""
        return self.current().filter(**{self.tracker.member_field: member}).exists()

    def add(self, member: models.Model, at: datetime) -> Any:
        """Open the membership of `member` at `at`.

        An already open membership is moved to start at `at`.
        """
        ensure_aware(at)
        model = self.model
        with transaction.atomic():
            row, created = model.objects.update_or_create(
                **{
                    self.tracker.group_field: self.group,
                    self.tracker.member_field: member,
                    f"{model.period_end_field}__isnull": True,
                },
                defaults={model.period_start_field: at},
            )
        logger.debug(
            "%s %s membership %s -> %s at %s.",
            "Opened" if created else "Restarted",
            self.tracker.name,
            self.group.pk,
            member.pk,
            at.isoformat(),
        )
        return row

    def remove(self, member: models.Model, at: datetime) -> Any | None:
        """Close the open membership of `member` at `at`.

        Removing a member without an open membership does nothing.
        """
        ensure_aware(at)
        row = self.current().filter(**{self.tracker.member_field: member}).first()
        if row is None:
            logger.debug(
                "No open %s membership %s -> %s; nothing to close.",
                self.tracker.name,
                self.group.pk,
                member.pk,
            )
            return None
        return end_period(row, at, kind=f"{self.tracker.name} membership")

    join = add
    leave = remove

    def add_many(self, members: Iterable[models.Model], at: datetime) -> list[Any]:
        """Add each member at the same timestamp."""
        with transaction.atomic():
            return [self.add(member, at) for member in members]

    def remove_many(self, members: Iterable[models.Model], at: datetime) -> list[Any]:
        """Remove each member at the same timestamp.

        Returns:
            The rows that were actually closed.

        """
        with transaction.atomic():
            closed = [self.remove(member, at) for member in members]
        return [row for row in closed if row is not None]

    def sync(
        self,
        old_members: Iterable[models.Model],
        new_members: Iterable[models.Model],
        at: datetime,
    ) -> None:
        """Replace the `old_members` roster with `new_members` at `at`.

        Members listed in both sets are closed and reopened at `at` unless
        `RINGSIDE_SYNC_KEEPS_CONTINUING_MEMBERS` is enabled, in which case their
        open membership is left as is.
        """
        old = list(old_members)
        new = list(new_members)
        if getattr(settings, "RINGSIDE_SYNC_KEEPS_CONTINUING_MEMBERS", False):
            continuing = {member.pk for member in old} & {member.pk for member in new}
            old = [member for member in old if member.pk not in continuing]
            new = [member for member in new if member.pk not in continuing]
        with transaction.atomic():
            self.remove_many(old, at)
            self.add_many(new, at)

    def close_all(self, at: datetime) -> int:
        """Close every open membership of the group at `at`.

        Returns:
            The number of memberships closed.

        """
        ensure_aware(at)
        kind = f"{self.tracker.name} membership"
        with transaction.atomic():
            rows = list(self.current())
            for row in rows:
                end_period(row, at, kind=kind)
        if rows:
            logger.debug("Closed %d %s rows for %s.", len(rows), kind, self.group.pk)
        return len(rows)

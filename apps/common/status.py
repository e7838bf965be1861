"""Status predicates derived from a roster entity's periods.

Each mixin expects the model to declare the matching `PeriodTracker`:

- `Employable` -> `employment`
- `Suspendable` -> `suspension`
- `Injurable` -> `injury`
- `Retirable` -> `retirement`
- `Activatable` -> `activity`

A predicate never raises for an entity without periods; it answers False.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any


class Employable:
    """Employment status."""

    employment: Any

    def is_employed(self) -> bool:
        """Return whether an employment period is open."""
        return self.employment.has_current()

    def has_employment_history(self) -> bool:
        """Return whether any employment has ended."""
        return self.employment.has_history()

    def has_future_employment(self, now: datetime) -> bool:
        """Return whether the open employment only starts after `now`."""
        return self.employment.has_future(now)

    def is_unemployed(self) -> bool:
        """Return whether the entity was never employed."""
        return not self.employment.exists()

    def is_released(self) -> bool:
        """Return whether the entity was employed before but is not now."""
        if self.is_employed() or (isinstance(self, Retirable) and self.is_retired()):
            return False
        return self.has_employment_history()

    def current_employment(self) -> Any | None:
        return self.employment.current()

    def previous_employment(self) -> Any | None:
        """Return the most recently ended employment."""
        return self.employment.latest_previous()

    def first_employment(self) -> Any | None:
        return self.employment.first()

    def future_employment(self, now: datetime) -> Any | None:
        return self.employment.future(now)


class Suspendable:
    """Suspension status."""

    suspension: Any

    def is_suspended(self) -> bool:
        return self.suspension.has_current()

    def has_suspension_history(self) -> bool:
        return self.suspension.has_history()

    def current_suspension(self) -> Any | None:
        return self.suspension.current()

    def previous_suspension(self) -> Any | None:
        return self.suspension.latest_previous()


class Injurable:
    """Injury status."""

    injury: Any

    def is_injured(self) -> bool:
        return self.injury.has_current()

    def has_injury_history(self) -> bool:
        return self.injury.has_history()

    def current_injury(self) -> Any | None:
        return self.injury.current()

    def previous_injury(self) -> Any | None:
        return self.injury.latest_previous()


class Retirable:
    """Retirement status."""

    retirement: Any

    def is_retired(self) -> bool:
        return self.retirement.has_current()

    def has_retirement_history(self) -> bool:
        return self.retirement.has_history()

    def current_retirement(self) -> Any | None:
        return self.retirement.current()

    def previous_retirement(self) -> Any | None:
        return self.retirement.latest_previous()


class Activatable:
    """Activity status for entities that debut rather than sign (titles, stables)."""

    activity: Any

    def is_currently_active(self) -> bool:
        """Return whether an activity period is open."""
        return self.activity.has_current()

    def is_inactive(self) -> bool:
        """Return whether no activity period is open (history or not)."""
        return not self.is_currently_active()

    def is_unactivated(self) -> bool:
        """Return whether the entity never had an activity period at all."""
        return not self.activity.exists()

    def has_activity_periods(self) -> bool:
        return self.activity.exists()

    def has_activity_history(self) -> bool:
        """Return whether any activity period has ended."""
        return self.activity.has_history()

    def has_future_activity(self, now: datetime) -> bool:
        """Return whether the open activity period only starts after `now`."""
        return self.activity.has_future(now)

    def current_activity(self) -> Any | None:
        return self.activity.current()

    def previous_activity(self) -> Any | None:
        return self.activity.latest_previous()

    def first_activity(self) -> Any | None:
        return self.activity.first()

    def future_activity(self, now: datetime) -> Any | None:
        return self.activity.future(now)


class Bookable(Employable, Suspendable, Retirable):
    """Match availability for employable roster members."""

    def is_bookable(self, now: datetime) -> bool:
        """Return whether the entity can be booked in a match at `now`.

        Bookable means employed (not just signed for a later date) and neither
        suspended, injured nor retired.
        """
        if not self.is_employed() or self.has_future_employment(now):
            return False
        if self.is_suspended() or self.is_retired():
            return False
        return not (isinstance(self, Injurable) and self.is_injured())

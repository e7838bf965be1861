"""Championship lookups for roster members that can hold titles."""

from __future__ import annotations

from typing import Any

from django.apps import apps

from apps.common.periods import PeriodQuerySet


class TitleHolder:
    """Championship predicates for wrestlers and tag teams."""

    def championships(self) -> PeriodQuerySet:
        """Return every reign held by this member, on any title."""
        model: Any = apps.get_model("title.TitleChampionship")
        return model.objects.held_by(self)

    def current_championships(self) -> PeriodQuerySet:
        return self.championships().current().select_related("title")

    def previous_championships(self) -> PeriodQuerySet:
        return self.championships().previous().select_related("title")

    def is_champion(self) -> bool:
        """Return whether the member holds at least one title right now."""
        return self.championships().current().exists()

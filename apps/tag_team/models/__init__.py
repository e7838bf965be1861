"""Model package for the tag_team app."""

from .tag_team import TagTeam
from .tag_team_status import TagTeamEmployment, TagTeamRetirement, TagTeamSuspension
from .tag_team_wrestler import TagTeamWrestler


__all__ = [
    "TagTeam",
    "TagTeamEmployment",
    "TagTeamRetirement",
    "TagTeamSuspension",
    "TagTeamWrestler",
]

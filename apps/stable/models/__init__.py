"""Model package for the stable app."""

from .stable import Stable
from .stable_members import StableTagTeam, StableWrestler
from .stable_status import StableActivation, StableRetirement


__all__ = [
    "Stable",
    "StableActivation",
    "StableRetirement",
    "StableTagTeam",
    "StableWrestler",
]

"""Model package for the manager app."""

from .manager import Manager
from .manager_clients import TagTeamManager, WrestlerManager
from .manager_status import (
    ManagerEmployment,
    ManagerInjury,
    ManagerRetirement,
    ManagerSuspension,
)


__all__ = [
    "Manager",
    "ManagerEmployment",
    "ManagerInjury",
    "ManagerRetirement",
    "ManagerSuspension",
    "TagTeamManager",
    "WrestlerManager",
]

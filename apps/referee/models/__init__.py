"""Model package for the referee app."""

from .referee import Referee
from .referee_status import (
    RefereeEmployment,
    RefereeInjury,
    RefereeRetirement,
    RefereeSuspension,
)


__all__ = [
    "Referee",
    "RefereeEmployment",
    "RefereeInjury",
    "RefereeRetirement",
    "RefereeSuspension",
]

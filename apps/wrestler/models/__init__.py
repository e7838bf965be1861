"""Model package for the wrestler app."""

from .wrestler import Wrestler
from .wrestler_status import (
    WrestlerEmployment,
    WrestlerInjury,
    WrestlerRetirement,
    WrestlerSuspension,
)


__all__ = [
    "Wrestler",
    "WrestlerEmployment",
    "WrestlerInjury",
    "WrestlerRetirement",
    "WrestlerSuspension",
]

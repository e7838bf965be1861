"""Model package for the title app."""

from .title import Title
from .title_championship import ChampionshipQuerySet, TitleChampionship
from .title_status import TitleActivation, TitleRetirement


__all__ = [
    "ChampionshipQuerySet",
    "Title",
    "TitleActivation",
    "TitleChampionship",
    "TitleRetirement",
]

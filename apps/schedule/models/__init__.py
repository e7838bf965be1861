"""Package contains the models for the schedule app."""

from .event import Event
from .event_match import (
    EventMatch,
    EventMatchCompetitor,
    EventMatchReferee,
    EventMatchTitle,
)
from .match_type import MatchType


__all__ = [
    "Event",
    "EventMatch",
    "EventMatchCompetitor",
    "EventMatchReferee",
    "EventMatchTitle",
    "MatchType",
]

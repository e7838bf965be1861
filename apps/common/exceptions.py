"""Errors raised by the roster lifecycle and booking code."""

from __future__ import annotations


class RosterError(RuntimeError):
    """Base class for roster errors.

    The `code` is a short machine-readable reason that callers can map onto a
    response or a form error.
    """

    default_code = "error"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        """Create an error with an optional machine-readable code."""
        super().__init__(message)
        self.code = code or self.default_code


class RosterValidationError(RosterError):
    """Raised when caller-supplied booking data is incomplete."""

    default_code = "invalid"


class InvalidRosterArgument(RosterError, ValueError):
    """Raised for arguments no roster operation can work with."""

    default_code = "invalid_argument"


class CompetitorConflictError(RosterValidationError):
    """Raised when one competitor is booked on more than one side of a match."""

    default_code = "competitor_conflict"


class TransitionNotAllowed(RosterError):
    """Raised when an eligibility guard rejects a status transition."""

    default_code = "not_allowed"

"""Roster behaviour switches.

These toggle the few places where the booking rules are a business decision
rather than a data invariant.
"""

from __future__ import annotations

from .env import env_bool


# When a roster sync lists a member in both the old and the new set, the default
# closes the member's open row and opens a fresh one at the same instant. Enable
# this to leave continuing members untouched instead.
RINGSIDE_SYNC_KEEPS_CONTINUING_MEMBERS = env_bool(
    "RINGSIDE_SYNC_KEEPS_CONTINUING_MEMBERS",
    False,
)

# Some stipulation matches book one competitor on several sides. Disable this to
# reject such bookings with a CompetitorConflictError.
RINGSIDE_ALLOW_DUPLICATE_COMPETITORS = env_bool(
    "RINGSIDE_ALLOW_DUPLICATE_COMPETITORS",
    True,
)

"""Fee schedule lookup."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, time

from .const import FEE_SCHEDULE
from .exceptions import ScheduleError
from .models import FeeBracket


def fee_for(value: time | datetime, schedule: Sequence[FeeBracket] = FEE_SCHEDULE) -> int:
    """Return the fee for a time of day, or 0 outside every bracket."""
    time_of_day = value.time() if isinstance(value, datetime) else value
    for bracket in schedule:
        if bracket.contains(time_of_day):
            return bracket.fee
    return 0


def validate_schedule(schedule: Sequence[FeeBracket]) -> tuple[FeeBracket, ...]:
    """Check that brackets are well formed, ordered and disjoint."""
    brackets = tuple(schedule)
    previous: FeeBracket | None = None
    for bracket in brackets:
        if not isinstance(bracket, FeeBracket):
            raise ScheduleError("Fee schedule entries must be FeeBracket instances.")
        if not isinstance(bracket.start, time) or not isinstance(bracket.end, time):
            raise ScheduleError("Bracket start and end must be datetime.time values.")
        if bracket.start >= bracket.end:
            raise ScheduleError(
                f"Bracket {bracket.start.isoformat()}-{bracket.end.isoformat()} is empty."
            )
        if isinstance(bracket.fee, bool) or not isinstance(bracket.fee, int) or bracket.fee < 0:
            raise ScheduleError("Bracket fee must be a non-negative integer.")
        if previous is not None and bracket.start < previous.end:
            raise ScheduleError(
                f"Bracket starting {bracket.start.isoformat()} overlaps or precedes "
                f"the bracket ending {previous.end.isoformat()}."
            )
        previous = bracket
    return brackets

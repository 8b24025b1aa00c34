"""Distances between dates, in seconds and in words.

Unit selection uses fixed-length months (30 days) and years (365 days); the
phrases are approximations meant for display, not calendar arithmetic.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .units import UNITS, DurationUnit, second


@dataclass(frozen=True, kw_only=True)
class RelativePhrase:
    magnitude: int
    unit: DurationUnit

    def render(self, compact: bool = False) -> str:
        """Render as "17 minutes", or "17m" when *compact*."""
        if compact:
            return f"{self.magnitude}{self.unit.abbreviation}"
        return f"{self.magnitude} {self.unit.label(self.magnitude)}"

    def __str__(self) -> str:
        return self.render()


def seconds_between_dates(date: datetime, other: datetime) -> int:
    """Return the number of seconds from *date* to *other*.

    The result is positive when *other* is later than *date*. Naive datetimes
    are interpreted as local time, aware ones by their UTC offset, so
    differences across timezones and DST transitions are exact. Fractional
    seconds are floored.
    """
    delta = _instant(other) - _instant(date)
    return delta // timedelta(seconds=1)


def _instant(dt: datetime) -> datetime:
    # astimezone() treats naive datetimes as local time
    return dt.astimezone(timezone.utc)


def relative_phrase(seconds: int | float) -> RelativePhrase:
    """Pick the coarsest unit not exceeding *seconds* and round to it.

    Negative durations are measured by their magnitude. The count is rounded
    to the nearest whole unit, halves up (1000 seconds is 17 minutes).
    """
    seconds = abs(seconds)
    unit = second
    for candidate in reversed(UNITS):
        if seconds >= candidate.seconds:
            unit = candidate
            break
    magnitude = math.floor(seconds / unit.seconds + 0.5)
    return RelativePhrase(magnitude=magnitude, unit=unit)


def distance_of_time_in_words(
    seconds: int | float, compare_with_now: bool, compact: bool = False
) -> str:
    """Describe a duration of *seconds* approximately, e.g. "2 weeks".

    Args:
        seconds: Duration in seconds
        compare_with_now: Whether *seconds* was measured against the current
            time. Accepted for callers' bookkeeping; the output is the same.
        compact: Render as "2w" instead of "2 weeks"
    """
    return relative_phrase(seconds).render(compact)


def time_ago_in_words(
    date: datetime, *, now: datetime | None = None, compact: bool = False
) -> str:
    """Describe how long ago *date* was, e.g. "3 hours".

    *now* defaults to the current time, timezone-aware if *date* is.
    Dates in the future are described by the same distance.
    """
    if now is None:
        now = datetime.now(timezone.utc) if date.tzinfo is not None else datetime.now()
    seconds = seconds_between_dates(date, now)
    return distance_of_time_in_words(seconds, True, compact)

"""Coercion of loosely typed values into calendar dates.

Numbers are Unix timestamps in seconds, strings are ISO 8601 style date-times
(e.g. ``"2019-03-26 10:30"``) parsed with python-dateutil. Anything that
cannot be coerced yields ``None`` instead of raising.
"""

from datetime import datetime
from logging import getLogger
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.parser import isoparse

logger = getLogger(__name__)


def to_date(value: Any, *, tz: str | None = None) -> datetime | None:
    """Convert *value* to a datetime, or return None if it cannot be converted.

    Args:
        value: Unix timestamp in seconds (int or float), date-time string such
            as "2019-03-26 10:30", or an existing datetime
        tz: IANA timezone name. When given, the result is timezone-aware in
            that zone. Otherwise it is a naive datetime in local time.

    Returns:
        The coerced datetime, or None for unsupported or malformed input
    """
    try:
        zone = ZoneInfo(tz) if tz is not None else None
    except (ZoneInfoNotFoundError, ValueError):
        logger.debug("Unknown timezone %r", tz)
        return None

    if isinstance(value, bool):
        logger.debug("Cannot convert bool %r to a date", value)
        return None

    if isinstance(value, (int, float)):
        try:
            if zone is None:
                return datetime.fromtimestamp(value)
            return datetime.fromtimestamp(value, tz=zone)
        except (OverflowError, OSError, ValueError) as e:
            logger.debug("Timestamp %r out of range: %s", value, e)
            return None

    if isinstance(value, str):
        try:
            parsed = isoparse(value.strip())
        except (ValueError, OverflowError) as e:
            logger.debug("Cannot parse %r as a date: %s", value, e)
            return None
        return _localize(parsed, zone, value)

    if isinstance(value, datetime):
        if zone is None:
            return value
        return _localize(value, zone, value)

    logger.debug("Cannot convert %s %r to a date", type(value).__name__, value)
    return None


def _localize(dt: datetime, zone: ZoneInfo | None, value: Any) -> datetime | None:
    try:
        return _convert(dt, zone)
    except (OverflowError, OSError, ValueError) as e:
        # Shifting by an offset can leave the datetime.min..datetime.max range
        logger.debug("Cannot convert %r to the target zone: %s", value, e)
        return None


def _convert(dt: datetime, zone: ZoneInfo | None) -> datetime:
    if zone is not None:
        if dt.tzinfo is None:
            return dt.replace(tzinfo=zone)
        return dt.astimezone(zone)
    if dt.tzinfo is not None:
        # Explicit offset: convert to local wall-clock time
        return dt.astimezone().replace(tzinfo=None)
    return dt

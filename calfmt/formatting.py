"""Human-readable date formatting.

Output follows a fixed English pattern, independent of the process locale::

    [Tuesday, ]26 Mar 2019, 10:30am
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any

# Indexed by datetime.weekday() (Monday == 0)
_DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_SHORT_DAY_NAMES = ("Mon", "Tues", "Wed", "Thurs", "Fri", "Sat", "Sun")

# Indexed by datetime.month - 1
_MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

# camelCase spellings accepted from option mappings
_ALIASES = {
    "includeDay": "include_day",
    "twentyFourHour": "twenty_four_hour",
}


@dataclass(frozen=True, kw_only=True)
class FormatOptions:
    """Options for :func:`format_date`.

    Attributes:
        include_day: Prefix the output with the weekday name
        compact: Use the short weekday name ("Tues" instead of "Tuesday")
        twenty_four_hour: Use a 24-hour clock without am/pm suffix
    """

    include_day: bool = False
    compact: bool = False
    twenty_four_hour: bool = False

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "FormatOptions":
        """Build options from a mapping, ignoring keys that are not options."""
        return cls(**_option_values(mapping))


def format_date(
    date: datetime,
    options: FormatOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Format *date* as e.g. "Tuesday, 26 Mar 2019, 10:30am".

    Args:
        date: The datetime to format, rendered in its own wall-clock time
        options: FormatOptions, a mapping of option names (unknown keys are
            ignored), or None for defaults
        **overrides: Individual options taking precedence over *options*

    Raises:
        TypeError: If date is not a datetime or options has an unsupported type
    """
    if not isinstance(date, datetime):
        raise TypeError(
            f"format_date() expects a datetime.\n"
            f"Got {type(date).__name__!r}: {date!r}\n"
            f"Hint: Convert timestamps and strings first:\n"
            f"  from calfmt import to_date\n"
            f"  format_date(to_date('2019-03-26 10:30'))"
        )
    opts = _coerce_options(options)
    if overrides:
        opts = replace(opts, **_option_values(overrides))

    text = f"{date.day:02d} {_MONTH_NAMES[date.month - 1]} {date.year:04d}, "
    text += _format_time(date, opts.twenty_four_hour)
    if opts.include_day:
        names = _SHORT_DAY_NAMES if opts.compact else _DAY_NAMES
        text = f"{names[date.weekday()]}, {text}"
    return text


def _option_values(mapping: Mapping[str, Any]) -> dict[str, bool]:
    """Recognized options in *mapping*, keyed by field name."""
    names = {field.name for field in fields(FormatOptions)}
    values: dict[str, bool] = {}
    for key, value in mapping.items():
        name = _ALIASES.get(key, key)
        if name in names:
            values[name] = bool(value)
    return values


def _coerce_options(options: FormatOptions | Mapping[str, Any] | None) -> FormatOptions:
    if options is None:
        return FormatOptions()
    if isinstance(options, FormatOptions):
        return options
    if isinstance(options, Mapping):
        return FormatOptions.from_mapping(options)
    raise TypeError(
        f"format_date() options must be FormatOptions, a mapping, or None.\n"
        f"Got {type(options).__name__!r}: {options!r}\n"
        f"Examples:\n"
        f"  format_date(dt, FormatOptions(include_day=True))\n"
        f"  format_date(dt, {{'includeDay': True, 'compact': True}})\n"
        f"  format_date(dt, twenty_four_hour=True)"
    )


def _format_time(date: datetime, twenty_four_hour: bool) -> str:
    if twenty_four_hour:
        return f"{date.hour}:{date.minute:02d}"
    hour = date.hour % 12 or 12
    suffix = "am" if date.hour < 12 else "pm"
    return f"{hour}:{date.minute:02d}{suffix}"

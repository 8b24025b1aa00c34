from .coerce import to_date
from .distance import (
    RelativePhrase,
    distance_of_time_in_words,
    relative_phrase,
    seconds_between_dates,
    time_ago_in_words,
)
from .formatting import FormatOptions, format_date
from .units import UNITS, DurationUnit, unit_named
from .util import plural

__all__ = [
    "plural",
    "to_date",
    "FormatOptions",
    "format_date",
    "seconds_between_dates",
    "distance_of_time_in_words",
    "time_ago_in_words",
    "relative_phrase",
    "RelativePhrase",
    "DurationUnit",
    "UNITS",
    "unit_named",
]

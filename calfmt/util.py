"""Utility constants and helpers for calfmt.

Time unit constants represent durations in seconds.
Months and years are fixed-length approximations, not calendar-aware.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2592000
YEAR = 31536000


def plural(word: str, count: int | float, plural: str | None = None) -> str:
    """Return *word* in the form matching *count*.

    A count of exactly 1 keeps the singular. Any other count uses the
    explicit *plural* if given (for irregular words like "sheep"), otherwise
    just appends "s".
    """
    if count == 1:
        return word
    if plural is not None:
        return plural
    return f"{word}s"

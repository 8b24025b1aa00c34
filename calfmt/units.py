"""Duration units with fixed lengths in seconds and compact suffixes."""

from dataclasses import dataclass

from .util import DAY, HOUR, MINUTE, MONTH, SECOND, WEEK, YEAR, plural


@dataclass(frozen=True, kw_only=True)
class DurationUnit:
    name: str
    seconds: int
    abbreviation: str

    def __post_init__(self) -> None:
        if self.seconds <= 0:
            raise ValueError(
                f"DurationUnit seconds must be positive, got {self.seconds}"
            )

    def label(self, count: int) -> str:
        """Unit name in the form matching *count* ("minute" or "minutes")."""
        return plural(self.name, count)

    def __str__(self) -> str:
        return f"DurationUnit({self.name}, {self.seconds}s)"


second = DurationUnit(name="second", seconds=SECOND, abbreviation="s")
minute = DurationUnit(name="minute", seconds=MINUTE, abbreviation="m")
hour = DurationUnit(name="hour", seconds=HOUR, abbreviation="h")
day = DurationUnit(name="day", seconds=DAY, abbreviation="d")
week = DurationUnit(name="week", seconds=WEEK, abbreviation="w")
month = DurationUnit(name="month", seconds=MONTH, abbreviation="mo")
year = DurationUnit(name="year", seconds=YEAR, abbreviation="y")

# Ordered finest to coarsest
UNITS: tuple[DurationUnit, ...] = (second, minute, hour, day, week, month, year)

_UNIT_MAP = {unit.name: unit for unit in UNITS}


def unit_named(name: str) -> DurationUnit:
    """Look up a unit by its singular or plural name ("hour", "hours")."""
    key = name.strip().lower()
    unit = _UNIT_MAP.get(key) or _UNIT_MAP.get(key.removesuffix("s"))
    if unit is None:
        valid = ", ".join(_UNIT_MAP)
        raise ValueError(f"Invalid unit '{name}'. Valid units: {valid}")
    return unit

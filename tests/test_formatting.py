"""Tests for human-readable date formatting."""

from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from calfmt import FormatOptions, format_date


def test_format_date_defaults():
    """Test formatting with default options."""
    assert format_date(datetime(2019, 3, 26, 10, 30)) == "26 Mar 2019, 10:30am"


def test_format_date_include_day():
    """Test that include_day prefixes the full weekday name."""
    date = datetime(2019, 3, 26, 10, 30)
    assert (
        format_date(date, FormatOptions(include_day=True))
        == "Tuesday, 26 Mar 2019, 10:30am"
    )


def test_format_date_include_day_compact():
    """Test that compact uses the short weekday name."""
    date = datetime(2019, 3, 26, 10, 30)
    options = FormatOptions(include_day=True, compact=True)
    assert format_date(date, options) == "Tues, 26 Mar 2019, 10:30am"


def test_format_date_compact_without_day():
    """Test that compact alone changes nothing."""
    date = datetime(2019, 3, 26, 10, 30)
    assert format_date(date, compact=True) == "26 Mar 2019, 10:30am"


@pytest.mark.parametrize(
    ("date", "expected"),
    [
        (datetime(2019, 3, 26, 10, 30), "26 Mar 2019, 10:30"),
        (datetime(2019, 3, 26, 12, 0), "26 Mar 2019, 12:00"),
        (datetime(2019, 3, 26, 18, 30), "26 Mar 2019, 18:30"),
        (datetime(2019, 3, 26, 0, 0), "26 Mar 2019, 0:00"),
    ],
)
def test_format_date_twenty_four_hour(date, expected):
    """Test the 24-hour clock option."""
    assert format_date(date, FormatOptions(twenty_four_hour=True)) == expected


@pytest.mark.parametrize(
    ("date", "expected"),
    [
        (datetime(2019, 3, 26, 0, 0), "26 Mar 2019, 12:00am"),
        (datetime(2019, 3, 26, 0, 5), "26 Mar 2019, 12:05am"),
        (datetime(2019, 3, 26, 12, 0), "26 Mar 2019, 12:00pm"),
        (datetime(2019, 3, 26, 18, 30), "26 Mar 2019, 6:30pm"),
        (datetime(2019, 3, 26, 23, 59), "26 Mar 2019, 11:59pm"),
    ],
)
def test_format_date_twelve_hour(date, expected):
    """Test wall-clock conventions of the 12-hour clock."""
    assert format_date(date) == expected


def test_format_date_pads_day():
    """Test that the day of month is zero-padded."""
    assert format_date(datetime(1920, 1, 5, 9, 7)) == "05 Jan 1920, 9:07am"


@pytest.mark.parametrize(
    ("day", "full", "short"),
    [
        (25, "Monday", "Mon"),
        (26, "Tuesday", "Tues"),
        (27, "Wednesday", "Wed"),
        (28, "Thursday", "Thurs"),
        (29, "Friday", "Fri"),
        (30, "Saturday", "Sat"),
        (31, "Sunday", "Sun"),
    ],
)
def test_format_date_weekday_names(day, full, short):
    """Test the weekday name tables for a full week (Mar 25-31, 2019)."""
    date = datetime(2019, 3, day, 9, 0)
    assert format_date(date, include_day=True).startswith(f"{full}, ")
    assert format_date(date, include_day=True, compact=True).startswith(f"{short}, ")


def test_format_date_month_names():
    """Test the month name table."""
    months = [format_date(datetime(2019, m, 1)).split()[1] for m in range(1, 13)]
    assert months == [
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    ]


def test_format_date_accepts_mapping():
    """Test camelCase mappings, ignoring unknown keys."""
    date = datetime(2019, 3, 26, 18, 30)
    options = {"includeDay": True, "twentyFourHour": True, "colour": "blue"}
    assert format_date(date, options) == "Tuesday, 26 Mar 2019, 18:30"


def test_format_date_overrides_take_precedence():
    """Test that keyword options override the options record."""
    date = datetime(2019, 3, 26, 18, 30)
    options = FormatOptions(include_day=True, twenty_four_hour=True)
    assert format_date(date, options, twenty_four_hour=False) == (
        "Tuesday, 26 Mar 2019, 6:30pm"
    )


def test_format_date_uses_wall_clock_time():
    """Test that aware datetimes are rendered in their own zone."""
    date = datetime(2019, 3, 26, 10, 30, tzinfo=ZoneInfo("America/New_York"))
    assert format_date(date) == "26 Mar 2019, 10:30am"


def test_format_options_from_mapping():
    """Test building options from snake_case and camelCase keys."""
    options = FormatOptions.from_mapping({"include_day": 1, "compact": True, "x": 1})
    assert options == FormatOptions(include_day=True, compact=True)


def test_format_date_rejects_bad_options():
    """Test that unsupported option types raise TypeError."""
    with pytest.raises(TypeError, match="options must be FormatOptions"):
        format_date(datetime(2019, 3, 26), ["includeDay"])  # type: ignore[arg-type]


def test_format_date_rejects_non_datetime():
    """Test that strings must be converted first."""
    with pytest.raises(TypeError, match="expects a datetime"):
        format_date("2019-03-26 10:30")  # type: ignore[arg-type]

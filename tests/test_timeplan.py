"""Tests for date and clock helpers."""

from datetime import date

from roster.services.timeplan import (
    calculate_shift_hours,
    format_date,
    iso_date,
    parse_date,
    parse_hour,
    week_dates,
    week_start,
    weekday_name,
)


def test_parse_date_valid_and_invalid():
    assert parse_date("03/11/2025") == date(2025, 11, 3)
    assert parse_date("31/02/2025") is None  # not a real day
    assert parse_date("3/11/2025") is None
    assert parse_date("2025-11-03") is None
    assert parse_date("") is None
    assert parse_date(None) is None


def test_format_and_iso_date():
    assert format_date(date(2025, 11, 4)) == "04/11/2025"
    assert iso_date("04/11/2025") == "2025-11-04"
    assert iso_date("not a date") == "not a date"


def test_week_start_monday_and_sunday():
    # 03/11/2025 is a Monday, 09/11/2025 the Sunday of the same week
    assert week_start(date(2025, 11, 3)) == date(2025, 11, 3)
    assert week_start(date(2025, 11, 6)) == date(2025, 11, 3)
    assert week_start(date(2025, 11, 9)) == date(2025, 11, 3)


def test_week_dates_cross_month():
    days = week_dates(date(2025, 10, 30))
    assert days[0] == date(2025, 10, 27)
    assert days[-1] == date(2025, 11, 2)
    assert len(days) == 7


def test_weekday_name():
    assert weekday_name(date(2025, 11, 3)) == "Monday"
    assert weekday_name(date(2025, 11, 9)) == "Sunday"


def test_calculate_shift_hours():
    """Test shift duration calculation."""
    assert calculate_shift_hours("07:00", "15:00") == 8.0
    assert calculate_shift_hours("09:00", "12:30") == 3.5
    assert calculate_shift_hours("13:30", "19:00") == 5.5


def test_calculate_shift_hours_malformed_is_zero():
    assert calculate_shift_hours("9h00", "17:00") == 0.0
    assert calculate_shift_hours("ab:cd", "17:00") == 0.0
    assert calculate_shift_hours("", "17:00") == 0.0
    assert calculate_shift_hours(None, None) == 0.0


def test_calculate_shift_hours_end_before_start():
    assert calculate_shift_hours("18:00", "10:00") == -8.0


def test_parse_hour():
    assert parse_hour("09:30") == 9
    assert parse_hour("14:00") == 14
    assert parse_hour("9h") == 9
    assert parse_hour("abc") is None
    assert parse_hour(None) is None

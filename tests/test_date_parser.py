"""Tests for date parser with relative dates."""

import pytest
from datetime import date, datetime, time, timedelta

from cashbook.utils.date_parser import (
    month_bounds,
    month_label,
    parse_date,
    parse_record_date,
    parse_record_time,
    parse_time,
)

TODAY = date(2024, 3, 15)


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    result = parse_date("2024-01-15")
    assert result == date(2024, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    result = parse_date("today")
    assert result == date.today()


def test_parse_yesterday_against_reference():
    """Test parsing 'yesterday' against an explicit reference date."""
    result = parse_date("yesterday", today=TODAY)
    assert result == TODAY - timedelta(days=1)


def test_parse_last_month():
    """Test parsing 'last month' across a year boundary."""
    assert parse_date("last month", today=date(2024, 1, 20)) == date(2023, 12, 1)
    assert parse_date("last month", today=TODAY) == date(2024, 2, 1)


def test_parse_last_week():
    """Test parsing 'last week'."""
    result = parse_date("last week", today=TODAY)
    # Monday of last week
    assert result == date(2024, 3, 4)
    assert result.weekday() == 0


def test_parse_this_and_next_month():
    """Test parsing 'this month' and 'next month'."""
    assert parse_date("this month", today=TODAY) == date(2024, 3, 1)
    assert parse_date("next month", today=date(2024, 12, 5)) == date(2025, 1, 1)


def test_parse_this_year():
    """Test parsing 'this year'."""
    assert parse_date("This Year", today=TODAY) == date(2024, 1, 1)


def test_parse_invalid_date():
    """Test parsing an invalid date string."""
    with pytest.raises(ValueError):
        parse_date("nonsense")


def test_parse_time_formats():
    """Test parsing HH:MM and HH:MM:SS times, with or without fractions."""
    assert parse_time("09:30") == time(9, 30)
    assert parse_time(" 17:05:42 ") == time(17, 5, 42)
    assert parse_time("10:00:00.000") == time(10, 0)
    assert parse_time("10:00:00.123456") == time(10, 0, 0, 123456)
    with pytest.raises(ValueError):
        parse_time("half past nine")


def test_parse_record_date_variants():
    """Test reading record dates from the shapes stores hand back."""
    assert parse_record_date(date(2024, 3, 1)) == date(2024, 3, 1)
    assert parse_record_date(datetime(2024, 3, 1, 23, 59)) == date(2024, 3, 1)
    assert parse_record_date("2024-03-01T18:30:00.000Z") == date(2024, 3, 1)
    assert parse_record_date("March 1, 2024") == date(2024, 3, 1)


@pytest.mark.parametrize("value", [None, "", "   ", "garbage", 20240301, "15", "March", "March 2024"])
def test_parse_record_date_unusable(value):
    """Test that unusable record dates come back as None."""
    assert parse_record_date(value) is None


def test_record_dates_are_not_relative():
    """Test that 'today' in a stored record is not resolved."""
    assert parse_record_date("today") is None


def test_parse_record_time():
    """Test reading record times."""
    assert parse_record_time("08:15:00") == time(8, 15)
    assert parse_record_time("08:15:00.000") == time(8, 15)
    assert parse_record_time(time(7, 0)) == time(7, 0)
    assert parse_record_time("") is None
    assert parse_record_time("noonish") is None


def test_month_bounds():
    """Test first and last day of a month."""
    assert month_bounds(TODAY) == (date(2024, 3, 1), date(2024, 3, 31))
    assert month_bounds(date(2023, 2, 14)) == (date(2023, 2, 1), date(2023, 2, 28))


def test_month_label():
    """Test locale-independent month labels."""
    assert month_label(2024, 1) == "Jan 2024"
    assert month_label(2023, 12) == "Dec 2023"

"""Date parsing utilities."""

import calendar
from datetime import date, datetime, time, timedelta
from typing import Any, Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Two defaults that differ in year, month and day
_PARTIAL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "last month", "this month", etc.

    Args:
        date_str: Date string in various formats
        today: Date relative expressions are resolved against (defaults to
            the current date)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)
        elif period == "week":
            return today - timedelta(days=today.weekday() + 7)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)
        elif period == "week":
            return today - timedelta(days=today.weekday())

    elif date_str.startswith("next "):
        period = date_str[5:]
        if period == "month":
            return (today + relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) + relativedelta(years=1)
        elif period == "week":
            return today + timedelta(days=(7 - today.weekday()))

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_time(time_str: str) -> time:
    """Parse an ``HH:MM`` or ``HH:MM:SS`` string into a time object.

    Fractional seconds (``10:00:00.000``) are accepted as well.

    Raises:
        ValueError: If time string cannot be parsed
    """
    time_str = time_str.strip()
    try:
        return time.fromisoformat(time_str)
    except ValueError:
        pass
    for fmt in ("%H:%M:%S.%f", "%H:%M:%S", "%H:%M"):
        try:
            return datetime.strptime(time_str, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Could not parse time '{time_str}'")


def parse_record_date(value: Any) -> Optional[date]:
    """Read the date of a stored or fetched record.

    Accepts date and datetime objects, ISO strings (with or without a time
    part) and any full date dateutil understands. Returns None when the value
    is missing, unparseable or partial (``"15"``, ``"March"``); record dates
    are never resolved relatively or filled in from the clock.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    value = value.strip()
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        pass
    # A missing year, month or day shows up as a difference between defaults
    try:
        first = date_parser.parse(value, default=_PARTIAL_DEFAULTS[0]).date()
        second = date_parser.parse(value, default=_PARTIAL_DEFAULTS[1]).date()
    except (ValueError, TypeError, OverflowError):
        return None
    return first if first == second else None


def parse_record_time(value: Any) -> Optional[time]:
    """Read the time of day of a record, or None if missing or unparseable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, time):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return parse_time(value)
    except ValueError:
        return None


def month_bounds(reference: date) -> tuple[date, date]:
    """Return the first and last day of the month containing ``reference``."""
    first_day = reference.replace(day=1)
    last_day = reference.replace(
        day=calendar.monthrange(reference.year, reference.month)[1]
    )
    return first_day, last_day


def month_label(year: int, month: int) -> str:
    """Return a locale-independent ``"<Mon> <Year>"`` label."""
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year}"

"""Date parsing utilities."""

from datetime import date, datetime, timedelta

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", "March 2029", etc.
    - Relative dates: "today", "tomorrow", "this month", "next month", "next year"

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "tomorrow": today + timedelta(days=1),
        "this month": today.replace(day=1),
        "next month": (today + relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "next year": today.replace(month=1, day=1) + relativedelta(years=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Missing components (e.g. the day in "March 2029") default to the 1st
    default = datetime(today.year, today.month, 1)
    try:
        dt = date_parser.parse(date_str, default=default)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")

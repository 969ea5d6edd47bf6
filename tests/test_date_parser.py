"""Tests for date parser with relative dates."""

import pytest
from datetime import date, timedelta
from dateutil.relativedelta import relativedelta
from budgetdash.utils.date_parser import parse_date


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    result = parse_date("2024-01-15")
    assert result == date(2024, 1, 15)


def test_parse_month_and_year():
    """Test a month name without a day defaults to the 1st."""
    assert parse_date("March 2029") == date(2029, 3, 1)


def test_parse_today():
    """Test parsing 'today'."""
    result = parse_date("today")
    assert result == date.today()


def test_parse_tomorrow():
    """Test parsing 'tomorrow'."""
    result = parse_date("tomorrow")
    assert result == date.today() + timedelta(days=1)


def test_parse_this_month():
    """Test parsing 'this month'."""
    assert parse_date("this month") == date.today().replace(day=1)


def test_parse_next_month():
    """Test parsing 'next month'."""
    result = parse_date("next month")
    expected = (date.today() + relativedelta(months=1)).replace(day=1)
    assert result == expected


def test_parse_next_year():
    """Test parsing 'next year'."""
    result = parse_date("next year")
    assert result == date(date.today().year + 1, 1, 1)


def test_parse_case_insensitive():
    """Test relative dates ignore case and surrounding whitespace."""
    assert parse_date("  Next Month ") == parse_date("next month")


def test_parse_invalid_date():
    """Test parsing invalid date raises ValueError."""
    with pytest.raises(ValueError):
        parse_date("gibberish")

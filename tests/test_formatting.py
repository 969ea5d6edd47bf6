"""Tests for display formatting."""

import math
from datetime import date
from decimal import Decimal

import pytest

from budgetdash.domain.amortization import ScheduleEntry
from budgetdash.utils.formatting import (
    format_currency,
    format_months,
    format_payoff_date,
    format_percentage,
    sample_schedule,
)


def make_entries(last_month):
    return [
        ScheduleEntry(
            month=month,
            total_balance=Decimal(last_month - month),
            interest=Decimal("0"),
            principal=Decimal("1"),
        )
        for month in range(last_month + 1)
    ]


class TestFormatCurrency:
    """Tests for format_currency."""

    def test_whole_dollars(self):
        """Test amounts round to whole dollars with grouping."""
        assert format_currency(1234.4) == "$1,234"
        assert format_currency(1234.6) == "$1,235"
        assert format_currency(0) == "$0"

    def test_with_cents(self):
        """Test amounts with cents."""
        assert format_currency(1234.5, show_cents=True) == "$1,234.50"
        assert format_currency(0.05, show_cents=True) == "$0.05"

    def test_negative(self):
        """Test negative amounts put the sign before the symbol."""
        assert format_currency(-50) == "-$50"
        assert format_currency(-12.5, show_cents=True) == "-$12.50"

    def test_halves_round_away_from_zero(self):
        """Test a half cent or half dollar rounds up, not to the even neighbour."""
        assert format_currency(2.5) == "$3"
        assert format_currency(1234.5) == "$1,235"
        assert format_currency(0.125, show_cents=True) == "$0.13"
        assert format_currency(-2.5) == "-$3"

    def test_decimal_amounts(self):
        """Test Decimal amounts format without passing through float."""
        assert format_currency(Decimal("0.005"), show_cents=True) == "$0.01"
        assert format_currency(Decimal("19.99")) == "$20"
        assert format_currency(Decimal("-1234.50"), show_cents=True) == "-$1,234.50"

    def test_none_and_infinity(self):
        """Test missing and infinite amounts."""
        assert format_currency(None) == "$0"
        assert format_currency(math.inf) == "$∞"

    def test_tiny_negative_shows_no_sign(self):
        """Test amounts that round to zero don't render as '-$0'."""
        assert format_currency(-0.2) == "$0"


def test_format_percentage():
    """Test percentages with one decimal by default."""
    assert format_percentage(33.0) == "33.0%"
    assert format_percentage(7.25, decimals=2) == "7.25%"
    assert format_percentage(None) == "0.0%"
    assert format_percentage(Decimal("0.25"), decimals=1) == "0.3%"


class TestFormatMonths:
    """Tests for format_months."""

    @pytest.mark.parametrize(
        "months,expected",
        [
            (0, "Done!"),
            (1, "1 month"),
            (5, "5 months"),
            (12, "1 year"),
            (13, "1 year, 1 month"),
            (14, "1 year, 2 months"),
            (24, "2 years"),
            (25, "2 years, 1 month"),
            (999, "83 years, 3 months"),
        ],
    )
    def test_durations(self, months, expected):
        """Test month counts render as years and months."""
        assert format_months(months) == expected

    @pytest.mark.parametrize("months", [math.inf, 1000])
    def test_never(self, months):
        """Test infinite and very long durations read as never."""
        assert format_months(months) == "Never"


class TestFormatPayoffDate:
    """Tests for format_payoff_date."""

    def test_adds_months(self):
        """Test the end month crosses year boundaries."""
        assert format_payoff_date(3, date(2024, 11, 15)) == "February 2025"
        assert format_payoff_date(0, date(2024, 11, 15)) == "November 2024"

    def test_never(self):
        """Test infinite durations have no end date."""
        assert format_payoff_date(math.inf, date(2024, 1, 1)) == "Never"


class TestSampleSchedule:
    """Tests for chart sampling."""

    def test_empty(self):
        """Test an empty schedule gives no points."""
        assert sample_schedule([]) == []

    def test_short_schedule_keeps_every_month(self):
        """Test two years or less keeps every month without year markers."""
        points = sample_schedule(make_entries(24))
        assert len(points) == 25
        assert not any(point.is_year_marker for point in points)
        assert points[0].label == "Mo 0"

    def test_medium_schedule_marks_years(self):
        """Test up to five years keeps every month and marks each year."""
        points = sample_schedule(make_entries(60))
        assert len(points) == 61
        markers = [point for point in points if point.is_year_marker]
        assert [point.month for point in markers] == [12, 24, 36, 48, 60]
        assert markers[0].label == "Year 1"
        assert points[1].label == "Mo 1"

    def test_long_schedule_keeps_every_third_month(self):
        """Test longer schedules keep every third month plus the last."""
        points = sample_schedule(make_entries(100))
        months = [point.month for point in points]
        assert months[0] == 0
        assert months[-1] == 100
        assert months[:4] == [0, 3, 6, 9]
        assert len(points) == 35

    def test_points_carry_balances(self):
        """Test chart points take the total balance of their month."""
        points = sample_schedule(make_entries(10))
        assert points[3].total_balance == Decimal("7")

"""Display formatting for amounts, percentages, durations and chart points.

Nothing in the domain layer depends on this module; it is only used where
results are shown.
"""

import math
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence, Union

from dateutil.relativedelta import relativedelta

from budgetdash.domain.amortization import Months, ScheduleEntry

NEVER = "Never"
DONE = "Done!"
# Durations above this many months read as "Never".
MAX_DISPLAY_MONTHS = 999

Number = Union[Decimal, int, float]


@dataclass(frozen=True)
class ChartPoint:
    """One sampled point of a payoff chart."""

    month: int
    label: str
    total_balance: Decimal
    is_year_marker: bool = False


def _to_decimal(value: Optional[Number]) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _round_half_up(value: Decimal, decimals: int) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_currency(amount: Optional[Number], show_cents: bool = False) -> str:
    """Format an amount as US dollars, e.g. '$1,235' or '-$12.50'.

    Halves round away from zero: 2.5 shows as '$3'.
    """
    amount = _to_decimal(amount)
    if amount.is_infinite():
        return "$∞"
    decimals = 2 if show_cents else 0
    rounded = _round_half_up(amount, decimals)
    text = f"${abs(rounded):,.{decimals}f}"
    return f"-{text}" if rounded < 0 else text


def format_percentage(value: Optional[Number], decimals: int = 1) -> str:
    rounded = _round_half_up(_to_decimal(value), decimals)
    return f"{rounded:.{decimals}f}%"


def _plural(count: int, unit: str) -> str:
    return f"1 {unit}" if count == 1 else f"{count} {unit}s"


def format_months(months: Months) -> str:
    """Format a month count, e.g. 14 -> '1 year, 2 months'."""
    if math.isinf(months) or months > MAX_DISPLAY_MONTHS:
        return NEVER
    months = int(months)
    if months == 0:
        return DONE
    if months < 12:
        return _plural(months, "month")

    years, remaining = divmod(months, 12)
    if remaining == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')}, {_plural(remaining, 'month')}"


def format_payoff_date(months: Months, start: Optional[date] = None) -> str:
    """Calendar month a duration ends in, e.g. 'March 2029'."""
    if math.isinf(months) or months > MAX_DISPLAY_MONTHS:
        return NEVER
    start = start or date.today()
    return (start + relativedelta(months=int(months))).strftime("%B %Y")


def sample_schedule(entries: Sequence[ScheduleEntry]) -> list[ChartPoint]:
    """Pick the schedule entries worth plotting.

    Up to 24 months every month is shown; up to 60 months every month is shown
    with year markers; longer schedules keep every third month plus the first
    and last.
    """
    if not entries:
        return []

    span = entries[-1].month
    if span <= 60:
        picked = list(entries)
    else:
        picked = [
            entry
            for index, entry in enumerate(entries)
            if index % 3 == 0 or index == len(entries) - 1
        ]

    mark_years = span > 24
    points = []
    for entry in picked:
        is_marker = mark_years and entry.month > 0 and entry.month % 12 == 0
        label = f"Year {entry.month // 12}" if is_marker else f"Mo {entry.month}"
        points.append(
            ChartPoint(
                month=entry.month,
                label=label,
                total_balance=entry.total_balance,
                is_year_marker=is_marker,
            )
        )
    return points

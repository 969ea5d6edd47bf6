"""Utility functions for budgetdash."""

from budgetdash.utils.amount_parser import parse_amount, sanitize_amount
from budgetdash.utils.date_parser import parse_date
from budgetdash.utils.formatting import (
    format_currency,
    format_months,
    format_percentage,
)

__all__ = [
    "parse_amount",
    "sanitize_amount",
    "parse_date",
    "format_currency",
    "format_months",
    "format_percentage",
]

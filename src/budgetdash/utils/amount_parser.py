"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation
from typing import Any


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)
    - "19.99%" (rates)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    # Remove currency and percent symbols
    amount_str = re.sub(r"[$€£¥%]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")

    if not amount.is_finite():
        raise ValueError(f"Amount must be a finite number: '{amount_str}'")
    return -amount if is_negative else amount


def sanitize_amount(value: Any) -> Decimal:
    """Coerce an untrusted value into a non-negative finite amount.

    Numbers pass through as Decimal, strings go through parse_amount, and
    anything that cannot be read as a finite number becomes 0. Negative
    amounts become 0.
    """
    if isinstance(value, bool) or value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        # str() keeps 19.99 from turning into its binary expansion
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = parse_amount(value)
        except ValueError:
            return Decimal("0")
    else:
        return Decimal("0")

    if not amount.is_finite() or amount < 0:
        return Decimal("0")
    return amount


def sanitize_order(value: Any, default: int) -> int:
    """Coerce an untrusted priority rank into a non-negative integer."""
    if isinstance(value, bool):
        return default
    try:
        order = int(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return order if order >= 0 else default

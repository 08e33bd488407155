"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re
from typing import Any

_CURRENCY_SYMBOLS = re.compile(r"[₹$€£¥]|\bRs\.?|\bINR\b", re.IGNORECASE)


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "₹123.45", "Rs. 123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

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

    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = _CURRENCY_SYMBOLS.sub("", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return -amount if is_negative else amount


def coerce_amount(value: Any) -> Decimal:
    """Convert a record's amount field to a non-negative Decimal.

    Missing, blank, non-numeric and non-finite values become zero; floats go
    through ``str`` so binary noise does not leak into the ledger. Negative
    amounts are taken by magnitude since the ledger side is decided by the
    record type.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = parse_amount(value)
        except ValueError:
            return Decimal("0")
    else:
        return Decimal("0")

    if not amount.is_finite():
        return Decimal("0")
    return abs(amount)

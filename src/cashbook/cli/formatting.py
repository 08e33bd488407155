"""Text formatting helpers shared by CLI commands."""

from decimal import Decimal
from typing import Optional

CURRENCY_SYMBOL = "₹"


def format_amount(amount: Optional[Decimal], blank_zero: bool = False) -> str:
    """Format an amount as ``₹1,234.50``; negative amounts get a leading minus."""
    if amount is None or (blank_zero and amount == 0):
        return ""
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(amount):,.2f}"


def truncate(text: str, width: int) -> str:
    """Cut text to a column width, marking the cut with '...'."""
    if len(text) <= width:
        return text
    return text[: max(width - 3, 0)] + "..."

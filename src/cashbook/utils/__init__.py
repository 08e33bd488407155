"""Utility functions for cashbook."""

from cashbook.utils.date_parser import (
    parse_date,
    parse_record_date,
    parse_record_time,
    month_bounds,
)
from cashbook.utils.amount_parser import parse_amount, coerce_amount

__all__ = [
    "parse_date",
    "parse_record_date",
    "parse_record_time",
    "month_bounds",
    "parse_amount",
    "coerce_amount",
]

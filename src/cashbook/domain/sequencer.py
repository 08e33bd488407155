"""Deterministic ordering of ledger transactions."""

import re
from collections.abc import Iterable
from datetime import date, time

from cashbook.domain.entities import Transaction, TransactionType

TYPE_PRIORITY = {
    TransactionType.INCOME: 1,
    TransactionType.EXPENSE: 2,
    TransactionType.PENDING: 3,
}

_NON_DIGITS = re.compile(r"\D")


def id_number(txn_id: str) -> int:
    """Return the digits of an id read as one integer, 0 if there are none."""
    digits = _NON_DIGITS.sub("", txn_id or "")
    return int(digits) if digits else 0


def sequence_key(txn: Transaction) -> tuple:
    """Sort key: date, time of day, type priority, numeric id, full id.

    A missing time sorts as midnight; a missing date sorts first.
    """
    return (
        txn.date or date.min,
        txn.time or time.min,
        TYPE_PRIORITY.get(txn.type, 0),
        id_number(txn.id),
        txn.id,
    )


def sequence(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Return transactions in ledger order."""
    return sorted(transactions, key=sequence_key)

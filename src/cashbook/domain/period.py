"""Period partitioning and opening balance carry-forward."""

from collections.abc import Iterable
from datetime import date

from cashbook.domain.accumulator import calculate_balance
from cashbook.domain.entities import (
    OpeningBalances,
    PeriodPartition,
    Transaction,
    TransactionType,
    ZERO,
)
from cashbook.logging_setup import get_logger
from cashbook.utils.date_parser import month_bounds

logger = get_logger(__name__)


def partition(transactions: Iterable[Transaction], today: date) -> PeriodPartition:
    """Split transactions around the calendar month containing ``today``.

    Undated transactions are kept apart: they belong to no range.
    """
    first_day, last_day = month_bounds(today)
    prior: list[Transaction] = []
    current: list[Transaction] = []
    future: list[Transaction] = []
    undated: list[Transaction] = []

    for txn in transactions:
        if txn.date is None:
            undated.append(txn)
        elif txn.date < first_day:
            prior.append(txn)
        elif txn.date <= last_day:
            current.append(txn)
        else:
            future.append(txn)

    if undated:
        logger.warning(
            "%d transaction(s) without a usable date left out of the ledger",
            len(undated),
        )

    return PeriodPartition(
        first_day=first_day,
        last_day=last_day,
        prior=tuple(prior),
        current=tuple(current),
        future=tuple(future),
        undated=tuple(undated),
    )


def opening_balances(prior: Iterable[Transaction]) -> OpeningBalances:
    """Reduce prior history to the opening cash and pending balances.

    Adjustments carry their effect through their type, so paid income minus
    expenses covers them.
    """
    prior = tuple(prior)
    balance = calculate_balance(prior)
    pending = sum(
        (txn.debit for txn in prior if txn.type is TransactionType.PENDING), ZERO
    )

    logger.debug(
        "Opening balance from %d prior transaction(s): balance=%s pending=%s",
        len(prior),
        balance,
        pending,
    )
    return OpeningBalances(opening_balance=balance, opening_pending=pending)

"""The cash ledger reconciliation pipeline.

``reconcile`` is a pure function of its three raw record arrays and the
reference date: normalize, partition around the reference month, sequence
the current month, accumulate running balances and aggregate analytics.
"""

from collections.abc import Mapping, Sequence
from datetime import date
from typing import Optional

from cashbook.domain.accumulator import accumulate
from cashbook.domain.analytics import category_summary, monthly_summary
from cashbook.domain.entities import ReconciliationResult
from cashbook.domain.normalizer import normalize_records
from cashbook.domain.period import opening_balances, partition
from cashbook.domain.sequencer import sequence
from cashbook.logging_setup import get_logger

logger = get_logger(__name__)


def _require_sequence(name: str, value) -> None:
    if value is None or isinstance(value, (str, bytes, Mapping)):
        raise TypeError(f"{name} must be a sequence of records, got {type(value).__name__}")


def reconcile(
    tokens: Sequence[Mapping],
    expenses: Sequence[Mapping],
    adjustments: Sequence[Mapping],
    today: Optional[date] = None,
    months: Optional[int] = None,
) -> ReconciliationResult:
    """Reconcile tokens, expenses and adjustments into the current month's ledger.

    Args:
        tokens: Raw token records
        expenses: Raw expense records
        adjustments: Raw cash adjustment records
        today: Reference date selecting the current month (defaults to today)
        months: Optional limit on the number of months in the monthly summary

    Returns:
        ReconciliationResult with the sequenced current-month transactions,
        cash info, category summary and monthly summary

    Raises:
        TypeError: If one of the record arrays is missing
    """
    _require_sequence("tokens", tokens)
    _require_sequence("expenses", expenses)
    _require_sequence("adjustments", adjustments)
    today = today or date.today()

    transactions = normalize_records(tokens, expenses, adjustments)
    period = partition(transactions, today)
    opening = opening_balances(period.prior)
    ordered = sequence(period.current)
    ledger, cash_info = accumulate(ordered, opening)

    logger.debug(
        "Reconciled %d transaction(s) for %s..%s: opening=%s closing=%s",
        len(ledger),
        period.first_day,
        period.last_day,
        cash_info.opening_balance,
        cash_info.closing_balance,
    )

    return ReconciliationResult(
        transactions=tuple(ledger),
        cash_info=cash_info,
        category_summary=category_summary(period.current),
        monthly_summary=monthly_summary(transactions, limit=months),
        first_day=period.first_day,
        last_day=period.last_day,
    )

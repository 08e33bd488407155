"""Cash book domain service: fetch the three record sources and reconcile them."""

from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Callable, Optional

from cashbook.database.base import Database
from cashbook.database.mappers import adjustment_to_raw, expense_to_raw, token_to_raw
from cashbook.domain.entities import ReconciliationResult, RecordSnapshot
from cashbook.domain.reconcile import reconcile
from cashbook.domain.refresh import LedgerRefresher
from cashbook.logging_setup import get_logger

logger = get_logger(__name__)

# Earliest date the opening balance scan reads from.
HISTORY_START = date(2000, 1, 1)


class CashBookService:
    """Service building the cash book from stored records."""

    def __init__(self, db: Database):
        """Initialize cash book service.

        Args:
            db: Database instance
        """
        self.db = db

    def fetch_records(
        self,
        from_date: Optional[date] = HISTORY_START,
        to_date: Optional[date] = None,
    ) -> RecordSnapshot:
        """Read tokens, expenses and adjustments in parallel.

        The whole history is read by default: the opening balance is always
        recomputed from scratch since past records can be edited.
        """
        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="cashbook-fetch") as pool:
            tokens = pool.submit(self.db.list_tokens, from_date, to_date)
            expenses = pool.submit(self.db.list_expenses, from_date, to_date)
            adjustments = pool.submit(self.db.list_adjustments, from_date, to_date)

            snapshot = RecordSnapshot(
                tokens=tuple(token_to_raw(t) for t in tokens.result()),
                expenses=tuple(expense_to_raw(e) for e in expenses.result()),
                adjustments=tuple(adjustment_to_raw(a) for a in adjustments.result()),
            )

        logger.debug(
            "Fetched %d token(s), %d expense(s), %d adjustment(s)",
            len(snapshot.tokens),
            len(snapshot.expenses),
            len(snapshot.adjustments),
        )
        return snapshot

    def get_cash_book(
        self, today: Optional[date] = None, months: Optional[int] = None
    ) -> ReconciliationResult:
        """Reconcile all stored records for the month containing ``today``.

        Args:
            today: Reference date (defaults to the current date)
            months: Optional limit on the monthly summary length

        Returns:
            ReconciliationResult for the month
        """
        snapshot = self.fetch_records()
        return reconcile(
            snapshot.tokens,
            snapshot.expenses,
            snapshot.adjustments,
            today=today,
            months=months,
        )

    def refresher(
        self,
        on_result: Optional[Callable[[ReconciliationResult], None]] = None,
        today: Optional[Callable[[], date]] = None,
        months: Optional[int] = None,
    ) -> LedgerRefresher:
        """Create a refresher that re-reads and reconciles the stored records."""
        return LedgerRefresher(
            fetch=self.fetch_records,
            on_result=on_result,
            today=today,
            months=months,
        )

"""Stateful refresh shell around the pure reconciliation pipeline.

The refresher owns everything the pipeline does not: fetching, polling,
debouncing and discarding results that a newer refresh has overtaken. Each
refresh takes a generation number; only the result of the latest generation
issued is applied.
"""

import threading
from datetime import date
from typing import Callable, Optional

from cashbook.domain.entities import ReconciliationResult, RecordSnapshot
from cashbook.domain.reconcile import reconcile
from cashbook.logging_setup import get_logger

logger = get_logger(__name__)

DEFAULT_POLL_INTERVAL = 300.0
DEFAULT_DEBOUNCE_DELAY = 1.0


class LedgerRefresher:
    """Fetch-then-reconcile cycle with latest-request-wins semantics."""

    def __init__(
        self,
        fetch: Callable[[], RecordSnapshot],
        on_result: Optional[Callable[[ReconciliationResult], None]] = None,
        today: Optional[Callable[[], date]] = None,
        months: Optional[int] = None,
        debounce_delay: float = DEFAULT_DEBOUNCE_DELAY,
    ):
        """Initialize the refresher.

        Args:
            fetch: Returns a fresh snapshot of the three record sources
            on_result: Called with every applied result
            today: Returns the reference date for each refresh (defaults to
                ``date.today``)
            months: Optional limit on the monthly summary length
            debounce_delay: Seconds ``request_refresh`` waits for quiet
        """
        self._fetch = fetch
        self._on_result = on_result
        self._today = today or date.today
        self._months = months
        self._debounce_delay = debounce_delay
        self._lock = threading.RLock()
        self._generation = 0
        self._applied_generation = 0
        self._timer: Optional[threading.Timer] = None
        self.result: Optional[ReconciliationResult] = None
        self.last_error: Optional[Exception] = None

    @property
    def generation(self) -> int:
        """Latest generation issued."""
        return self._generation

    @property
    def applied_generation(self) -> int:
        """Generation of the result currently applied (0 if none)."""
        return self._applied_generation

    def begin(self) -> int:
        """Issue a new generation number, superseding every earlier one."""
        with self._lock:
            self._generation += 1
            return self._generation

    def complete(self, generation: int, result: ReconciliationResult) -> bool:
        """Apply a result if no newer refresh has been issued since.

        Returns:
            True if the result was applied, False if it was stale
        """
        with self._lock:
            if generation != self._generation:
                logger.info(
                    "Discarding stale ledger result (generation %d, latest %d)",
                    generation,
                    self._generation,
                )
                return False
            self.result = result
            self._applied_generation = generation
            self.last_error = None
            if self._on_result is not None:
                self._on_result(result)
            return True

    def refresh(self) -> Optional[ReconciliationResult]:
        """Fetch records, reconcile them and apply the result.

        A failed fetch is logged and kept in ``last_error``; the previously
        applied result stays in place.

        Returns:
            The applied result, or None if the fetch failed or the result
            was overtaken by a newer refresh
        """
        generation = self.begin()
        today = self._today()
        try:
            snapshot = self._fetch()
        except Exception as exc:
            logger.exception("Ledger refresh %d failed to fetch records", generation)
            with self._lock:
                if generation == self._generation:
                    self.last_error = exc
            return None

        result = reconcile(
            snapshot.tokens,
            snapshot.expenses,
            snapshot.adjustments,
            today=today,
            months=self._months,
        )
        if not self.complete(generation, result):
            return None
        return result

    def poll(
        self,
        stop_event: threading.Event,
        interval: float = DEFAULT_POLL_INTERVAL,
        immediate: bool = True,
    ) -> None:
        """Refresh every ``interval`` seconds until ``stop_event`` is set."""
        if immediate and not stop_event.is_set():
            self.refresh()
        while not stop_event.wait(interval):
            self.refresh()

    def request_refresh(self) -> None:
        """Schedule a refresh once no further request arrives for the debounce delay."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self._debounce_delay, self._run_debounced)
            self._timer.daemon = True
            self._timer.start()

    def cancel_pending(self) -> None:
        """Cancel a debounced refresh that has not started yet."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _run_debounced(self) -> None:
        with self._lock:
            self._timer = None
        self.refresh()

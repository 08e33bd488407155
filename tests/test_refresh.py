"""Tests for the ledger refresher."""

import threading
import time
from datetime import date
from decimal import Decimal

from cashbook.domain.entities import RecordSnapshot
from cashbook.domain.reconcile import reconcile
from cashbook.domain.refresh import LedgerRefresher

TODAY = date(2024, 3, 15)


def _snapshot(amount):
    return RecordSnapshot(
        tokens=({"id": 1, "date": "2024-03-02", "amount": amount, "isPaid": True},)
    )


def _as_lists(snapshot):
    return list(snapshot.tokens), list(snapshot.expenses), list(snapshot.adjustments)


def test_refresh_applies_result():
    """Test a successful refresh."""
    applied = []
    refresher = LedgerRefresher(
        lambda: _snapshot(100), on_result=applied.append, today=lambda: TODAY
    )

    result = refresher.refresh()

    assert result is not None
    assert result.cash_info.closing_balance == Decimal("100")
    assert refresher.result is result
    assert applied == [result]
    assert refresher.applied_generation == refresher.generation == 1


def test_stale_result_is_discarded():
    """Test that an older generation cannot replace a newer result."""
    refresher = LedgerRefresher(lambda: _snapshot(0), today=lambda: TODAY)
    old = refresher.begin()
    new = refresher.begin()

    newer_result = reconcile([], [], [], today=TODAY)
    older_result = reconcile(*_as_lists(_snapshot(50)), today=TODAY)

    assert refresher.complete(new, newer_result) is True
    assert refresher.complete(old, older_result) is False
    assert refresher.result is newer_result
    assert refresher.applied_generation == new


def test_slow_fetch_overtaken_by_newer_refresh():
    """Test latest-request-wins with a slow first fetch."""
    release = threading.Event()
    started = threading.Event()
    amounts = iter([10, 20])

    def fetch():
        amount = next(amounts)
        if amount == 10:
            started.set()
            release.wait(5)
        return _snapshot(amount)

    refresher = LedgerRefresher(fetch, today=lambda: TODAY)
    slow = threading.Thread(target=refresher.refresh)
    slow.start()
    assert started.wait(5)

    fast_result = refresher.refresh()
    release.set()
    slow.join(5)

    assert fast_result is not None
    assert refresher.result is fast_result
    assert refresher.result.cash_info.closing_balance == Decimal("20")


def test_fetch_failure_keeps_previous_result():
    """Test that a failed fetch keeps the last result."""
    calls = {"count": 0}

    def fetch():
        calls["count"] += 1
        if calls["count"] > 1:
            raise RuntimeError("database unavailable")
        return _snapshot(100)

    refresher = LedgerRefresher(fetch, today=lambda: TODAY)
    first = refresher.refresh()

    assert refresher.refresh() is None
    assert refresher.result is first
    assert isinstance(refresher.last_error, RuntimeError)


def test_successful_refresh_clears_last_error():
    outcomes = [RuntimeError("boom"), _snapshot(5)]

    def fetch():
        outcome = outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    refresher = LedgerRefresher(fetch, today=lambda: TODAY)
    refresher.refresh()
    assert refresher.last_error is not None

    refresher.refresh()
    assert refresher.last_error is None


def test_poll_stops_on_event():
    stop = threading.Event()
    results = []

    def on_result(result):
        results.append(result)
        if len(results) == 3:
            stop.set()

    refresher = LedgerRefresher(lambda: _snapshot(1), on_result=on_result, today=lambda: TODAY)
    refresher.poll(stop, interval=0.01)

    assert len(results) == 3


def test_poll_with_stop_already_set_does_nothing():
    stop = threading.Event()
    stop.set()
    refresher = LedgerRefresher(lambda: _snapshot(1), today=lambda: TODAY)

    refresher.poll(stop, interval=0.01)

    assert refresher.generation == 0


def test_request_refresh_is_debounced():
    """Test that a burst of requests triggers one refresh."""
    done = threading.Event()
    fetches = []

    def fetch():
        fetches.append(1)
        return _snapshot(1)

    refresher = LedgerRefresher(
        fetch, on_result=lambda _: done.set(), today=lambda: TODAY, debounce_delay=0.05
    )
    for _ in range(5):
        refresher.request_refresh()

    assert done.wait(5)
    assert len(fetches) == 1


def test_cancel_pending_prevents_refresh():
    refresher = LedgerRefresher(lambda: _snapshot(1), today=lambda: TODAY, debounce_delay=0.05)
    refresher.request_refresh()
    refresher.cancel_pending()

    time.sleep(0.2)

    assert refresher.generation == 0

"""Tests for building the cash book from stored records."""

from datetime import date, time
from decimal import Decimal

from cashbook.domain.entities import TransactionType

TODAY = date(2024, 3, 15)


def _seed(token_service, expense_service, adjustment_service):
    token_service.create_token(
        token_no="1", date=date(2024, 2, 10), amount=Decimal("1000"), is_paid=True
    )
    token_service.create_token(
        token_no="2", date=date(2024, 3, 1), amount=Decimal("500"), is_paid=True, test="Gold"
    )
    token_service.create_token(token_no="3", date=date(2024, 3, 3), amount=Decimal("300"))
    expense_service.create_expense(
        date=date(2024, 3, 2), expense_type="Rent", amount=Decimal("200"), paid_to="Landlord"
    )
    adjustment_service.create_adjustment(
        date=date(2024, 3, 4),
        amount=Decimal("100"),
        adjustment_type="addition",
        reason="Excess",
        time=time(9, 30),
    )


def test_fetch_records_returns_raw_shapes(
    cashbook_service, token_service, expense_service, adjustment_service
):
    """Test that fetched records use the raw record keys."""
    _seed(token_service, expense_service, adjustment_service)

    snapshot = cashbook_service.fetch_records()

    assert len(snapshot.tokens) == 3
    assert len(snapshot.expenses) == 1
    assert len(snapshot.adjustments) == 1
    token = snapshot.tokens[0]
    assert token["isPaid"] is True
    assert token["tokenNo"] == "1"
    assert token["date"] == "2024-02-10"
    assert snapshot.expenses[0]["expense_type"] == "Rent"
    assert snapshot.adjustments[0]["time"] == "09:30:00"


def test_get_cash_book(cashbook_service, token_service, expense_service, adjustment_service):
    """Test reconciling stored records for a month."""
    _seed(token_service, expense_service, adjustment_service)

    result = cashbook_service.get_cash_book(today=TODAY)
    info = result.cash_info

    assert info.opening_balance == Decimal("1000")
    assert info.total_income == Decimal("600")
    assert info.total_expense == Decimal("200")
    assert info.total_pending == Decimal("300")
    assert info.closing_balance == Decimal("1400")
    assert [t.id for t in result.transactions] == [
        "token-2",
        "expense-1",
        "token-3",
        "adjustment-1",
    ]
    assert result.transactions[2].type is TransactionType.PENDING


def test_paying_a_token_moves_it_into_income(cashbook_service, token_service):
    """Test that settling a pending token changes the cash book."""
    token_id = token_service.create_token(
        token_no="5", date=date(2024, 3, 5), amount=Decimal("75")
    )
    before = cashbook_service.get_cash_book(today=TODAY).cash_info

    token_service.set_paid(token_id)
    after = cashbook_service.get_cash_book(today=TODAY).cash_info

    assert (before.total_pending, before.closing_balance) == (Decimal("75"), Decimal("0"))
    assert (after.total_pending, after.closing_balance) == (Decimal("0"), Decimal("75"))


def test_empty_database(cashbook_service):
    """Test the cash book of an empty database."""
    result = cashbook_service.get_cash_book(today=TODAY)

    assert result.transactions == ()
    assert result.cash_info.closing_balance == Decimal("0")


def test_refresher_reads_from_database(cashbook_service, token_service):
    """Test that the refresher picks up newly stored records."""
    refresher = cashbook_service.refresher(today=lambda: TODAY)
    refresher.refresh()
    assert refresher.result.cash_info.total_income == Decimal("0")

    token_service.create_token(
        token_no="1", date=date(2024, 3, 2), amount=Decimal("40"), is_paid=True
    )
    refresher.refresh()

    assert refresher.result.cash_info.total_income == Decimal("40")

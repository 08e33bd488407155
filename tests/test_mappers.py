"""Tests for database mappers."""

from datetime import date, time
from decimal import Decimal

from cashbook.database.models import (
    Token as ORMToken,
    Expense as ORMExpense,
    CashAdjustment as ORMCashAdjustment,
)
from cashbook.database.mappers import (
    adjustment_to_domain,
    adjustment_to_raw,
    expense_to_domain,
    expense_to_raw,
    token_to_domain,
    token_to_raw,
)
from cashbook.domain.entities import CashAdjustmentRecord, ExpenseRecord, TokenRecord
from cashbook.domain.normalizer import normalize_adjustment, normalize_token


class TestTokenMapper:
    """Tests for Token mapper."""

    def test_token_to_domain(self):
        """Test converting ORM Token to domain TokenRecord."""
        orm_token = ORMToken(
            id=4,
            token_no="T-4",
            date=date(2024, 3, 1),
            time=time(11, 5),
            name="Ravi",
            test="Gold",
            amount=Decimal("150.00"),
            is_paid=True,
        )

        record = token_to_domain(orm_token)

        assert isinstance(record, TokenRecord)
        assert record.token_no == "T-4"
        assert record.amount == Decimal("150.00")
        assert record.is_paid is True

    def test_token_to_raw_normalizes_back(self):
        """Test that the raw shape feeds the normalizer unchanged."""
        record = TokenRecord(
            id=4,
            token_no="T-4",
            date=date(2024, 3, 1),
            time=None,
            name=None,
            test=None,
            amount=Decimal("150.00"),
            is_paid=False,
        )

        raw = token_to_raw(record)
        txn = normalize_token(raw)

        assert raw["isPaid"] is False
        assert raw["tokenNo"] == "T-4"
        assert raw["date"] == "2024-03-01"
        assert raw["time"] is None
        assert txn.id == "token-4"
        assert txn.debit == Decimal("150.00")


class TestExpenseMapper:
    """Tests for Expense mapper."""

    def test_expense_to_domain_and_raw(self):
        """Test converting ORM Expense to domain and raw shapes."""
        orm_expense = ORMExpense(
            id=2,
            date=date(2024, 3, 2),
            expense_type="Rent",
            amount=Decimal("900"),
            paid_to="Landlord",
            pay_mode="Cash",
            remarks=None,
        )

        record = expense_to_domain(orm_expense)
        raw = expense_to_raw(record)

        assert isinstance(record, ExpenseRecord)
        assert raw == {
            "id": 2,
            "date": "2024-03-02",
            "amount": "900",
            "expense_type": "Rent",
            "paid_to": "Landlord",
            "remarks": None,
        }


class TestCashAdjustmentMapper:
    """Tests for CashAdjustment mapper."""

    def test_adjustment_to_domain_and_raw(self):
        """Test converting ORM CashAdjustment to domain and raw shapes."""
        orm_adjustment = ORMCashAdjustment(
            id=9,
            date=date(2024, 3, 5),
            time=time(18, 30),
            amount=Decimal("75.50"),
            adjustment_type="deduction",
            reason="Short",
            reference_number="V-1",
            entered_by="Asha",
            remarks=None,
        )

        record = adjustment_to_domain(orm_adjustment)
        txn = normalize_adjustment(adjustment_to_raw(record))

        assert isinstance(record, CashAdjustmentRecord)
        assert record.entered_by == "Asha"
        assert txn.time == time(18, 30)
        assert txn.debit == Decimal("75.50")
        assert txn.particulars.value == "Cash Adjustment: Short (Ref: V-1)"

"""Expense domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal

from cashbook.database.base import Database
from cashbook.domain.entities import ExpenseRecord
from cashbook.domain.errors import ValidationError, missing_field, non_positive_amount


class ExpenseService:
    """Service for managing expenses."""

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_expense(
        self,
        date: date,
        expense_type: str,
        amount: Decimal,
        paid_to: Optional[str] = None,
        pay_mode: Optional[str] = None,
        remarks: Optional[str] = None,
    ) -> int:
        """Create an expense.

        The expense type becomes the category in the ledger analytics.

        Returns:
            Expense ID

        Raises:
            ValidationError: If the expense type is empty or the amount is not positive
        """
        expense_type = (expense_type or "").strip()
        if not expense_type:
            raise ValidationError(missing_field("Expense type"))
        if amount <= 0:
            raise ValidationError(non_positive_amount(amount))

        return self.db.create_expense(
            date=date,
            expense_type=expense_type,
            amount=amount,
            paid_to=paid_to,
            pay_mode=pay_mode,
            remarks=remarks,
        )

    def get_expense(self, expense_id: int) -> Optional[ExpenseRecord]:
        """Get expense by ID."""
        return self.db.get_expense(expense_id)

    def list_expenses(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> list[ExpenseRecord]:
        """List expenses in a date range, oldest first."""
        return self.db.list_expenses(from_date=start_date, to_date=end_date)

"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date, time
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from cashbook.domain.entities import (
    TokenRecord,
    ExpenseRecord,
    CashAdjustmentRecord,
)


class Database(ABC):
    """Abstract database interface for cashbook records.

    Range reads are inclusive on both ends; a missing bound is open.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Token operations
    @abstractmethod
    def create_token(
        self,
        token_no: str,
        date: date,
        amount: Decimal,
        time: Optional[time] = None,
        name: Optional[str] = None,
        test: Optional[str] = None,
        is_paid: bool = False,
    ) -> int:
        """Create a new token. Returns token ID."""
        pass

    @abstractmethod
    def get_token(self, token_id: int) -> Optional[TokenRecord]:
        """Get token by ID."""
        pass

    @abstractmethod
    def token_number_exists(self, token_no: str) -> bool:
        """Check whether a token number is already taken."""
        pass

    @abstractmethod
    def list_tokens(
        self, from_date: Optional[date] = None, to_date: Optional[date] = None
    ) -> list[TokenRecord]:
        """List tokens in a date range, oldest first."""
        pass

    @abstractmethod
    def update_token_paid(self, token_id: int, is_paid: bool) -> None:
        """Set the paid flag of a token."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(
        self,
        date: date,
        expense_type: str,
        amount: Decimal,
        paid_to: Optional[str] = None,
        pay_mode: Optional[str] = None,
        remarks: Optional[str] = None,
    ) -> int:
        """Create a new expense. Returns expense ID."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: int) -> Optional[ExpenseRecord]:
        """Get expense by ID."""
        pass

    @abstractmethod
    def list_expenses(
        self, from_date: Optional[date] = None, to_date: Optional[date] = None
    ) -> list[ExpenseRecord]:
        """List expenses in a date range, oldest first."""
        pass

    # Cash adjustment operations
    @abstractmethod
    def create_adjustment(
        self,
        date: date,
        amount: Decimal,
        adjustment_type: str,
        reason: str,
        time: Optional[time] = None,
        reference_number: Optional[str] = None,
        entered_by: Optional[str] = None,
        remarks: Optional[str] = None,
    ) -> int:
        """Create a new cash adjustment. Returns adjustment ID."""
        pass

    @abstractmethod
    def get_adjustment(self, adjustment_id: int) -> Optional[CashAdjustmentRecord]:
        """Get cash adjustment by ID."""
        pass

    @abstractmethod
    def list_adjustments(
        self,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
        adjustment_type: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[CashAdjustmentRecord]:
        """List cash adjustments, most recent first."""
        pass

    @abstractmethod
    def update_adjustment(
        self,
        adjustment_id: int,
        date: Optional[date] = None,
        time: Optional[time] = None,
        amount: Optional[Decimal] = None,
        adjustment_type: Optional[str] = None,
        reason: Optional[str] = None,
        reference_number: Optional[str] = None,
        entered_by: Optional[str] = None,
        remarks: Optional[str] = None,
    ) -> None:
        """Update cash adjustment fields; None leaves a field unchanged."""
        pass

    @abstractmethod
    def delete_adjustment(self, adjustment_id: int) -> None:
        """Delete a cash adjustment."""
        pass

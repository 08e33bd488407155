"""Token domain service."""

from typing import Optional
from datetime import date, time
from decimal import Decimal

from cashbook.database.base import Database
from cashbook.domain.entities import TokenRecord
from cashbook.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_token_number,
    missing_field,
    non_positive_amount,
    token_not_found,
)


class TokenService:
    """Service for managing sales tokens."""

    def __init__(self, db: Database):
        """Initialize token service.

        Args:
            db: Database instance
        """
        self.db = db

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
        """Create a token.

        Args:
            token_no: Token number printed on the slip
            date: Token date
            amount: Amount charged for the test
            time: Optional time of day
            name: Optional customer name
            test: Optional test performed
            is_paid: Whether the customer has paid

        Returns:
            Token ID

        Raises:
            ValidationError: If the token number is empty or the amount is not positive
            ConflictError: If the token number is already taken
        """
        token_no = (token_no or "").strip()
        if not token_no:
            raise ValidationError(missing_field("Token number"))
        if amount <= 0:
            raise ValidationError(non_positive_amount(amount))
        if self.db.token_number_exists(token_no):
            raise ConflictError(duplicate_token_number(token_no))

        return self.db.create_token(
            token_no=token_no,
            date=date,
            amount=amount,
            time=time,
            name=name,
            test=test,
            is_paid=is_paid,
        )

    def get_token(self, token_id: int) -> Optional[TokenRecord]:
        """Get token by ID."""
        return self.db.get_token(token_id)

    def list_tokens(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> list[TokenRecord]:
        """List tokens in a date range, oldest first."""
        return self.db.list_tokens(from_date=start_date, to_date=end_date)

    def set_paid(self, token_id: int, is_paid: bool = True) -> TokenRecord:
        """Mark a token paid (settling a pending amount) or unpaid.

        Raises:
            NotFoundError: If the token doesn't exist
        """
        if self.db.get_token(token_id) is None:
            raise NotFoundError(token_not_found(token_id))
        self.db.update_token_paid(token_id, is_paid)
        return self.db.get_token(token_id)

"""Cash adjustment domain service."""

from typing import Optional
from datetime import date, time
from decimal import Decimal

from cashbook.database.base import Database
from cashbook.domain.entities import (
    AdjustmentSummary,
    AdjustmentType,
    CashAdjustmentRecord,
    ZERO,
)
from cashbook.domain.errors import (
    NotFoundError,
    ValidationError,
    adjustment_not_found,
    invalid_adjustment_type,
    missing_field,
    non_positive_amount,
)


def _validate_type(adjustment_type: str) -> str:
    normalized = (adjustment_type or "").strip().lower()
    if normalized not in {t.value for t in AdjustmentType}:
        raise ValidationError(invalid_adjustment_type(adjustment_type))
    return normalized


def _validate_amount(amount: Decimal) -> None:
    if amount <= 0:
        raise ValidationError(non_positive_amount(amount))


class CashAdjustmentService:
    """Service for managing manual cash adjustments."""

    def __init__(self, db: Database):
        """Initialize cash adjustment service.

        Args:
            db: Database instance
        """
        self.db = db

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
        """Create a cash adjustment.

        Args:
            date: Adjustment date
            amount: Amount added to or removed from the cash balance
            adjustment_type: "addition" or "deduction"
            reason: Why the cash was corrected
            time: Optional time of day, used to order same-day entries
            reference_number: Optional reference (receipt, voucher...)
            entered_by: Optional name of whoever recorded it
            remarks: Optional free-text remarks

        Returns:
            Adjustment ID

        Raises:
            ValidationError: If type, amount or reason are invalid
        """
        adjustment_type = _validate_type(adjustment_type)
        _validate_amount(amount)
        reason = (reason or "").strip()
        if not reason:
            raise ValidationError(missing_field("Reason"))

        return self.db.create_adjustment(
            date=date,
            amount=amount,
            adjustment_type=adjustment_type,
            reason=reason,
            time=time,
            reference_number=reference_number,
            entered_by=entered_by,
            remarks=remarks,
        )

    def get_adjustment(self, adjustment_id: int) -> Optional[CashAdjustmentRecord]:
        """Get cash adjustment by ID."""
        return self.db.get_adjustment(adjustment_id)

    def require_adjustment(self, adjustment_id: int) -> CashAdjustmentRecord:
        """Get cash adjustment by ID or raise NotFoundError."""
        adjustment = self.db.get_adjustment(adjustment_id)
        if adjustment is None:
            raise NotFoundError(adjustment_not_found(adjustment_id))
        return adjustment

    def list_adjustments(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        adjustment_type: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[CashAdjustmentRecord]:
        """List cash adjustments, most recent first.

        Raises:
            ValidationError: If adjustment_type is given and invalid
        """
        if adjustment_type is not None:
            adjustment_type = _validate_type(adjustment_type)
        return self.db.list_adjustments(
            from_date=start_date,
            to_date=end_date,
            adjustment_type=adjustment_type,
            limit=limit,
        )

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
    ) -> CashAdjustmentRecord:
        """Update cash adjustment fields.

        Raises:
            NotFoundError: If the adjustment doesn't exist
            ValidationError: If a new type, amount or reason is invalid
        """
        self.require_adjustment(adjustment_id)

        if adjustment_type is not None:
            adjustment_type = _validate_type(adjustment_type)
        if amount is not None:
            _validate_amount(amount)
        if reason is not None:
            reason = reason.strip()
            if not reason:
                raise ValidationError(missing_field("Reason"))

        self.db.update_adjustment(
            adjustment_id,
            date=date,
            time=time,
            amount=amount,
            adjustment_type=adjustment_type,
            reason=reason,
            reference_number=reference_number,
            entered_by=entered_by,
            remarks=remarks,
        )
        return self.require_adjustment(adjustment_id)

    def delete_adjustment(self, adjustment_id: int) -> CashAdjustmentRecord:
        """Delete a cash adjustment and return what was deleted.

        Raises:
            NotFoundError: If the adjustment doesn't exist
        """
        adjustment = self.require_adjustment(adjustment_id)
        self.db.delete_adjustment(adjustment_id)
        return adjustment

    def get_summary(self, start_date: date, end_date: date) -> AdjustmentSummary:
        """Total additions and deductions between two dates (inclusive).

        Raises:
            ValidationError: If start_date is after end_date
        """
        if start_date > end_date:
            raise ValidationError(
                f"Start date {start_date} is after end date {end_date}"
            )

        additions = deductions = ZERO
        addition_count = deduction_count = 0
        for adjustment in self.db.list_adjustments(from_date=start_date, to_date=end_date):
            if adjustment.adjustment_type == AdjustmentType.ADDITION.value:
                additions += adjustment.amount
                addition_count += 1
            elif adjustment.adjustment_type == AdjustmentType.DEDUCTION.value:
                deductions += adjustment.amount
                deduction_count += 1

        return AdjustmentSummary(
            start_date=start_date,
            end_date=end_date,
            addition_count=addition_count,
            deduction_count=deduction_count,
            additions=additions,
            deductions=deductions,
        )

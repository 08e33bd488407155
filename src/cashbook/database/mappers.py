"""Mapper functions between SQLAlchemy models, domain records and raw records.

Raw records are the plain mappings the reconciliation pipeline reads; their
keys follow the record shapes the ledger has always consumed (``isPaid``,
``tokenNo``, ``expense_type`` ...).
"""

from datetime import date, time
from decimal import Decimal
from typing import Any, Optional

from cashbook.domain import entities as domain
from cashbook.database.models import (
    Token as ORMToken,
    Expense as ORMExpense,
    CashAdjustment as ORMCashAdjustment,
)


def _decimal(value: Any) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _iso_date(value: date) -> str:
    return value.isoformat()


def _iso_time(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M:%S") if value is not None else None


def token_to_domain(orm_token: ORMToken) -> domain.TokenRecord:
    """Convert SQLAlchemy Token model to domain TokenRecord."""
    return domain.TokenRecord(
        id=orm_token.id,
        token_no=orm_token.token_no,
        date=orm_token.date,
        time=orm_token.time,
        name=orm_token.name,
        test=orm_token.test,
        amount=_decimal(orm_token.amount),
        is_paid=bool(orm_token.is_paid),
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.ExpenseRecord:
    """Convert SQLAlchemy Expense model to domain ExpenseRecord."""
    return domain.ExpenseRecord(
        id=orm_expense.id,
        date=orm_expense.date,
        expense_type=orm_expense.expense_type,
        amount=_decimal(orm_expense.amount),
        paid_to=orm_expense.paid_to,
        pay_mode=orm_expense.pay_mode,
        remarks=orm_expense.remarks,
    )


def adjustment_to_domain(
    orm_adjustment: ORMCashAdjustment,
) -> domain.CashAdjustmentRecord:
    """Convert SQLAlchemy CashAdjustment model to domain CashAdjustmentRecord."""
    return domain.CashAdjustmentRecord(
        id=orm_adjustment.id,
        date=orm_adjustment.date,
        time=orm_adjustment.time,
        amount=_decimal(orm_adjustment.amount),
        adjustment_type=orm_adjustment.adjustment_type,
        reason=orm_adjustment.reason,
        reference_number=orm_adjustment.reference_number,
        entered_by=orm_adjustment.entered_by,
        remarks=orm_adjustment.remarks,
    )


def token_to_raw(token: domain.TokenRecord) -> dict[str, Any]:
    """Convert a TokenRecord to the raw token shape."""
    return {
        "id": token.id,
        "date": _iso_date(token.date),
        "time": _iso_time(token.time),
        "amount": str(token.amount),
        "isPaid": token.is_paid,
        "test": token.test,
        "tokenNo": token.token_no,
        "name": token.name,
    }


def expense_to_raw(expense: domain.ExpenseRecord) -> dict[str, Any]:
    """Convert an ExpenseRecord to the raw expense shape."""
    return {
        "id": expense.id,
        "date": _iso_date(expense.date),
        "amount": str(expense.amount),
        "expense_type": expense.expense_type,
        "paid_to": expense.paid_to,
        "remarks": expense.remarks,
    }


def adjustment_to_raw(adjustment: domain.CashAdjustmentRecord) -> dict[str, Any]:
    """Convert a CashAdjustmentRecord to the raw adjustment shape."""
    return {
        "id": adjustment.id,
        "date": _iso_date(adjustment.date),
        "time": _iso_time(adjustment.time),
        "adjustment_type": adjustment.adjustment_type,
        "amount": str(adjustment.amount),
        "reason": adjustment.reason,
        "reference_number": adjustment.reference_number,
        "remarks": adjustment.remarks,
    }

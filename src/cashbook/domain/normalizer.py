"""Source normalization: raw token, expense and adjustment records to Transactions."""

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from cashbook.domain.entities import (
    AdjustmentType,
    TextParticulars,
    TokenParticulars,
    Transaction,
    TransactionSource,
    TransactionType,
    ZERO,
)
from cashbook.logging_setup import get_logger
from cashbook.utils.amount_parser import coerce_amount
from cashbook.utils.date_parser import parse_record_date, parse_record_time

logger = get_logger(__name__)

_TRUE_STRINGS = {"true", "1", "yes", "y", "paid"}


def _coerce_paid(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _record_date(record: Mapping, txn_id: str):
    raw = record.get("date")
    parsed = parse_record_date(raw)
    if parsed is None:
        logger.warning("Record %s has unparseable date %r", txn_id, raw)
    return parsed


def normalize_token(record: Mapping) -> Transaction:
    """Normalize a sales token: paid tokens are Income, unpaid ones Pending."""
    txn_id = f"token-{record.get('id')}"
    amount = coerce_amount(record.get("amount"))
    is_paid = _coerce_paid(record.get("isPaid"))

    return Transaction(
        id=txn_id,
        date=_record_date(record, txn_id),
        time=parse_record_time(record.get("time")),
        type=TransactionType.INCOME if is_paid else TransactionType.PENDING,
        amount=amount,
        debit=ZERO if is_paid else amount,
        credit=amount if is_paid else ZERO,
        particulars=TokenParticulars(
            test=_text(record.get("test")) or "No Test",
            token_no=_text(record.get("tokenNo")),
            name=_text(record.get("name")),
        ),
        source=TransactionSource.TOKEN,
        is_paid=is_paid,
    )


def normalize_expense(record: Mapping) -> Transaction:
    """Normalize an expense into a debit with ``"<type> - <paid to>"`` particulars."""
    txn_id = f"expense-{record.get('id')}"
    amount = coerce_amount(record.get("amount"))
    expense_type = _text(record.get("expense_type")) or "Other"
    paid_to = _text(record.get("paid_to")) or "N/A"

    return Transaction(
        id=txn_id,
        date=_record_date(record, txn_id),
        time=parse_record_time(record.get("time")),
        type=TransactionType.EXPENSE,
        amount=amount,
        debit=amount,
        credit=ZERO,
        particulars=TextParticulars(f"{expense_type} - {paid_to}"),
        source=TransactionSource.EXPENSE,
        remarks=_text(record.get("remarks")),
    )


def _adjustment_particulars(record: Mapping) -> TextParticulars:
    reason = _text(record.get("reason")) or ""
    reference = _text(record.get("reference_number"))
    if reference:
        return TextParticulars(f"Cash Adjustment: {reason} (Ref: {reference})")
    return TextParticulars(f"Cash Adjustment: {reason}")


def normalize_adjustment(record: Mapping) -> Transaction:
    """Normalize a cash adjustment.

    Additions become Income, deductions Expense. Any other adjustment type
    is kept as a flagged Expense with no cash effect.
    """
    txn_id = f"adjustment-{record.get('id')}"
    amount = coerce_amount(record.get("amount"))
    raw_type = _text(record.get("adjustment_type"))
    adjustment_type = raw_type.lower() if raw_type else None

    debit = credit = ZERO
    flagged = False
    if adjustment_type == AdjustmentType.ADDITION.value:
        txn_type = TransactionType.INCOME
        credit = amount
    elif adjustment_type == AdjustmentType.DEDUCTION.value:
        txn_type = TransactionType.EXPENSE
        debit = amount
    else:
        logger.warning(
            "Adjustment %s has unknown adjustment_type %r; ignoring its amount",
            txn_id,
            raw_type,
        )
        txn_type = TransactionType.EXPENSE
        flagged = True

    return Transaction(
        id=txn_id,
        date=_record_date(record, txn_id),
        time=parse_record_time(record.get("time")),
        type=txn_type,
        amount=amount,
        debit=debit,
        credit=credit,
        particulars=_adjustment_particulars(record),
        source=TransactionSource.ADJUSTMENT,
        is_adjustment=True,
        remarks=_text(record.get("remarks")),
        flagged=flagged,
    )


def normalize_records(
    tokens: Iterable[Mapping],
    expenses: Iterable[Mapping],
    adjustments: Iterable[Mapping],
) -> list[Transaction]:
    """Normalize all three sources into one list, tokens first."""
    transactions = [normalize_token(record) for record in tokens]
    transactions.extend(normalize_expense(record) for record in expenses)
    transactions.extend(normalize_adjustment(record) for record in adjustments)
    return transactions


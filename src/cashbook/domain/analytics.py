"""Category and monthly analytics over normalized transactions."""

from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal
from typing import Optional

from cashbook.domain.entities import (
    CategoryTotal,
    MonthlySummary,
    TextParticulars,
    Transaction,
    TransactionType,
    ZERO,
)
from cashbook.utils.date_parser import month_label

CATEGORY_LIMIT = 5
CASH_ADJUSTMENTS_CATEGORY = "Cash Adjustments"
OTHER_CATEGORY = "Other"
UNDATED_LABEL = "Undated"


def expense_category(txn: Transaction) -> str:
    """Category of an expense: the particulars text before the first " - "."""
    if isinstance(txn.particulars, TextParticulars):
        return txn.particulars.value.split(" - ")[0]
    return OTHER_CATEGORY


def category_summary(
    transactions: Iterable[Transaction], limit: int = CATEGORY_LIMIT
) -> tuple[CategoryTotal, ...]:
    """Rank expense categories by total debit, largest first.

    Adjustment deductions are pooled into one "Cash Adjustments" category
    that competes in the same ranking.
    """
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    adjustment_deductions = ZERO

    for txn in transactions:
        if txn.type is not TransactionType.EXPENSE:
            continue
        if txn.is_adjustment:
            adjustment_deductions += txn.debit
        else:
            totals[expense_category(txn)] += txn.debit

    if adjustment_deductions > 0:
        totals[CASH_ADJUSTMENTS_CATEGORY] += adjustment_deductions

    ranked = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return tuple(
        CategoryTotal(category=category, total=total)
        for category, total in ranked[:limit]
    )


def monthly_summary(
    transactions: Iterable[Transaction], limit: Optional[int] = None
) -> tuple[MonthlySummary, ...]:
    """Bucket transactions by calendar month, most recent month first.

    Undated transactions are collected in a trailing "Undated" bucket.
    ``limit`` keeps only the most recent dated months.
    """
    buckets: dict[Optional[tuple[int, int]], dict[str, Decimal]] = defaultdict(
        lambda: {"income": ZERO, "expense": ZERO, "pending": ZERO}
    )

    for txn in transactions:
        key = (txn.date.year, txn.date.month) if txn.date is not None else None
        bucket = buckets[key]
        if txn.type is TransactionType.INCOME:
            bucket["income"] += txn.credit
        elif txn.type is TransactionType.EXPENSE:
            bucket["expense"] += txn.debit
        elif txn.type is TransactionType.PENDING:
            bucket["pending"] += txn.debit

    dated_keys = sorted((key for key in buckets if key is not None), reverse=True)
    if limit is not None:
        dated_keys = dated_keys[:limit]

    results = [
        _month_entry(month_label(year, month), year, month, buckets[(year, month)])
        for year, month in dated_keys
    ]
    if None in buckets and limit is None:
        results.append(_month_entry(UNDATED_LABEL, None, None, buckets[None]))
    return tuple(results)


def _month_entry(
    label: str, year: Optional[int], month: Optional[int], data: dict[str, Decimal]
) -> MonthlySummary:
    return MonthlySummary(
        month_label=label,
        year=year,
        month=month,
        income=data["income"],
        expense=data["expense"],
        pending=data["pending"],
        net=data["income"] - data["expense"],
    )

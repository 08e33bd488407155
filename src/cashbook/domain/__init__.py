"""Domain layer for cashbook application.

Only the pure reconciliation pipeline is exported here; the record services
depend on the database layer and are imported from their own modules.
"""

from cashbook.domain.reconcile import reconcile
from cashbook.domain.entities import (
    CashInfo,
    CategoryTotal,
    MonthlySummary,
    ReconciliationResult,
    Transaction,
    TransactionSource,
    TransactionType,
)

__all__ = [
    "reconcile",
    "CashInfo",
    "CategoryTotal",
    "MonthlySummary",
    "ReconciliationResult",
    "Transaction",
    "TransactionSource",
    "TransactionType",
]

"""Running balance accumulation over a sequenced ledger."""

from collections.abc import Iterable, Sequence
from dataclasses import replace
from decimal import Decimal

from cashbook.domain.entities import (
    CashInfo,
    OpeningBalances,
    Transaction,
    TransactionSource,
    TransactionType,
    ZERO,
)
from cashbook.logging_setup import get_logger

logger = get_logger(__name__)


def calculate_balance(
    transactions: Iterable[Transaction], opening_balance: Decimal = ZERO
) -> Decimal:
    """Fold transactions into a cash balance; pending entries do not count."""
    balance = opening_balance
    for txn in transactions:
        if txn.type is TransactionType.INCOME:
            balance += txn.credit
        elif txn.type is TransactionType.EXPENSE:
            balance -= txn.debit
    return balance


def accumulate(
    ordered: Sequence[Transaction], opening: OpeningBalances
) -> tuple[list[Transaction], CashInfo]:
    """Annotate ordered transactions with running balances and total them.

    Each transaction gets the balance after its own effect. Transactions of
    an unrecognized type leave the balance alone and come back flagged.
    """
    running_balance = opening.opening_balance
    total_income = total_expense = period_pending = ZERO
    token_income = adjustment_income = adjustment_expense = ZERO
    annotated: list[Transaction] = []

    for txn in ordered:
        pending_balance = ZERO
        flagged = txn.flagged
        if txn.type is TransactionType.INCOME:
            running_balance += txn.credit
            total_income += txn.credit
            if txn.is_adjustment:
                adjustment_income += txn.credit
            elif txn.source is TransactionSource.TOKEN:
                token_income += txn.credit
        elif txn.type is TransactionType.EXPENSE:
            running_balance -= txn.debit
            total_expense += txn.debit
            if txn.is_adjustment:
                adjustment_expense += txn.debit
        elif txn.type is TransactionType.PENDING:
            pending_balance = txn.debit
            period_pending += txn.debit
        else:
            logger.warning("Transaction %s has unknown type %r", txn.id, txn.type)
            flagged = True

        annotated.append(
            replace(
                txn,
                running_balance=running_balance,
                pending_balance=pending_balance,
                flagged=flagged,
            )
        )

    net_change = total_income - total_expense
    cash_info = CashInfo(
        opening_balance=opening.opening_balance,
        opening_pending=opening.opening_pending,
        total_income=total_income,
        total_expense=total_expense,
        total_pending=opening.opening_pending + period_pending,
        net_change=net_change,
        closing_balance=opening.opening_balance + net_change,
        token_income=token_income,
        adjustment_income=adjustment_income,
        adjustment_expense=adjustment_expense,
    )
    return annotated, cash_info

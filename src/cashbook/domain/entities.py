"""Domain model entities for cashbook.

These are pure data classes representing business concepts, independent of
the database schema. The reconciliation pipeline only ever sees these types
(or the raw record mappings it normalizes into them).
"""

from dataclasses import dataclass, field
from datetime import date, time
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

ZERO = Decimal("0")


class TransactionType(str, Enum):
    """Ledger classification of a normalized transaction."""

    INCOME = "Income"
    EXPENSE = "Expense"
    PENDING = "Pending"


class TransactionSource(str, Enum):
    """Record source a transaction was normalized from."""

    TOKEN = "token"
    EXPENSE = "expense"
    ADJUSTMENT = "adjustment"


class AdjustmentType(str, Enum):
    """Direction of a manual cash adjustment."""

    ADDITION = "addition"
    DEDUCTION = "deduction"


@dataclass(frozen=True)
class TokenParticulars:
    """Particulars of a sales token."""

    test: str
    token_no: Optional[str]
    name: Optional[str]
    kind: str = field(default="token", init=False)

    def __str__(self) -> str:
        parts = [self.test]
        if self.token_no:
            parts.append(f"#{self.token_no}")
        if self.name:
            parts.append(self.name)
        return " ".join(parts)


@dataclass(frozen=True)
class TextParticulars:
    """Free-text particulars of an expense or adjustment."""

    value: str
    kind: str = field(default="text", init=False)

    def __str__(self) -> str:
        return self.value


Particulars = Union[TokenParticulars, TextParticulars]


@dataclass(frozen=True)
class Transaction:
    """Normalized ledger transaction.

    ``running_balance`` and ``pending_balance`` stay ``None`` until the
    balance accumulator annotates the transaction.
    """

    id: str
    date: Optional[date]
    time: Optional[time]
    type: TransactionType
    amount: Decimal
    debit: Decimal
    credit: Decimal
    particulars: Particulars
    source: TransactionSource
    is_adjustment: bool = False
    is_paid: Optional[bool] = None
    remarks: Optional[str] = None
    flagged: bool = False
    running_balance: Optional[Decimal] = None
    pending_balance: Optional[Decimal] = None


@dataclass(frozen=True)
class CashInfo:
    """Aggregate cash position for one reconciliation."""

    opening_balance: Decimal = ZERO
    opening_pending: Decimal = ZERO
    total_income: Decimal = ZERO
    total_expense: Decimal = ZERO
    total_pending: Decimal = ZERO
    net_change: Decimal = ZERO
    closing_balance: Decimal = ZERO
    token_income: Decimal = ZERO
    adjustment_income: Decimal = ZERO
    adjustment_expense: Decimal = ZERO


@dataclass(frozen=True)
class OpeningBalances:
    """Balances carried into the current period from prior history."""

    opening_balance: Decimal = ZERO
    opening_pending: Decimal = ZERO


@dataclass(frozen=True)
class CategoryTotal:
    """Summed debit of one expense category."""

    category: str
    total: Decimal


@dataclass(frozen=True)
class MonthlySummary:
    """Income, expense and pending totals of one calendar month.

    ``year`` and ``month`` are ``None`` for the bucket of undated records.
    """

    month_label: str
    year: Optional[int]
    month: Optional[int]
    income: Decimal = ZERO
    expense: Decimal = ZERO
    pending: Decimal = ZERO
    net: Decimal = ZERO


@dataclass(frozen=True)
class PeriodPartition:
    """Transactions split around the reference month."""

    first_day: date
    last_day: date
    prior: tuple[Transaction, ...]
    current: tuple[Transaction, ...]
    future: tuple[Transaction, ...]
    undated: tuple[Transaction, ...]


@dataclass(frozen=True)
class ReconciliationResult:
    """Everything one run of the reconciliation pipeline produces."""

    transactions: tuple[Transaction, ...]
    cash_info: CashInfo
    category_summary: tuple[CategoryTotal, ...]
    monthly_summary: tuple[MonthlySummary, ...]
    first_day: date
    last_day: date


@dataclass(frozen=True)
class TokenRecord:
    """Sales token as stored."""

    id: int
    token_no: str
    date: date
    time: Optional[time]
    name: Optional[str]
    test: Optional[str]
    amount: Decimal
    is_paid: bool


@dataclass(frozen=True)
class ExpenseRecord:
    """Expense as stored."""

    id: int
    date: date
    expense_type: str
    amount: Decimal
    paid_to: Optional[str]
    pay_mode: Optional[str]
    remarks: Optional[str]


@dataclass(frozen=True)
class CashAdjustmentRecord:
    """Manual cash adjustment as stored."""

    id: int
    date: date
    time: Optional[time]
    amount: Decimal
    adjustment_type: str
    reason: str
    reference_number: Optional[str]
    entered_by: Optional[str]
    remarks: Optional[str]


@dataclass(frozen=True)
class AdjustmentSummary:
    """Adjustment totals over a date range."""

    start_date: date
    end_date: date
    addition_count: int
    deduction_count: int
    additions: Decimal
    deductions: Decimal

    @property
    def net_adjustment(self) -> Decimal:
        return self.additions - self.deductions


@dataclass(frozen=True)
class RecordSnapshot:
    """The three raw record arrays one reconciliation reads."""

    tokens: tuple[dict, ...] = ()
    expenses: tuple[dict, ...] = ()
    adjustments: tuple[dict, ...] = ()

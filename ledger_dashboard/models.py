"""Record types held by the ledger.

Four record kinds share the shape "identity + category + amount", which is
what lets one filter/aggregate/progress engine serve every page. Each kind
exposes the same read-only view (``label``, ``category``, ``ledger_amount``,
``flow``, ``sort_date``, ``sort_amount``) so the stages never branch on type.

Money is always :class:`decimal.Decimal`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from .config import SAVINGS_CATEGORY


class Period(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class BudgetStatus(str, Enum):
    SAFE = "safe"
    WARNING = "warning"
    OVER = "over"


class GoalStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    PAST_DUE = "past_due"


@dataclass(frozen=True)
class Expense:
    id: str
    date: date
    category: str
    amount: Decimal
    description: str

    @property
    def label(self) -> str:
        return self.description

    @property
    def ledger_amount(self) -> Decimal:
        return self.amount

    @property
    def flow(self) -> str:
        return TransactionType.EXPENSE.value

    @property
    def sort_date(self) -> Optional[date]:
        return self.date

    @property
    def sort_amount(self) -> Decimal:
        return self.amount


@dataclass(frozen=True)
class Budget:
    """Spending limit for one category.

    ``spent`` is tracked on the budget itself and is not recomputed from the
    expense ledger.
    """

    id: str
    category: str
    amount: Decimal
    spent: Decimal = Decimal("0")
    period: Period = Period.MONTHLY

    @property
    def label(self) -> str:
        return self.category

    @property
    def ledger_amount(self) -> Decimal:
        return self.spent

    @property
    def flow(self) -> str:
        return TransactionType.EXPENSE.value

    @property
    def sort_date(self) -> Optional[date]:
        return None

    @property
    def sort_amount(self) -> Decimal:
        return self.amount


@dataclass(frozen=True)
class SavingsGoal:
    id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal
    target_date: date

    @property
    def label(self) -> str:
        return self.name

    @property
    def category(self) -> str:
        return SAVINGS_CATEGORY

    @property
    def ledger_amount(self) -> Decimal:
        return self.current_amount

    @property
    def flow(self) -> str:
        # money set aside counts as an inflow
        return TransactionType.INCOME.value

    @property
    def sort_date(self) -> Optional[date]:
        return self.target_date

    @property
    def sort_amount(self) -> Decimal:
        return self.target_amount


@dataclass(frozen=True)
class Transaction:
    """A ledger entry; ``amount`` is a magnitude and ``type`` carries the sign."""

    id: str
    date: date
    description: str
    category: str
    amount: Decimal
    type: TransactionType

    @property
    def label(self) -> str:
        return self.description

    @property
    def ledger_amount(self) -> Decimal:
        return self.amount

    @property
    def flow(self) -> str:
        return TransactionType(self.type).value

    @property
    def signed_amount(self) -> Decimal:
        return self.amount if self.flow == TransactionType.INCOME.value else -self.amount

    @property
    def sort_date(self) -> Optional[date]:
        return self.date

    @property
    def sort_amount(self) -> Decimal:
        return self.amount


Record = Union[Expense, Budget, SavingsGoal, Transaction]

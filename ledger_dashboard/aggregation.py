"""Aggregation stage: income, expense, balance and per-category sums.

Works on any mix of record kinds through their shared ``flow``,
``category`` and ``ledger_amount`` attributes. All arithmetic is exact
:class:`~decimal.Decimal`, so ``total_income - total_expense == balance``
holds without tolerance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable

from .models import TransactionType
from .progress import BudgetProgress, budget_progress

_ZERO = Decimal("0")


@dataclass(frozen=True)
class LedgerTotals:
    total_income: Decimal = _ZERO
    total_expense: Decimal = _ZERO
    balance: Decimal = _ZERO
    by_category: Dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class BudgetTotals:
    total_limit: Decimal
    total_spent: Decimal
    progress: BudgetProgress


def aggregate(records: Iterable[Any]) -> LedgerTotals:
    """Sum a record collection.

    Every record adds its ``ledger_amount`` to exactly one category bucket;
    buckets appear in first-seen order. An empty collection yields zeros.
    """
    income = _ZERO
    expense = _ZERO
    by_category: Dict[str, Decimal] = {}

    for record in records:
        value = record.ledger_amount
        if record.flow == TransactionType.INCOME.value:
            income += value
        else:
            expense += value
        by_category[record.category] = by_category.get(record.category, _ZERO) + value

    return LedgerTotals(
        total_income=income,
        total_expense=expense,
        balance=income - expense,
        by_category=by_category,
    )


def total_savings(goals: Iterable[Any]) -> Decimal:
    """Total currently saved across all goals."""
    return sum((g.current_amount for g in goals), _ZERO)


def budget_totals(budgets: Iterable[Any]) -> BudgetTotals:
    """Combined limit and spend across budgets, with the overall progress."""
    budgets = tuple(budgets)
    total_limit = sum((b.amount for b in budgets), _ZERO)
    total_spent = sum((b.spent for b in budgets), _ZERO)
    return BudgetTotals(
        total_limit=total_limit,
        total_spent=total_spent,
        progress=budget_progress(total_spent, total_limit),
    )


def top_categories(totals: LedgerTotals, limit: int = 3) -> Dict[str, Decimal]:
    """The ``limit`` largest category buckets, largest first."""
    ranked = sorted(totals.by_category.items(), key=lambda item: item[1], reverse=True)
    return dict(ranked[:limit])

"""Shared sample data for every page.

All seed records and chart series live in one JSON file
(``data/seed.json``). Records are passed through the validation layer so
sample data obeys the same rules as user input.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import pandas as pd

from . import config
from .models import Budget, Expense, SavingsGoal, Transaction
from .validation import build_budget, build_expense, build_goal, build_transaction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Seed:
    expenses: Tuple[Expense, ...]
    budgets: Tuple[Budget, ...]
    savings_goals: Tuple[SavingsGoal, ...]
    transactions: Tuple[Transaction, ...]
    monthly_spending: pd.DataFrame = field(compare=False)
    monthly_cash_flow: pd.DataFrame = field(compare=False)
    yearly_comparison: pd.DataFrame = field(compare=False)
    daily_spending: pd.DataFrame = field(compare=False)
    category_colors: Dict[str, str] = field(default_factory=dict, compare=False)


def read_seed_file(path: Optional[Path] = None) -> Dict[str, Any]:
    """Read the raw seed JSON.

    Raises:
        FileNotFoundError: If the seed file doesn't exist
        json.JSONDecodeError: If the seed file is invalid JSON
    """
    target = Path(path or config.SEED_PATH)
    if not target.exists():
        raise FileNotFoundError(f"Seed file not found: {target}")
    with target.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _series_frame(rows: Any, index_col: str) -> pd.DataFrame:
    frame = pd.DataFrame(rows or [])
    if frame.empty:
        return frame
    return frame.set_index(index_col)


def parse_seed(data: Dict[str, Any]) -> Seed:
    """Build typed records and chart frames from raw seed data."""
    return Seed(
        expenses=tuple(build_expense(row, str(row["id"])) for row in data.get("expenses", [])),
        budgets=tuple(build_budget(row, str(row["id"])) for row in data.get("budgets", [])),
        savings_goals=tuple(build_goal(row, str(row["id"])) for row in data.get("savings_goals", [])),
        transactions=tuple(
            build_transaction(row, str(row["id"])) for row in data.get("transactions", [])
        ),
        monthly_spending=_series_frame(data.get("monthly_spending"), "month"),
        monthly_cash_flow=_series_frame(data.get("monthly_cash_flow"), "month"),
        yearly_comparison=_series_frame(data.get("yearly_comparison"), "month"),
        daily_spending=_series_frame(data.get("daily_spending"), "day"),
        category_colors=dict(data.get("category_colors", {})),
    )


@lru_cache(maxsize=4)
def _load_seed_cached(path: str) -> Seed:
    seed = parse_seed(read_seed_file(Path(path)))
    logger.info(
        "Loaded seed data from %s: %d expenses, %d budgets, %d goals, %d transactions",
        path,
        len(seed.expenses),
        len(seed.budgets),
        len(seed.savings_goals),
        len(seed.transactions),
    )
    return seed


def load_seed(path: Optional[Path] = None) -> Seed:
    """Load the shared seed data, parsing each file only once per process."""
    return _load_seed_cached(str(Path(path or config.SEED_PATH).resolve()))

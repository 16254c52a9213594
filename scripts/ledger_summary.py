#!/usr/bin/env python3
"""Print ledger totals, category breakdown and budget/goal status for the seed data."""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ledger_dashboard import config
from ledger_dashboard.aggregation import aggregate, total_savings
from ledger_dashboard.fixtures import load_seed
from ledger_dashboard.formatting import format_currency
from ledger_dashboard.progress import budget_progress, describe_time_left, goal_progress
from ledger_dashboard.reporting import category_series


def main(seed_path: Path | None = None, today: date | None = None, limit: int = 10) -> None:
    seed = load_seed(seed_path)
    today = today or date.today()

    totals = aggregate(seed.transactions)
    print("Transactions:")
    print(f"  Income:   {format_currency(totals.total_income)}")
    print(f"  Expenses: {format_currency(totals.total_expense)}")
    print(f"  Balance:  {format_currency(totals.balance)}")

    print("\nTop expense categories:")
    print(category_series(seed.expenses).head(limit).to_string())

    print("\nBudgets:")
    for budget in seed.budgets:
        progress = budget_progress(budget.spent, budget.amount)
        line = f"  {budget.category:<16} {progress.percent:>3}%  {progress.status.value}"
        if progress.is_over:
            line += f" (over by {format_currency(progress.overage)})"
        print(line)

    print(f"\nSavings goals (total saved {format_currency(total_savings(seed.savings_goals))}):")
    for goal in seed.savings_goals:
        progress = goal_progress(goal.current_amount, goal.target_amount, goal.target_date, today)
        print(f"  {goal.name:<18} {progress.percent:>3}%  {describe_time_left(progress)}")


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Summarise the ledger seed data.')
    parser.add_argument('--seed', type=Path, default=None, help='Path to a seed JSON file')
    parser.add_argument('--today', type=date.fromisoformat, default=None, help='Reference date (YYYY-MM-DD)')
    parser.add_argument('--limit', type=int, default=10, help='How many categories to show')
    parser.add_argument('--log-level', default=config.LOG_LEVEL, help='Logging level')
    args = parser.parse_args()
    config.configure_logging(args.log_level.upper())
    main(seed_path=args.seed, today=args.today, limit=args.limit)

"""Top‑level package for the Ledger Dashboard.

This file makes the directory a Python package and exposes
convenient names.  The primary modules are:

* ``filtering`` – search/category/type filters and date or amount sorting
* ``aggregation`` – income, expense, balance and per-category totals
* ``progress`` – budget utilisation and savings-goal progress
* ``record_store`` – immutable add/update/remove of records by id
* ``validation`` – turns raw form input into typed records
* ``assistant`` – the rule-based financial assistant
* ``visualization`` – functions that generate Plotly figures

To run the dashboard from the command line you can execute:

```bash
streamlit run ledger_dashboard/Home.py
```

or use ``run_ledger_dashboard.py`` at the project root.
"""

from .aggregation import LedgerTotals, aggregate, budget_totals, total_savings
from .errors import DivisionByZeroGuarded, NotFound, ValidationError
from .filtering import Query, Sort, filter_and_sort
from .models import Budget, BudgetStatus, Expense, GoalStatus, Period, SavingsGoal, Transaction, TransactionType
from .progress import BudgetProgress, GoalProgress, budget_progress, goal_progress
from .record_store import add_record, get_record, mint_record_id, remove_record, update_record

__all__ = [
    # Records
    "Expense",
    "Budget",
    "SavingsGoal",
    "Transaction",
    "Period",
    "TransactionType",
    "BudgetStatus",
    "GoalStatus",
    # Record store
    "add_record",
    "update_record",
    "remove_record",
    "get_record",
    "mint_record_id",
    # Stages
    "Query",
    "Sort",
    "filter_and_sort",
    "LedgerTotals",
    "aggregate",
    "budget_totals",
    "total_savings",
    "BudgetProgress",
    "GoalProgress",
    "budget_progress",
    "goal_progress",
    # Errors
    "ValidationError",
    "NotFound",
    "DivisionByZeroGuarded",
]

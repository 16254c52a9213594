"""Tabular views of ledger records for tables, charts and exports.

The engine stages work on records; this module converts their results into
pandas objects the Streamlit pages and Plotly charts consume. Decimal
amounts become floats here and only here, at the display boundary.
"""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Iterable, List

import pandas as pd

from .aggregation import aggregate
from .models import TransactionType

WEEKDAY_ORDER = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTHLY_COLUMNS = ["Income", "Expenses", "Net"]

# Display headers for record fields, in table order
_COLUMN_LABELS = {
    "date": "Date",
    "name": "Name",
    "description": "Description",
    "category": "Category",
    "type": "Type",
    "amount": "Amount",
    "spent": "Spent",
    "period": "Period",
    "target_amount": "Target Amount",
    "current_amount": "Current Amount",
    "target_date": "Target Date",
}
_MONEY_FIELDS = {"amount", "spent", "target_amount", "current_amount"}
_DATE_FIELDS = {"date", "target_date"}


def _row(record: Any) -> dict:
    row = asdict(record) if is_dataclass(record) else dict(record)
    for key, value in row.items():
        if isinstance(value, Enum):
            row[key] = value.value
    return row


def records_to_frame(records: Iterable[Any]) -> pd.DataFrame:
    """One row per record, ``id`` as the index, display headers as columns."""
    rows: List[dict] = [_row(r) for r in records]
    if not rows:
        return pd.DataFrame()
    df = pd.DataFrame(rows).set_index("id")
    for column in df.columns:
        if column in _MONEY_FIELDS:
            df[column] = pd.to_numeric(df[column].astype(str), errors="coerce")
        elif column in _DATE_FIELDS:
            df[column] = pd.to_datetime(df[column])
    ordered = [c for c in _COLUMN_LABELS if c in df.columns]
    return df[ordered].rename(columns=_COLUMN_LABELS)


def category_series(records: Iterable[Any]) -> pd.Series:
    """Per-category totals, largest first, as floats for charting."""
    by_category = aggregate(records).by_category
    series = pd.Series({k: float(v) for k, v in by_category.items()}, dtype=float)
    series.index.name = "Category"
    return series.sort_values(ascending=False)


def monthly_breakdown(transactions: Iterable[Any]) -> pd.DataFrame:
    """Income, expenses and net cash flow per calendar month."""
    rows = [
        {
            "Month": pd.Timestamp(t.date).to_period("M"),
            "Flow": t.flow,
            "Amount": float(t.amount),
        }
        for t in transactions
    ]
    if not rows:
        return pd.DataFrame(columns=MONTHLY_COLUMNS)
    df = pd.DataFrame(rows)
    pivot = df.pivot_table(index="Month", columns="Flow", values="Amount", aggfunc="sum", fill_value=0.0)
    result = pd.DataFrame(index=pivot.index)
    result["Income"] = pivot.get(TransactionType.INCOME.value, 0.0)
    result["Expenses"] = pivot.get(TransactionType.EXPENSE.value, 0.0)
    result["Net"] = result["Income"] - result["Expenses"]
    return result.sort_index()


def spending_by_weekday(expenses: Iterable[Any]) -> pd.Series:
    """Total expense amount per weekday, Monday first, zero-filled."""
    rows = [
        {"Day": pd.Timestamp(e.date).strftime("%a"), "Amount": float(e.ledger_amount)}
        for e in expenses
        if e.flow == TransactionType.EXPENSE.value and e.sort_date is not None
    ]
    if not rows:
        return pd.Series(0.0, index=WEEKDAY_ORDER, name="Amount")
    totals = pd.DataFrame(rows).groupby("Day")["Amount"].sum()
    return totals.reindex(WEEKDAY_ORDER, fill_value=0.0).rename("Amount")


def report_csv(frame: pd.DataFrame) -> str:
    """CSV text for a report download."""
    return frame.to_csv(index=True)

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from ledger_dashboard.filtering import Query, Sort, filter_and_sort, toggle_sort
from ledger_dashboard.models import Budget, Expense, SavingsGoal, Transaction, TransactionType


def _txn(id_, day, description, category, amount, kind):
    return Transaction(
        id=id_,
        date=date(2023, 6, day),
        description=description,
        category=category,
        amount=Decimal(amount),
        type=TransactionType(kind),
    )


def _sample_transactions():
    return (
        _txn("1", 20, "Salary Deposit", "Income", "3200", "income"),
        _txn("2", 19, "Grocery Store", "Food & Dining", "120.50", "expense"),
        _txn("3", 18, "Electric Bill", "Utilities", "95.40", "expense"),
        _txn("4", 15, "Restaurant", "Food & Dining", "67.80", "expense"),
        _txn("5", 16, "Freelance Payment", "Income", "850", "income"),
        _txn("6", 14, "Food truck refund", "Food & Dining", "12", "income"),
    )


def test_category_and_type_sorted_by_amount_desc() -> None:
    result = filter_and_sort(
        _sample_transactions(),
        Query(category="Food & Dining", type="expense"),
        Sort("amount", "desc"),
    )
    assert [t.id for t in result] == ["2", "4"]


def test_default_sort_is_most_recent_first() -> None:
    result = filter_and_sort(_sample_transactions())
    assert [t.date.day for t in result] == [20, 19, 18, 16, 15, 14]


def test_text_search_is_case_insensitive() -> None:
    result = filter_and_sort(_sample_transactions(), Query(text="BILL"))
    assert [t.id for t in result] == ["3"]


@pytest.mark.parametrize("sentinel", ["all", "All", None])
def test_all_sentinel_matches_everything(sentinel) -> None:
    records = _sample_transactions()
    result = filter_and_sort(records, Query(category=sentinel, type=sentinel))
    assert len(result) == len(records)


def test_filter_is_idempotent() -> None:
    query = Query(text="e", type="expense")
    sort = Sort("amount", "asc")
    once = filter_and_sort(_sample_transactions(), query, sort)
    assert filter_and_sort(once, query, sort) == once


def test_input_is_not_modified() -> None:
    records = list(_sample_transactions())
    snapshot = list(records)
    filter_and_sort(records, Query(text="salary"), Sort("amount", "asc"))
    assert records == snapshot


def test_sort_is_stable_for_equal_keys() -> None:
    records = (
        Expense("a", date(2023, 1, 1), "Other", Decimal("10"), "first"),
        Expense("b", date(2023, 1, 2), "Other", Decimal("10"), "second"),
        Expense("c", date(2023, 1, 3), "Other", Decimal("5"), "third"),
    )
    assert [e.id for e in filter_and_sort(records, sort=Sort("amount", "desc"))] == ["a", "b", "c"]
    assert [e.id for e in filter_and_sort(records, sort=Sort("amount", "asc"))] == ["c", "a", "b"]


def test_type_selector_ignored_for_records_without_type() -> None:
    expenses = (Expense("1", date(2023, 1, 1), "Other", Decimal("1"), "x"),)
    assert filter_and_sort(expenses, Query(type="income")) == expenses


def test_goals_search_by_name() -> None:
    goals = (
        SavingsGoal("1", "Emergency Fund", Decimal("100"), Decimal("0"), date(2024, 1, 1)),
        SavingsGoal("2", "Vacation", Decimal("100"), Decimal("0"), date(2025, 1, 1)),
    )
    assert [g.id for g in filter_and_sort(goals, Query(text="vaca"))] == ["2"]
    assert [g.id for g in filter_and_sort(goals)] == ["2", "1"]


def test_budgets_keep_input_order_by_default() -> None:
    budgets = (
        Budget("1", "Shopping", Decimal("300")),
        Budget("2", "Food & Dining", Decimal("600")),
    )
    assert filter_and_sort(budgets) == budgets
    assert [b.id for b in filter_and_sort(budgets, sort=Sort("amount", "desc"))] == ["2", "1"]
    with pytest.raises(ValueError):
        filter_and_sort(budgets, sort=Sort("date", "asc"))


def test_invalid_sort_rejected() -> None:
    with pytest.raises(ValueError):
        Sort("category", "asc")
    with pytest.raises(ValueError):
        Sort("date", "up")


def test_toggle_sort() -> None:
    assert toggle_sort(Sort("date", "desc"), "date") == Sort("date", "asc")
    assert toggle_sort(Sort("date", "asc"), "date") == Sort("date", "desc")
    assert toggle_sort(Sort("date", "asc"), "amount") == Sort("amount", "desc")


def test_text_search_keeps_surrounding_whitespace() -> None:
    records = (
        Expense("1", date(2023, 1, 2), "Food & Dining", Decimal("4"), "Coffee beans"),
        Expense("2", date(2023, 1, 1), "Food & Dining", Decimal("3"), "Iced coffee"),
    )
    assert [e.id for e in filter_and_sort(records, Query(text="coffee "))] == ["1"]
    assert [e.id for e in filter_and_sort(records, Query(text="coffee"))] == ["1", "2"]

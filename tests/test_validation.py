from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from ledger_dashboard.errors import ValidationError
from ledger_dashboard.models import Period, TransactionType
from ledger_dashboard.validation import (
    build_budget,
    build_expense,
    build_goal,
    build_transaction,
    parse_amount,
    parse_date,
    submit_record,
)


def _expense_form(**overrides):
    form = {"date": "2023-06-18", "category": "Food & Dining", "amount": "45.80", "description": "Dinner"}
    form.update(overrides)
    return form


@pytest.mark.parametrize(
    "raw, expected",
    [("45.80", Decimal("45.80")), ("1,200", Decimal("1200")), ("$19.99", Decimal("19.99")), (12, Decimal("12"))],
)
def test_parse_amount_accepts(raw, expected) -> None:
    assert parse_amount(raw, "amount") == expected


@pytest.mark.parametrize("raw", ["abc", "-5", "0", "", None, "NaN", "Infinity", True])
def test_parse_amount_rejects(raw) -> None:
    with pytest.raises(ValidationError) as excinfo:
        parse_amount(raw, "amount")
    assert excinfo.value.field == "amount"


def test_parse_amount_allows_zero_when_asked() -> None:
    assert parse_amount("0", "spent", allow_zero=True) == 0


def test_parse_date() -> None:
    assert parse_date("2023-06-18", "date") == date(2023, 6, 18)
    assert parse_date(datetime(2023, 6, 18, 9, 30), "date") == date(2023, 6, 18)
    with pytest.raises(ValidationError):
        parse_date("18/06/2023", "date")


def test_build_expense() -> None:
    expense = build_expense(_expense_form(), "7")
    assert expense.id == "7"
    assert expense.amount == Decimal("45.80")
    assert expense.date == date(2023, 6, 18)


def test_build_expense_defaults_date_to_today() -> None:
    assert build_expense(_expense_form(date=None), "1").date == date.today()


@pytest.mark.parametrize("missing", ["category", "amount", "description"])
def test_build_expense_requires_fields(missing) -> None:
    with pytest.raises(ValidationError, match="Please fill all required fields"):
        build_expense(_expense_form(**{missing: ""}), "1")


def test_build_expense_rejects_unknown_category() -> None:
    with pytest.raises(ValidationError):
        build_expense(_expense_form(category="Income"), "1")


def test_build_budget_defaults() -> None:
    budget = build_budget({"category": "Shopping", "amount": "300"}, "1")
    assert budget.spent == 0
    assert budget.period == Period.MONTHLY


def test_build_goal_defaults_current_amount() -> None:
    goal = build_goal({"name": "Vacation", "target_amount": "3000", "target_date": "2023-09-15"}, "1")
    assert goal.current_amount == 0
    assert goal.target_date == date(2023, 9, 15)


def test_build_transaction() -> None:
    txn = build_transaction(
        {"description": "Salary", "category": "Income", "amount": "3200", "type": "income", "date": "2023-06-20"},
        "1",
    )
    assert txn.type == TransactionType.INCOME
    with pytest.raises(ValidationError):
        build_transaction(
            {"description": "Salary", "category": "Income", "amount": "3200", "type": "refund"}, "1"
        )


def test_submit_record_adds_and_updates() -> None:
    records = (build_expense(_expense_form(), "1"),)
    added = submit_record(records, _expense_form(description="Lunch"), build_expense, prepend=True)
    assert len(added) == 2
    assert added[0].description == "Lunch"
    assert added[0].id != "1"

    edited = submit_record(added, _expense_form(amount="50"), build_expense, editing_id="1")
    assert [r.id for r in edited] == [r.id for r in added]
    assert edited[1].amount == Decimal("50")


def test_submit_record_failure_leaves_collection_untouched() -> None:
    records = (build_expense(_expense_form(), "1"),)
    with pytest.raises(ValidationError):
        submit_record(records, _expense_form(amount="-1"), build_expense)
    assert len(records) == 1

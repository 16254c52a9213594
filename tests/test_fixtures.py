from __future__ import annotations

import json
from decimal import Decimal

import pytest

from ledger_dashboard.errors import ValidationError
from ledger_dashboard.fixtures import load_seed, parse_seed, read_seed_file


def test_default_seed_loads() -> None:
    seed = load_seed()
    assert len(seed.expenses) == 7
    assert len(seed.budgets) == 5
    assert len(seed.savings_goals) == 4
    assert len(seed.transactions) == 10
    assert seed.budgets[0].spent == Decimal("485")
    assert list(seed.monthly_spending.index)[:2] == ["Jan", "Feb"]
    assert list(seed.daily_spending.index)[0] == "Mon"
    assert seed.category_colors["Food & Dining"].startswith("#")


def test_seed_is_cached_per_path() -> None:
    assert load_seed() is load_seed()


def test_missing_seed_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        read_seed_file(tmp_path / "missing.json")


def test_custom_seed_file(tmp_path) -> None:
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({
        "expenses": [
            {"id": "a", "date": "2024-01-02", "category": "Travel", "amount": "300", "description": "Flights"}
        ],
    }))
    seed = load_seed(path)
    assert seed.expenses[0].category == "Travel"
    assert seed.budgets == ()
    assert seed.monthly_spending.empty


def test_invalid_seed_rows_are_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_seed({"budgets": [{"id": "1", "category": "Shopping", "amount": "-3"}]})

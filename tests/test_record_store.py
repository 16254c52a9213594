from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from ledger_dashboard.errors import NotFound
from ledger_dashboard.models import Expense
from ledger_dashboard.record_store import add_record, get_record, mint_record_id, remove_record, update_record


def _expense(id_, amount="10", description="Coffee"):
    return Expense(id_, date(2023, 6, 1), "Food & Dining", Decimal(amount), description)


def _sample():
    return (_expense("1"), _expense("2", "20", "Lunch"), _expense("3", "30", "Dinner"))


def test_add_appends_or_prepends() -> None:
    records = _sample()
    new = _expense("4")
    assert add_record(records, new)[-1] == new
    assert add_record(records, new, prepend=True)[0] == new
    assert len(records) == 3


def test_update_keeps_position() -> None:
    records = _sample()
    replacement = _expense("2", "25", "Late lunch")
    updated = update_record(records, "2", replacement)
    assert [r.id for r in updated] == ["1", "2", "3"]
    assert updated[1].amount == Decimal("25")
    assert records[1].amount == Decimal("20")


def test_update_missing_id() -> None:
    records = _sample()
    with pytest.raises(NotFound) as excinfo:
        update_record(records, "99", _expense("99"))
    assert excinfo.value.record_id == "99"
    assert update_record(records, "99", _expense("99"), strict=False) == records


def test_remove_missing_id_is_noop() -> None:
    records = _sample()
    assert remove_record(records, "99") == records
    with pytest.raises(NotFound):
        remove_record(records, "99", strict=True)


def test_remove_then_get_raises() -> None:
    remaining = remove_record(_sample(), "2")
    assert [r.id for r in remaining] == ["1", "3"]
    with pytest.raises(NotFound):
        get_record(remaining, "2")
    assert get_record(remaining, "3").description == "Dinner"


def test_not_found_is_a_key_error() -> None:
    with pytest.raises(KeyError):
        get_record((), "1")


def test_mint_record_id_is_unique() -> None:
    records = (_expense("1000"), _expense("1001"))
    assert mint_record_id(records, now=1.0) == "1002"
    assert mint_record_id((), now=1.5) == "1500"

import pytest

from ledger_dashboard.view_state import CLOSED, DialogMode, DialogState


def test_dialog_transitions() -> None:
    creating = CLOSED.open_create()
    assert creating.is_open and not creating.is_editing
    editing = creating.open_edit("42")
    assert editing.mode == DialogMode.EDITING
    assert editing.record_id == "42"
    assert editing.close() == CLOSED
    assert not CLOSED.is_open


def test_editing_requires_record_id() -> None:
    with pytest.raises(ValueError):
        DialogState(DialogMode.EDITING)
    with pytest.raises(ValueError):
        DialogState(DialogMode.CREATING, "1")


def test_labels() -> None:
    assert CLOSED.open_create().title("Expense") == "Add New Expense"
    assert CLOSED.open_edit("1").title("Expense") == "Edit Expense"
    assert CLOSED.open_create().submit_label("Goal", create_verb="Create") == "Create Goal"
    assert CLOSED.open_edit("1").submit_label("Goal") == "Update Goal"

"""Form-boundary validation.

Raw form values (strings from text inputs, numbers from number inputs,
dates from date pickers) are turned into typed records here, or rejected
with :class:`~ledger_dashboard.errors.ValidationError` before any record is
constructed. The engine stages only ever see validated records.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, TypeVar

from . import config
from .errors import ValidationError
from .models import Budget, Expense, Period, SavingsGoal, Transaction, TransactionType
from .record_store import add_record, mint_record_id, update_record

logger = logging.getLogger(__name__)

R = TypeVar("R")
Builder = Callable[[Mapping[str, Any], str], R]


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require(form: Mapping[str, Any], *fields: str) -> None:
    """Reject the form if any of ``fields`` is missing or blank."""
    missing = [name for name in fields if _is_blank(form.get(name))]
    if missing:
        raise ValidationError(missing[0], "Please fill all required fields")


def parse_amount(raw: Any, field: str, allow_zero: bool = False) -> Decimal:
    """Parse a money amount into a Decimal.

    Accepts numbers or text such as ``"1,200.50"`` or ``"$45"``. Rejects
    non-numeric input, negative values, and zero unless ``allow_zero``.
    """
    if _is_blank(raw):
        raise ValidationError(field, f"{field} is required")
    if isinstance(raw, bool):
        raise ValidationError(field, f"{field} must be a number")
    text = str(raw).strip().replace(",", "").lstrip("$")
    try:
        value = Decimal(text)
    except InvalidOperation:
        raise ValidationError(field, f"{field} must be a number") from None
    if not value.is_finite():
        raise ValidationError(field, f"{field} must be a number")
    if value < 0 or (value == 0 and not allow_zero):
        bound = "zero or more" if allow_zero else "greater than zero"
        raise ValidationError(field, f"{field} must be {bound}")
    return value


def parse_date(raw: Any, field: str) -> date:
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if _is_blank(raw):
        raise ValidationError(field, f"{field} is required")
    try:
        return date.fromisoformat(str(raw).strip()[:10])
    except ValueError:
        raise ValidationError(field, f"{field} must be a date (YYYY-MM-DD)") from None


def parse_choice(raw: Any, field: str, choices: Sequence[str]) -> str:
    value = getattr(raw, "value", raw)
    if value not in choices:
        raise ValidationError(field, f"Unknown {field} '{value}'")
    return value


def build_expense(form: Mapping[str, Any], record_id: str) -> Expense:
    require(form, "category", "amount", "description")
    return Expense(
        id=record_id,
        date=parse_date(form.get("date") or date.today(), "date"),
        category=parse_choice(form["category"], "category", config.EXPENSE_CATEGORIES),
        amount=parse_amount(form["amount"], "amount"),
        description=str(form["description"]).strip(),
    )


def build_budget(form: Mapping[str, Any], record_id: str) -> Budget:
    require(form, "category", "amount")
    spent = form.get("spent")
    period = form.get("period") or Period.MONTHLY.value
    return Budget(
        id=record_id,
        category=parse_choice(form["category"], "category", config.EXPENSE_CATEGORIES),
        amount=parse_amount(form["amount"], "amount"),
        spent=parse_amount("0" if _is_blank(spent) else spent, "spent", allow_zero=True),
        period=Period(parse_choice(period, "period", [p.value for p in Period])),
    )


def build_goal(form: Mapping[str, Any], record_id: str) -> SavingsGoal:
    require(form, "name", "target_amount", "target_date")
    current = form.get("current_amount")
    return SavingsGoal(
        id=record_id,
        name=str(form["name"]).strip(),
        target_amount=parse_amount(form["target_amount"], "target_amount"),
        current_amount=parse_amount(
            "0" if _is_blank(current) else current, "current_amount", allow_zero=True
        ),
        target_date=parse_date(form["target_date"], "target_date"),
    )


def build_transaction(form: Mapping[str, Any], record_id: str) -> Transaction:
    require(form, "description", "category", "amount", "type")
    return Transaction(
        id=record_id,
        date=parse_date(form.get("date") or date.today(), "date"),
        description=str(form["description"]).strip(),
        category=parse_choice(form["category"], "category", config.TRANSACTION_CATEGORIES),
        amount=parse_amount(form["amount"], "amount"),
        type=TransactionType(parse_choice(form["type"], "type", [t.value for t in TransactionType])),
    )


def submit_record(
    records: Sequence[R],
    form: Mapping[str, Any],
    builder: Builder,
    editing_id: Optional[str] = None,
    prepend: bool = False,
) -> Tuple[R, ...]:
    """Validate ``form`` and return the collection with the record added or replaced.

    When ``editing_id`` is given the record keeps its id and position;
    otherwise a new id is minted. On any error the input collection is left
    untouched and the error propagates.
    """
    record_id = editing_id or mint_record_id(records)
    try:
        record = builder(form, record_id)
    except ValidationError as exc:
        logger.info("Rejected %s form: %s", builder.__name__.replace("build_", ""), exc)
        raise
    if editing_id:
        return update_record(records, editing_id, record)
    return add_record(records, record, prepend=prepend)

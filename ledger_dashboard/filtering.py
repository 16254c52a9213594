"""Filter and sort stage.

Derives the visible subset of a collection from a text query, a category
selector and a type selector, then orders it by date or amount. Mirrors the
search box, category dropdown, type dropdown and sortable column headers
found on the Expenses and Transactions pages.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Tuple

from .config import ALL_SENTINEL

SORT_KEYS = ("date", "amount")
SORT_DIRECTIONS = ("asc", "desc")


@dataclass(frozen=True)
class Query:
    """Selectors for :func:`filter_and_sort`.

    ``None`` or the ``"all"`` sentinel (any case) disables a selector.
    ``text`` is a case-insensitive substring match on the record label,
    surrounding whitespace included.
    """

    text: Optional[str] = None
    category: Optional[str] = None
    type: Optional[str] = None


@dataclass(frozen=True)
class Sort:
    key: str = "date"
    direction: str = "desc"

    def __post_init__(self) -> None:
        if self.key not in SORT_KEYS:
            raise ValueError(f"Unsupported sort key '{self.key}'")
        if self.direction not in SORT_DIRECTIONS:
            raise ValueError(f"Unsupported sort direction '{self.direction}'")


DEFAULT_SORT = Sort()


def _is_all(selector: Optional[str]) -> bool:
    return selector is None or str(selector).strip().lower() == ALL_SENTINEL


def _matches(record: Any, query: Query) -> bool:
    text = (query.text or "").lower()
    if text and text not in record.label.lower():
        return False
    if not _is_all(query.category) and record.category != query.category:
        return False
    record_type = getattr(record, "type", None)
    if record_type is not None and not _is_all(query.type):
        if getattr(record_type, "value", record_type) != query.type:
            return False
    return True


def _sort_value(record: Any, key: str):
    return record.sort_date if key == "date" else record.sort_amount


def filter_and_sort(
    records: Iterable[Any], query: Optional[Query] = None, sort: Optional[Sort] = None
) -> Tuple[Any, ...]:
    """Return the records matching ``query``, ordered by ``sort``.

    All three selectors are ANDed. The sort is stable; when ``sort`` is not
    given, records are ordered by date, most recent first, and collections
    without dates (budgets) keep their input order.

    Raises:
        ValueError: If an explicit date sort is requested for records that
            carry no date.
    """
    query = query or Query()
    matched = [r for r in records if _matches(r, query)]

    if sort is None:
        if any(r.sort_date is None for r in matched):
            return tuple(matched)
        sort = DEFAULT_SORT
    elif sort.key == "date" and any(r.sort_date is None for r in matched):
        raise ValueError("Records without a date cannot be sorted by date")

    ordered = sorted(
        matched,
        key=lambda r: _sort_value(r, sort.key),
        reverse=sort.direction == "desc",
    )
    return tuple(ordered)


def toggle_sort(current: Sort, key: str) -> Sort:
    """Column-header behaviour: same key flips direction, a new key starts descending."""
    if current.key == key:
        return Sort(key, "asc" if current.direction == "desc" else "desc")
    return Sort(key, "desc")

"""Progress stage: budget utilisation and savings-goal progress.

Display percentages are rounded half-up and clamped to 100, while status is
always classified from the raw, unclamped ratio. A zero limit or target is
guarded: a :class:`DivisionByZeroGuarded` warning is emitted and the result
resolves to zero percent.
"""

from __future__ import annotations

import logging
import math
import warnings
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Tuple, Union

from .config import WARNING_THRESHOLD
from .errors import DivisionByZeroGuarded
from .models import BudgetStatus, GoalStatus

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, str]
DateLike = Union[date, datetime]

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")
_SECONDS_PER_DAY = 86400


@dataclass(frozen=True)
class BudgetProgress:
    percent: int
    exact_percent: Decimal
    status: BudgetStatus
    overage: Decimal
    guarded: bool = False

    @property
    def is_over(self) -> bool:
        return self.status == BudgetStatus.OVER


@dataclass(frozen=True)
class GoalProgress:
    percent: int
    exact_percent: Decimal
    days_remaining: int
    amount_remaining: Decimal
    is_past_due: bool
    status: GoalStatus
    guarded: bool = False


def _to_decimal(value: Number) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _ratio_percent(part: Decimal, whole: Decimal, what: str) -> Tuple[Decimal, bool]:
    """Return (exact percent, guarded)."""
    if whole == 0:
        warnings.warn(
            f"{what} is zero; progress resolved to 0%",
            DivisionByZeroGuarded,
            stacklevel=3,
        )
        logger.info("Guarded division by zero %s", what)
        return _ZERO, True
    return part / whole * _HUNDRED, False


def display_percent(exact_percent: Decimal) -> int:
    """Round half-up to a whole percent and clamp at 100."""
    rounded = int(exact_percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return min(rounded, 100)


def budget_progress(spent: Number, amount: Number) -> BudgetProgress:
    """Derive display percent, status and overage for one budget.

    Reaching the limit exactly is still ``safe``; only strictly exceeding it
    is ``over``. At or above the warning threshold (80%) is ``warning``.
    """
    spent = _to_decimal(spent)
    amount = _to_decimal(amount)
    exact, guarded = _ratio_percent(spent, amount, "budget limit")

    if guarded:
        status = BudgetStatus.SAFE
    elif spent > amount:
        status = BudgetStatus.OVER
    elif spent / amount >= WARNING_THRESHOLD:
        status = BudgetStatus.WARNING
    else:
        status = BudgetStatus.SAFE

    overage = spent - amount if status == BudgetStatus.OVER else _ZERO
    return BudgetProgress(
        percent=display_percent(exact),
        exact_percent=exact,
        status=status,
        overage=overage,
        guarded=guarded,
    )


def days_between(start: DateLike, end: DateLike) -> int:
    """Whole days from ``start`` to ``end``, rounded up; negative when ``end`` is earlier."""
    if isinstance(start, datetime) or isinstance(end, datetime):
        start_dt = start if isinstance(start, datetime) else datetime.combine(start, datetime.min.time())
        end_dt = end if isinstance(end, datetime) else datetime.combine(end, datetime.min.time())
        return math.ceil((end_dt - start_dt).total_seconds() / _SECONDS_PER_DAY)
    return (end - start).days


def goal_progress(current: Number, target: Number, target_date: DateLike, today: DateLike) -> GoalProgress:
    """Derive progress and time remaining for a savings goal.

    Overshooting the target is valid: the amount remaining never goes below
    zero and the display percent stays at 100.
    """
    current = _to_decimal(current)
    target = _to_decimal(target)
    exact, guarded = _ratio_percent(current, target, "goal target")
    days_remaining = days_between(today, target_date)
    reached = not guarded and current >= target
    is_past_due = days_remaining <= 0 and current < target

    if reached:
        status = GoalStatus.COMPLETED
    elif is_past_due:
        status = GoalStatus.PAST_DUE
    else:
        status = GoalStatus.IN_PROGRESS

    return GoalProgress(
        percent=display_percent(exact),
        exact_percent=exact,
        days_remaining=days_remaining,
        amount_remaining=max(target - current, _ZERO),
        is_past_due=is_past_due,
        status=status,
        guarded=guarded,
    )


def describe_time_left(progress: GoalProgress) -> str:
    if progress.days_remaining > 0:
        unit = "day" if progress.days_remaining == 1 else "days"
        return f"{progress.days_remaining} {unit} remaining"
    return "Goal date passed"


def goals_progress(goals: Iterable, today: DateLike) -> Tuple[GoalProgress, ...]:
    """Progress for every goal in ``goals``, in order."""
    return tuple(
        goal_progress(g.current_amount, g.target_amount, g.target_date, today) for g in goals
    )

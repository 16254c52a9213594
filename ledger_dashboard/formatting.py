"""Formatting utilities for currency and text display."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Amount = Union[Decimal, float, int]

_CENTS = Decimal("0.01")


def to_cents(amount: Amount) -> Decimal:
    """Quantize an amount to two decimal places, rounding half-up."""
    value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount: Amount, include_sign: bool = True) -> str:
    """Format a currency amount with proper formatting.

    Args:
        amount: The amount to format
        include_sign: Whether to include the dollar sign

    Returns:
        Formatted currency string (e.g., "$1,234.56" or "1,234.56")

    Example:
        >>> format_currency(Decimal("1234.56"))
        '$1,234.56'
        >>> format_currency(-45, include_sign=False)
        '-45.00'
    """
    value = to_cents(amount)
    formatted = f"{abs(value):,.2f}"
    prefix = "-" if value < 0 else ""
    return f"{prefix}${formatted}" if include_sign else f"{prefix}{formatted}"


def escape_dollar_for_markdown(amount: Amount) -> str:
    """Format a dollar amount and escape the dollar sign for markdown rendering.

    Streamlit markdown treats ``$`` as a LaTeX math delimiter, which turns
    the text between two amounts into italics.

    Example:
        >>> escape_dollar_for_markdown(1234.56)
        '\\$1,234.56'
    """
    return escape_markdown_dollars(format_currency(amount))


def escape_markdown_dollars(text: str) -> str:
    """Escape every unescaped ``$`` in free text bound for ``st.markdown``/``st.write``.

    Example:
        >>> escape_markdown_dollars("Food ($485) and Rent ($1200)")
        'Food (\\\\$485) and Rent (\\\\$1200)'
    """
    return re.sub(r"(?<!\\)\$", r"\\$", text)


def format_signed(amount: Amount, flow: str) -> str:
    """Transactions table amount: ``+$3,200.00`` for income, ``-$120.50`` for expenses."""
    sign = "+" if flow == "income" else "-"
    return f"{sign}{format_currency(abs(to_cents(amount)))}"


def format_percent(percent: Union[int, Decimal]) -> str:
    return f"{percent}%"

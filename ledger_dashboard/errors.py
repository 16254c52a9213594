"""Error taxonomy for the ledger engine.

All of these are recoverable and local. Validation failures are raised at
the form boundary before a record exists, lookups by id raise ``NotFound``
only when the caller asks for strictness, and division by a zero limit is
signalled as a warning and resolved to a zero percent result.
"""

from __future__ import annotations

from typing import Optional


class LedgerError(Exception):
    """Base class for ledger engine errors."""


class ValidationError(LedgerError, ValueError):
    """A required form field is missing or holds an invalid value."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFound(LedgerError, KeyError):
    """No record with the requested id exists in the collection."""

    def __init__(self, record_id: str, message: Optional[str] = None):
        super().__init__(record_id)
        self.record_id = record_id
        self.message = message or f"No record with id '{record_id}'"

    def __str__(self) -> str:
        return self.message


class LedgerWarning(UserWarning):
    """Base class for non-fatal conditions signalled by the engine."""


class DivisionByZeroGuarded(LedgerWarning):
    """A progress ratio was requested against a zero limit or target."""

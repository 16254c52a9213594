"""Immutable record collections.

The calling page owns its collection for the session. Every function here
takes a tuple and returns a new tuple; inputs are never modified, so a
failed operation leaves the caller's collection exactly as it was.
"""

from __future__ import annotations

import logging
import time
from typing import Iterable, Optional, Tuple, TypeVar

from .errors import NotFound

logger = logging.getLogger(__name__)

R = TypeVar("R")


def add_record(records: Iterable[R], record: R, prepend: bool = False) -> Tuple[R, ...]:
    """Return a new collection with ``record`` added at the front or back."""
    existing = tuple(records)
    logger.debug("Adding record %s", getattr(record, "id", record))
    return (record,) + existing if prepend else existing + (record,)


def update_record(
    records: Iterable[R], record_id: str, replacement: R, strict: bool = True
) -> Tuple[R, ...]:
    """Replace the record with ``record_id``, keeping its position.

    Raises:
        NotFound: If no record has ``record_id`` and ``strict`` is set.
    """
    existing = tuple(records)
    if not any(r.id == record_id for r in existing):
        if strict:
            raise NotFound(record_id)
        logger.info("Update skipped, record %s not found", record_id)
        return existing
    logger.debug("Updating record %s", record_id)
    return tuple(replacement if r.id == record_id else r for r in existing)


def remove_record(records: Iterable[R], record_id: str, strict: bool = False) -> Tuple[R, ...]:
    """Return the collection without the record with ``record_id``.

    Removing an absent id is a no-op unless ``strict`` is set.
    """
    existing = tuple(records)
    remaining = tuple(r for r in existing if r.id != record_id)
    if len(remaining) == len(existing):
        if strict:
            raise NotFound(record_id)
        logger.info("Delete skipped, record %s not found", record_id)
    else:
        logger.debug("Removed record %s", record_id)
    return remaining


def get_record(records: Iterable[R], record_id: str) -> R:
    for record in records:
        if record.id == record_id:
            return record
    raise NotFound(record_id)


def mint_record_id(records: Iterable[R] = (), now: Optional[float] = None) -> str:
    """Mint a time-based id (epoch milliseconds) unique within ``records``."""
    taken = {r.id for r in records}
    candidate = int((time.time() if now is None else now) * 1000)
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)

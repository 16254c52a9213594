"""Create/edit dialog state for the record pages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DialogMode(str, Enum):
    CLOSED = "closed"
    CREATING = "creating"
    EDITING = "editing"


@dataclass(frozen=True)
class DialogState:
    """One of ``closed``, ``creating`` or ``editing(record_id)``."""

    mode: DialogMode = DialogMode.CLOSED
    record_id: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.mode == DialogMode.EDITING) != (self.record_id is not None):
            raise ValueError("record_id is required when editing and only then")

    @property
    def is_open(self) -> bool:
        return self.mode != DialogMode.CLOSED

    @property
    def is_editing(self) -> bool:
        return self.mode == DialogMode.EDITING

    def open_create(self) -> "DialogState":
        return DialogState(DialogMode.CREATING)

    def open_edit(self, record_id: str) -> "DialogState":
        return DialogState(DialogMode.EDITING, record_id)

    def close(self) -> "DialogState":
        return CLOSED

    def title(self, noun: str, create_verb: str = "Add New") -> str:
        """Dialog heading, e.g. ``Edit Expense`` or ``Add New Expense``."""
        return f"Edit {noun}" if self.is_editing else f"{create_verb} {noun}"

    def submit_label(self, noun: str, create_verb: str = "Add") -> str:
        return f"Update {noun}" if self.is_editing else f"{create_verb} {noun}"


CLOSED = DialogState()

"""Identity/session provider used by the surrounding app.

The ledger engine never imports this module. Pages use it to personalise
the greeting and to gate profile edits. ``LocalIdentityProvider`` is the
in-process provider used when no hosted auth service is configured.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Protocol

from . import config

logger = logging.getLogger(__name__)

Listener = Callable[[Optional["UserIdentity"]], None]


@dataclass(frozen=True)
class UserIdentity:
    id: str
    email: str
    full_name: str = ""


class IdentityProvider(Protocol):
    def get_current_user(self) -> Optional[UserIdentity]:
        ...

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        ...


class LocalIdentityProvider:
    """Single-user provider that keeps the signed-in identity in memory."""

    def __init__(self, user: Optional[UserIdentity] = None):
        self._user = user
        self._listeners: List[Listener] = []

    @classmethod
    def from_config(cls) -> "LocalIdentityProvider":
        return cls(
            UserIdentity(
                id="local",
                email=config.DEFAULT_USER_EMAIL,
                full_name=config.DEFAULT_USER_NAME,
            )
        )

    def get_current_user(self) -> Optional[UserIdentity]:
        return self._user

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for identity changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._user)

    def sign_in(self, user: UserIdentity) -> None:
        self._user = user
        logger.info("Signed in %s", user.email)
        self._notify()

    def sign_out(self) -> None:
        self._user = None
        logger.info("Signed out")
        self._notify()

    def update_profile(self, full_name: str) -> UserIdentity:
        """Change the signed-in user's display name.

        Raises:
            PermissionError: If nobody is signed in.
            ValueError: If ``full_name`` is blank.
        """
        if not can_edit_profile(self._user):
            raise PermissionError("Sign in to edit your profile")
        if not full_name or not full_name.strip():
            raise ValueError("Full name cannot be empty")
        self._user = replace(self._user, full_name=full_name.strip())
        self._notify()
        return self._user


def greeting_name(user: Optional[UserIdentity], default: str = "there") -> str:
    """First name for the dashboard greeting, falling back to the email's local part."""
    if user is None:
        return default
    if user.full_name.strip():
        return user.full_name.split()[0]
    if user.email:
        return user.email.split("@")[0]
    return default


def can_edit_profile(user: Optional[UserIdentity]) -> bool:
    return user is not None

"""Shared session and sidebar components for the multi-page dashboard.

Every page calls :func:`render_shared_sidebar` first. It seeds the session
with the shared sample records (once per session), owns the identity
provider, and renders the greeting and ledger snapshot in the sidebar.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, MutableMapping, Optional

import streamlit as st

from . import config
from .aggregation import aggregate, total_savings
from .assistant import start_conversation
from .fixtures import Seed, load_seed
from .formatting import format_currency
from .identity import LocalIdentityProvider, greeting_name
from .view_state import CLOSED, DialogState

logger = logging.getLogger(__name__)

RECORD_KEYS = ("expenses", "budgets", "savings_goals", "transactions")
IDENTITY_KEY = "identity_provider"
MESSAGES_KEY = "assistant_messages"


def ensure_session_state(state: MutableMapping[str, Any], seed: Optional[Seed] = None) -> None:
    """Populate missing session keys from the shared seed data."""
    missing = [key for key in RECORD_KEYS if key not in state]
    if missing:
        seed = seed or load_seed()
        for key in missing:
            state[key] = getattr(seed, key)
        logger.debug("Seeded session keys %s", ", ".join(missing))
    if IDENTITY_KEY not in state:
        state[IDENTITY_KEY] = LocalIdentityProvider.from_config()
    if MESSAGES_KEY not in state:
        state[MESSAGES_KEY] = start_conversation()


DIALOG_PREFIX = "dialog_"


def dialog_key(noun: str) -> str:
    return f"{DIALOG_PREFIX}{noun}"


def get_dialog(state: MutableMapping[str, Any], noun: str) -> DialogState:
    return state.get(dialog_key(noun), CLOSED)


def set_dialog(state: MutableMapping[str, Any], noun: str, dialog: DialogState) -> None:
    state[dialog_key(noun)] = dialog


def close_dialog_for(state: MutableMapping[str, Any], noun: str, record_id: str) -> None:
    """Close the dialog for ``noun`` if it is editing ``record_id``."""
    dialog = get_dialog(state, noun)
    if dialog.is_editing and dialog.record_id == record_id:
        set_dialog(state, noun, dialog.close())


def reset_session(state: MutableMapping[str, Any], seed: Seed) -> None:
    """Restore the seed records, restart the assistant and close every dialog."""
    for key in RECORD_KEYS:
        state[key] = getattr(seed, key)
    state[MESSAGES_KEY] = start_conversation()
    for key in [k for k in state.keys() if str(k).startswith(DIALOG_PREFIX)]:
        state[key] = CLOSED
    logger.info("Session reset to sample data")


def rerun() -> None:
    """Trigger a rerun across Streamlit versions."""
    rerun_fn = getattr(st, "rerun", None) or getattr(st, "experimental_rerun", None)
    if rerun_fn is not None:
        rerun_fn()


def render_shared_sidebar() -> Dict[str, Any]:
    """Render shared sidebar elements available on all pages.

    Returns:
        Dict with keys: 'seed', 'user', 'today'
    """
    config.configure_logging()
    state = st.session_state
    seed = load_seed()
    ensure_session_state(state, seed)

    user = state[IDENTITY_KEY].get_current_user()
    st.sidebar.title("💰 Ledger")
    st.sidebar.caption(f"Welcome back, {greeting_name(user)}!")

    totals = aggregate(state["transactions"])
    st.sidebar.subheader("Snapshot")
    st.sidebar.metric("Balance", format_currency(totals.balance))
    st.sidebar.metric("Saved toward goals", format_currency(total_savings(state["savings_goals"])))

    if st.sidebar.button("↺ Reset sample data", help="Discard this session's changes"):
        reset_session(state, seed)
        st.sidebar.success("Sample data restored")

    return {
        "seed": seed,
        "user": user,
        "today": date.today(),
    }

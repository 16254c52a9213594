"""Main entry point for Streamlit multi-page app.

This file enables Streamlit's automatic page discovery.
Pages in the pages/ directory will automatically appear in the sidebar.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st

from ledger_dashboard.shared_sidebar import render_shared_sidebar


def main() -> None:
    st.set_page_config(page_title="Ledger Dashboard", page_icon="💰", layout="wide")
    sidebar = render_shared_sidebar()
    st.title("💰 Ledger Dashboard")
    st.markdown(
        "Track expenses, plan budgets, follow your savings goals and review reports. "
        "Pick a page from the sidebar to get started."
    )
    user = sidebar["user"]
    if user is None:
        st.info("You are browsing as a guest. Sign in from the Profile page to personalise the dashboard.")


if __name__ == "__main__":
    main()

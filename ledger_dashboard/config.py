"""Configuration management for the ledger dashboard.

This module centralizes all configuration values including paths,
shared category lists, thresholds, and environment variable overrides.
"""

from __future__ import annotations

import logging
import os
from decimal import Decimal
from pathlib import Path
from typing import List, Optional

# Package root - assumes this file is in ledger_dashboard/
_PACKAGE_ROOT = Path(__file__).parent.resolve()

# Data directories
DATA_DIR = Path(os.getenv("LEDGER_DATA_DIR", _PACKAGE_ROOT / "data")).resolve()
SEED_PATH = Path(os.getenv("LEDGER_SEED_PATH", DATA_DIR / "seed.json")).resolve()

# Shared category set. Every page and the validation layer read these lists.
EXPENSE_CATEGORIES: List[str] = [
    "Food & Dining",
    "Transportation",
    "Entertainment",
    "Utilities",
    "Rent & Housing",
    "Shopping",
    "Travel",
    "Health",
    "Education",
    "Other",
]
INCOME_CATEGORY = "Income"
SAVINGS_CATEGORY = "Savings"
TRANSACTION_CATEGORIES: List[str] = [INCOME_CATEGORY, *EXPENSE_CATEGORIES]

# Filter sentinel matching every category/type (compared case-insensitively)
ALL_SENTINEL = "all"

# Budgets at or above this share of their limit are flagged as a warning
WARNING_THRESHOLD = Decimal(os.getenv("LEDGER_WARNING_THRESHOLD", "0.80"))

# Local identity used when no external session provider is configured
DEFAULT_USER_NAME = os.getenv("LEDGER_USER_NAME", "Alex")
DEFAULT_USER_EMAIL = os.getenv("LEDGER_USER_EMAIL", "alex@example.com")

LOG_LEVEL = os.getenv("LEDGER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the app and scripts.

    Safe to call on every Streamlit rerun; handlers are only installed the
    first time.
    """
    root = logging.getLogger()
    root.setLevel(level or LOG_LEVEL)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def is_known_category(category: str, *, include_income: bool = False) -> bool:
    """Return True when ``category`` belongs to the shared category set."""
    allowed = TRANSACTION_CATEGORIES if include_income else EXPENSE_CATEGORIES
    return category in allowed


def get_seed_path() -> str:
    """Get the seed data path as a string."""
    return str(SEED_PATH)

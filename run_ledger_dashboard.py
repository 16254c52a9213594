#!/usr/bin/env python3
"""Direct launcher for the Ledger Dashboard.

This script launches Streamlit with the ledger_dashboard directory as the app root,
enabling automatic page discovery from the pages/ subdirectory.
"""

import os
import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()
dashboard_dir = project_root / "ledger_dashboard"

if __name__ == "__main__":
    # Streamlit discovers pages/ relative to the working directory
    os.chdir(dashboard_dir)
    raise SystemExit(subprocess.call([
        sys.executable, "-m", "streamlit", "run",
        "Home.py",
    ]))

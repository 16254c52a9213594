#!/usr/bin/env python3
"""Validate a seed JSON file through the same rules as the entry forms."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List, Tuple

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ledger_dashboard import config
from ledger_dashboard.errors import ValidationError
from ledger_dashboard.fixtures import read_seed_file
from ledger_dashboard.validation import build_budget, build_expense, build_goal, build_transaction

BUILDERS = {
    'expenses': build_expense,
    'budgets': build_budget,
    'savings_goals': build_goal,
    'transactions': build_transaction,
}


def validate_seed(data: Dict) -> List[Tuple[str, str, str]]:
    """Return (section, record id, message) for every invalid or duplicate record."""
    issues: List[Tuple[str, str, str]] = []
    for section, builder in BUILDERS.items():
        seen = set()
        for row in data.get(section, []):
            record_id = str(row.get('id', ''))
            if not record_id:
                issues.append((section, '?', 'missing id'))
                continue
            if record_id in seen:
                issues.append((section, record_id, 'duplicate id'))
            seen.add(record_id)
            try:
                builder(row, record_id)
            except ValidationError as exc:
                issues.append((section, record_id, f'{exc.field}: {exc}'))
    return issues


def main(path: Path | None = None) -> int:
    target = path or config.SEED_PATH
    try:
        data = read_seed_file(target)
    except FileNotFoundError as exc:
        print(exc)
        return 1

    issues = validate_seed(data)
    if issues:
        print("Seed validation failed:")
        for section, record_id, message in issues:
            print(f"  - {section}[{record_id}]: {message}")
        return 1

    print(f"Seed data at {target} validated successfully.")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Validate ledger seed data.')
    parser.add_argument('path', nargs='?', type=Path, default=None, help='Seed JSON file')
    args = parser.parse_args()
    raise SystemExit(main(args.path))

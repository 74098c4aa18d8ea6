"""
CSV export and import functionality for SpillPay
"""
from __future__ import annotations
import csv
from typing import List

from models import SplitOutcome


def export_outcome_to_csv(outcome: SplitOutcome, filepath: str) -> None:
    """
    Export a confirmed split to CSV file
    CSV columns: person, order, shared_portion, share
    """
    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(['person', 'order', 'shared_portion', 'share'])
        for s in outcome.shares or []:
            writer.writerow([
                s.label,
                s.participant.order,
                s.shared_portion,
                s.amount,
            ])


def import_names_from_csv(filepath: str) -> List[str]:
    """
    Import participant names from CSV file.
    Uses the 'person' or 'name' column when there is a header, otherwise the first column.
    """
    with open(filepath, 'r', newline='', encoding='utf-8-sig') as f:
        rows = [row for row in csv.reader(f) if row]

    if not rows:
        return []

    header = [c.strip().lower() for c in rows[0]]
    col = 0
    for key in ('person', 'name'):
        if key in header:
            col = header.index(key)
            rows = rows[1:]
            break

    return [row[col].strip() for row in rows if len(row) > col]

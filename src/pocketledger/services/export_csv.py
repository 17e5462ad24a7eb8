"""CSV export helpers for PocketLedger."""

from __future__ import annotations

import csv
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, Mapping

from ..models.expense import Expense

EXPENSE_HEADERS = ["id", "date", "amount", "description", "category_id", "category", "created_at"]


def _serialize_value(value):
    if value is None:
        return ""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def export_expenses_csv(
    *,
    expenses: Iterable[Expense],
    output_path: Path,
    category_names: Mapping[int, str] | None = None,
) -> Path:
    """Write expenses to CSV at `output_path`.

    Columns are deterministic: id, date, amount, description, category_id,
    category, created_at. ``category`` is resolved through ``category_names``
    and left blank when no lookup is given. Returns the path written.
    """

    lookup = category_names or {}
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(
            fh, fieldnames=EXPENSE_HEADERS, extrasaction="ignore", quoting=csv.QUOTE_MINIMAL
        )
        writer.writeheader()
        for expense in expenses:
            category_id = getattr(expense, "category_id", None)
            writer.writerow(
                {
                    "id": _serialize_value(getattr(expense, "id", None)),
                    "date": _serialize_value(getattr(expense, "date", None)),
                    "amount": _serialize_value(getattr(expense, "amount", None)),
                    "description": _serialize_value(getattr(expense, "description", None)),
                    "category_id": _serialize_value(category_id),
                    "category": lookup.get(category_id, "") if category_id is not None else "",
                    "created_at": _serialize_value(getattr(expense, "created_at", None)),
                }
            )

    return output_path

"""Expense repository protocol."""

from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from ...models.category import Category
from ...models.expense import Expense


class ExpenseRepository(Protocol):
    """Repository for recording expenses and aggregating their amounts."""

    def create(self, expense: Expense) -> Expense:
        """Create a new expense."""
        ...

    def list_all(self, limit: Optional[int] = None) -> list[Expense]:
        """List expenses, most recent first."""
        ...

    def filter_by_date_range(self, start_date: date, end_date: date) -> list[Expense]:
        """Get expenses dated within an inclusive range."""
        ...

    def filter_by_category(self, category_id: int) -> list[Expense]:
        """Get all expenses for a specific category."""
        ...

    def total_amount(self) -> float:
        """Sum every expense amount; zero when there are none."""
        ...

    def category_totals(self) -> list[tuple[Category, float]]:
        """Per-category totals including categories without expenses."""
        ...

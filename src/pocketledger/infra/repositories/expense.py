"""SQLModel implementation of Expense repository."""

from __future__ import annotations

from datetime import date
from typing import Callable, ContextManager, Optional

from sqlalchemy import func
from sqlmodel import Session, select

from ...models.category import Category
from ...models.expense import Expense

# Most recent first; created_at and id break ties between same-day expenses
_NEWEST_FIRST = (
    Expense.date.desc(),  # type: ignore[attr-defined]
    Expense.created_at.desc(),  # type: ignore[attr-defined]
    Expense.id.desc(),  # type: ignore[union-attr]
)


class SQLModelExpenseRepository:
    """SQLModel-based expense repository implementation."""

    def __init__(self, session_factory: Callable[[], ContextManager[Session]]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def create(self, expense: Expense) -> Expense:
        """Create a new expense."""
        with self.session_factory() as session:
            session.add(expense)
            session.commit()
            session.refresh(expense)
            session.expunge(expense)
            return expense

    def list_all(self, limit: Optional[int] = None) -> list[Expense]:
        """List expenses, most recent first, optionally capped at ``limit`` rows."""
        with self.session_factory() as session:
            statement = select(Expense).order_by(*_NEWEST_FIRST)
            if limit is not None:
                statement = statement.limit(limit)
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def filter_by_date_range(self, start_date: date, end_date: date) -> list[Expense]:
        """Get expenses with ``start_date <= date <= end_date``."""
        with self.session_factory() as session:
            statement = (
                select(Expense)
                .where(Expense.date >= start_date)
                .where(Expense.date <= end_date)
                .order_by(*_NEWEST_FIRST)
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def filter_by_category(self, category_id: int) -> list[Expense]:
        """Get all expenses for a specific category."""
        with self.session_factory() as session:
            statement = (
                select(Expense)
                .where(Expense.category_id == category_id)
                .order_by(*_NEWEST_FIRST)
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def total_amount(self) -> float:
        """Sum every expense amount; zero when there are none."""
        with self.session_factory() as session:
            total = session.exec(select(func.coalesce(func.sum(Expense.amount), 0.0))).one()
            return float(total or 0.0)

    def category_totals(self) -> list[tuple[Category, float]]:
        """Left-outer aggregate so categories without expenses report 0."""
        with self.session_factory() as session:
            total = func.coalesce(func.sum(Expense.amount), 0.0).label("total")
            statement = (
                select(Category, total)
                .outerjoin(Expense, Expense.category_id == Category.id)  # type: ignore[arg-type]
                .group_by(Category.id)
                .order_by(total.desc(), Category.id)  # type: ignore[arg-type]
            )
            rows = [
                (category, float(amount or 0.0))
                for category, amount in session.exec(statement).all()
            ]
            session.expunge_all()
            return rows

"""SQLModel implementation of Category repository."""

from __future__ import annotations

from typing import Callable, ContextManager, Iterable

from sqlalchemy import func
from sqlmodel import Session, select

from ...models.category import Category


class SQLModelCategoryRepository:
    """SQLModel-based category repository implementation."""

    def __init__(self, session_factory: Callable[[], ContextManager[Session]]):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def list_all(self) -> list[Category]:
        """List all categories ordered by name."""
        with self.session_factory() as session:
            statement = select(Category).order_by(Category.name, Category.id)  # type: ignore
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def count(self) -> int:
        """Return the number of stored categories."""
        with self.session_factory() as session:
            return int(session.exec(select(func.count()).select_from(Category)).one())

    def create(self, category: Category) -> Category:
        """Create a new category."""
        with self.session_factory() as session:
            session.add(category)
            session.commit()
            session.refresh(category)
            session.expunge(category)
            return category

    def create_many(self, categories: Iterable[Category]) -> list[Category]:
        """Insert several categories in one transaction; none are kept on failure."""
        with self.session_factory() as session:
            rows = list(categories)
            session.add_all(rows)
            session.commit()
            session.expunge_all()
            return rows

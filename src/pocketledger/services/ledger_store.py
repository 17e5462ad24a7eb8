"""Ledger store: schema setup, expense recording and spending aggregates."""

from __future__ import annotations

import calendar
import threading
from datetime import date
from decimal import Decimal
from typing import Callable, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from ..config import BaseConfig
from ..constants.categories import DEFAULT_CATEGORIES
from ..domain.repositories import CategoryRepository, ExpenseRepository
from ..errors import ConstraintViolation, NotInitialized, StorageUnavailable
from ..infra.database import create_db_engine, create_session_factory, init_database
from ..infra.repositories import SQLModelCategoryRepository, SQLModelExpenseRepository
from ..logging_config import get_logger
from ..models.category import Category
from ..models.expense import Expense
from ..models.summary import CategorySummary
from .money import to_money

logger = get_logger("services.ledger_store")


def month_bounds(today: date) -> tuple[date, date]:
    """Return the first and last calendar day of ``today``'s month."""

    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)


class LedgerStore:
    """Owns the local categories/expenses database.

    Construct one per application, call :meth:`initialize` at startup and pass
    the instance to whatever needs it. Writes are serialized with a lock; reads
    are not.
    """

    def __init__(
        self,
        config: BaseConfig | None = None,
        *,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.config = config or BaseConfig()
        self._clock = clock
        self._write_lock = threading.Lock()
        self._engine: Engine | None = None
        self._categories: CategoryRepository | None = None
        self._expenses: ExpenseRepository | None = None

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    # ------------------------------------------------------------------ lifecycle

    def initialize(self) -> None:
        """Create the schema and seed default categories into an empty table.

        Safe to call on every start; a second call never duplicates seeds.
        Raises StorageUnavailable when the database cannot be opened.
        """

        with self._write_lock:
            engine = self._engine
            try:
                if engine is None:
                    engine = create_db_engine(self.config)
                init_database(engine)
                categories = SQLModelCategoryRepository(create_session_factory(engine))
                seeded = self._seed_default_categories(categories)
            except (SQLAlchemyError, OSError) as exc:
                logger.exception(
                    "Could not open ledger database",
                    extra={"database_url": self.config.DATABASE_URL},
                )
                if engine is not None and engine is not self._engine:
                    engine.dispose()
                raise StorageUnavailable(
                    f"Could not open the ledger database at {self.config.DATABASE_URL}."
                ) from exc

            self._engine = engine
            self._categories = categories
            self._expenses = SQLModelExpenseRepository(create_session_factory(engine))

        logger.info(
            "Ledger store initialized",
            extra={"database_url": self.config.DATABASE_URL, "seeded_categories": seeded},
        )

    def close(self) -> None:
        """Dispose the engine; later calls raise NotInitialized until re-initialized."""

        with self._write_lock:
            if self._engine is not None:
                self._engine.dispose()
                logger.info("Ledger store closed")
            self._engine = None
            self._categories = None
            self._expenses = None

    def __enter__(self) -> "LedgerStore":
        self.initialize()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def _seed_default_categories(repo: CategoryRepository) -> int:
        if repo.count() > 0:
            return 0
        repo.create_many(
            Category(name=seed.name, color=seed.color, icon=seed.icon)
            for seed in DEFAULT_CATEGORIES
        )
        return len(DEFAULT_CATEGORIES)

    def _category_repo(self, operation: str) -> CategoryRepository:
        if self._categories is None:
            logger.error("Ledger store used before initialize()", extra={"operation": operation})
            raise NotInitialized(operation)
        return self._categories

    def _expense_repo(self, operation: str) -> ExpenseRepository:
        if self._expenses is None:
            logger.error("Ledger store used before initialize()", extra={"operation": operation})
            raise NotInitialized(operation)
        return self._expenses

    # ------------------------------------------------------------------ writes

    def add_category(self, name: str, color: str, icon: str) -> int:
        """Insert a category and return its id. Names need not be unique."""

        repo = self._category_repo("add_category")
        with self._write_lock:
            try:
                category = repo.create(Category(name=name, color=color, icon=icon))
            except IntegrityError as exc:
                logger.warning("Category rejected by schema", extra={"category_name": name})
                raise ConstraintViolation("Category could not be saved.") from exc
            except OperationalError as exc:
                logger.exception("Category write failed", extra={"category_name": name})
                raise StorageUnavailable("The ledger database is not writable right now.") from exc
        logger.info("Category added", extra={"category_id": category.id})
        return int(category.id)  # type: ignore[arg-type]

    def add_expense(
        self,
        amount: float | Decimal,
        description: str,
        category_id: int,
        date: date,
    ) -> int:
        """Insert an expense dated ``date`` and return its id.

        The amount is rounded to whole cents before it is stored. Input is
        otherwise trusted; an unknown ``category_id`` surfaces as ConstraintViolation.
        """

        repo = self._expense_repo("add_expense")
        expense = Expense(
            amount=float(to_money(amount)),
            description=description,
            category_id=category_id,
            date=date,
        )
        with self._write_lock:
            try:
                expense = repo.create(expense)
            except IntegrityError as exc:
                logger.warning(
                    "Expense rejected by schema",
                    extra={"category_id": category_id},
                )
                raise ConstraintViolation("Expense could not be saved.") from exc
            except OperationalError as exc:
                logger.exception("Expense write failed", extra={"category_id": category_id})
                raise StorageUnavailable("The ledger database is not writable right now.") from exc
        logger.info(
            "Expense added",
            extra={"expense_id": expense.id, "category_id": category_id},
        )
        return int(expense.id)  # type: ignore[arg-type]

    # ------------------------------------------------------------------ reads

    def list_categories(self) -> list[Category]:
        """All categories sorted by name."""
        return self._category_repo("list_categories").list_all()

    def list_expenses(self, limit: Optional[int] = None) -> list[Expense]:
        """Expenses newest first; at most ``limit`` rows when given."""

        if limit is not None and limit < 0:
            raise ValueError("limit must be zero or greater.")
        rows = self._expense_repo("list_expenses").list_all(limit=limit)
        logger.debug("Listed expenses", extra={"limit": limit, "count": len(rows)})
        return rows

    def list_expenses_by_date_range(self, start: date, end: date) -> list[Expense]:
        """Expenses dated between ``start`` and ``end``, both inclusive."""
        return self._expense_repo("list_expenses_by_date_range").filter_by_date_range(start, end)

    def list_expenses_by_category(self, category_id: int) -> list[Expense]:
        return self._expense_repo("list_expenses_by_category").filter_by_category(category_id)

    def total_expenses(self) -> Decimal:
        """Sum of every expense; ``Decimal("0.00")`` for an empty ledger."""
        return to_money(self._expense_repo("total_expenses").total_amount())

    def current_month_expenses(self) -> list[Expense]:
        """Expenses dated inside the clock's current calendar month."""

        self._expense_repo("current_month_expenses")
        start, end = month_bounds(self._clock())
        return self.list_expenses_by_date_range(start, end)

    def category_summary(self) -> list[CategorySummary]:
        """Every category with its total, largest first; unused ones total 0."""

        rows = self._expense_repo("category_summary").category_totals()
        return [
            CategorySummary(category=category, total=to_money(total))
            for category, total in rows
        ]

"""SQLModel definitions for recorded expenses."""

from __future__ import annotations

import datetime as dt
from typing import Any, ClassVar, Optional

from sqlalchemy import func
from sqlmodel import Field, SQLModel


class Expense(SQLModel, table=True):
    """A single dated outflow attributed to one category.

    ``date`` is the effective date chosen by the user; ``created_at`` is when
    the row was written and only breaks ordering ties.
    """

    __tablename__: ClassVar[str] = "expenses"
    __table_args__: ClassVar[dict[str, Any]] = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    amount: float = Field(nullable=False)
    description: str = Field(nullable=False)
    category_id: int = Field(foreign_key="categories.id", nullable=False, index=True)
    date: dt.date = Field(nullable=False, index=True)
    created_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.timezone.utc),
        nullable=False,
        sa_column_kwargs={"server_default": func.current_timestamp()},
    )

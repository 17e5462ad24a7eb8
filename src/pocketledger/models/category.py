"""Expense category definitions."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, ClassVar, Optional

from sqlalchemy import func
from sqlmodel import Field, SQLModel


class Category(SQLModel, table=True):
    """Spending bucket with a display color and icon.

    ``color`` and ``icon`` are opaque to the store and only carried for rendering.
    """

    __tablename__: ClassVar[str] = "categories"
    __table_args__: ClassVar[dict[str, Any]] = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, index=True)
    color: str = Field(nullable=False)
    icon: str = Field(nullable=False)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        nullable=False,
        sa_column_kwargs={"server_default": func.current_timestamp()},
    )

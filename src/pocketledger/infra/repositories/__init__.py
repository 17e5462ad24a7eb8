"""SQLModel repository implementations."""

from .category import SQLModelCategoryRepository
from .expense import SQLModelExpenseRepository

__all__ = [
    "SQLModelCategoryRepository",
    "SQLModelExpenseRepository",
]

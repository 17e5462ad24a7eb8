"""Repository protocol definitions for domain layer."""

from .category import CategoryRepository
from .expense import ExpenseRepository

__all__ = [
    "CategoryRepository",
    "ExpenseRepository",
]

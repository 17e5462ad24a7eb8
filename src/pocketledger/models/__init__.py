"""SQLModel table exports."""

from .category import Category
from .expense import Expense
from .summary import CategoryShare, CategorySummary

__all__ = [
    "Category",
    "CategoryShare",
    "CategorySummary",
    "Expense",
]

"""Plain records returned by the aggregation queries."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .category import Category


@dataclass(frozen=True)
class CategorySummary:
    """Total spent in one category; ``total`` is zero for unused categories."""

    category: Category
    total: Decimal


@dataclass(frozen=True)
class CategoryShare:
    """A non-empty category's total and its share of the grand total, in percent."""

    category: Category
    total: Decimal
    percentage: float

"""Spending breakdown helpers built on top of the ledger store aggregates."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Optional

from ..models.summary import CategoryShare, CategorySummary
from .money import ZERO, sum_money, to_money

if TYPE_CHECKING:  # pragma: no cover
    from .ledger_store import LedgerStore


def category_breakdown(
    summary: Iterable[CategorySummary], top_n: Optional[int] = None
) -> list[CategoryShare]:
    """Turn per-category totals into percentage shares.

    Categories with a zero total are dropped; they add nothing to the grand
    total, so the remaining percentages add up to 100. When the grand total
    is zero every percentage is zero. Rows are ordered by total
    descending and truncated to ``top_n`` when given; the percentages are always
    relative to the grand total of *all* categories.
    """

    rows = list(summary)
    grand_total = sum_money(row.total for row in rows)
    shares = [
        CategoryShare(
            category=row.category,
            total=to_money(row.total),
            percentage=(
                float(Decimal(row.total) * 100 / grand_total) if grand_total > 0 else 0.0
            ),
        )
        for row in rows
        if row.total > 0
    ]
    shares.sort(key=lambda share: share.total, reverse=True)
    if top_n is not None:
        shares = shares[: max(0, top_n)]
    return shares


@dataclass
class Dashboard:
    """Figures behind the summary screen."""

    total: Decimal = ZERO
    month_total: Decimal = ZERO
    month_count: int = 0
    breakdown: list[CategoryShare] = field(default_factory=list)


def build_dashboard(store: "LedgerStore", top_n: Optional[int] = None) -> Dashboard:
    """Collect the overall total, this month's spending and the top categories.

    ``top_n`` defaults to the store config's ``SUMMARY_TOP_N``.
    """

    limit = top_n if top_n is not None else store.config.SUMMARY_TOP_N
    month = store.current_month_expenses()
    return Dashboard(
        total=store.total_expenses(),
        month_total=sum_money(expense.amount for expense in month),
        month_count=len(month),
        breakdown=category_breakdown(store.category_summary(), top_n=limit),
    )

"""Demo expense seeding for trying the app with realistic-looking data."""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from ..logging_config import get_logger
from .money import ZERO, to_money

if TYPE_CHECKING:  # pragma: no cover
    from .ledger_store import LedgerStore

logger = get_logger("services.demo_seed")

# Sample descriptions and amount ranges keyed by seeded category name
_DEMO_EXPENSES: dict[str, tuple[tuple[str, ...], tuple[float, float]]] = {
    "Alimentación": (("Supermercado", "Panadería", "Cena fuera", "Mercado"), (4.0, 85.0)),
    "Transporte": (("Gasolina", "Metro", "Taxi", "Parking"), (1.5, 60.0)),
    "Entretenimiento": (("Cine", "Concierto", "Suscripción streaming"), (8.0, 45.0)),
    "Salud": (("Farmacia", "Dentista"), (5.0, 120.0)),
    "Compras": (("Ropa", "Electrónica", "Regalos"), (10.0, 150.0)),
    "Hogar": (("Luz", "Agua", "Internet", "Limpieza"), (15.0, 90.0)),
    "Educación": (("Libros", "Curso online"), (9.0, 70.0)),
    "Otros": (("Varios",), (2.0, 30.0)),
}
_FALLBACK = (("Gasto",), (1.0, 50.0))


@dataclass
class SeedSummary:
    """What a demo seed run inserted."""

    expenses: int = 0
    total: Decimal = ZERO


def _shift_month(anchor: date, months_back: int) -> tuple[int, int]:
    index = anchor.year * 12 + (anchor.month - 1) - months_back
    return index // 12, index % 12 + 1


def seed_demo_expenses(
    store: "LedgerStore",
    *,
    months: int = 3,
    per_month: int = 8,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> SeedSummary:
    """Insert ``per_month`` random expenses for each of the last ``months`` months.

    Expenses are spread over the existing categories; the current month only
    receives dates up to ``today``. Pass a seeded ``rng`` for repeatable data.
    """

    if months <= 0 or per_month <= 0:
        raise ValueError("months and per_month must be greater than zero.")

    rng = rng or random.Random()
    anchor = today or date.today()
    categories = store.list_categories()
    if not categories:
        raise ValueError("Ledger has no categories to attach demo expenses to.")

    summary = SeedSummary()
    for months_back in range(months):
        year, month = _shift_month(anchor, months_back)
        last_day = anchor.day if months_back == 0 else 28
        for _ in range(per_month):
            category = rng.choice(categories)
            descriptions, (low, high) = _DEMO_EXPENSES.get(category.name, _FALLBACK)
            amount = to_money(rng.uniform(low, high))
            store.add_expense(
                amount=amount,
                description=rng.choice(descriptions),
                category_id=category.id,  # type: ignore[arg-type]
                date=date(year, month, rng.randint(1, last_day)),
            )
            summary.expenses += 1
            summary.total += amount

    logger.info(
        "Demo expenses seeded",
        extra={"expenses": summary.expenses, "total": str(summary.total)},
    )
    return summary

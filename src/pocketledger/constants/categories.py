"""
Default categories seeded into an empty ledger.
Order matters: categories are inserted in this order on first initialization.
"""

from __future__ import annotations

from typing import NamedTuple


class SeedCategory(NamedTuple):
    name: str
    color: str
    icon: str


DEFAULT_CATEGORIES: tuple[SeedCategory, ...] = (
    SeedCategory("Alimentación", "#ff6b6b", "🍕"),
    SeedCategory("Transporte", "#4ecdc4", "🚗"),
    SeedCategory("Entretenimiento", "#45b7d1", "🎬"),
    SeedCategory("Salud", "#96ceb4", "🏥"),
    SeedCategory("Compras", "#feca57", "🛒"),
    SeedCategory("Hogar", "#ff9ff3", "🏠"),
    SeedCategory("Educación", "#54a0ff", "📚"),
    SeedCategory("Otros", "#ddd", "📦"),
)

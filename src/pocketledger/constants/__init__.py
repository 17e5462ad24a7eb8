"""Static data shared across PocketLedger."""

from .categories import DEFAULT_CATEGORIES, SeedCategory

__all__ = ["DEFAULT_CATEGORIES", "SeedCategory"]

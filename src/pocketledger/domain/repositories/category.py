"""Category repository protocol."""

from __future__ import annotations

from typing import Iterable, Protocol

from ...models.category import Category


class CategoryRepository(Protocol):
    """Repository for managing category entities."""

    def list_all(self) -> list[Category]:
        """List all categories ordered by name."""
        ...

    def count(self) -> int:
        """Return the number of stored categories."""
        ...

    def create(self, category: Category) -> Category:
        """Create a new category."""
        ...

    def create_many(self, categories: Iterable[Category]) -> list[Category]:
        """Create several categories atomically."""
        ...

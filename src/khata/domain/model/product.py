"""Product entity.

Products form the shop's price list. Only price and category are
tracked; stock levels are out of scope.
"""

from __future__ import annotations

from dataclasses import dataclass

from khata.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog. Immutable once created."""

    id: str
    name: str
    price: Money
    category: str = ""

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on name or category."""
        needle = term.lower()
        return needle in self.name.lower() or needle in self.category.lower()

"""Application service: Search Products use case (query)."""

from __future__ import annotations

from khata.application.store import LedgerStore
from khata.domain.model.product import Product


class SearchProductsHandler:

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def handle(self, term: str = "") -> list[Product]:
        """Return products whose name or category contains *term*.

        A blank term returns the whole catalog in insertion order.
        """
        term = (term or "").strip()
        products = self._store.state.products
        if not term:
            return list(products)
        return [p for p in products if p.matches(term)]

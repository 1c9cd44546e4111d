"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

from khata.application.store import LedgerStore
from khata.domain.model.actions import AddProduct
from khata.domain.model.product import Product
from khata.domain.service.validation import parse_name, parse_price, require


class AddProductHandler:

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def handle(self, name: str, price: str | Decimal, category: str = "") -> Product:
        """Add a new product to the catalog.

        Duplicate names are allowed; every product gets its own id.
        """
        action = AddProduct(
            name=require(parse_name(name, "Product name")),
            price=require(parse_price(price)),
            category=(category or "").strip(),
        )
        self._store.dispatch(action)
        return action.build()

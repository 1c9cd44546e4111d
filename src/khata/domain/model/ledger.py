"""LedgerState aggregate: the whole shop in one value.

The state is never mutated. Every change produces a new LedgerState via
``khata.domain.service.reducer.reduce`` and the store persists it whole.
"""

from __future__ import annotations

from dataclasses import dataclass

from khata.domain.model.customer import Customer
from khata.domain.model.product import Product
from khata.domain.model.transaction import Transaction


@dataclass(frozen=True)
class LedgerState:
    """Aggregate root for products, customers and transactions.

    ``transactions`` is ordered most-recent-first.
    """

    products: tuple[Product, ...] = ()
    customers: tuple[Customer, ...] = ()
    transactions: tuple[Transaction, ...] = ()

    def find_customer(self, customer_id: str) -> Customer | None:
        for customer in self.customers:
            if customer.id == customer_id:
                return customer
        return None

    def transactions_for(self, customer_id: str) -> list[Transaction]:
        return [t for t in self.transactions if t.customer_id == customer_id]

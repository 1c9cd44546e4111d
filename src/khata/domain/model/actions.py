"""Actions: the only ways the ledger can change.

Each action carries everything the reducer needs, including the id and
timestamp of the entity it will create, so that applying it is a pure
function of (state, action).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from khata.domain.model.customer import Customer
from khata.domain.model.identifiers import new_id, utc_now
from khata.domain.model.product import Product
from khata.domain.model.transaction import Transaction, TransactionType
from khata.domain.model.value_objects import Money


@dataclass(frozen=True)
class AddProduct:
    name: str
    price: Money
    category: str = ""
    product_id: str = field(default_factory=new_id)

    def build(self) -> Product:
        return Product(
            id=self.product_id,
            name=self.name,
            price=self.price,
            category=self.category,
        )


@dataclass(frozen=True)
class AddCustomer:
    name: str
    phone: str
    customer_id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=utc_now)

    def build(self) -> Customer:
        return Customer(
            id=self.customer_id,
            name=self.name,
            phone=self.phone,
            outstanding_balance=Money.zero(),
            last_updated=self.created_at,
        )


@dataclass(frozen=True)
class RecordTransaction:
    customer_id: str
    type: TransactionType
    amount: Money
    description: str
    transaction_id: str = field(default_factory=new_id)
    timestamp: datetime = field(default_factory=utc_now)

    def build(self) -> Transaction:
        return Transaction(
            id=self.transaction_id,
            customer_id=self.customer_id,
            amount=self.amount,
            type=self.type,
            description=self.description,
            timestamp=self.timestamp,
        )


Action = AddProduct | AddCustomer | RecordTransaction

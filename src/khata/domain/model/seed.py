"""Seed state used on first run or when the saved snapshot is unreadable."""

from __future__ import annotations

from khata.domain.model.customer import Customer
from khata.domain.model.identifiers import utc_now
from khata.domain.model.ledger import LedgerState
from khata.domain.model.product import Product
from khata.domain.model.value_objects import Money


def seed_state() -> LedgerState:
    now = utc_now()
    return LedgerState(
        products=(
            Product(id="1", name="Basmati Rice 1kg", price=Money.of(120), category="Grains"),
            Product(id="2", name="Tata Salt 1kg", price=Money.of(25), category="Spices"),
            Product(id="3", name="Fortune Oil 1L", price=Money.of(185), category="Essentials"),
        ),
        customers=(
            Customer(
                id="c1",
                name="Rahul Sharma",
                phone="9876543210",
                outstanding_balance=Money.of(450),
                last_updated=now,
            ),
            Customer(
                id="c2",
                name="Priya Verma",
                phone="9123456780",
                outstanding_balance=Money.zero(),
                last_updated=now,
            ),
        ),
        transactions=(),
    )

"""Application service: Add Customer use case."""

from __future__ import annotations

from khata.application.store import LedgerStore
from khata.domain.model.actions import AddCustomer
from khata.domain.model.customer import Customer
from khata.domain.service.validation import parse_name, require


class AddCustomerHandler:

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def handle(self, name: str, phone: str) -> Customer:
        """Open a new khata with a zero balance."""
        action = AddCustomer(
            name=require(parse_name(name, "Customer name")),
            phone=require(parse_name(phone, "Phone number")),
        )
        self._store.dispatch(action)
        return action.build()

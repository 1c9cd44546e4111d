"""Application service: customer list and khata queries."""

from __future__ import annotations

from khata.application.dto import CustomerLedgerDTO, CustomerSummaryDTO
from khata.application.mapping import to_customer_dto, to_transaction_dto
from khata.application.store import LedgerStore
from khata.domain.exceptions import EntityNotFoundError


class ListCustomersHandler:

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def handle(self) -> list[CustomerSummaryDTO]:
        return [to_customer_dto(c) for c in self._store.state.customers]


class ShowCustomerLedgerHandler:

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def handle(self, customer_id: str) -> CustomerLedgerDTO:
        state = self._store.state
        customer = state.find_customer(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer '{customer_id}' not found")
        return CustomerLedgerDTO(
            customer=to_customer_dto(customer),
            transactions=[
                to_transaction_dto(state, t)
                for t in state.transactions_for(customer_id)
            ],
        )

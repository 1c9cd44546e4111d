"""Application service: Show Dashboard use case (query)."""

from __future__ import annotations

from khata.application.dto import DashboardDTO
from khata.application.mapping import to_customer_dto, to_transaction_dto
from khata.application.store import LedgerStore
from khata.domain.model.value_objects import Money

RECENT_TRANSACTION_LIMIT = 5
TOP_DEBTOR_LIMIT = 5


class ShowDashboardHandler:

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def handle(self) -> DashboardDTO:
        state = self._store.state
        debtors = sorted(
            (c for c in state.customers if c.has_dues),
            key=lambda c: c.outstanding_balance.amount,
            reverse=True,
        )
        return DashboardDTO(
            total_credit=str(Money.total([c.outstanding_balance for c in state.customers])),
            customer_count=len(state.customers),
            product_count=len(state.products),
            recent_transactions=[
                to_transaction_dto(state, t)
                for t in state.transactions[:RECENT_TRANSACTION_LIMIT]
            ],
            top_debtors=[to_customer_dto(c) for c in debtors[:TOP_DEBTOR_LIMIT]],
        )

"""Application service: Record Transaction use case.

Posts a purchase (credit given) or a payment (money received) to a
customer's khata. The balance rule itself lives in ``Customer.apply``.
"""

from __future__ import annotations

from decimal import Decimal

from khata.application.store import LedgerStore
from khata.domain.model.actions import RecordTransaction
from khata.domain.model.transaction import Transaction, TransactionType
from khata.domain.service.validation import (
    parse_amount,
    parse_transaction_type,
    require,
)
from khata.logging import get_logger

log = get_logger("record-transaction")


class RecordTransactionHandler:

    def __init__(self, store: LedgerStore) -> None:
        self._store = store

    def handle(
        self,
        customer_id: str,
        type: str | TransactionType,
        amount: str | Decimal,
        description: str | None = None,
    ) -> Transaction:
        """Record a transaction and update the customer's balance.

        An unknown ``customer_id`` is not an error: the transaction is
        still recorded and no balance changes.
        """
        if not isinstance(type, TransactionType):
            type = require(parse_transaction_type(type))
        money = require(parse_amount(amount))
        text = (description or "").strip() or type.default_description

        if self._store.state.find_customer(customer_id) is None:
            log.warning(
                "Recording %s for unknown customer %r; no balance will change",
                type.value, customer_id,
            )

        action = RecordTransaction(
            customer_id=customer_id,
            type=type,
            amount=money,
            description=text,
        )
        self._store.dispatch(action)
        return action.build()

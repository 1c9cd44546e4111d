"""Domain service: the ledger reducer.

``reduce(state, action)`` is the single place where ledger arithmetic
lives. It is pure: no clock, no id generation, no I/O. Those are done
when the action is built (see ``khata.domain.model.actions``).
"""

from __future__ import annotations

import dataclasses

from khata.domain.model.actions import (
    Action,
    AddCustomer,
    AddProduct,
    RecordTransaction,
)
from khata.domain.model.ledger import LedgerState


def reduce(state: LedgerState, action: Action) -> LedgerState:
    """Return the state that results from applying *action* to *state*."""
    if isinstance(action, AddProduct):
        return _add_product(state, action)
    if isinstance(action, AddCustomer):
        return _add_customer(state, action)
    if isinstance(action, RecordTransaction):
        return _record_transaction(state, action)
    raise TypeError(f"Unknown action: {type(action).__name__}")


def _add_product(state: LedgerState, action: AddProduct) -> LedgerState:
    return dataclasses.replace(state, products=state.products + (action.build(),))


def _add_customer(state: LedgerState, action: AddCustomer) -> LedgerState:
    return dataclasses.replace(state, customers=state.customers + (action.build(),))


def _record_transaction(state: LedgerState, action: RecordTransaction) -> LedgerState:
    """Prepend the transaction and post it to the matching customer.

    If no customer has ``action.customer_id`` the transaction is still
    recorded and every balance is left untouched.
    """
    transaction = action.build()
    customers = tuple(
        c.apply(transaction) if c.id == transaction.customer_id else c
        for c in state.customers
    )
    return dataclasses.replace(
        state,
        customers=customers,
        transactions=(transaction,) + state.transactions,
    )

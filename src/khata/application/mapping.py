"""Domain -> DTO mapping shared by the query handlers."""

from __future__ import annotations

from khata.application.dto import CustomerSummaryDTO, TransactionDTO
from khata.domain.model.customer import Customer
from khata.domain.model.ledger import LedgerState
from khata.domain.model.transaction import Transaction

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


def to_customer_dto(customer: Customer) -> CustomerSummaryDTO:
    return CustomerSummaryDTO(
        id=customer.id,
        name=customer.name,
        phone=customer.phone,
        outstanding_balance=str(customer.outstanding_balance),
        last_updated=customer.last_updated.strftime(TIMESTAMP_FORMAT),
    )


def to_transaction_dto(state: LedgerState, transaction: Transaction) -> TransactionDTO:
    customer = state.find_customer(transaction.customer_id)
    return TransactionDTO(
        id=transaction.id,
        customer_id=transaction.customer_id,
        customer_name=customer.name if customer is not None else "?",
        type=transaction.type.value,
        amount=str(transaction.amount),
        description=transaction.description,
        timestamp=transaction.timestamp.strftime(TIMESTAMP_FORMAT),
    )

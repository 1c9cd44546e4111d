"""Transaction entity, one line in a customer's khata."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from khata.domain.model.value_objects import Money


class TransactionType(Enum):
    PURCHASE = "PURCHASE"  # goods taken on credit, balance goes up
    PAYMENT = "PAYMENT"  # money received, balance goes down

    @property
    def default_description(self) -> str:
        if self is TransactionType.PURCHASE:
            return "New Purchase"
        return "Payment Received"


@dataclass(frozen=True)
class Transaction:
    """An immutable ledger entry.

    ``customer_id`` referred to an existing customer when the entry was
    recorded. Nothing re-checks that afterwards; customers cannot be
    deleted, so the reference cannot dangle today.
    """

    id: str
    customer_id: str
    amount: Money
    type: TransactionType
    description: str
    timestamp: datetime

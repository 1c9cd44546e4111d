"""Customer entity and the balance rule.

A customer's outstanding balance (udhaar) is the only running total in
the system. Purchases raise it, payments lower it, and it never goes
below zero.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime

from khata.domain.model.transaction import Transaction, TransactionType
from khata.domain.model.value_objects import Money


@dataclass(frozen=True)
class Customer:
    """A customer account.

    Invariants:
    - ``outstanding_balance`` is always >= 0 (guaranteed by ``Money``)
    - balance and ``last_updated`` only change through ``apply()``
    """

    id: str
    name: str
    phone: str
    outstanding_balance: Money
    last_updated: datetime

    @property
    def has_dues(self) -> bool:
        return not self.outstanding_balance.is_zero

    def apply(self, transaction: Transaction) -> Customer:
        """Return a copy of this customer with *transaction* posted.

        Payments larger than the balance are absorbed: the balance is
        clamped at zero instead of turning into store credit.
        """
        if transaction.type is TransactionType.PURCHASE:
            balance = self.outstanding_balance + transaction.amount
        else:
            balance = self.outstanding_balance.deduct(transaction.amount)
        return dataclasses.replace(
            self,
            outstanding_balance=balance,
            last_updated=transaction.timestamp,
        )

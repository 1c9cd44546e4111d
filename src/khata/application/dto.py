"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money values are
pre-formatted strings, e.g. "₹120".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TransactionDTO:
    id: str
    customer_id: str
    customer_name: str  # "?" when the customer no longer resolves
    type: str
    amount: str
    description: str
    timestamp: str


@dataclass(frozen=True)
class CustomerSummaryDTO:
    id: str
    name: str
    phone: str
    outstanding_balance: str
    last_updated: str


@dataclass(frozen=True)
class CustomerLedgerDTO:
    """Output: a customer's khata, newest entry first."""

    customer: CustomerSummaryDTO
    transactions: list[TransactionDTO]


@dataclass(frozen=True)
class DashboardDTO:
    total_credit: str
    customer_count: int
    product_count: int
    recent_transactions: list[TransactionDTO]
    top_debtors: list[CustomerSummaryDTO]


@dataclass(frozen=True)
class ReceiptDraft:
    """A suggested purchase built from a scanned bill.

    Nothing is recorded until the user confirms the draft.
    """

    amount: str  # plain decimal, e.g. "145.50", ready to feed back as input
    description: str
    item_count: int

"""JSON snapshot implementation of LedgerRepository.

The whole ledger is stored as one JSON document under a single key.
Field names follow the browser app's ``kirana_data`` blob so an
exported snapshot from it loads unchanged: camelCase keys, epoch
millisecond timestamps. Snapshots written here use decimal strings for
money and ISO-8601 timestamps; the reader accepts both forms.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from khata.domain.exceptions import ValidationError
from khata.domain.model.customer import Customer
from khata.domain.model.ledger import LedgerState
from khata.domain.model.product import Product
from khata.domain.model.transaction import Transaction, TransactionType
from khata.domain.model.value_objects import Money
from khata.domain.repository.ledger_repository import LedgerRepository
from khata.infrastructure.persistence.key_value_store import FileKeyValueStore
from khata.logging import get_logger

log = get_logger("persistence")

# Earlier builds used other keys; nothing is migrated from them.
STORAGE_KEY = "kirana_data"


class JsonLedgerRepository(LedgerRepository):

    def __init__(self, store: FileKeyValueStore, key: str = STORAGE_KEY) -> None:
        self._store = store
        self._key = key

    # --- LedgerRepository interface -------------------------------------------

    def load(self) -> LedgerState | None:
        try:
            text = self._store.get(self._key)
            if text is None:
                return None
            return self._to_domain(json.loads(text))
        except (
            OSError, ValueError, TypeError, KeyError, AttributeError,
            InvalidOperation, OverflowError, ValidationError,
        ) as exc:
            log.error("Discarding unreadable snapshot under %r: %s", self._key, exc)
            return None

    def save(self, state: LedgerState) -> None:
        self._store.set(self._key, json.dumps(self._to_raw(state), indent=2) + "\n")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(state: LedgerState) -> dict:
        return {
            "products": [
                {
                    "id": p.id,
                    "name": p.name,
                    "price": str(p.price.amount),
                    "category": p.category,
                }
                for p in state.products
            ],
            "customers": [
                {
                    "id": c.id,
                    "name": c.name,
                    "phone": c.phone,
                    "outstandingBalance": str(c.outstanding_balance.amount),
                    "lastUpdated": c.last_updated.isoformat(),
                }
                for c in state.customers
            ],
            "transactions": [
                {
                    "id": t.id,
                    "customerId": t.customer_id,
                    "amount": str(t.amount.amount),
                    "type": t.type.value,
                    "description": t.description,
                    "timestamp": t.timestamp.isoformat(),
                }
                for t in state.transactions
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> LedgerState:
        products = tuple(
            Product(
                id=_text(p["id"]),
                name=_text(p["name"]),
                price=_money(p["price"]),
                category=_text(p.get("category", "")),
            )
            for p in raw["products"]
        )
        customers = tuple(
            Customer(
                id=_text(c["id"]),
                name=_text(c["name"]),
                phone=_text(c.get("phone", "")),
                outstanding_balance=_money(c["outstandingBalance"]),
                last_updated=_timestamp(c["lastUpdated"]),
            )
            for c in raw["customers"]
        )
        transactions = tuple(
            Transaction(
                id=_text(t["id"]),
                customer_id=_text(t["customerId"]),
                amount=_money(t["amount"]),
                type=TransactionType(t["type"]),
                description=_text(t.get("description", "")),
                timestamp=_timestamp(t["timestamp"]),
            )
            for t in raw.get("transactions", [])
        )
        return LedgerState(products=products, customers=customers, transactions=transactions)


def _text(value: object) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"Expected text, got {value!r}")
    return value


def _money(value: str | int | float) -> Money:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid money amount: {value!r}")
    return Money(Decimal(str(value)))


def _timestamp(value: str | int | float) -> datetime:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed

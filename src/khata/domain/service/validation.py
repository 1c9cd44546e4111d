"""Boundary parsing for user-entered text.

Every parser returns either ``Valid(value)`` or ``Invalid(reason)``;
parsers never raise. Application handlers decide what to do with an
``Invalid`` result before any state is touched, usually via ``require``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Generic, TypeVar

from khata.domain.exceptions import ValidationError
from khata.domain.model.transaction import TransactionType
from khata.domain.model.value_objects import Money

T = TypeVar("T")


@dataclass(frozen=True)
class Valid(Generic[T]):
    value: T


@dataclass(frozen=True)
class Invalid:
    reason: str


ParseResult = Valid[T] | Invalid

_TYPE_ALIASES = {
    "purchase": TransactionType.PURCHASE,
    "credit": TransactionType.PURCHASE,
    "payment": TransactionType.PAYMENT,
    "paid": TransactionType.PAYMENT,
}


def _parse_decimal(text: str | int | float | Decimal, label: str) -> Decimal | Invalid:
    raw = str(text).strip()
    if not raw:
        return Invalid(f"{label} is required")
    try:
        value = Decimal(raw)
    except InvalidOperation:
        return Invalid(f"{label} must be a number, got {raw!r}")
    if not value.is_finite():
        return Invalid(f"{label} must be a finite number, got {raw!r}")
    return value


def parse_price(text: str | int | float | Decimal) -> ParseResult[Money]:
    """Parse a catalog price: any finite number >= 0."""
    value = _parse_decimal(text, "Price")
    if isinstance(value, Invalid):
        return value
    if value < 0:
        return Invalid(f"Price cannot be negative, got {value}")
    return Valid(Money(value))


def parse_amount(text: str | int | float | Decimal) -> ParseResult[Money]:
    """Parse a transaction amount: any finite number > 0."""
    value = _parse_decimal(text, "Amount")
    if isinstance(value, Invalid):
        return value
    if value <= 0:
        return Invalid(f"Amount must be positive, got {value}")
    return Valid(Money(value))


def parse_name(text: str | None, label: str = "Name") -> ParseResult[str]:
    if text is None or not text.strip():
        return Invalid(f"{label} is required")
    return Valid(text.strip())


def parse_transaction_type(text: str) -> ParseResult[TransactionType]:
    key = (text or "").strip().lower()
    if key in _TYPE_ALIASES:
        return Valid(_TYPE_ALIASES[key])
    return Invalid(f"Unknown transaction type {text!r}, expected PURCHASE or PAYMENT")


def require(result: ParseResult[T]) -> T:
    """Return the parsed value, or raise ValidationError for ``Invalid``."""
    if isinstance(result, Invalid):
        raise ValidationError(result.reason)
    return result.value

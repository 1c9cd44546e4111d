"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from khata.domain.exceptions import ValidationError

CURRENCY = "INR"
_SYMBOLS = {"INR": "₹"}


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount with currency.

    Uses Decimal so that running balances built from many small
    purchases and payments do not drift.
    """

    amount: Decimal
    currency: str = CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def deduct(self, other: Money) -> Money:
        """Subtract *other*, flooring the result at zero.

        Over-payments are absorbed: 300 deduct 500 is 0, not -200.
        """
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            result = Decimal("0")
        return Money(result, self.currency)

    @property
    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        symbol = _SYMBOLS.get(self.currency, self.currency + " ")
        if self.amount == self.amount.to_integral_value():
            return f"{symbol}{self.amount:.0f}"
        return f"{symbol}{self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def total(amounts: list[Money]) -> Money:
        result = Money.zero()
        for amount in amounts:
            result = result + amount
        return result

"""Unit tests for the Customer balance rule."""

from datetime import datetime, timedelta, timezone

from khata.domain.model.customer import Customer
from khata.domain.model.transaction import Transaction, TransactionType
from khata.domain.model.value_objects import Money

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _customer(balance: int = 0) -> Customer:
    return Customer(
        id="c1",
        name="Rahul Sharma",
        phone="9876543210",
        outstanding_balance=Money.of(balance),
        last_updated=T0,
    )


def _tx(type: TransactionType, amount: int, minutes: int = 1) -> Transaction:
    return Transaction(
        id=f"t{minutes}",
        customer_id="c1",
        amount=Money.of(amount),
        type=type,
        description="",
        timestamp=T0 + timedelta(minutes=minutes),
    )


class TestCustomerApply:

    def test_purchase_increases_balance(self):
        c = _customer(100).apply(_tx(TransactionType.PURCHASE, 120))
        assert c.outstanding_balance == Money.of(220)

    def test_payment_decreases_balance(self):
        c = _customer(450).apply(_tx(TransactionType.PAYMENT, 200))
        assert c.outstanding_balance == Money.of(250)

    def test_payment_clears_balance_exactly(self):
        c = _customer(450).apply(_tx(TransactionType.PAYMENT, 450))
        assert c.outstanding_balance.is_zero

    def test_overpayment_clamps_at_zero(self):
        c = _customer(300).apply(_tx(TransactionType.PAYMENT, 500))
        assert c.outstanding_balance == Money.zero()

    def test_clamp_happens_per_transaction(self):
        c = _customer(0)
        c = c.apply(_tx(TransactionType.PURCHASE, 100, 1))
        c = c.apply(_tx(TransactionType.PAYMENT, 200, 2))
        c = c.apply(_tx(TransactionType.PURCHASE, 50, 3))
        # The absorbed over-payment is not carried forward as credit.
        assert c.outstanding_balance == Money.of(50)

    def test_last_updated_follows_transaction(self):
        tx = _tx(TransactionType.PURCHASE, 10, minutes=5)
        c = _customer().apply(tx)
        assert c.last_updated == tx.timestamp

    def test_original_is_unchanged(self):
        original = _customer(100)
        original.apply(_tx(TransactionType.PURCHASE, 50))
        assert original.outstanding_balance == Money.of(100)
        assert original.last_updated == T0

    def test_has_dues(self):
        assert _customer(1).has_dues
        assert not _customer(0).has_dues

"""Tests for the LedgerStore state container.

Uses in-memory fake repositories, no file I/O.
"""

from khata.application.store import LedgerStore
from khata.domain.model.actions import AddProduct
from khata.domain.model.ledger import LedgerState
from khata.domain.model.seed import seed_state
from khata.domain.model.value_objects import Money
from tests.fakes import FakeLedgerRepository


class TestLedgerStoreOpen:

    def test_absent_snapshot_falls_back_to_seed(self):
        store = LedgerStore.open(FakeLedgerRepository(state=None))
        seed = seed_state()
        assert [p.name for p in store.state.products] == [p.name for p in seed.products]
        assert [c.name for c in store.state.customers] == ["Rahul Sharma", "Priya Verma"]
        assert store.state.find_customer("c1").outstanding_balance == Money.of(450)
        assert store.state.transactions == ()

    def test_restores_saved_snapshot(self):
        saved = LedgerState()
        store = LedgerStore.open(FakeLedgerRepository(state=saved))
        assert store.state is saved


class TestLedgerStoreDispatch:

    def test_persists_after_every_dispatch(self):
        repo = FakeLedgerRepository(state=LedgerState())
        store = LedgerStore.open(repo)
        store.dispatch(AddProduct(name="Sugar", price=Money.of(45)))
        store.dispatch(AddProduct(name="Tea", price=Money.of(90)))
        assert repo.save_count == 2
        assert repo.saved == store.state

    def test_write_failure_is_not_raised(self):
        repo = FakeLedgerRepository(state=LedgerState(), fail_on_save=True)
        store = LedgerStore.open(repo)
        new_state = store.dispatch(AddProduct(name="Sugar", price=Money.of(45)))
        assert [p.name for p in new_state.products] == ["Sugar"]
        assert store.state is new_state

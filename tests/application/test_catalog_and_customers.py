"""Tests for the add-product, add-customer and query use cases."""

import pytest

from khata.application.add_customer import AddCustomerHandler
from khata.application.add_product import AddProductHandler
from khata.application.search_products import SearchProductsHandler
from khata.application.show_customer_ledger import (
    ListCustomersHandler,
    ShowCustomerLedgerHandler,
)
from khata.application.record_transaction import RecordTransactionHandler
from khata.domain.exceptions import EntityNotFoundError, ValidationError
from khata.domain.model.seed import seed_state
from khata.domain.model.value_objects import Money
from tests.fakes import make_store


class TestAddProduct:

    def test_adds_product_with_fresh_id(self):
        store, repo = make_store(seed_state())
        existing = {p.id for p in store.state.products}

        product = AddProductHandler(store).handle("Sugar 1kg", "45", "Essentials")

        assert product.id not in existing
        assert store.state.products[-1] == product
        assert product.price == Money.of(45)
        assert repo.save_count == 1

    def test_blank_name_rejected(self):
        store, repo = make_store()
        with pytest.raises(ValidationError, match="Product name is required"):
            AddProductHandler(store).handle("  ", "10")
        assert repo.save_count == 0

    def test_non_numeric_price_rejected_before_mutation(self):
        store, repo = make_store()
        with pytest.raises(ValidationError, match="must be a number"):
            AddProductHandler(store).handle("Sugar", "forty")
        assert store.state.products == ()
        assert repo.save_count == 0

    def test_free_product_allowed(self):
        store, _ = make_store()
        product = AddProductHandler(store).handle("Carry bag", "0")
        assert product.price.is_zero


class TestAddCustomer:

    def test_new_customer_owes_nothing(self):
        store, _ = make_store()
        customer = AddCustomerHandler(store).handle(" Amit ", "9000000000")
        assert customer.name == "Amit"
        assert customer.outstanding_balance.is_zero
        assert store.state.customers == (customer,)

    def test_duplicate_names_allowed(self):
        store, _ = make_store()
        handler = AddCustomerHandler(store)
        a = handler.handle("Amit", "1")
        b = handler.handle("Amit", "1")
        assert a.id != b.id
        assert len(store.state.customers) == 2

    def test_phone_required(self):
        store, _ = make_store()
        with pytest.raises(ValidationError, match="Phone number is required"):
            AddCustomerHandler(store).handle("Amit", "")


class TestSearchProducts:

    def test_blank_term_returns_everything_in_order(self):
        store, _ = make_store(seed_state())
        names = [p.name for p in SearchProductsHandler(store).handle("")]
        assert names == ["Basmati Rice 1kg", "Tata Salt 1kg", "Fortune Oil 1L"]

    def test_matches_name_case_insensitively(self):
        store, _ = make_store(seed_state())
        names = [p.name for p in SearchProductsHandler(store).handle("rice")]
        assert names == ["Basmati Rice 1kg"]

    def test_matches_category(self):
        store, _ = make_store(seed_state())
        names = [p.name for p in SearchProductsHandler(store).handle("SPICES")]
        assert names == ["Tata Salt 1kg"]

    def test_no_match(self):
        store, _ = make_store(seed_state())
        assert SearchProductsHandler(store).handle("biscuit") == []


class TestCustomerLedger:

    def test_list_customers(self):
        store, _ = make_store(seed_state())
        rows = ListCustomersHandler(store).handle()
        assert [(r.name, r.outstanding_balance) for r in rows] == [
            ("Rahul Sharma", "₹450"),
            ("Priya Verma", "₹0"),
        ]

    def test_shows_only_that_customers_transactions_newest_first(self):
        store, _ = make_store(seed_state())
        record = RecordTransactionHandler(store)
        record.handle("c1", "PURCHASE", "100", "Rice")
        record.handle("c2", "PURCHASE", "25", "Salt")
        record.handle("c1", "PAYMENT", "50")

        dto = ShowCustomerLedgerHandler(store).handle("c1")

        assert dto.customer.outstanding_balance == "₹500"
        assert [t.description for t in dto.transactions] == ["Payment Received", "Rice"]
        assert all(t.customer_name == "Rahul Sharma" for t in dto.transactions)

    def test_unknown_customer(self):
        store, _ = make_store(seed_state())
        with pytest.raises(EntityNotFoundError, match="not found"):
            ShowCustomerLedgerHandler(store).handle("nobody")

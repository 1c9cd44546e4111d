"""Tests for the ScanReceipt use case."""

import pytest

from khata.application.record_transaction import RecordTransactionHandler
from khata.application.scan_receipt import ScanReceiptHandler
from khata.domain.exceptions import ReceiptScanFailed
from khata.domain.model.seed import seed_state
from khata.domain.model.value_objects import Money
from khata.domain.service.receipt_extractor import ScannedItem
from tests.fakes import FakeReceiptExtractor, make_store


class TestScanReceipt:

    def test_builds_draft_from_items(self):
        extractor = FakeReceiptExtractor([
            ScannedItem("Basmati Rice 1kg", Money.of(120)),
            ScannedItem("Tata Salt 1kg", Money.of("25.50")),
        ])
        draft = ScanReceiptHandler(extractor).handle(b"jpeg-bytes")

        assert draft.amount == "145.50"
        assert draft.description == "AI Scanned: Basmati Rice 1kg (₹120), Tata Salt 1kg (₹25.50)"
        assert draft.item_count == 2
        assert extractor.calls == [b"jpeg-bytes"]

    def test_empty_result_is_a_scan_failure(self):
        with pytest.raises(ReceiptScanFailed, match="Scanning failed"):
            ScanReceiptHandler(FakeReceiptExtractor([])).handle(b"jpeg-bytes")

    def test_scanning_does_not_record_anything(self):
        store, repo = make_store(seed_state())
        extractor = FakeReceiptExtractor([ScannedItem("Oil", Money.of(185))])
        ScanReceiptHandler(extractor).handle(b"x")
        assert store.state.transactions == ()
        assert repo.save_count == 0

    def test_confirmed_draft_records_purchase(self):
        store, _ = make_store(seed_state())
        extractor = FakeReceiptExtractor([ScannedItem("Oil", Money.of(185))])
        draft = ScanReceiptHandler(extractor).handle(b"x")

        tx = RecordTransactionHandler(store).handle("c2", "PURCHASE", draft.amount, draft.description)

        assert tx.amount == Money.of(185)
        assert store.state.find_customer("c2").outstanding_balance == Money.of(185)

"""Application service: Scan Receipt use case.

Turns a photo of a bill into a *suggested* purchase. The draft is only
a proposal; recording it is a separate, user-confirmed step through
``RecordTransactionHandler``.
"""

from __future__ import annotations

from khata.application.dto import ReceiptDraft
from khata.domain.exceptions import ReceiptScanFailed
from khata.domain.model.value_objects import Money
from khata.domain.service.receipt_extractor import ReceiptExtractor, ScannedItem

DESCRIPTION_PREFIX = "AI Scanned: "


class ScanReceiptHandler:

    def __init__(self, extractor: ReceiptExtractor) -> None:
        self._extractor = extractor

    def handle(self, image_bytes: bytes) -> ReceiptDraft:
        items = self._extractor.extract(image_bytes)
        if not items:
            raise ReceiptScanFailed("Scanning failed. Please try manual entry.")
        return self._to_draft(items)

    @staticmethod
    def _to_draft(items: list[ScannedItem]) -> ReceiptDraft:
        total = Money.total([item.price for item in items])
        lines = ", ".join(f"{item.name} ({item.price})" for item in items)
        return ReceiptDraft(
            amount=str(total.amount),
            description=DESCRIPTION_PREFIX + lines,
            item_count=len(items),
        )

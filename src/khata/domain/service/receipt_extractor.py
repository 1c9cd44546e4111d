"""Port for the AI receipt extractor.

Implementations turn a photographed bill into best-effort line items.
They must never raise: any failure is reported as an empty list, so a
caller cannot tell "nothing found" from "extraction failed".
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from khata.domain.model.value_objects import Money


@dataclass(frozen=True)
class ScannedItem:
    name: str
    price: Money


class ReceiptExtractor(ABC):

    @abstractmethod
    def extract(self, image_bytes: bytes) -> list[ScannedItem]:
        """Return the items read from a JPEG image, or [] on failure."""

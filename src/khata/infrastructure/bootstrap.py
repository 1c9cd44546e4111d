"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from khata.application.store import LedgerStore
from khata.infrastructure.ai.openai_receipt_extractor import OpenAIReceiptExtractor
from khata.infrastructure.config import load_settings
from khata.infrastructure.persistence.json_ledger_repository import JsonLedgerRepository
from khata.infrastructure.persistence.key_value_store import FileKeyValueStore


def ledger_repository() -> JsonLedgerRepository:
    settings = load_settings()
    return JsonLedgerRepository(FileKeyValueStore(settings.data_dir))


def ledger_store() -> LedgerStore:
    return LedgerStore.open(ledger_repository())


def receipt_extractor() -> OpenAIReceiptExtractor:
    return OpenAIReceiptExtractor.from_settings(load_settings())

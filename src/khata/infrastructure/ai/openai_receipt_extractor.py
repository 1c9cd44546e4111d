"""ReceiptExtractor backed by an OpenAI vision model.

One JPEG in, a list of ``{name, price}`` guesses out. The model is held
to a strict JSON schema; anything that does not fit it is dropped and
reported as an empty result. No retries, no streaming.
"""

from __future__ import annotations

import base64
import json
import time
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from openai import APIConnectionError, APIStatusError, APITimeoutError, OpenAI, OpenAIError

from khata.domain.model.value_objects import Money
from khata.domain.service.receipt_extractor import ReceiptExtractor, ScannedItem
from khata.infrastructure.config import Settings
from khata.logging import get_logger

LOG = get_logger("receipt-extraction")

PROMPT = (
    "Extract products and their prices from this grocery list or bill. "
    "Return the data in a clean JSON format. If a price is not found, "
    "estimate a reasonable market price or return 0. Only return the JSON."
)


def _receipt_schema() -> Dict[str, Any]:
    return {
        "name": "receipt_items",
        "strict": True,
        "schema": {
            "type": "object",
            "properties": {
                "items": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "name": {"type": "string", "description": "Name of the product"},
                            "price": {"type": "number", "description": "Price of the product"},
                        },
                        "required": ["name", "price"],
                        "additionalProperties": False,
                    },
                },
            },
            "required": ["items"],
            "additionalProperties": False,
        },
    }


def _data_url(image_bytes: bytes) -> str:
    b64 = base64.b64encode(image_bytes).decode("ascii")
    return f"data:image/jpeg;base64,{b64}"


class SchemaViolation(ValueError):
    """The model's answer did not match the receipt schema."""


def parse_items(payload: Any) -> List[ScannedItem]:
    """Validate a decoded model answer and convert it to ScannedItems.

    Accepts either ``{"items": [...]}`` or a bare list. Raises
    SchemaViolation on the first malformed entry.
    """
    if isinstance(payload, dict):
        payload = payload.get("items")
    if not isinstance(payload, list):
        raise SchemaViolation(f"expected a list of items, got {type(payload).__name__}")

    items: List[ScannedItem] = []
    for i, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise SchemaViolation(f"item {i} is not an object")
        name = entry.get("name")
        price = entry.get("price")
        if not isinstance(name, str) or not name.strip():
            raise SchemaViolation(f"item {i} has no usable name")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise SchemaViolation(f"item {i} price is not a number: {price!r}")
        try:
            value = Decimal(str(price))
        except InvalidOperation as exc:
            raise SchemaViolation(f"item {i} price is not a number: {price!r}") from exc
        if not value.is_finite() or value < 0:
            raise SchemaViolation(f"item {i} price out of range: {price!r}")
        items.append(ScannedItem(name=name.strip(), price=Money(value)))
    return items


class OpenAIReceiptExtractor(ReceiptExtractor):

    def __init__(self, client: Optional[OpenAI], model: str) -> None:
        self._client = client
        self._model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> OpenAIReceiptExtractor:
        if not settings.openai_api_key:
            LOG.warning("OPENAI_API_KEY not set; receipt scanning is disabled")
            return cls(None, settings.vision_model)
        client = OpenAI(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            max_retries=0,
        )
        return cls(client, settings.vision_model)

    def extract(self, image_bytes: bytes) -> List[ScannedItem]:
        if self._client is None:
            return []
        if not image_bytes:
            LOG.error("Empty image passed to receipt extraction")
            return []

        messages = [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": PROMPT},
                    {"type": "image_url", "image_url": {"url": _data_url(image_bytes)}},
                ],
            },
        ]

        t0 = time.perf_counter()
        try:
            LOG.info("Calling OpenAI Chat Completions (vision) model='%s'", self._model)
            completion = self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                response_format={"type": "json_schema", "json_schema": _receipt_schema()},
            )
            choice = completion.choices[0] if completion.choices else None
            text = choice.message.content if choice is not None else None
            if not text:
                LOG.error("Model returned an empty answer")
                return []
            items = parse_items(json.loads(text))
        except (APIConnectionError, APITimeoutError) as e:
            LOG.error("Network/timeout while calling OpenAI: %s", e)
            return []
        except APIStatusError as e:
            LOG.error("OpenAI API returned %s: %s", e.status_code, e.message)
            return []
        except OpenAIError as e:
            LOG.error("OpenAI extraction failed: %s", e)
            return []
        except json.JSONDecodeError as e:
            LOG.error("Model answer is not valid JSON: %s", e)
            return []
        except SchemaViolation as e:
            LOG.error("Model answer does not match the receipt schema: %s", e)
            return []
        except Exception as e:
            LOG.error("Receipt extraction failed: %s", e)
            return []

        LOG.info("Extracted %d item(s) in %.2fs", len(items), time.perf_counter() - t0)
        return items

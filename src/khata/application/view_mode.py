"""Shopkeeper vs customer presentation modes.

This only decides which commands are offered. There is no
authentication behind it.
"""

from __future__ import annotations

from enum import Enum


class ViewMode(Enum):
    SHOPKEEPER = "shopkeeper"
    CUSTOMER = "customer"

    @property
    def can_modify(self) -> bool:
        return self is ViewMode.SHOPKEEPER

    @property
    def sections(self) -> tuple[str, ...]:
        if self is ViewMode.SHOPKEEPER:
            return ("dashboard", "product", "customer")
        return ("customer",)

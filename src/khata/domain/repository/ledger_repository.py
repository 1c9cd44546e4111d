"""Abstract repository for the LedgerState aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The whole aggregate is loaded and saved as one
snapshot; there is no per-entity access.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from khata.domain.model.ledger import LedgerState


class LedgerRepository(ABC):

    @abstractmethod
    def load(self) -> LedgerState | None:
        """Return the saved snapshot, or None if absent or unreadable."""

    @abstractmethod
    def save(self, state: LedgerState) -> None:
        """Overwrite the saved snapshot with *state*."""

"""LedgerStore, the state container.

Holds the current LedgerState, applies actions through the pure reducer
and writes the full state through to the repository after every change.
Handlers never touch the state directly; they build an action and call
``dispatch``.
"""

from __future__ import annotations

from khata.domain.model.actions import Action
from khata.domain.model.ledger import LedgerState
from khata.domain.model.seed import seed_state
from khata.domain.repository.ledger_repository import LedgerRepository
from khata.domain.service.reducer import reduce
from khata.logging import get_logger

log = get_logger("store")


class LedgerStore:

    def __init__(self, repo: LedgerRepository, state: LedgerState) -> None:
        self._repo = repo
        self._state = state

    @classmethod
    def open(cls, repo: LedgerRepository) -> LedgerStore:
        """Restore the saved snapshot, falling back to the seed state."""
        state = repo.load()
        if state is None:
            log.info("No usable snapshot found; starting from seed data")
            state = seed_state()
        return cls(repo, state)

    @property
    def state(self) -> LedgerState:
        return self._state

    def dispatch(self, action: Action) -> LedgerState:
        """Apply *action*, persist the result and return the new state.

        The new state is visible even if the write fails; write errors
        are logged, not raised.
        """
        self._state = reduce(self._state, action)
        try:
            self._repo.save(self._state)
        except OSError:
            log.exception("Failed to persist ledger after %s", type(action).__name__)
        return self._state

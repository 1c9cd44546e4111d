"""Identifier and clock helpers.

Kept out of the entities so reducers stay pure: ids and timestamps are
generated once, when an action is built, and then carried through.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone


def new_id() -> str:
    """Return a fresh, collision-resistant opaque token."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)

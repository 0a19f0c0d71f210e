"""
Abstract store protocol for ServiceSpecification persistence.

Implement this protocol to plug in a storage backend.  The service
ships with an in‑memory store (the default, lost on restart) and a
MongoDB store.  Records are plain dictionaries addressed by their
application level ``id`` field.

``insert`` owns the uniqueness policy: a record whose name is already
taken (case‑insensitively) is stored under ``<name>-<epoch ms>``, moving
to the next millisecond until the suffixed name is free as well.
"""

import time
from typing import Any, Dict, Iterator, List, Optional, Protocol, runtime_checkable

Record = Dict[str, Any]


class StoreError(RuntimeError):
    """Raised when the backing store fails independently of the request."""


@runtime_checkable
class Store(Protocol):
    """Storage interface for ServiceSpecification records."""

    async def list(self) -> List[Record]:
        """Return every record in the store's iteration order."""
        ...

    async def insert(self, record: Record) -> Record:
        """Store a new record, applying the uniqueness policy.

        Returns the record as stored, which may differ from the input.
        """
        ...

    async def find_by_id(self, record_id: str) -> Optional[Record]:
        """Retrieve a record by ID. Returns None if not found."""
        ...

    async def replace(self, record_id: str, record: Record) -> bool:
        """Overwrite a record. Returns False if no record has that ID."""
        ...

    async def remove(self, record_id: str) -> bool:
        """Delete a record by ID. Returns True if deleted."""
        ...

    async def seed(self, record: Record) -> bool:
        """Store ``record`` verbatim unless its ID exists. Returns True if stored."""
        ...


def same_name(left: Any, right: Any) -> bool:
    """Case‑insensitive name comparison.

    Only string names take part in the uniqueness policy; ``None`` and
    other non‑string values never clash with anything.
    """
    if not isinstance(left, str) or not isinstance(right, str):
        return False
    return left.lower() == right.lower()


def name_candidates(name: str) -> Iterator[str]:
    """Yield ``<name>-<epoch ms>`` replacements for a taken name.

    Each candidate uses the next millisecond, so callers can keep trying
    until one is free even when several creates land in the same instant.
    """
    stamp = int(time.time() * 1000)
    while True:
        yield f"{name}-{stamp}"
        stamp += 1

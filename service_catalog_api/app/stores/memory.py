"""
In‑memory store.

Records are kept in a list in insertion order and looked up with a
linear scan.  Nothing here awaits, so each call completes without
interleaving with other requests on the event loop; no locking is done.
Records handed in and out are copied so callers cannot mutate stored
state behind the store's back.
"""

import logging
from typing import List, Optional

from ..services.record_factory import utc_now
from .base import Record, name_candidates, same_name

logger = logging.getLogger(__name__)


class MemoryStore:
    """
    Process‑local store backed by an ordered list.

    Not shared between processes; contents are lost on restart.
    """

    def __init__(self, records: Optional[List[Record]] = None) -> None:
        self._records: List[Record] = [dict(record) for record in records or []]

    def __len__(self) -> int:
        return len(self._records)

    def _index_of(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.get("id") == record_id:
                return index
        return -1

    def _name_taken(self, name) -> bool:
        return any(same_name(existing.get("name"), name) for existing in self._records)

    async def list(self) -> List[Record]:
        return [dict(record) for record in self._records]

    async def insert(self, record: Record) -> Record:
        record = dict(record)
        if self._name_taken(record.get("name")):
            for candidate in name_candidates(record["name"]):
                if not self._name_taken(candidate):
                    record["name"] = candidate
                    break
        # Each new record is stamped one second later per stored record so
        # that creates within the same instant still sort strictly.
        record["lastUpdate"] = utc_now(offset_seconds=len(self._records))
        self._records.append(record)
        logger.debug("Stored record %s (%d total)", record.get("id"), len(self._records))
        return dict(record)

    async def find_by_id(self, record_id: str) -> Optional[Record]:
        index = self._index_of(record_id)
        if index == -1:
            return None
        return dict(self._records[index])

    async def replace(self, record_id: str, record: Record) -> bool:
        index = self._index_of(record_id)
        if index == -1:
            return False
        self._records[index] = dict(record)
        return True

    async def remove(self, record_id: str) -> bool:
        index = self._index_of(record_id)
        if index == -1:
            return False
        del self._records[index]
        return True

    async def seed(self, record: Record) -> bool:
        if self._index_of(record["id"]) != -1:
            return False
        self._records.append(dict(record))
        return True

"""
Service layer for ServiceSpecification resources.

``ServiceSpecificationService`` implements list, create, get, update and
delete on top of a ``Store``.  The store is passed in by the caller
(the API layer gets it from the application through a dependency), and
so is the base URL the request was served on, because every record
returned carries an ``href`` built from it.

Unknown identifiers raise ``RecordNotFoundError``; store failures
propagate as ``StoreError``.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Mapping, Optional

from ..stores import Record, Store
from .query_filter import filter_records
from .record_factory import build_record, href_for, next_timestamp, reassert_defaults


class RecordNotFoundError(LookupError):
    """Raised when no record has the requested ``id``."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"ServiceSpecification {record_id} not found")
        self.record_id = record_id


def _with_href(record: Record, base_url: str) -> Record:
    record["href"] = href_for(base_url, record["id"])
    return record


class ServiceSpecificationService:
    """Business logic for the ServiceSpecification resource."""

    @classmethod
    async def list_specifications(
        cls,
        store: Store,
        base_url: str,
        filters: Optional[Mapping[str, str]] = None,
        fields: Optional[str] = None,
    ) -> List[Record]:
        """Return the records matching ``filters``, projected onto ``fields``.

        Links are rebuilt for ``base_url`` before filtering so that
        ``href`` can be filtered and selected like any other field.
        """
        records = [_with_href(record, base_url) for record in await store.list()]
        return filter_records(records, filters or {}, fields)

    @classmethod
    async def create_specification(
        cls,
        store: Store,
        base_url: str,
        payload: Optional[Mapping[str, Any]] = None,
    ) -> Record:
        """Normalize ``payload`` into a record and store it.

        A client supplied ``id`` that is already in use is replaced by a
        generated one.  The store may rename the record when its name is
        taken and, for the in‑memory backend, restamps ``lastUpdate``.
        """
        logger = logging.getLogger(__name__)
        payload = dict(payload or {})
        if payload.get("id") and await store.find_by_id(str(payload["id"])) is not None:
            logger.info("Requested id %s is taken; generating a new one", payload["id"])
            payload["id"] = str(uuid.uuid4())
        record = await store.insert(build_record(payload, base_url))
        logger.info("Created ServiceSpecification %s (%s)", record["id"], record.get("name"))
        return _with_href(record, base_url)

    @classmethod
    async def get_specification(cls, store: Store, base_url: str, record_id: str) -> Record:
        record = await store.find_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return _with_href(record, base_url)

    @classmethod
    async def update_specification(
        cls,
        store: Store,
        base_url: str,
        record_id: str,
        changes: Optional[Mapping[str, Any]] = None,
    ) -> Record:
        """Shallow‑merge ``changes`` over an existing record.

        Only provided fields overwrite stored ones.  ``id`` cannot be
        changed, ``lastUpdate`` is restamped and ``href`` recomputed, and
        defaulted fields cleared by the merge get their defaults back.
        Name uniqueness is not checked here.
        """
        logger = logging.getLogger(__name__)
        current = await store.find_by_id(record_id)
        if current is None:
            raise RecordNotFoundError(record_id)

        updated: Dict[str, Any] = {**current, **dict(changes or {})}
        updated["id"] = current["id"]
        updated["lastUpdate"] = next_timestamp(current.get("lastUpdate"))
        reassert_defaults(updated, base_url)

        if not await store.replace(record_id, updated):
            # Removed by a concurrent request between the read and the write.
            raise RecordNotFoundError(record_id)
        logger.info("Updated ServiceSpecification %s", record_id)
        return updated

    @classmethod
    async def delete_specification(cls, store: Store, record_id: str) -> None:
        logger = logging.getLogger(__name__)
        if not await store.remove(record_id):
            raise RecordNotFoundError(record_id)
        logger.info("Deleted ServiceSpecification %s", record_id)

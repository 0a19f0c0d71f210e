"""
MongoDB store.

Usage:
    from service_catalog_api.app.stores.mongo import MongoStore

    store = MongoStore(uri="mongodb://localhost:27017", db_name="service_catalog")
    await store.ensure_indexes()

Records are addressed by their application ``id`` field, never by the
native ``_id``, which is projected out of every read.  Every call is a
round trip through the asynchronous pymongo client; driver failures are
logged and re‑raised as ``StoreError``.
"""

import logging
import re
from typing import Any, List, Optional

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from .base import Record, StoreError, name_candidates

logger = logging.getLogger(__name__)

_NO_NATIVE_ID = {"_id": False}


def _without_native_id(record: Record) -> Record:
    return {key: value for key, value in record.items() if key != "_id"}


class MongoStore:
    """
    MongoDB‑backed store for ServiceSpecification records.

    Collection layout:
        One document per record, unique index on ``id``.
    """

    def __init__(
        self,
        uri: str = "mongodb://localhost:27017",
        db_name: str = "service_catalog",
        collection_name: str = "serviceSpecifications",
        client: Optional[Any] = None,
        collection: Optional[Any] = None,
    ) -> None:
        self._uri = uri
        self._db_name = db_name
        self._collection_name = collection_name
        self._client = client
        self._collection = collection

    @property
    def collection(self) -> Any:
        if self._collection is None:
            if self._client is None:
                self._client = AsyncMongoClient(self._uri)
            self._collection = self._client[self._db_name][self._collection_name]
        return self._collection

    async def ensure_indexes(self) -> None:
        try:
            await self.collection.create_index("id", unique=True)
        except PyMongoError as e:
            logger.error("MongoDB index creation failed on %s: %s", self._collection_name, e)
            raise StoreError("index creation failed") from e

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()

    async def list(self) -> List[Record]:
        try:
            cursor = self.collection.find({}, _NO_NATIVE_ID)
            return await cursor.to_list(None)
        except PyMongoError as e:
            logger.error("MongoDB list failed: %s", e)
            raise StoreError("list failed") from e

    async def _name_taken(self, name: Any) -> bool:
        # Only string names take part in the uniqueness policy.
        if not isinstance(name, str):
            return False
        pattern = f"^{re.escape(name)}$"
        found = await self.collection.find_one(
            {"name": {"$regex": pattern, "$options": "i"}}, _NO_NATIVE_ID
        )
        return found is not None

    async def insert(self, record: Record) -> Record:
        record = _without_native_id(record)
        try:
            if await self._name_taken(record.get("name")):
                for candidate in name_candidates(record["name"]):
                    if not await self._name_taken(candidate):
                        record["name"] = candidate
                        break
            # insert_one adds ``_id`` to the document it is given.
            await self.collection.insert_one(dict(record))
        except PyMongoError as e:
            logger.error("MongoDB insert failed for %s: %s", record.get("id"), e)
            raise StoreError("insert failed") from e
        return record

    async def find_by_id(self, record_id: str) -> Optional[Record]:
        try:
            return await self.collection.find_one({"id": record_id}, _NO_NATIVE_ID)
        except PyMongoError as e:
            logger.error("MongoDB find failed for %s: %s", record_id, e)
            raise StoreError("find failed") from e

    async def replace(self, record_id: str, record: Record) -> bool:
        try:
            result = await self.collection.replace_one({"id": record_id}, _without_native_id(record))
        except PyMongoError as e:
            logger.error("MongoDB replace failed for %s: %s", record_id, e)
            raise StoreError("replace failed") from e
        return result.matched_count > 0

    async def remove(self, record_id: str) -> bool:
        try:
            result = await self.collection.delete_one({"id": record_id})
        except PyMongoError as e:
            logger.error("MongoDB delete failed for %s: %s", record_id, e)
            raise StoreError("delete failed") from e
        return result.deleted_count > 0

    async def seed(self, record: Record) -> bool:
        try:
            result = await self.collection.update_one(
                {"id": record["id"]},
                {"$setOnInsert": _without_native_id(record)},
                upsert=True,
            )
        except PyMongoError as e:
            logger.error("MongoDB seed failed for %s: %s", record.get("id"), e)
            raise StoreError("seed failed") from e
        return result.upserted_id is not None

"""
Store selection, start‑up initialisation and the FastAPI dependency.

``build_store`` picks the backend named by ``settings.store_backend``.
The chosen store is owned by the application (``app.state.store``) and
handed to route handlers through ``get_store``, so there is no
module‑level collection.  ``init_store`` runs at start‑up: it creates
the MongoDB index when needed and loads the fixed test record.
"""

import logging

from fastapi import Request

from ..services.record_factory import build_record
from ..stores import MemoryStore, Store
from .config import Settings

logger = logging.getLogger(__name__)

# Fixed record conformance test kits filter on.
TEST_RECORD = {
    "id": "5ae4dc5f-8031-40f6-ab85-ca6912d8635c",
    "name": "TestServiceName",
    "lifecycleStatus": "active",
    "isBundle": True,
    "lastUpdate": "2025-07-01T00:00:00Z",
}


def build_store(app_settings: Settings) -> Store:
    """Create the store selected by ``STORE_BACKEND``."""
    backend = app_settings.store_backend.lower()
    if backend == "memory":
        return MemoryStore()
    if backend == "mongo":
        from ..stores.mongo import MongoStore

        return MongoStore(
            uri=app_settings.mongodb_uri,
            db_name=app_settings.mongodb_db,
            collection_name=app_settings.mongodb_collection,
        )
    raise ValueError(f"Unknown STORE_BACKEND {app_settings.store_backend!r}")


async def init_store(store: Store, app_settings: Settings) -> None:
    """Prepare ``store`` for serving requests."""
    ensure_indexes = getattr(store, "ensure_indexes", None)
    if ensure_indexes is not None:
        await ensure_indexes()

    if app_settings.seed_test_record:
        seeded = await store.seed(build_record(TEST_RECORD, app_settings.base_url))
        if seeded:
            logger.info("Seeded test record %s", TEST_RECORD["id"])


async def close_store(store: Store) -> None:
    close = getattr(store, "close", None)
    if close is not None:
        await close()


def get_store(request: Request) -> Store:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store

"""
Storage backends.

``MemoryStore`` is imported eagerly; ``MongoStore`` lives in
``stores.mongo`` and is only imported when the mongo backend is
selected, so the pymongo client is not created for in‑memory runs.
"""

from .base import Record, Store, StoreError
from .memory import MemoryStore

__all__ = ["MemoryStore", "Record", "Store", "StoreError"]

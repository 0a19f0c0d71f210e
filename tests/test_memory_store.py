"""Tests for the in-memory store and its uniqueness policy."""

import pytest

from service_catalog_api.app.services.record_factory import build_record, parse_timestamp
from service_catalog_api.app.stores import MemoryStore, Store

BASE_URL = "http://testserver"


@pytest.fixture
def store():
    return MemoryStore()


def test_implements_protocol(store):
    assert isinstance(store, Store)


@pytest.mark.asyncio
class TestInsert:
    async def test_insert_and_find(self, store):
        record = await store.insert(build_record({"name": "Alpha"}, BASE_URL))
        fetched = await store.find_by_id(record["id"])
        assert fetched == record

    async def test_duplicate_name_is_suffixed(self, store):
        first = await store.insert(build_record({"name": "Alpha"}, BASE_URL))
        second = await store.insert(build_record({"name": "ALPHA"}, BASE_URL))
        assert first["name"] == "Alpha"
        assert second["name"].startswith("ALPHA-")
        assert second["name"][len("ALPHA-"):].isdigit()

    async def test_repeated_name_stays_unique_within_one_millisecond(self, store):
        names = []
        for _ in range(5):
            record = await store.insert(build_record({"name": "Alpha"}, BASE_URL))
            names.append(record["name"])
        assert len(set(names)) == 5
        assert all(name.startswith("Alpha-") for name in names[1:])

    async def test_null_name_never_clashes(self, store):
        await store.seed({"id": "nameless", "name": None})
        record = await store.insert(build_record({"name": "None"}, BASE_URL))
        assert record["name"] == "None"
        second = await store.insert({"id": "other", "name": None})
        assert second["name"] is None

    async def test_rapid_inserts_get_increasing_stamps(self, store):
        stamps = []
        for _ in range(3):
            record = await store.insert(build_record({}, BASE_URL))
            stamps.append(parse_timestamp(record["lastUpdate"]))
        assert stamps[0] < stamps[1] < stamps[2]

    async def test_list_keeps_insertion_order(self, store):
        for name in ("a", "b", "c"):
            await store.insert(build_record({"name": name}, BASE_URL))
        assert [record["name"] for record in await store.list()] == ["a", "b", "c"]

    async def test_returned_records_are_copies(self, store):
        record = await store.insert(build_record({"name": "Alpha"}, BASE_URL))
        record["name"] = "mutated"
        listed = await store.list()
        listed[0]["name"] = "mutated again"
        assert (await store.find_by_id(record["id"]))["name"] == "Alpha"


@pytest.mark.asyncio
class TestMutations:
    async def test_replace(self, store):
        record = await store.insert(build_record({"name": "Alpha"}, BASE_URL))
        assert await store.replace(record["id"], {**record, "name": "Beta"}) is True
        assert (await store.find_by_id(record["id"]))["name"] == "Beta"

    async def test_replace_missing(self, store):
        assert await store.replace("nope", {"id": "nope"}) is False

    async def test_remove(self, store):
        record = await store.insert(build_record({}, BASE_URL))
        assert await store.remove(record["id"]) is True
        assert await store.find_by_id(record["id"]) is None
        assert len(store) == 0

    async def test_remove_missing(self, store):
        assert await store.remove("nope") is False

    async def test_seed_is_verbatim_and_idempotent(self, store):
        record = build_record({"id": "seed", "lastUpdate": "2025-07-01T00:00:00Z"}, BASE_URL)
        assert await store.seed(record) is True
        assert await store.seed(record) is False
        assert await store.list() == [record]

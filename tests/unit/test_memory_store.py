"""InMemoryDocumentStore: upsert/list/delete semantics and copy isolation."""

import pytest

from artisan_sync.infrastructure.store.memory_store import InMemoryDocumentStore
from artisan_sync.infrastructure.store.protocol import StoredDocument


@pytest.mark.asyncio
async def test_upsert_creates_then_overwrites(store) -> None:
    await store.upsert("artisans", "a1", {"name": "Amina", "rating": 4})
    await store.upsert("artisans", "a1", {"name": "Amina"})
    assert await store.list_all("artisans") == [StoredDocument("a1", {"name": "Amina"})]


@pytest.mark.asyncio
async def test_list_unknown_collection_is_empty(store) -> None:
    assert await store.list_all("reviews") == []


@pytest.mark.asyncio
async def test_delete_missing_document_is_noop(store) -> None:
    await store.delete("reviews", "missing")
    await store.upsert("reviews", "r1", {"rating": 5})
    await store.delete("reviews", "r1")
    assert await store.list_all("reviews") == []


@pytest.mark.asyncio
async def test_stored_records_are_isolated_from_callers(store) -> None:
    record = {"tags": ["oak"]}
    await store.upsert("artisans", "a1", record)
    record["tags"].append("pine")
    listed = await store.list_all("artisans")
    listed[0].data["tags"].append("elm")
    assert store.snapshot() == {"artisans": {"a1": {"tags": ["oak"]}}}


@pytest.mark.asyncio
async def test_aclose_marks_store_closed() -> None:
    store = InMemoryDocumentStore({"artisans": {"a1": {}}})
    await store.aclose()
    await store.aclose()
    assert store.closed

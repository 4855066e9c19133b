"""Tests for the in-process scenario store."""

import pytest

from invoice_roi.errors import ScenarioNotFoundError


def _record(name: str) -> dict:
    return {"scenario_name": name, "user_email": "ap@example.com", "monthly_savings": 1.0}


class TestInMemoryScenarioStore:
    @pytest.mark.asyncio
    async def test_insert_assigns_identity(self, memory_store):
        stored = await memory_store.insert(_record("A"))
        assert stored["id"]
        assert stored["created_at"]
        assert stored["scenario_name"] == "A"

    @pytest.mark.asyncio
    async def test_insert_assigns_unique_ids(self, memory_store):
        a = await memory_store.insert(_record("A"))
        b = await memory_store.insert(_record("B"))
        assert a["id"] != b["id"]

    @pytest.mark.asyncio
    async def test_insert_does_not_mutate_argument(self, memory_store):
        record = _record("A")
        await memory_store.insert(record)
        assert "id" not in record

    @pytest.mark.asyncio
    async def test_list_newest_first(self, memory_store):
        for name in ("first", "second", "third"):
            await memory_store.insert(_record(name))
        names = [r["scenario_name"] for r in await memory_store.list_all()]
        assert names == ["third", "second", "first"]

    @pytest.mark.asyncio
    async def test_list_empty(self, memory_store):
        assert await memory_store.list_all() == []

    @pytest.mark.asyncio
    async def test_get_by_id(self, memory_store):
        stored = await memory_store.insert(_record("A"))
        assert await memory_store.get_by_id(stored["id"]) == stored

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, memory_store):
        assert await memory_store.get_by_id("nope") is None

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self, memory_store):
        stored = await memory_store.insert(_record("A"))
        fetched = await memory_store.get_by_id(stored["id"])
        fetched["scenario_name"] = "changed"
        again = await memory_store.get_by_id(stored["id"])
        assert again["scenario_name"] == "A"

    @pytest.mark.asyncio
    async def test_delete(self, memory_store):
        stored = await memory_store.insert(_record("A"))
        await memory_store.delete_by_id(stored["id"])
        assert await memory_store.get_by_id(stored["id"]) is None
        assert await memory_store.list_all() == []

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, memory_store):
        with pytest.raises(ScenarioNotFoundError) as exc_info:
            await memory_store.delete_by_id("nope")
        assert exc_info.value.scenario_id == "nope"

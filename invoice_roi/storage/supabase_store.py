"""Supabase store -- persists scenarios in a Postgres table via supabase-py."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from supabase import Client, create_client

from invoice_roi.config.settings import Settings
from invoice_roi.errors import PersistenceError, ScenarioNotFoundError

from .base import ScenarioStore

logger = logging.getLogger(__name__)


class SupabaseScenarioStore(ScenarioStore):
    """Scenario records in a Supabase table.

    The table owns ``id`` (uuid default) and ``created_at`` (now() default).
    supabase-py is synchronous, so each request runs in a worker thread.
    """

    def __init__(self, client: Client, table: str = "scenarios"):
        self._client = client
        self._table = table

    @classmethod
    def from_settings(cls, settings: Settings) -> SupabaseScenarioStore:
        client = create_client(settings.supabase_url, settings.supabase_key)
        return cls(client, table=settings.scenarios_table)

    async def _execute(self, action: str, query: Any) -> list[dict[str, Any]]:
        try:
            response = await asyncio.to_thread(query.execute)
        except Exception as e:
            logger.error(f"Supabase {action} on '{self._table}' failed: {e}")
            raise PersistenceError(f"Failed to {action} scenario: {e}") from e
        return list(response.data or [])

    async def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        rows = await self._execute("save", self._client.table(self._table).insert(record))
        if not rows:
            raise PersistenceError("Failed to save scenario: store returned no row")
        return rows[0]

    async def list_all(self) -> list[dict[str, Any]]:
        query = (
            self._client.table(self._table)
            .select("*")
            .order("created_at", desc=True)
        )
        return await self._execute("list", query)

    async def get_by_id(self, scenario_id: str) -> Optional[dict[str, Any]]:
        query = (
            self._client.table(self._table)
            .select("*")
            .eq("id", scenario_id)
            .limit(1)
        )
        rows = await self._execute("load", query)
        return rows[0] if rows else None

    async def delete_by_id(self, scenario_id: str) -> None:
        query = self._client.table(self._table).delete().eq("id", scenario_id)
        rows = await self._execute("delete", query)
        if not rows:
            raise ScenarioNotFoundError(scenario_id)

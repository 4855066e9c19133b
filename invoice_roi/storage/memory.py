"""In-process scenario store for local runs and tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4

from invoice_roi.errors import ScenarioNotFoundError

from .base import ScenarioStore


class InMemoryScenarioStore(ScenarioStore):
    """Keeps records in a list, newest first. Contents die with the process."""

    def __init__(self) -> None:
        self._records: list[dict[str, Any]] = []

    async def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        stored = {
            **record,
            "id": str(uuid4()),
            "created_at": datetime.now(tz=timezone.utc).isoformat(),
        }
        self._records.insert(0, stored)
        return dict(stored)

    async def list_all(self) -> list[dict[str, Any]]:
        # Stable sort keeps insertion order (newest first) for equal timestamps.
        ordered = sorted(self._records, key=lambda r: r["created_at"], reverse=True)
        return [dict(r) for r in ordered]

    async def get_by_id(self, scenario_id: str) -> Optional[dict[str, Any]]:
        for record in self._records:
            if record["id"] == scenario_id:
                return dict(record)
        return None

    async def delete_by_id(self, scenario_id: str) -> None:
        for i, record in enumerate(self._records):
            if record["id"] == scenario_id:
                del self._records[i]
                return
        raise ScenarioNotFoundError(scenario_id)

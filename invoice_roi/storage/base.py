from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class ScenarioStore(ABC):
    """Abstract base for all scenario record stores.

    Records are flat dicts as produced by ``scenarios.serializer.to_record``.
    The store assigns ``id`` and ``created_at`` on insert. Every method is a
    single request: implementations must not retry, and must raise
    ``PersistenceError`` rather than report a failed write as success.
    """

    @abstractmethod
    async def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        """Persist a new record and return it as stored."""
        ...

    @abstractmethod
    async def list_all(self) -> list[dict[str, Any]]:
        """Return every record, newest ``created_at`` first."""
        ...

    @abstractmethod
    async def get_by_id(self, scenario_id: str) -> Optional[dict[str, Any]]:
        """Return one record, or None if it does not exist."""
        ...

    @abstractmethod
    async def delete_by_id(self, scenario_id: str) -> None:
        """Delete one record; raise ScenarioNotFoundError if absent."""
        ...

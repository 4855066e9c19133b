"""Scenario use cases: save, list, load and delete named calculations."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from invoice_roi.engine.calculator import CalculationEngine
from invoice_roi.engine.result import CalculatorResults
from invoice_roi.errors import MalformedRecordError, ScenarioNotFoundError
from invoice_roi.hooks.audit_hooks import log_scenario_action
from invoice_roi.models.inputs import CalculatorInputs
from invoice_roi.models.scenario import Scenario, ScenarioSummary
from invoice_roi.storage.base import ScenarioStore
from invoice_roi.validation import require_text, validate_email

from .serializer import scenario_from_record, summary_from_record, to_record

logger = logging.getLogger(__name__)

# Recent lifecycle entries kept per service; older ones live only in the log.
AUDIT_TRAIL_LIMIT = 500


@dataclass
class ScenarioListing:
    """Saved scenarios plus the ids of records that could not be read."""

    scenarios: list[ScenarioSummary]
    rejected: list[str] = field(default_factory=list)


class ScenarioService:
    """Coordinates the serializer and the injected store.

    Failures propagate to the caller unchanged: nothing is retried and a
    failed write is never reported as saved.
    """

    def __init__(self, store: ScenarioStore, engine: Optional[CalculationEngine] = None):
        self._store = store
        self._engine = engine or CalculationEngine()
        self.audit_trail: deque[dict[str, Any]] = deque(maxlen=AUDIT_TRAIL_LIMIT)

    async def save(
        self,
        name: str,
        user_email: str,
        inputs: CalculatorInputs,
        results: CalculatorResults,
    ) -> Scenario:
        """Persist a calculation that has already been run."""
        name = require_text(name, "Scenario name")
        user_email = validate_email(user_email)

        stored = await self._store.insert(to_record(inputs, results, name, user_email))
        scenario = scenario_from_record(stored)
        self.audit_trail.append(
            log_scenario_action("save", scenario.id, user_email, {"name": name})
        )
        return scenario

    async def list_scenarios(self) -> ScenarioListing:
        """Return summaries newest first; unreadable rows are reported, not shown."""
        listing = ScenarioListing(scenarios=[])
        for record in await self._store.list_all():
            try:
                listing.scenarios.append(summary_from_record(record))
            except MalformedRecordError as e:
                record_id = str(record.get("id", "<unknown>"))
                logger.warning(f"Rejected malformed scenario record {record_id}: {e}")
                listing.rejected.append(record_id)
        return listing

    async def load(self, scenario_id: str, recompute: bool = False) -> Scenario:
        """Rebuild a saved scenario exactly as stored.

        With ``recompute`` the stored inputs are run through the engine
        again and the fresh results replace the stored ones.
        """
        record = await self._store.get_by_id(scenario_id)
        if record is None:
            raise ScenarioNotFoundError(scenario_id)

        scenario = scenario_from_record(record)
        if recompute:
            scenario = replace(scenario, results=self._engine.calculate(scenario.inputs))
        self.audit_trail.append(
            log_scenario_action(
                "load", scenario.id, scenario.user_email, {"recompute": recompute}
            )
        )
        return scenario

    async def delete(self, scenario_id: str) -> None:
        await self._store.delete_by_id(scenario_id)
        self.audit_trail.append(log_scenario_action("delete", scenario_id))

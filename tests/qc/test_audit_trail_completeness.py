"""Tests for audit trail completeness across scenario lifecycle actions."""

import pytest

from invoice_roi.errors import ScenarioNotFoundError
from invoice_roi.scenarios.service import AUDIT_TRAIL_LIMIT


class TestAuditTrailCompleteness:
    """Verify that every successful save/load/delete leaves an audit entry."""

    async def _save(self, service, engine, inputs, name="Q4"):
        return await service.save(name, "ap@example.com", inputs, engine.calculate(inputs))

    @pytest.mark.asyncio
    async def test_every_action_has_audit_entry(self, scenario_service, engine, baseline_inputs):
        """save, load and delete each append one entry, in order."""
        saved = await self._save(scenario_service, engine, baseline_inputs)
        await scenario_service.load(saved.id)
        await scenario_service.delete(saved.id)

        actions = [e["action"] for e in scenario_service.audit_trail]
        assert actions == ["save", "load", "delete"]
        assert all(e["scenario_id"] == saved.id for e in scenario_service.audit_trail)

    @pytest.mark.asyncio
    async def test_audit_entry_has_required_fields(self, scenario_service, engine, baseline_inputs):
        saved = await self._save(scenario_service, engine, baseline_inputs)
        await scenario_service.load(saved.id, recompute=True)

        for entry in scenario_service.audit_trail:
            for key in ("action", "scenario_id", "user_email", "details", "timestamp"):
                assert key in entry, f"{entry['action']} entry missing {key}"
        save_entry, load_entry = scenario_service.audit_trail
        assert save_entry["details"] == {"name": "Q4"}
        assert save_entry["user_email"] == "ap@example.com"
        assert load_entry["details"] == {"recompute": True}

    @pytest.mark.asyncio
    async def test_listing_is_not_audited(self, scenario_service, engine, baseline_inputs):
        await self._save(scenario_service, engine, baseline_inputs)
        await scenario_service.list_scenarios()
        assert len(scenario_service.audit_trail) == 1

    @pytest.mark.asyncio
    async def test_failed_actions_not_audited(self, scenario_service):
        with pytest.raises(ScenarioNotFoundError):
            await scenario_service.load("missing")
        with pytest.raises(ScenarioNotFoundError):
            await scenario_service.delete("missing")
        assert list(scenario_service.audit_trail) == []

    @pytest.mark.asyncio
    async def test_audit_trail_is_bounded(self, scenario_service, engine, baseline_inputs):
        """A long-lived service keeps only the most recent entries."""
        saved = await self._save(scenario_service, engine, baseline_inputs)
        for _ in range(AUDIT_TRAIL_LIMIT + 10):
            await scenario_service.load(saved.id)

        assert len(scenario_service.audit_trail) == AUDIT_TRAIL_LIMIT
        assert all(e["action"] == "load" for e in scenario_service.audit_trail)

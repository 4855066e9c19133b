"""Shared test fixtures for the Invoice ROI Simulator test suite."""

from dataclasses import replace

import pytest

from invoice_roi.engine.calculator import CalculationEngine
from invoice_roi.errors import PersistenceError
from invoice_roi.models.inputs import CalculatorInputs
from invoice_roi.scenarios.service import ScenarioService
from invoice_roi.storage.base import ScenarioStore
from invoice_roi.storage.memory import InMemoryScenarioStore


@pytest.fixture
def engine() -> CalculationEngine:
    return CalculationEngine()


@pytest.fixture
def baseline_inputs() -> CalculatorInputs:
    """The reference mid-size AP team, using the default values of the calculator form.

    manual 37,500 / automated 500 / error savings 2,000 per month.
    """
    return CalculatorInputs(
        invoice_volume=1000,
        staff_count=3,
        hourly_wage=25,
        hours_per_invoice=0.5,
        manual_error_rate=0.05,
        auto_error_rate=0.01,
        error_cost=50,
        automated_cost_per_invoice=0.5,
        implementation_cost=10_000,
        time_horizon_months=12,
    )


@pytest.fixture
def zero_implementation_inputs(baseline_inputs) -> CalculatorInputs:
    return replace(baseline_inputs, implementation_cost=0)


@pytest.fixture
def negative_savings_inputs(baseline_inputs) -> CalculatorInputs:
    """Automation at $50/invoice costs more than manual labour plus errors."""
    return replace(baseline_inputs, automated_cost_per_invoice=50)


@pytest.fixture
def memory_store() -> InMemoryScenarioStore:
    return InMemoryScenarioStore()


@pytest.fixture
def scenario_service(memory_store) -> ScenarioService:
    return ScenarioService(memory_store)


def make_record(**overrides) -> dict:
    """A stored scenario row as a tabular backend returns it."""
    record = {
        "id": "2f1c5a8e-0000-4000-8000-000000000001",
        "created_at": "2024-10-01T09:30:00+00:00",
        "scenario_name": "Q4 Projection",
        "user_email": "ap.lead@example.com",
        "invoice_volume": 1000,
        "staff_count": 3,
        "hourly_wage": 25.0,
        "hours_per_invoice": 0.5,
        "manual_error_rate": 0.05,
        "auto_error_rate": 0.01,
        "error_cost": 50.0,
        "automated_cost_per_invoice": 0.5,
        "implementation_cost": 10000.0,
        "time_horizon_months": 12,
        "monthly_savings": 44850.0,
        "payback_months": 0.22296544035674470,
        "roi_percentage": 5282.0,
        "net_savings": 528200.0,
        "cumulative_savings": 538200.0,
        "manual_labor_cost": 37500.0,
        "automated_cost": 500.0,
    }
    record.update(overrides)
    return record


@pytest.fixture
def record_factory():
    """Build stored rows with per-test overrides."""
    return make_record


class FailingScenarioStore(ScenarioStore):
    """A store whose backend is unreachable. Counts every request it receives."""

    def __init__(self, reason: str = "connection refused"):
        self.reason = reason
        self.calls = 0

    def _fail(self, action: str):
        self.calls += 1
        raise PersistenceError(f"Failed to {action} scenario: {self.reason}")

    async def insert(self, record):
        self._fail("save")

    async def list_all(self):
        self._fail("list")

    async def get_by_id(self, scenario_id):
        self._fail("load")

    async def delete_by_id(self, scenario_id):
        self._fail("delete")


@pytest.fixture
def failing_store() -> FailingScenarioStore:
    return FailingScenarioStore()

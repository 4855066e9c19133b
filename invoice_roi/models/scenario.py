from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from invoice_roi.engine.result import CalculatorResults

from .inputs import CalculatorInputs


@dataclass(frozen=True)
class Scenario:
    """A named, persisted calculation. Never mutated after creation."""

    id: str
    name: str
    user_email: str
    created_at: datetime
    inputs: CalculatorInputs
    results: CalculatorResults


@dataclass(frozen=True)
class ScenarioSummary:
    """The slice of a scenario shown in the saved-scenarios list."""

    id: str
    name: str
    user_email: str
    created_at: datetime
    roi_percentage: float
    monthly_savings: float

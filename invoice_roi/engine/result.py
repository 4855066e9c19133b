"""Immutable result structure produced by the calculation engine."""

from __future__ import annotations

from dataclasses import dataclass

# Metrics that are floored at zero and always persisted with a scenario.
TOP_LINE_FIELDS: tuple[str, ...] = (
    "monthly_savings",
    "payback_months",
    "roi_percentage",
    "net_savings",
    "cumulative_savings",
)

# Monthly cost breakdown shown in the cost comparison.
BREAKDOWN_FIELDS: tuple[str, ...] = (
    "manual_labor_cost",
    "automated_cost",
)


@dataclass(frozen=True)
class CalculatorResults:
    """Financial outcome of a projection.

    ``cost_breakdown_known`` is False only for results rebuilt from a record
    that did not carry the breakdown; the two cost fields are then explicit
    zeros and must be treated as unknown, not as real costs.
    """

    monthly_savings: float
    payback_months: float
    roi_percentage: float
    net_savings: float
    cumulative_savings: float
    manual_labor_cost: float
    automated_cost: float
    cost_breakdown_known: bool = True

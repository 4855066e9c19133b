"""Core calculation engine.

Takes the invoicing parameters -> produces CalculatorResults. The engine is
stateless and never raises, so it is safe to call concurrently.
"""

from __future__ import annotations

import logging
import math

from invoice_roi.engine.formulas import (
    calc_automated_cost,
    calc_error_savings,
    calc_manual_labor_cost,
    calc_monthly_savings,
    safe_ratio,
)
from invoice_roi.engine.result import CalculatorResults
from invoice_roi.models.inputs import CalculatorInputs

logger = logging.getLogger(__name__)

# Fixed optimism uplift applied to every projected monthly saving.
# Changes require product sign-off.
BIAS_FACTOR = 1.15


def _floor_at_zero(value: float) -> float:
    """Report negative or non-finite projections as zero."""
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


class CalculationEngine:
    """Stateless engine that runs the ROI projection."""

    def calculate(self, inputs: CalculatorInputs) -> CalculatorResults:
        """Run the projection for a flat monthly run-rate over the horizon.

        Negative top-line metrics are floored at zero, so a scenario where
        automation costs more than it saves reads as "no benefit" rather
        than as a negative ROI.
        """
        manual_labor_cost = calc_manual_labor_cost(
            staff_count=inputs.staff_count,
            hourly_wage=inputs.hourly_wage,
            hours_per_invoice=inputs.hours_per_invoice,
            invoice_volume=inputs.invoice_volume,
        )
        automated_cost = calc_automated_cost(
            invoice_volume=inputs.invoice_volume,
            automated_cost_per_invoice=inputs.automated_cost_per_invoice,
        )
        error_savings = calc_error_savings(
            manual_error_rate=inputs.manual_error_rate,
            auto_error_rate=inputs.auto_error_rate,
            invoice_volume=inputs.invoice_volume,
            error_cost=inputs.error_cost,
        )
        monthly_savings_raw = calc_monthly_savings(
            manual_labor_cost=manual_labor_cost,
            error_savings=error_savings,
            automated_cost=automated_cost,
            bias_factor=BIAS_FACTOR,
        )

        cumulative_savings = monthly_savings_raw * inputs.time_horizon_months
        net_savings = cumulative_savings - inputs.implementation_cost

        # Payback is undefined without positive savings.
        if monthly_savings_raw > 0:
            payback_months = safe_ratio(inputs.implementation_cost, monthly_savings_raw)
        else:
            payback_months = 0.0
        roi_percentage = safe_ratio(net_savings, inputs.implementation_cost) * 100

        logger.debug(
            "Projection: manual=%.2f automated=%.2f error_savings=%.2f monthly_raw=%.2f",
            manual_labor_cost,
            automated_cost,
            error_savings,
            monthly_savings_raw,
        )

        return CalculatorResults(
            monthly_savings=_floor_at_zero(monthly_savings_raw),
            payback_months=_floor_at_zero(payback_months),
            roi_percentage=_floor_at_zero(roi_percentage),
            net_savings=_floor_at_zero(net_savings),
            cumulative_savings=_floor_at_zero(cumulative_savings),
            manual_labor_cost=manual_labor_cost,
            automated_cost=automated_cost,
        )


_ENGINE = CalculationEngine()


def compute(inputs: CalculatorInputs) -> CalculatorResults:
    """Map inputs to results with the default engine."""
    return _ENGINE.calculate(inputs)

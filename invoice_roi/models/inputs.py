from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class CalculatorInputs:
    """Business-process parameters describing the current invoicing operation.

    Error rates are ratios in [0, 1]. Percentage-scaled values coming from a
    form must be divided by 100 before they reach this object.
    """

    invoice_volume: float  # invoices per month
    staff_count: float
    hourly_wage: float  # fully loaded, currency/hour
    hours_per_invoice: float
    manual_error_rate: float
    auto_error_rate: float
    error_cost: float  # currency per erroneous invoice
    automated_cost_per_invoice: float
    implementation_cost: float  # one-time
    time_horizon_months: float

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the input field names in declaration order."""
        return [f.name for f in fields(cls)]

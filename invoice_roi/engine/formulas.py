"""Invoice-processing cost formulas.

Each function is a pure calculation with no side effects. All monetary
values are per month and in the same currency as the inputs. None of them
validate or raise: range checks belong to the request boundary, and the
engine must stay total for any numeric input.
"""

from __future__ import annotations


def calc_manual_labor_cost(
    staff_count: float,
    hourly_wage: float,
    hours_per_invoice: float,
    invoice_volume: float,
) -> float:
    """Manual_Cost = staff_count x hourly_wage x hours_per_invoice x invoice_volume"""
    return staff_count * hourly_wage * hours_per_invoice * invoice_volume


def calc_automated_cost(
    invoice_volume: float,
    automated_cost_per_invoice: float,
) -> float:
    """Automated_Cost = invoice_volume x automated_cost_per_invoice"""
    return invoice_volume * automated_cost_per_invoice


def calc_error_savings(
    manual_error_rate: float,
    auto_error_rate: float,
    invoice_volume: float,
    error_cost: float,
) -> float:
    """Error_Savings = (manual_rate - auto_rate) x invoice_volume x error_cost

    Negative when the automated process errs more often than the manual one.
    """
    return (manual_error_rate - auto_error_rate) * invoice_volume * error_cost


def calc_monthly_savings(
    manual_labor_cost: float,
    error_savings: float,
    automated_cost: float,
    bias_factor: float,
) -> float:
    """Monthly_Savings = (manual + error_savings - automated) x bias_factor"""
    return (manual_labor_cost + error_savings - automated_cost) * bias_factor


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 for a zero divisor instead of inf/NaN."""
    if denominator == 0:
        return 0.0
    return numerator / denominator

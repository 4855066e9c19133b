"""Display formatting for metrics shown on the dashboard and in reports."""

from __future__ import annotations

from typing import Optional

from invoice_roi.engine.result import CalculatorResults


def format_currency(value: float, decimals: int = 0) -> str:
    """$44,850 style; negatives as -$1,234."""
    rounded = round(value, decimals)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.{decimals}f}"


def format_percent(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f}%"


def format_months(value: float, decimals: int = 1) -> str:
    return f"{value:.{decimals}f} months"


def format_rate(ratio: float, decimals: int = 2) -> str:
    """Render a 0-1 ratio as a percentage, e.g. 0.05 -> 5.00%."""
    return format_percent(ratio * 100, decimals)


def cost_reduction_percentage(results: CalculatorResults) -> Optional[float]:
    """Share of the manual monthly cost removed by automation.

    None when the breakdown is unknown or there is no manual cost to reduce.
    """
    if not results.cost_breakdown_known or results.manual_labor_cost == 0:
        return None
    return (
        (results.manual_labor_cost - results.automated_cost)
        / results.manual_labor_cost
        * 100
    )


def display_metrics(results: CalculatorResults) -> dict[str, str]:
    """Formatted values for the results dashboard cards."""
    metrics = {
        "monthly_savings": format_currency(results.monthly_savings),
        "payback_period": format_months(results.payback_months),
        "roi_percentage": format_percent(results.roi_percentage),
        "net_savings": format_currency(results.net_savings),
        "cumulative_savings": format_currency(results.cumulative_savings),
    }
    if results.cost_breakdown_known:
        metrics["manual_monthly_cost"] = format_currency(results.manual_labor_cost)
        metrics["automated_monthly_cost"] = format_currency(results.automated_cost)
    else:
        metrics["manual_monthly_cost"] = "N/A"
        metrics["automated_monthly_cost"] = "N/A"
    return metrics

"""Tests for metric display formatting."""

from dataclasses import replace

import pytest

from invoice_roi.formatting import (
    cost_reduction_percentage,
    display_metrics,
    format_currency,
    format_months,
    format_percent,
    format_rate,
)


class TestFormatters:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (44_850, "$44,850"),
            (44_849.6, "$44,850"),
            (0, "$0"),
            (-1_234.4, "-$1,234"),
            (1_000_000, "$1,000,000"),
        ],
    )
    def test_currency(self, value, expected):
        assert format_currency(value) == expected

    def test_currency_with_cents(self):
        assert format_currency(0.5, decimals=2) == "$0.50"

    def test_percent(self):
        assert format_percent(5282) == "5282.0%"

    def test_months(self):
        assert format_months(10_000 / 44_850) == "0.2 months"

    def test_rate(self):
        assert format_rate(0.05) == "5.00%"


class TestCostReduction:
    def test_reference_reduction(self, engine, baseline_inputs):
        result = engine.calculate(baseline_inputs)
        # (37,500 - 500) / 37,500
        assert cost_reduction_percentage(result) == pytest.approx(98.6667, rel=1e-4)

    def test_unknown_breakdown(self, engine, baseline_inputs):
        result = replace(engine.calculate(baseline_inputs), cost_breakdown_known=False)
        assert cost_reduction_percentage(result) is None

    def test_no_manual_cost(self, engine, baseline_inputs):
        result = engine.calculate(replace(baseline_inputs, staff_count=0))
        assert cost_reduction_percentage(result) is None


class TestDisplayMetrics:
    def test_reference_cards(self, engine, baseline_inputs):
        metrics = display_metrics(engine.calculate(baseline_inputs))
        assert metrics == {
            "monthly_savings": "$44,850",
            "payback_period": "0.2 months",
            "roi_percentage": "5282.0%",
            "net_savings": "$528,200",
            "cumulative_savings": "$538,200",
            "manual_monthly_cost": "$37,500",
            "automated_monthly_cost": "$500",
        }

    def test_unknown_breakdown_shown_as_na(self, engine, baseline_inputs):
        result = replace(engine.calculate(baseline_inputs), cost_breakdown_known=False)
        metrics = display_metrics(result)
        assert metrics["manual_monthly_cost"] == "N/A"
        assert metrics["automated_monthly_cost"] == "N/A"

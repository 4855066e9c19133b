"""Pydantic request/response models for the HTTP API.

Range checks live here, at the boundary: the engine assumes well-formed
numeric input and never validates.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from invoice_roi.engine.result import CalculatorResults
from invoice_roi.formatting import cost_reduction_percentage, display_metrics
from invoice_roi.models.inputs import CalculatorInputs
from invoice_roi.models.scenario import Scenario, ScenarioSummary


class _InputFields(BaseModel):
    """Fields shared by the form and the ratio-based inputs payload."""

    model_config = ConfigDict(allow_inf_nan=False)

    invoice_volume: float = Field(ge=0, description="Invoices processed per month")
    staff_count: float = Field(ge=0, description="Headcount doing manual processing")
    hourly_wage: float = Field(ge=0, description="Fully loaded labour cost per hour")
    hours_per_invoice: float = Field(ge=0, description="Manual processing hours per invoice")
    error_cost: float = Field(ge=0, description="Cost per erroneous invoice")
    automated_cost_per_invoice: float = Field(ge=0, description="Automated cost per invoice")
    implementation_cost: float = Field(ge=0, description="One-time adoption cost")
    time_horizon_months: float = Field(ge=1, description="Projection window in months")


class CalculatorForm(_InputFields):
    """Calculator form as a user fills it in: error rates in percent (0-100)."""

    manual_error_rate_percent: float = Field(ge=0, le=100)
    auto_error_rate_percent: float = Field(ge=0, le=100)

    def to_inputs(self) -> CalculatorInputs:
        return CalculatorInputs(
            invoice_volume=self.invoice_volume,
            staff_count=self.staff_count,
            hourly_wage=self.hourly_wage,
            hours_per_invoice=self.hours_per_invoice,
            manual_error_rate=self.manual_error_rate_percent / 100,
            auto_error_rate=self.auto_error_rate_percent / 100,
            error_cost=self.error_cost,
            automated_cost_per_invoice=self.automated_cost_per_invoice,
            implementation_cost=self.implementation_cost,
            time_horizon_months=self.time_horizon_months,
        )


class CalculatorInputsSchema(_InputFields):
    """Engine inputs with error rates as ratios (0-1)."""

    manual_error_rate: float = Field(ge=0, le=1.0)
    auto_error_rate: float = Field(ge=0, le=1.0)

    def to_inputs(self) -> CalculatorInputs:
        return CalculatorInputs(**self.model_dump())


class CalculatorInputsView(BaseModel):
    """Inputs as echoed back in responses. Stored rows are not range-checked."""

    invoice_volume: float
    staff_count: float
    hourly_wage: float
    hours_per_invoice: float
    manual_error_rate: float
    auto_error_rate: float
    error_cost: float
    automated_cost_per_invoice: float
    implementation_cost: float
    time_horizon_months: float

    @classmethod
    def from_inputs(cls, inputs: CalculatorInputs) -> CalculatorInputsView:
        return cls(**{name: getattr(inputs, name) for name in CalculatorInputs.field_names()})


class CalculatorResultsSchema(BaseModel):
    monthly_savings: float
    payback_months: float
    roi_percentage: float
    net_savings: float
    cumulative_savings: float
    manual_labor_cost: float
    automated_cost: float
    cost_breakdown_known: bool = True

    @classmethod
    def from_results(cls, results: CalculatorResults) -> CalculatorResultsSchema:
        return cls(
            monthly_savings=results.monthly_savings,
            payback_months=results.payback_months,
            roi_percentage=results.roi_percentage,
            net_savings=results.net_savings,
            cumulative_savings=results.cumulative_savings,
            manual_labor_cost=results.manual_labor_cost,
            automated_cost=results.automated_cost,
            cost_breakdown_known=results.cost_breakdown_known,
        )


class CostComparisonData(BaseModel):
    """Data for the manual-vs-automated monthly cost bar chart."""

    labels: list[str] = ["Manual Process", "Automated Process"]
    values: list[float]
    savings_percentage: Optional[float] = None

    @classmethod
    def from_results(cls, results: CalculatorResults) -> Optional[CostComparisonData]:
        if not results.cost_breakdown_known:
            return None
        return cls(
            values=[results.manual_labor_cost, results.automated_cost],
            savings_percentage=cost_reduction_percentage(results),
        )


class CalculateResponse(BaseModel):
    inputs: CalculatorInputsView
    results: CalculatorResultsSchema
    display: dict[str, str]
    cost_comparison: Optional[CostComparisonData] = None

    @classmethod
    def build(cls, inputs: CalculatorInputs, results: CalculatorResults) -> CalculateResponse:
        return cls(
            inputs=CalculatorInputsView.from_inputs(inputs),
            results=CalculatorResultsSchema.from_results(results),
            display=display_metrics(results),
            cost_comparison=CostComparisonData.from_results(results),
        )


class SaveScenarioRequest(BaseModel):
    scenario_name: str
    user_email: str
    inputs: CalculatorInputsSchema


class ScenarioResponse(BaseModel):
    id: str
    scenario_name: str
    user_email: str
    created_at: datetime
    inputs: CalculatorInputsView
    results: CalculatorResultsSchema
    display: dict[str, str]

    @classmethod
    def from_scenario(cls, scenario: Scenario) -> ScenarioResponse:
        return cls(
            id=scenario.id,
            scenario_name=scenario.name,
            user_email=scenario.user_email,
            created_at=scenario.created_at,
            inputs=CalculatorInputsView.from_inputs(scenario.inputs),
            results=CalculatorResultsSchema.from_results(scenario.results),
            display=display_metrics(scenario.results),
        )


class ScenarioSummaryResponse(BaseModel):
    id: str
    scenario_name: str
    user_email: str
    created_at: datetime
    roi_percentage: float
    monthly_savings: float

    @classmethod
    def from_summary(cls, summary: ScenarioSummary) -> ScenarioSummaryResponse:
        return cls(
            id=summary.id,
            scenario_name=summary.name,
            user_email=summary.user_email,
            created_at=summary.created_at,
            roi_percentage=summary.roi_percentage,
            monthly_savings=summary.monthly_savings,
        )


class ScenarioListResponse(BaseModel):
    scenarios: list[ScenarioSummaryResponse]
    rejected: list[str] = []


class ReportRequest(BaseModel):
    """Report for either fresh inputs or a saved scenario, not both."""

    company_name: str
    contact_email: str
    inputs: Optional[CalculatorInputsSchema] = None
    scenario_id: Optional[str] = None

    @model_validator(mode="after")
    def exactly_one_source(self) -> ReportRequest:
        if (self.inputs is None) == (self.scenario_id is None):
            raise ValueError("Provide exactly one of 'inputs' or 'scenario_id'")
        return self

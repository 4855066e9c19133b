"""Assemble the downloadable ROI report.

The report only lays out values that were already computed; it never runs
the engine itself.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from io import BytesIO
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib.pagesizes import letter
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from invoice_roi.config.settings import Settings, get_settings
from invoice_roi.engine.result import CalculatorResults
from invoice_roi.errors import ReportGenerationError
from invoice_roi.formatting import (
    cost_reduction_percentage,
    format_currency,
    format_months,
    format_percent,
    format_rate,
)
from invoice_roi.models.inputs import CalculatorInputs
from invoice_roi.validation import require_text, validate_email

from .helpers import label_value_table, section_bar, title_bar
from .styles import pdf_palette, pdf_styles

logger = logging.getLogger(__name__)


def _num(value: float) -> str:
    if float(value).is_integer():
        return f"{value:,.0f}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def report_filename(company_name: str, report_date: Optional[date] = None) -> str:
    """ROI-Report-<Company-Name>-<YYYY-MM-DD>.pdf"""
    report_date = report_date or date.today()
    slug = re.sub(r"\s+", "-", company_name.strip())
    slug = re.sub(r"[^\w.-]", "", slug, flags=re.ASCII)
    return f"ROI-Report-{slug}-{report_date.isoformat()}.pdf"


def key_metric_rows(results: CalculatorResults) -> list[list[str]]:
    return [
        ["Monthly Savings", format_currency(results.monthly_savings, 2)],
        ["Payback Period", format_months(results.payback_months)],
        ["ROI Percentage", format_percent(results.roi_percentage)],
        ["Net Savings", format_currency(results.net_savings, 2)],
        ["Cumulative Savings", format_currency(results.cumulative_savings, 2)],
    ]


def input_parameter_rows(inputs: CalculatorInputs) -> list[list[str]]:
    return [
        ["Monthly Invoice Volume", _num(inputs.invoice_volume)],
        ["Staff Count", _num(inputs.staff_count)],
        ["Hourly Wage", f"${_num(inputs.hourly_wage)}"],
        ["Hours per Invoice", _num(inputs.hours_per_invoice)],
        ["Manual Error Rate", format_rate(inputs.manual_error_rate)],
        ["Automated Error Rate", format_rate(inputs.auto_error_rate)],
        ["Cost per Error", f"${_num(inputs.error_cost)}"],
        ["Automated Cost per Invoice", f"${_num(inputs.automated_cost_per_invoice)}"],
        ["Implementation Cost", f"${_num(inputs.implementation_cost)}"],
        ["Time Horizon", f"{_num(inputs.time_horizon_months)} months"],
    ]


def cost_comparison_rows(results: CalculatorResults) -> Optional[list[list[str]]]:
    """None when the stored scenario did not carry the cost breakdown."""
    if not results.cost_breakdown_known:
        return None
    rows = [
        ["Manual Monthly Cost", format_currency(results.manual_labor_cost, 2)],
        ["Automated Monthly Cost", format_currency(results.automated_cost, 2)],
    ]
    reduction = cost_reduction_percentage(results)
    if reduction is not None:
        rows.append(["Cost Reduction", format_percent(reduction)])
    return rows


def build_report(
    inputs: CalculatorInputs,
    results: CalculatorResults,
    company_name: str,
    contact_email: str,
    report_date: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> bytes:
    """Render the PDF report and return its bytes."""
    company_name = require_text(company_name, "Company name")
    contact_email = validate_email(contact_email, "Contact email")
    report_date = report_date or date.today()
    settings = settings or get_settings()

    pal = pdf_palette()
    styles = pdf_styles()
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=letter,
        title=settings.report_title,
        author=company_name,
    )
    content_w = doc.width

    story = [
        title_bar(escape(settings.report_title), styles["ReportTitle"], pal, content_w),
        Spacer(1, 18),
        Paragraph(f"Company: {escape(company_name)}", styles["CompanyLine"]),
        Paragraph(f"Contact: {escape(contact_email)}", styles["BodyText"]),
        Paragraph(f"Report Date: {report_date.isoformat()}", styles["BodyText"]),
        Spacer(1, 18),
        section_bar("Key ROI Metrics", pal, content_w),
        Spacer(1, 6),
        label_value_table(key_metric_rows(results), content_w, pal),
        Spacer(1, 18),
        section_bar("Input Parameters", pal, content_w),
        Spacer(1, 6),
        label_value_table(input_parameter_rows(inputs), content_w, pal),
        Spacer(1, 18),
        section_bar("Cost Comparison", pal, content_w),
        Spacer(1, 6),
    ]

    comparison = cost_comparison_rows(results)
    if comparison is None:
        story.append(Paragraph(
            "Cost breakdown not available for this saved scenario.",
            styles["BodyText"],
        ))
    else:
        highlight = len(comparison) - 1 if len(comparison) == 3 else None
        story.append(label_value_table(comparison, content_w, pal, highlight_row=highlight))

    def _footer(canvas, document):
        canvas.saveState()
        canvas.setFont("Helvetica", 10)
        canvas.setFillColor(pal["MUTED"])
        canvas.drawCentredString(letter[0] / 2, 20, settings.report_footer)
        canvas.restoreState()

    try:
        doc.build(story, onFirstPage=_footer, onLaterPages=_footer)
    except Exception as e:
        logger.exception(f"Report generation failed for {company_name}")
        raise ReportGenerationError(f"Failed to generate PDF report: {e}") from e

    return buffer.getvalue()

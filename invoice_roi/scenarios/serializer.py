"""Flatten calculations into scenario records and rebuild them on reload.

Records are plain dicts keyed by snake_case column names, the shape a
tabular store such as Supabase/Postgres returns. Some backends hand numeric
columns back as text, so every field is coerced explicitly and a record that
cannot be fully rebuilt is rejected as a whole.
"""

from __future__ import annotations

import math
import re
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping

from invoice_roi.engine.result import BREAKDOWN_FIELDS, TOP_LINE_FIELDS, CalculatorResults
from invoice_roi.errors import InvalidInputError, MalformedRecordError
from invoice_roi.models.inputs import CalculatorInputs
from invoice_roi.models.scenario import Scenario, ScenarioSummary

INPUT_COLUMNS: tuple[str, ...] = tuple(CalculatorInputs.field_names())

# Decimal text as a numeric or float8 column renders it: no underscores,
# no padding, no inf/nan spellings.
_NUMERIC_TEXT = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _coerce_number(record: Mapping[str, Any], column: str) -> float:
    """Return ``record[column]`` as a finite float or reject the record."""
    if column not in record:
        raise MalformedRecordError(f"Missing required field '{column}'", field_name=column)

    raw = record[column]
    # bool is an int subclass; a flag in a numeric column is a schema error.
    if raw is None or isinstance(raw, bool):
        raise MalformedRecordError(
            f"Field '{column}' is not numeric: {raw!r}", field_name=column
        )
    if isinstance(raw, (int, float, Decimal)):
        value = float(raw)
    elif isinstance(raw, str):
        if not _NUMERIC_TEXT.fullmatch(raw):
            raise MalformedRecordError(
                f"Field '{column}' is not numeric: {raw!r}", field_name=column
            )
        value = float(raw)
    else:
        raise MalformedRecordError(
            f"Field '{column}' has unsupported type {type(raw).__name__}",
            field_name=column,
        )

    if not math.isfinite(value):
        raise MalformedRecordError(
            f"Field '{column}' is not finite: {raw!r}", field_name=column
        )
    return value


def _coerce_text(record: Mapping[str, Any], column: str) -> str:
    raw = record.get(column)
    if raw is None or not str(raw).strip():
        raise MalformedRecordError(f"Missing required field '{column}'", field_name=column)
    return str(raw)


def _coerce_timestamp(record: Mapping[str, Any], column: str = "created_at") -> datetime:
    raw = record.get(column)
    if isinstance(raw, datetime):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        raise MalformedRecordError(f"Missing required field '{column}'", field_name=column)
    try:
        return datetime.fromisoformat(raw.strip())
    except ValueError:
        raise MalformedRecordError(
            f"Field '{column}' is not an ISO timestamp: {raw!r}", field_name=column
        ) from None


def to_record(
    inputs: CalculatorInputs,
    results: CalculatorResults,
    name: str,
    email: str,
) -> dict[str, Any]:
    """Flatten a calculation into an insertable record.

    Identity and creation time are assigned by the store, not here. Every
    numeric column must be finite, otherwise the record could never be
    rebuilt by ``from_record``; such calculations are rejected up front.
    """
    columns = [(c, getattr(inputs, c)) for c in INPUT_COLUMNS]
    columns += [(c, getattr(results, c)) for c in TOP_LINE_FIELDS]
    if results.cost_breakdown_known:
        columns += [(c, getattr(results, c)) for c in BREAKDOWN_FIELDS]

    record: dict[str, Any] = {
        "scenario_name": name,
        "user_email": email,
    }
    for column, value in columns:
        value = float(value)
        if not math.isfinite(value):
            raise InvalidInputError(
                f"Cannot save scenario: '{column}' is out of range ({value})"
            )
        record[column] = value
    return record


def from_record(record: Mapping[str, Any]) -> tuple[CalculatorInputs, CalculatorResults]:
    """Rebuild inputs and results from a persisted record without recomputation.

    Records written before the cost breakdown was stored get explicit zeros
    for it and ``cost_breakdown_known=False``.
    """
    inputs = CalculatorInputs(**{c: _coerce_number(record, c) for c in INPUT_COLUMNS})
    top_line = {c: _coerce_number(record, c) for c in TOP_LINE_FIELDS}

    present = [c for c in BREAKDOWN_FIELDS if record.get(c) is not None]
    if len(present) == len(BREAKDOWN_FIELDS):
        breakdown = {c: _coerce_number(record, c) for c in BREAKDOWN_FIELDS}
        known = True
    elif present:
        raise MalformedRecordError(
            f"Incomplete cost breakdown: only {present} present",
            field_name=present[0],
        )
    else:
        breakdown = {c: 0.0 for c in BREAKDOWN_FIELDS}
        known = False

    results = CalculatorResults(**top_line, **breakdown, cost_breakdown_known=known)
    return inputs, results


def scenario_from_record(record: Mapping[str, Any]) -> Scenario:
    """Rebuild a full Scenario, including identity and ownership."""
    inputs, results = from_record(record)
    return Scenario(
        id=_coerce_text(record, "id"),
        name=_coerce_text(record, "scenario_name"),
        user_email=_coerce_text(record, "user_email"),
        created_at=_coerce_timestamp(record),
        inputs=inputs,
        results=results,
    )


def summary_from_record(record: Mapping[str, Any]) -> ScenarioSummary:
    """Rebuild the list-view slice of a record."""
    return ScenarioSummary(
        id=_coerce_text(record, "id"),
        name=_coerce_text(record, "scenario_name"),
        user_email=_coerce_text(record, "user_email"),
        created_at=_coerce_timestamp(record),
        roi_percentage=_coerce_number(record, "roi_percentage"),
        monthly_savings=_coerce_number(record, "monthly_savings"),
    )

"""Exception taxonomy for the ROI simulator.

The calculation engine never raises; everything here belongs to the
boundaries around it (request validation, persistence, reporting).
"""

from __future__ import annotations


class ROISimulatorError(Exception):
    """Base class for all errors surfaced to the initiating user action."""


class InvalidInputError(ROISimulatorError, ValueError):
    """A caller-supplied value is missing, non-numeric or out of range."""


class MalformedRecordError(ROISimulatorError, ValueError):
    """A persisted scenario record cannot be reconstructed."""

    def __init__(self, message: str, field_name: str | None = None):
        super().__init__(message)
        self.field_name = field_name


class ScenarioNotFoundError(ROISimulatorError):
    """No scenario exists with the requested id."""

    def __init__(self, scenario_id: str):
        super().__init__(f"Scenario '{scenario_id}' not found")
        self.scenario_id = scenario_id


class PersistenceError(ROISimulatorError):
    """The scenario store is unreachable or rejected the request."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ReportGenerationError(ROISimulatorError):
    """The report document could not be assembled."""

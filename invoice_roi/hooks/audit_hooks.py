"""Audit hooks: logs scenario lifecycle actions for the audit trail."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)


def log_scenario_action(
    action: str,
    scenario_id: str | None,
    user_email: str | None = None,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Record a save/load/delete of a scenario in the audit log.

    Returns the audit entry dict for downstream persistence.
    """
    entry = {
        "action": action,
        "scenario_id": scenario_id,
        "user_email": user_email,
        "details": details or {},
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
    }
    logger.info("Scenario audit: %s → %s", action, scenario_id)
    return entry

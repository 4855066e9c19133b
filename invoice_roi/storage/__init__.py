from __future__ import annotations

import logging

from invoice_roi.config.settings import Settings

from .base import ScenarioStore
from .memory import InMemoryScenarioStore
from .supabase_store import SupabaseScenarioStore

logger = logging.getLogger(__name__)


def build_scenario_store(settings: Settings) -> ScenarioStore:
    """Use Supabase when credentials are configured, else keep scenarios in memory."""
    if settings.supabase_url and settings.supabase_key:
        logger.info("Using Supabase scenario store (table=%s)", settings.scenarios_table)
        return SupabaseScenarioStore.from_settings(settings)
    logger.warning("Supabase not configured; scenarios are kept in memory only")
    return InMemoryScenarioStore()


__all__ = [
    "ScenarioStore",
    "InMemoryScenarioStore",
    "SupabaseScenarioStore",
    "build_scenario_store",
]

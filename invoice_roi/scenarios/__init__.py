from .serializer import from_record, scenario_from_record, summary_from_record, to_record
from .service import ScenarioListing, ScenarioService

__all__ = [
    "to_record",
    "from_record",
    "scenario_from_record",
    "summary_from_record",
    "ScenarioListing",
    "ScenarioService",
]

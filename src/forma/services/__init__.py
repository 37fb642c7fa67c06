"""Services for forma."""

from .catalog import add_manual_exercise, build_manual_entry
from .ingest import IngestResult, IngestService
from .planner import PlanService

__all__ = [
    "add_manual_exercise",
    "build_manual_entry",
    "IngestResult",
    "IngestService",
    "PlanService",
]

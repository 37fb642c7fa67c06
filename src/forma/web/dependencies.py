"""Request-scoped helpers shared by routers."""

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..config import Settings
from ..db.repositories import ExerciseRepository
from ..services.ingest import IngestService
from ..services.planner import PlanService


def get_templates(request: Request) -> Jinja2Templates:
    """Get templates from app state."""
    return request.app.state.templates


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repository(request: Request) -> ExerciseRepository:
    return ExerciseRepository(request.app.state.db_path)


def get_plan_service(request: Request) -> PlanService:
    return PlanService.from_settings(
        get_settings(request),
        get_repository(request),
        client_factory=request.app.state.client_factory,
    )


def get_ingest_service(request: Request) -> IngestService:
    return IngestService.from_settings(
        get_settings(request),
        get_repository(request),
        client_factory=request.app.state.client_factory,
    )

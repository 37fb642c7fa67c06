"""Plan generation routes."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from ...agents.dispatcher import is_rate_limit_error
from ...errors import FormaError, InputValidationError, MalformedResponseError
from ...generators.blueprint import BlueprintGenerator
from ...models.exercises import EQUIPMENT_OPTIONS
from ...models.plan import UserConstraints, WorkoutPlan
from ..dependencies import get_plan_service, get_templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["plans"])

GOAL_OPTIONS = ["hypertrophy", "strength", "endurance"]
DURATION_OPTIONS = [30, 45, 60, 75, 90]


async def _read_json(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError:
        raise InputValidationError("Request body must be JSON")
    if not isinstance(body, dict):
        raise InputValidationError("Request body must be a JSON object")
    return body


@router.get("/", response_class=HTMLResponse)
async def planner_page(request: Request):
    """Planner form and results view."""
    templates = get_templates(request)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "goals": GOAL_OPTIONS,
            "durations": DURATION_OPTIONS,
            "equipment": [item.upper() for item in EQUIPMENT_OPTIONS if item != "Machine"],
        },
    )


@router.post("/api/generate-plan")
async def generate_plan(request: Request):
    """Generate an enriched workout plan.

    Body: ``{"userInputs": {"goals": [...], "duration": "...", "equipment": "...", "days": 4}}``
    """
    body = await _read_json(request)
    constraints = UserConstraints.from_dict(body.get("userInputs"))
    service = get_plan_service(request)

    try:
        plan = await service.generate(constraints)
    except FormaError:
        raise
    except Exception as e:
        logger.exception("Error generating workout plan")
        if is_rate_limit_error(e):
            return JSONResponse({"error": "High traffic. Please wait 1 minute."}, status_code=429)
        return JSONResponse(
            {"error": "Failed to generate workout plan", "details": str(e)},
            status_code=500,
        )

    return plan.to_dict()


@router.post("/api/blueprint")
async def download_blueprint(request: Request):
    """Render an enriched plan (as returned by generate-plan) to PDF."""
    body = await _read_json(request)
    try:
        plan = WorkoutPlan.from_dict(body)
    except MalformedResponseError as e:
        raise InputValidationError(f"Invalid plan: {e.message}")

    pdf = BlueprintGenerator().render_pdf(plan)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="FORMA_Blueprint.pdf"'},
    )

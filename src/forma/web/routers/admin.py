"""Admin routes: PIN gate, manual entry and Neural Ingest."""

import hmac
import logging

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import HTMLResponse, JSONResponse

from ...errors import ConfigurationError, FormaError, InputValidationError
from ...models.exercises import EQUIPMENT_OPTIONS, DifficultyTier, TargetMuscle
from ...services.catalog import add_manual_exercise, build_manual_entry
from ..dependencies import get_ingest_service, get_repository, get_settings, get_templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["admin"])


@router.get("/admin", response_class=HTMLResponse)
async def admin_page(request: Request):
    """Admin console. The PIN gate is enforced client-side only."""
    templates = get_templates(request)
    return templates.TemplateResponse(
        request,
        "admin.html",
        {
            "muscles": [m.value for m in TargetMuscle],
            "equipment": EQUIPMENT_OPTIONS,
            "difficulties": [(tier.value, tier.label) for tier in DifficultyTier],
        },
    )


@router.post("/api/admin/pin")
async def check_pin(request: Request, pin: str = Form("")):
    """Compare a PIN with the configured one.

    The page keeps the result in sessionStorage for the tab's lifetime;
    nothing server-side depends on it.
    """
    configured = get_settings(request).admin_pin
    if not configured:
        raise ConfigurationError("Admin PIN not configured")
    return {"success": hmac.compare_digest(pin.encode(), configured.encode())}


@router.post("/api/admin/exercises")
async def add_exercise(
    request: Request,
    name: str = Form(""),
    target_muscle: str = Form(TargetMuscle.CHEST.value),
    equipment: list[str] = Form([]),
    difficulty_tier: int = Form(DifficultyTier.INTERMEDIATE.value),
    science_note: str = Form(""),
):
    """Insert a single exercise from the admin form."""
    draft = build_manual_entry(
        name=name,
        target_muscle=target_muscle,
        equipment=equipment,
        difficulty_tier=difficulty_tier,
        science_note=science_note,
    )
    exercise = await add_manual_exercise(get_repository(request), draft)
    return {"success": True, "exercise": exercise.to_dict()}


@router.post("/api/admin/ingest")
async def ingest(request: Request, file: UploadFile | None = File(None)):
    """Neural Ingest: extract exercises from an uploaded PDF, CSV or text file."""
    if file is None or not file.filename:
        raise InputValidationError("No file provided")

    data = await file.read()
    service = get_ingest_service(request)

    try:
        result = await service.ingest_document(file.filename, file.content_type, data)
    except FormaError:
        raise
    except Exception as e:
        logger.exception("[Ingest] Unexpected error")
        return JSONResponse({"error": str(e) or "Processing failed"}, status_code=500)

    return result.to_dict()

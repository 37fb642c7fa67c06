"""Catalog browsing routes."""

from fastapi import APIRouter, Request

from ..dependencies import get_repository

router = APIRouter(prefix="/api/exercises", tags=["catalog"])


@router.get("")
async def list_exercises(request: Request, target_muscle: str | None = None):
    """List catalog rows, optionally for one target muscle."""
    repo = get_repository(request)
    if target_muscle:
        exercises = await repo.get_by_target_muscle(target_muscle)
    else:
        exercises = await repo.list_all()
    return {
        "count": len(exercises),
        "exercises": [exercise.to_dict() for exercise in exercises],
    }

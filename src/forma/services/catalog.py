"""Manual catalog maintenance."""

import logging

from ..db.repositories import ExerciseRepository
from ..errors import InputValidationError
from ..models.exercises import DifficultyTier, Exercise, ExerciseDraft, TargetMuscle

logger = logging.getLogger(__name__)


def build_manual_entry(
    name: str,
    target_muscle: str,
    equipment: list[str],
    difficulty_tier: int = DifficultyTier.INTERMEDIATE,
    science_note: str | None = None,
) -> ExerciseDraft:
    """Validate an admin form submission.

    Raises:
        InputValidationError: on a blank name, unknown muscle, no equipment, or a bad tier
    """
    if not name or not name.strip():
        raise InputValidationError("Exercise name required")

    if target_muscle not in {m.value for m in TargetMuscle}:
        raise InputValidationError(f"Unknown target muscle: {target_muscle}")

    equipment = [item.strip() for item in equipment if item and item.strip()]
    if not equipment:
        raise InputValidationError("Select at least one equipment type")

    try:
        tier = DifficultyTier(int(difficulty_tier))
    except ValueError:
        raise InputValidationError(f"Invalid difficulty tier: {difficulty_tier}")

    return ExerciseDraft(
        name=name.strip(),
        target_muscle=target_muscle,
        equipment=equipment,
        difficulty_tier=tier,
        science_note=(science_note or "").strip() or None,
    )


async def add_manual_exercise(repository: ExerciseRepository, draft: ExerciseDraft) -> Exercise:
    """Insert one admin-entered exercise and return it with its ID."""
    exercise = draft.to_exercise()
    exercise.id = await repository.add(draft)
    logger.info("Added exercise %r (id %s)", exercise.name, exercise.id)
    return exercise

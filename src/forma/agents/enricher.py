"""Attach catalog names and notes to model-generated plans."""

import logging

from ..models.exercises import Exercise
from ..models.plan import PlanDay, PlanExercise, WorkoutPlan

logger = logging.getLogger(__name__)


def build_catalog_lookup(exercises: list[Exercise]) -> dict[str, Exercise]:
    """Index exercises by ID.

    Keys are strings so a model that quotes numeric IDs still matches.
    """
    return {str(exercise.id): exercise for exercise in exercises}


def enrich_exercise(exercise: PlanExercise, lookup: dict[str, Exercise]) -> PlanExercise:
    """Return a copy of ``exercise`` with ``name`` and ``science_note`` set.

    Unknown IDs get a placeholder name and keep the model's own note.
    """
    record = lookup.get(str(exercise.id))
    if record is None:
        logger.warning("Model referenced unknown exercise id %r", exercise.id)

    name = record.name if record and record.name else f"Exercise {exercise.id}"
    science_note = record.science_note if record and record.science_note else exercise.note

    return PlanExercise(
        id=exercise.id,
        sets=exercise.sets,
        reps=exercise.reps,
        note=exercise.note,
        name=name,
        science_note=science_note,
    )


def enrich_plan(plan: WorkoutPlan, catalog: list[Exercise]) -> WorkoutPlan:
    """Enrich every exercise reference in ``plan`` from ``catalog``."""
    lookup = build_catalog_lookup(catalog)
    return WorkoutPlan(
        schedule=[
            PlanDay(
                day_name=day.day_name,
                exercises=[enrich_exercise(ex, lookup) for ex in day.exercises],
            )
            for day in plan.schedule
        ]
    )

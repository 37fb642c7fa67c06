"""Data models for forma."""

from .exercises import (
    COMMON_EXERCISES,
    DifficultyTier,
    Exercise,
    ExerciseDraft,
    TargetMuscle,
)
from .plan import PlanDay, PlanExercise, UserConstraints, WorkoutPlan

__all__ = [
    "COMMON_EXERCISES",
    "DifficultyTier",
    "Exercise",
    "ExerciseDraft",
    "PlanDay",
    "PlanExercise",
    "TargetMuscle",
    "UserConstraints",
    "WorkoutPlan",
]

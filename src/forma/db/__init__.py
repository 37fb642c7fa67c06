"""Database layer for forma."""

from .engine import get_db_path, init_db, seed_exercises
from .repositories import ExerciseRepository

__all__ = [
    "ExerciseRepository",
    "get_db_path",
    "init_db",
    "seed_exercises",
]

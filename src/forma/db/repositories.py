"""Data access layer for the exercise catalog."""

import json
from pathlib import Path

import aiosqlite

from ..models.exercises import Exercise, ExerciseDraft
from .engine import get_db_path


class ExerciseRepository:
    """Repository for the exercise catalog."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, exercise_id: int) -> Exercise | None:
        """Get an exercise by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE id = ?", (exercise_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def list_all(self) -> list[Exercise]:
        """List all exercises."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM exercises ORDER BY id")
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def list_names(self) -> list[str]:
        """All catalog names (full scan, used for duplicate checks)."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT name FROM exercises")
            rows = await cursor.fetchall()
            return [row[0] for row in rows]

    async def count(self) -> int:
        """Number of catalog rows."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT COUNT(*) FROM exercises")
            row = await cursor.fetchone()
            return row[0]

    async def get_by_equipment(self, equipment: list[str]) -> list[Exercise]:
        """Get exercises whose equipment overlaps the given labels."""
        if not equipment:
            return []

        placeholders = ", ".join("?" for _ in equipment)
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                f"""
                SELECT * FROM exercises
                WHERE EXISTS (
                    SELECT 1 FROM json_each(exercises.equipment)
                    WHERE json_each.value IN ({placeholders})
                )
                ORDER BY id
                """,
                tuple(equipment),
            )
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def get_by_target_muscle(self, target_muscle: str) -> list[Exercise]:
        """Get exercises for one target muscle label."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE target_muscle = ? ORDER BY name",
                (target_muscle,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def add(self, exercise: Exercise | ExerciseDraft) -> int:
        """Add a single exercise."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO exercises
                (name, target_muscle, equipment, difficulty_tier, science_note)
                VALUES (?, ?, ?, ?, ?)
                """,
                self._to_params(exercise),
            )
            await db.commit()
            return cursor.lastrowid

    async def add_many(self, exercises: list[ExerciseDraft]) -> list[int]:
        """Insert a batch in one transaction.

        Returns:
            The new row IDs, in input order
        """
        ids = []
        async with aiosqlite.connect(self.db_path) as db:
            for exercise in exercises:
                cursor = await db.execute(
                    """
                    INSERT INTO exercises
                    (name, target_muscle, equipment, difficulty_tier, science_note)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    self._to_params(exercise),
                )
                ids.append(cursor.lastrowid)
            await db.commit()
        return ids

    async def delete(self, exercise_id: int) -> None:
        """Delete an exercise."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM exercises WHERE id = ?", (exercise_id,))
            await db.commit()

    def _to_params(self, exercise: Exercise | ExerciseDraft) -> tuple:
        return (
            exercise.name,
            exercise.target_muscle,
            json.dumps(list(exercise.equipment)),
            int(exercise.difficulty_tier),
            exercise.science_note,
        )

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        """Convert a database row to an Exercise."""
        return Exercise(
            id=row["id"],
            name=row["name"],
            target_muscle=row["target_muscle"],
            equipment=json.loads(row["equipment"]),
            difficulty_tier=row["difficulty_tier"],
            science_note=row["science_note"],
        )

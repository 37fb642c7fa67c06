"""Database engine setup and initialization."""

import json
import logging
from pathlib import Path

import aiosqlite

from ..config import DATA_DIR

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "forma.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Exercise catalog. Names are deliberately not UNIQUE: duplicates are
        # filtered case-insensitively at ingest time instead.
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                target_muscle TEXT NOT NULL,
                equipment TEXT NOT NULL DEFAULT '[]',
                difficulty_tier INTEGER NOT NULL DEFAULT 2,
                science_note TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercises_target_muscle
            ON exercises(target_muscle)
        """)

        await db.commit()


async def seed_exercises(db_path: Path | None = None) -> int:
    """Seed the catalog with the starter exercises.

    Exercises whose name already exists (case-insensitive) are skipped.

    Returns:
        Number of exercises inserted
    """
    from ..models.exercises import COMMON_EXERCISES

    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        cursor = await db.execute("SELECT name FROM exercises")
        existing = {row[0].lower() for row in await cursor.fetchall()}

        count = 0
        for exercise in COMMON_EXERCISES:
            if exercise.name.lower() in existing:
                continue
            await db.execute(
                """
                INSERT INTO exercises
                (name, target_muscle, equipment, difficulty_tier, science_note)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    exercise.name,
                    exercise.target_muscle,
                    json.dumps(exercise.equipment),
                    int(exercise.difficulty_tier),
                    exercise.science_note,
                ),
            )
            count += 1

        await db.commit()

    logger.info("Seeded %d exercises into %s", count, db_path)
    return count

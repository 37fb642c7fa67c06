"""Workout plan generation service."""

import logging

import aiosqlite

from ..agents.client import ClientFactory, gemini_client_factory
from ..agents.dispatcher import KeyRotationDispatcher
from ..agents.enricher import enrich_plan
from ..agents.prompts import build_workout_prompt, format_catalog_context
from ..config import ApiCredential, Settings
from ..db.repositories import ExerciseRepository
from ..errors import CatalogEmptyError, StorageError
from ..models.exercises import BODYWEIGHT, Exercise
from ..models.plan import UserConstraints, WorkoutPlan
from ..utils.hashing import generate_input_hash

logger = logging.getLogger(__name__)


class PlanService:
    """Builds the prompt, calls the model with key failover, enriches the result."""

    def __init__(
        self,
        repository: ExerciseRepository,
        credential_pool: list[ApiCredential],
        client_factory: ClientFactory | None = None,
    ):
        self.repository = repository
        self.credential_pool = credential_pool
        self.client_factory = client_factory or gemini_client_factory()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        repository: ExerciseRepository,
        client_factory: ClientFactory | None = None,
    ) -> "PlanService":
        return cls(
            repository=repository,
            credential_pool=settings.credential_pool(),
            client_factory=client_factory or gemini_client_factory(settings.base_url),
        )

    async def select_exercises(self, equipment: list[str]) -> list[Exercise]:
        """Catalog rows matching the user's equipment.

        Falls back to bodyweight exercises when nothing matches.

        Raises:
            CatalogEmptyError: if the bodyweight fallback is empty too
            StorageError: if the catalog cannot be read
        """
        try:
            exercises = await self.repository.get_by_equipment(equipment)
            if not exercises:
                logger.info("No exercises for %s, falling back to bodyweight", equipment)
                exercises = await self.repository.get_by_equipment([BODYWEIGHT])
        except aiosqlite.Error as e:
            raise StorageError(f"Database error: {e}")

        if not exercises:
            raise CatalogEmptyError(
                "No exercises found matching your equipment. Please select different equipment."
            )
        return exercises

    async def generate(self, constraints: UserConstraints) -> WorkoutPlan:
        """Generate an enriched plan for ``constraints``."""
        logger.info(
            "Generating %d-day plan (request %s)",
            constraints.days,
            generate_input_hash(constraints.to_dict())[:12],
        )

        exercises = await self.select_exercises(constraints.equipment_list())
        prompt = build_workout_prompt(constraints, format_catalog_context(exercises))

        dispatcher = KeyRotationDispatcher(self.credential_pool, self.client_factory)
        result = await dispatcher.dispatch(prompt)

        plan = WorkoutPlan.from_dict(result.data)
        logger.info(
            "Plan generated by %s: %d days, %d exercises",
            result.credential.name,
            len(plan.schedule),
            plan.exercise_count(),
        )
        return enrich_plan(plan, exercises)

"""Tests for prompt construction."""

import json

from forma.agents.prompts import (
    build_extraction_prompt,
    build_workout_prompt,
    format_catalog_context,
    format_goal,
)
from forma.models.exercises import Exercise
from forma.models.plan import UserConstraints


class TestFormatGoal:
    """Tests for goal phrasing."""

    def test_single_goal(self):
        goal, focus = format_goal(["strength"])
        assert goal == "Strength"
        assert "strength" in focus

    def test_hybrid_goal(self):
        goal, focus = format_goal(["hypertrophy", "strength"])
        assert goal == "Hybrid Training (Hypertrophy + Strength)"
        assert "8-12" in focus
        assert "3-6" in focus


class TestWorkoutPrompt:
    """Tests for the plan prompt."""

    def test_catalog_context_omits_notes(self):
        context = format_catalog_context(
            [Exercise(id=5, name="Plank", target_muscle="Abs", equipment=["Bodyweight"], science_note="secret")]
        )
        assert json.loads(context) == [{"id": 5, "name": "Plank", "muscle": "Abs"}]
        assert "secret" not in context

    def test_prompt_contains_constraints(self):
        constraints = UserConstraints(goals=["endurance"], duration="30 minutes", equipment="Dumbbell", days=5)
        prompt = build_workout_prompt(constraints, '[{"id":1}]')

        assert '[{"id":1}]' in prompt
        assert "Generate EXACTLY 5 days" in prompt
        assert "Duration: 30 minutes" in prompt
        assert "Equipment: Dumbbell" in prompt
        assert '"schedule"' in prompt


class TestExtractionPrompt:
    """Tests for the ingest prompt."""

    def test_lists_muscles_and_text(self):
        prompt = build_extraction_prompt("Do 3 sets of goblet squats.")
        assert "Chest, Back, Legs, Shoulders, Arms, Abs" in prompt
        assert prompt.endswith("Do 3 sets of goblet squats.")

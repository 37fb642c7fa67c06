"""Tests for data models."""

import pytest

from forma.errors import InputValidationError, MalformedResponseError
from forma.models.exercises import (
    COMMON_EXERCISES,
    DifficultyTier,
    Exercise,
    ExerciseDraft,
    TargetMuscle,
)
from forma.models.plan import PlanExercise, UserConstraints, WorkoutPlan


class TestExercise:
    """Tests for Exercise model."""

    def test_exercise_to_dict(self):
        """Test exercise serialization."""
        exercise = Exercise(
            id=7,
            name="Bench Press",
            target_muscle=TargetMuscle.CHEST.value,
            equipment=["Barbell"],
            difficulty_tier=DifficultyTier.INTERMEDIATE,
            science_note="Press",
        )
        data = exercise.to_dict()

        assert data == {
            "id": 7,
            "name": "Bench Press",
            "target_muscle": "Chest",
            "equipment": ["Barbell"],
            "difficulty_tier": 2,
            "science_note": "Press",
        }

    def test_prompt_context_is_minified(self):
        exercise = Exercise(id=1, name="Push-Up", target_muscle="Chest", equipment=["Bodyweight"], science_note="x")
        assert exercise.to_prompt_context() == {"id": 1, "name": "Push-Up", "muscle": "Chest"}

    def test_draft_to_exercise(self):
        draft = ExerciseDraft(name="Plank", target_muscle="Abs", equipment=["Bodyweight"])
        exercise = draft.to_exercise()
        assert exercise.id is None
        assert exercise.name == "Plank"

    def test_difficulty_labels(self):
        assert DifficultyTier.BEGINNER.label == "Beginner"
        assert DifficultyTier.ADVANCED.label == "Advanced"

    def test_common_exercises_are_valid(self):
        """Starter catalog uses known muscles, has unique names and a bodyweight option."""
        muscles = {m.value for m in TargetMuscle}
        names = [ex.name.lower() for ex in COMMON_EXERCISES]

        assert len(names) == len(set(names))
        assert all(ex.target_muscle in muscles for ex in COMMON_EXERCISES)
        assert all(ex.equipment for ex in COMMON_EXERCISES)
        assert any("Bodyweight" in ex.equipment for ex in COMMON_EXERCISES)


class TestUserConstraints:
    """Tests for request validation."""

    def test_from_dict_full(self):
        constraints = UserConstraints.from_dict(
            {
                "goals": ["hypertrophy", "strength"],
                "duration": "60 minutes",
                "equipment": "DUMBBELL, BODYWEIGHT",
                "days": "3",
            }
        )
        assert constraints.goals == ["hypertrophy", "strength"]
        assert constraints.days == 3
        assert constraints.equipment_list() == ["Dumbbell", "Bodyweight"]

    def test_single_goal_string(self):
        constraints = UserConstraints.from_dict({"goal": "strength"})
        assert constraints.goals == ["strength"]
        assert constraints.days == 4
        assert constraints.equipment == "Bodyweight"

    def test_list_equipment_and_int_duration(self):
        constraints = UserConstraints.from_dict(
            {"goals": ["endurance"], "equipment": ["Barbell", "Cables"], "duration": 30}
        )
        assert constraints.equipment_list() == ["Barbell", "Cables"]
        assert constraints.duration == "30 minutes"

    def test_missing_input(self):
        with pytest.raises(InputValidationError, match="Missing userInputs"):
            UserConstraints.from_dict(None)

    @pytest.mark.parametrize("goals", [[], ["  "], None, 5, {"a": 1}])
    def test_no_goals(self, goals):
        with pytest.raises(InputValidationError, match="At least one goal"):
            UserConstraints.from_dict({"goals": goals, "days": 4})

    @pytest.mark.parametrize("days", [0, 8, "many"])
    def test_bad_days(self, days):
        with pytest.raises(InputValidationError):
            UserConstraints.from_dict({"goals": ["strength"], "days": days})

    def test_equipment_list_ignores_blanks(self):
        constraints = UserConstraints(goals=["strength"], equipment="barbell, ,dumbbell,")
        assert constraints.equipment_list() == ["Barbell", "Dumbbell"]


class TestWorkoutPlan:
    """Tests for plan parsing."""

    def test_from_dict(self):
        plan = WorkoutPlan.from_dict(
            {
                "schedule": [
                    {"day_name": "Day 1", "exercises": [{"id": 4, "sets": 3, "reps": "10", "note": "n"}]},
                    {"day_name": "Day 2", "exercises": []},
                ]
            }
        )
        assert len(plan.schedule) == 2
        assert plan.exercise_count() == 1
        assert plan.schedule[0].exercises[0].reps == "10"

    def test_round_trip_keeps_enrichment(self):
        exercise = PlanExercise(id=1, sets=3, reps="8", note="n", name="Bench Press", science_note="s")
        data = exercise.to_dict()
        assert data["name"] == "Bench Press"
        assert PlanExercise.from_dict(data) == exercise

    def test_unenriched_dict_omits_names(self):
        assert "name" not in PlanExercise(id=1, sets=3, reps="8").to_dict()

    @pytest.mark.parametrize("payload", [{}, {"schedule": "nope"}, [], {"schedule": [{"exercises": [{}]}]}])
    def test_malformed(self, payload):
        with pytest.raises(MalformedResponseError):
            WorkoutPlan.from_dict(payload)

"""Tests for plan enrichment."""

from forma.agents.enricher import build_catalog_lookup, enrich_exercise, enrich_plan
from forma.models.exercises import Exercise
from forma.models.plan import PlanDay, PlanExercise, WorkoutPlan

CATALOG = [
    Exercise(id=1, name="Bench Press", target_muscle="Chest", equipment=["Barbell"], science_note="Catalog note"),
    Exercise(id=2, name="Push-Up", target_muscle="Chest", equipment=["Bodyweight"], science_note=None),
]


class TestEnrichExercise:
    """Tests for single exercise enrichment."""

    def test_known_id(self):
        enriched = enrich_exercise(
            PlanExercise(id=1, sets=4, reps="8-10", note="Model note"), build_catalog_lookup(CATALOG)
        )
        assert enriched.name == "Bench Press"
        assert enriched.science_note == "Catalog note"
        assert enriched.note == "Model note"
        assert enriched.sets == 4

    def test_string_id_matches(self):
        enriched = enrich_exercise(PlanExercise(id="1", sets=3, reps="5"), build_catalog_lookup(CATALOG))
        assert enriched.name == "Bench Press"

    def test_unknown_id_gets_placeholder(self):
        enriched = enrich_exercise(
            PlanExercise(id=999, sets=3, reps="12", note="Model note"), build_catalog_lookup(CATALOG)
        )
        assert enriched.name == "Exercise 999"
        assert enriched.science_note == "Model note"

    def test_missing_catalog_note_uses_model_note(self):
        enriched = enrich_exercise(
            PlanExercise(id=2, sets=3, reps="15", note="Go slow"), build_catalog_lookup(CATALOG)
        )
        assert enriched.name == "Push-Up"
        assert enriched.science_note == "Go slow"


class TestEnrichPlan:
    """Tests for whole-plan enrichment."""

    def test_structure_preserved(self):
        plan = WorkoutPlan(
            schedule=[
                PlanDay(day_name="Day 1", exercises=[PlanExercise(id=1, sets=3, reps="8")]),
                PlanDay(day_name="Day 2", exercises=[PlanExercise(id=2, sets=3, reps="12")]),
            ]
        )
        enriched = enrich_plan(plan, CATALOG)

        assert [day.day_name for day in enriched.schedule] == ["Day 1", "Day 2"]
        assert enriched.schedule[1].exercises[0].name == "Push-Up"
        assert plan.schedule[0].exercises[0].name is None

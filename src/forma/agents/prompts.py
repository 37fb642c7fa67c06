"""Prompt templates for plan generation and catalog extraction."""

import json

from ..models.exercises import Exercise, TargetMuscle
from ..models.plan import UserConstraints


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def format_catalog_context(exercises: list[Exercise]) -> str:
    """Serialize the catalog excerpt for the prompt.

    Only id, name and muscle are sent; notes stay server-side and are
    attached during enrichment.
    """
    return json.dumps(
        [exercise.to_prompt_context() for exercise in exercises],
        separators=(",", ":"),
    )


def format_goal(goals: list[str]) -> tuple[str, str]:
    """Return the (goal, focus) prompt lines for one or several goals."""
    if len(goals) > 1:
        goal_text = f"Hybrid Training ({' + '.join(_capitalize(g) for g in goals)})"
        focus = (
            "Focus: Blend volume for size with heavy compound lifts for strength. "
            "Balance hypertrophy rep ranges (8-12) with strength rep ranges (3-6) "
            "across the program."
        )
    else:
        goal_text = _capitalize(goals[0])
        focus = f"Focus: Optimize for {goals[0]} training principles."
    return goal_text, focus


def build_workout_prompt(constraints: UserConstraints, available_exercises: str) -> str:
    """Build the plan-generation instruction document.

    Args:
        constraints: Validated user constraints
        available_exercises: Catalog excerpt from format_catalog_context

    Returns:
        Prompt text asking for a JSON schedule that references catalog IDs
    """
    goal_text, goal_focus = format_goal(constraints.goals)

    return WORKOUT_PROMPT.format(
        available_exercises=available_exercises,
        goal_text=goal_text,
        goal_focus=goal_focus,
        duration=constraints.duration,
        equipment=constraints.equipment,
        days=constraints.days,
    ).strip()


WORKOUT_PROMPT = """
ROLE: Expert Strength Coach.

EXERCISE DATABASE (JSON):
{available_exercises}

CONSTRAINTS:
- Goal: {goal_text}
- {goal_focus}
- Duration: {duration}
- Equipment: {equipment}
- Days: {days}

RULES:
1. Generate EXACTLY {days} days.
2. Use ONLY exercise IDs from the database above.
3. Each day: 4-6 exercises.

OUTPUT (JSON only, no markdown):
{{
  "schedule": [
    {{
      "day_name": "Day 1 - Push",
      "exercises": [
        {{ "id": 1, "sets": 4, "reps": "8-10", "note": "Controlled tempo" }}
      ]
    }}
  ]
}}
"""


def build_extraction_prompt(document_text: str) -> str:
    """Build the Neural Ingest extraction prompt for a document."""
    muscles = ", ".join(m.value for m in TargetMuscle)
    return EXTRACTION_PROMPT.format(muscles=muscles, document_text=document_text)


EXTRACTION_PROMPT = """You are a data extraction engine. Analyze the following text and extract all fitness exercises mentioned.

Return a JSON Array where each object has:
{{
  "name": "Exercise Name",
  "target_muscle": "Primary muscle group",
  "equipment": ["Equipment1", "Equipment2"],
  "difficulty": "Beginner/Intermediate/Advanced",
  "instructions": "Brief description or cues"
}}

STRICT RULES:
- target_muscle MUST be one of: {muscles}
- equipment should be an array like: ["Barbell"], ["Dumbbell", "Bench"], ["Bodyweight"], ["Machine"], ["Cables"]
- If difficulty is unclear, default to "Intermediate"
- If instructions are not found, provide a brief generic description
- Extract ALL exercises found, even if partially described
- Do NOT invent exercises not mentioned in the text

TEXT TO ANALYZE:
{document_text}"""

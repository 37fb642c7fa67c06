"""Workout plan request and response models."""

from dataclasses import dataclass, field

from ..errors import InputValidationError, MalformedResponseError
from .exercises import BODYWEIGHT

MIN_DAYS = 1
MAX_DAYS = 7


def title_case_label(label: str) -> str:
    """'DUMBBELL' -> 'Dumbbell' (matches catalog equipment labels)."""
    return label[:1].upper() + label[1:].lower()


@dataclass
class UserConstraints:
    """What the user asked for. Lives for one request only."""

    goals: list[str]
    duration: str = "45 minutes"
    equipment: str = BODYWEIGHT
    days: int = 4

    def equipment_list(self) -> list[str]:
        """Split the equipment string into title-cased catalog labels."""
        items = [item.strip() for item in self.equipment.split(",")]
        return [title_case_label(item) for item in items if item]

    def to_dict(self) -> dict:
        return {
            "goals": list(self.goals),
            "duration": self.duration,
            "equipment": self.equipment,
            "days": self.days,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "UserConstraints":
        """Validate raw request input.

        Accepts either a ``goals`` list or a single ``goal`` string.

        Raises:
            InputValidationError: if the input or its goals are missing
        """
        if not data or not isinstance(data, dict):
            raise InputValidationError("Missing userInputs in request body")

        goals = data.get("goals")
        if goals is None and data.get("goal"):
            goals = [data["goal"]]
        if isinstance(goals, str):
            goals = [goals]
        if not isinstance(goals, list):
            raise InputValidationError("At least one goal is required")
        goals = [str(g).strip() for g in goals if str(g).strip()]
        if not goals:
            raise InputValidationError("At least one goal is required")

        equipment = data.get("equipment") or BODYWEIGHT
        if isinstance(equipment, list):
            equipment = ", ".join(str(e) for e in equipment)

        days = _parse_days(data.get("days", 4))
        duration = data.get("duration") or "45 minutes"
        if isinstance(duration, int):
            duration = f"{duration} minutes"

        return cls(goals=goals, duration=str(duration), equipment=str(equipment), days=days)


def _parse_days(value) -> int:
    try:
        days = int(str(value).strip())
    except ValueError:
        raise InputValidationError(f"Invalid day count: {value!r}")
    if not MIN_DAYS <= days <= MAX_DAYS:
        raise InputValidationError(f"Day count must be between {MIN_DAYS} and {MAX_DAYS}")
    return days


@dataclass
class PlanExercise:
    """An exercise reference inside a generated day."""

    id: int | str
    sets: int | str
    reps: str
    note: str = ""
    name: str | None = None
    science_note: str | None = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "sets": self.sets,
            "reps": self.reps,
            "note": self.note,
        }
        if self.name is not None:
            data["name"] = self.name
        if self.science_note is not None:
            data["science_note"] = self.science_note
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "PlanExercise":
        return cls(
            id=data["id"],
            sets=data.get("sets", 3),
            reps=str(data.get("reps", "")),
            note=data.get("note") or "",
            name=data.get("name"),
            science_note=data.get("science_note"),
        )


@dataclass
class PlanDay:
    """A single generated training day."""

    day_name: str
    exercises: list[PlanExercise] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "day_name": self.day_name,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PlanDay":
        return cls(
            day_name=data.get("day_name", ""),
            exercises=[PlanExercise.from_dict(ex) for ex in data.get("exercises", [])],
        )


@dataclass
class WorkoutPlan:
    """A generated schedule. Created per request and never stored."""

    schedule: list[PlanDay] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"schedule": [day.to_dict() for day in self.schedule]}

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutPlan":
        """Parse model output or a client-supplied plan.

        Raises:
            MalformedResponseError: if the payload has no usable schedule
        """
        if not isinstance(data, dict) or not isinstance(data.get("schedule"), list):
            raise MalformedResponseError("AI response is missing a schedule")
        try:
            return cls(schedule=[PlanDay.from_dict(day) for day in data["schedule"]])
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedResponseError(f"AI response has an invalid schedule: {e}")

    def exercise_count(self) -> int:
        return sum(len(day.exercises) for day in self.schedule)

"""Exercise catalog definitions."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class TargetMuscle(str, Enum):
    """Target muscle groups used by the catalog."""

    CHEST = "Chest"
    BACK = "Back"
    LEGS = "Legs"
    SHOULDERS = "Shoulders"
    ARMS = "Arms"
    ABS = "Abs"


class DifficultyTier(IntEnum):
    """Difficulty tiers stored on catalog rows."""

    BEGINNER = 1
    INTERMEDIATE = 2
    ADVANCED = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


# Equipment labels offered in the planner and admin forms. Ingested rows may
# carry other labels (e.g. "Bench"); equipment is stored as free text.
EQUIPMENT_OPTIONS = ["Barbell", "Dumbbell", "Machine", "Cables", "Bodyweight"]

BODYWEIGHT = "Bodyweight"


@dataclass
class Exercise:
    """A catalog record."""

    name: str
    target_muscle: str
    equipment: list[str]
    difficulty_tier: int = DifficultyTier.INTERMEDIATE
    science_note: str | None = None
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage and JSON responses."""
        return {
            "id": self.id,
            "name": self.name,
            "target_muscle": self.target_muscle,
            "equipment": list(self.equipment),
            "difficulty_tier": int(self.difficulty_tier),
            "science_note": self.science_note,
        }

    def to_prompt_context(self) -> dict:
        """Minified form sent to the model: id, name and muscle only."""
        return {"id": self.id, "name": self.name, "muscle": self.target_muscle}


@dataclass
class ExerciseDraft:
    """A normalized record waiting to be inserted (no id yet)."""

    name: str
    target_muscle: str
    equipment: list[str] = field(default_factory=list)
    difficulty_tier: int = DifficultyTier.INTERMEDIATE
    science_note: str | None = None

    def to_exercise(self) -> Exercise:
        return Exercise(
            name=self.name,
            target_muscle=self.target_muscle,
            equipment=list(self.equipment),
            difficulty_tier=self.difficulty_tier,
            science_note=self.science_note,
        )


# Starter catalog seeded by `forma init`
COMMON_EXERCISES: list[Exercise] = [
    # Chest
    Exercise(
        name="Bench Press",
        target_muscle=TargetMuscle.CHEST.value,
        equipment=["Barbell"],
        difficulty_tier=DifficultyTier.INTERMEDIATE,
        science_note="Horizontal press with the highest loading potential for the pecs. Retract the scapulae and keep feet planted.",
    ),
    Exercise(
        name="Incline Dumbbell Press",
        target_muscle=TargetMuscle.CHEST.value,
        equipment=["Dumbbell"],
        difficulty_tier=DifficultyTier.INTERMEDIATE,
        science_note="A 30-45 degree incline biases the clavicular head of the pectoralis major.",
    ),
    Exercise(
        name="Cable Fly",
        target_muscle=TargetMuscle.CHEST.value,
        equipment=["Cables"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="Cables keep tension constant through the stretched position where flys are hardest.",
    ),
    Exercise(
        name="Push-Up",
        target_muscle=TargetMuscle.CHEST.value,
        equipment=["Bodyweight"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="Closed-chain press that lets the scapulae move freely. Elevate the feet to add load.",
    ),
    Exercise(
        name="Chest Press Machine",
        target_muscle=TargetMuscle.CHEST.value,
        equipment=["Machine"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="Fixed path removes the stability demand so sets can be taken close to failure safely.",
    ),
    # Back
    Exercise(
        name="Barbell Row",
        target_muscle=TargetMuscle.BACK.value,
        equipment=["Barbell"],
        difficulty_tier=DifficultyTier.INTERMEDIATE,
        science_note="Hinge to roughly 45 degrees and pull to the lower ribs to load the lats and mid-back.",
    ),
    Exercise(
        name="One-Arm Dumbbell Row",
        target_muscle=TargetMuscle.BACK.value,
        equipment=["Dumbbell"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="Unilateral row that allows a long range of motion and corrects side-to-side imbalances.",
    ),
    Exercise(
        name="Lat Pulldown",
        target_muscle=TargetMuscle.BACK.value,
        equipment=["Cables", "Machine"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="Vertical pull scalable below bodyweight. Drive the elbows toward the hips.",
    ),
    Exercise(
        name="Pull-Up",
        target_muscle=TargetMuscle.BACK.value,
        equipment=["Bodyweight"],
        difficulty_tier=DifficultyTier.ADVANCED,
        science_note="Full hang to chin over bar. One of the strongest stimuli for lat width.",
    ),
    Exercise(
        name="Deadlift",
        target_muscle=TargetMuscle.BACK.value,
        equipment=["Barbell"],
        difficulty_tier=DifficultyTier.ADVANCED,
        science_note="Hip hinge loading the entire posterior chain. Keep the bar over mid-foot.",
    ),
    # Legs
    Exercise(
        name="Back Squat",
        target_muscle=TargetMuscle.LEGS.value,
        equipment=["Barbell"],
        difficulty_tier=DifficultyTier.INTERMEDIATE,
        science_note="Depth at or below parallel maximizes quad and glute recruitment.",
    ),
    Exercise(
        name="Romanian Deadlift",
        target_muscle=TargetMuscle.LEGS.value,
        equipment=["Barbell", "Dumbbell"],
        difficulty_tier=DifficultyTier.INTERMEDIATE,
        science_note="Hamstrings are trained at long muscle lengths. Push the hips back with soft knees.",
    ),
    Exercise(
        name="Goblet Squat",
        target_muscle=TargetMuscle.LEGS.value,
        equipment=["Dumbbell"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="Front-loaded squat that encourages an upright torso and teaches depth.",
    ),
    Exercise(
        name="Leg Press",
        target_muscle=TargetMuscle.LEGS.value,
        equipment=["Machine"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="High quad loading with little spinal compression.",
    ),
    Exercise(
        name="Bulgarian Split Squat",
        target_muscle=TargetMuscle.LEGS.value,
        equipment=["Bodyweight", "Dumbbell"],
        difficulty_tier=DifficultyTier.INTERMEDIATE,
        science_note="Rear-foot-elevated split squat with a deep glute stretch on the front leg.",
    ),
    # Shoulders
    Exercise(
        name="Overhead Press",
        target_muscle=TargetMuscle.SHOULDERS.value,
        equipment=["Barbell"],
        difficulty_tier=DifficultyTier.INTERMEDIATE,
        science_note="Standing vertical press. Squeeze the glutes to keep the ribs down.",
    ),
    Exercise(
        name="Dumbbell Lateral Raise",
        target_muscle=TargetMuscle.SHOULDERS.value,
        equipment=["Dumbbell"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="Isolates the lateral deltoid. Lead with the elbows and stop near shoulder height.",
    ),
    Exercise(
        name="Cable Face Pull",
        target_muscle=TargetMuscle.SHOULDERS.value,
        equipment=["Cables"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="Rear delts and external rotators. Pull toward the forehead with the elbows high.",
    ),
    Exercise(
        name="Pike Push-Up",
        target_muscle=TargetMuscle.SHOULDERS.value,
        equipment=["Bodyweight"],
        difficulty_tier=DifficultyTier.INTERMEDIATE,
        science_note="Bodyweight vertical press. Raise the hips to shift load onto the delts.",
    ),
    # Arms
    Exercise(
        name="Barbell Curl",
        target_muscle=TargetMuscle.ARMS.value,
        equipment=["Barbell"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="Heaviest curl variation. Keep the elbows pinned to avoid swinging.",
    ),
    Exercise(
        name="Cable Triceps Pushdown",
        target_muscle=TargetMuscle.ARMS.value,
        equipment=["Cables"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="Lateral and medial triceps heads under constant cable tension.",
    ),
    Exercise(
        name="Hammer Curl",
        target_muscle=TargetMuscle.ARMS.value,
        equipment=["Dumbbell"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="Neutral grip shifts work toward the brachialis and brachioradialis.",
    ),
    Exercise(
        name="Bench Dip",
        target_muscle=TargetMuscle.ARMS.value,
        equipment=["Bodyweight"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="Triceps-dominant press. Keep the shoulders away from the ears.",
    ),
    # Abs
    Exercise(
        name="Plank",
        target_muscle=TargetMuscle.ABS.value,
        equipment=["Bodyweight"],
        difficulty_tier=DifficultyTier.BEGINNER,
        science_note="Anti-extension hold. Posteriorly tilt the pelvis and brace.",
    ),
    Exercise(
        name="Hanging Leg Raise",
        target_muscle=TargetMuscle.ABS.value,
        equipment=["Bodyweight"],
        difficulty_tier=DifficultyTier.ADVANCED,
        science_note="Curl the pelvis up rather than just lifting the legs to load the rectus abdominis.",
    ),
    Exercise(
        name="Cable Crunch",
        target_muscle=TargetMuscle.ABS.value,
        equipment=["Cables"],
        difficulty_tier=DifficultyTier.INTERMEDIATE,
        science_note="Loaded spinal flexion. Round the spine toward the pelvis and keep the hips still.",
    ),
]

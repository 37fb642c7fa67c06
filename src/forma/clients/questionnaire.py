"""Interactive collection of plan constraints for the CLI."""

import questionary
from questionary import Style

from ..models.exercises import EQUIPMENT_OPTIONS
from ..models.plan import MAX_DAYS, MIN_DAYS, UserConstraints

custom_style = Style(
    [
        ("qmark", "fg:#d4ff00 bold"),
        ("question", "bold"),
        ("answer", "fg:#d4ff00 bold"),
        ("pointer", "fg:#d4ff00 bold"),
        ("highlighted", "fg:#d4ff00 bold"),
        ("selected", "fg:#8a8a8a"),
        ("instruction", ""),
        ("text", ""),
    ]
)

GOAL_CHOICES = [
    questionary.Choice("Build muscle (hypertrophy)", "hypertrophy"),
    questionary.Choice("Build strength", "strength"),
    questionary.Choice("Muscular endurance", "endurance"),
]


def _valid_days(text: str) -> bool | str:
    if text.isdigit() and MIN_DAYS <= int(text) <= MAX_DAYS:
        return True
    return f"Enter a number from {MIN_DAYS} to {MAX_DAYS}"


class ConstraintsQuestionnaire:
    """Asks for whichever constraints were not given on the command line."""

    async def collect(
        self,
        goals: list[str] | None = None,
        duration: int | None = None,
        equipment: str | None = None,
        days: int | None = None,
    ) -> UserConstraints:
        if not goals:
            goals = await questionary.checkbox(
                "What are you training for? (Select all that apply)",
                choices=GOAL_CHOICES,
                style=custom_style,
            ).ask_async()
            goals = goals or ["hypertrophy"]

        if duration is None:
            answer = await questionary.select(
                "How long is each session?",
                choices=[f"{minutes} minutes" for minutes in (30, 45, 60, 75, 90)],
                default="45 minutes",
                style=custom_style,
            ).ask_async()
            duration = int(answer.split()[0]) if answer else 45

        if equipment is None:
            selected = await questionary.checkbox(
                "What equipment do you have access to?",
                choices=EQUIPMENT_OPTIONS,
                style=custom_style,
            ).ask_async()
            equipment = ", ".join(selected or []) or "Bodyweight"

        if days is None:
            answer = await questionary.text(
                "How many days per week?",
                default="4",
                validate=_valid_days,
                style=custom_style,
            ).ask_async()
            days = int(answer or 4)

        return UserConstraints.from_dict(
            {
                "goals": goals,
                "duration": f"{duration or 45} minutes",
                "equipment": equipment,
                "days": days,
            }
        )

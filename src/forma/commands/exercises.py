"""Exercise catalog commands."""

import click

from ..db import ExerciseRepository
from ..errors import FormaError
from ..models.exercises import EQUIPMENT_OPTIONS, DifficultyTier, TargetMuscle
from ..services.catalog import add_manual_exercise, build_manual_entry
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, format_table, get_db


def _tier_label(tier: int) -> str:
    try:
        return DifficultyTier(tier).label
    except ValueError:
        return str(tier)


@click.group()
@click.pass_context
def exercises(ctx):
    """Inspect and extend the exercise catalog."""
    ensure_initialized(ctx)


@exercises.command(name="list")
@click.option(
    "--muscle",
    "-m",
    type=click.Choice([m.value for m in TargetMuscle]),
    help="Only show one target muscle",
)
@click.pass_context
@async_command
async def list_exercises(ctx, muscle: str | None):
    """List catalog exercises."""
    repo = ExerciseRepository(get_db(ctx))
    rows_data = await repo.get_by_target_muscle(muscle) if muscle else await repo.list_all()

    if not rows_data:
        echo_info("Catalog is empty. Run 'forma init' or 'forma ingest <file>'")
        return

    headers = ["ID", "Name", "Muscle", "Equipment", "Tier"]
    rows = [
        [
            str(ex.id),
            ex.name[:30] + "..." if len(ex.name) > 30 else ex.name,
            ex.target_muscle,
            ", ".join(ex.equipment),
            _tier_label(ex.difficulty_tier),
        ]
        for ex in rows_data
    ]

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(rows_data)} exercise(s)")


@exercises.command(name="add")
@click.argument("name")
@click.option(
    "--muscle",
    "-m",
    type=click.Choice([m.value for m in TargetMuscle]),
    default=TargetMuscle.CHEST.value,
    show_default=True,
)
@click.option(
    "--equipment",
    "-e",
    multiple=True,
    default=["Barbell"],
    show_default=True,
    help=f"Repeatable. Usual labels: {', '.join(EQUIPMENT_OPTIONS)}",
)
@click.option("--tier", "-t", type=click.IntRange(1, 3), default=2, show_default=True)
@click.option("--note", default="", help="Science note shown on plan cards")
@click.pass_context
@async_command
async def add_exercise(ctx, name: str, muscle: str, equipment: tuple[str, ...], tier: int, note: str):
    """Add a single exercise to the catalog."""
    try:
        draft = build_manual_entry(name, muscle, list(equipment), tier, note)
    except FormaError as e:
        echo_error(e.message)
        ctx.exit(1)

    exercise = await add_manual_exercise(ExerciseRepository(get_db(ctx)), draft)
    echo_success(f"Added '{exercise.name}' (ID: {exercise.id})")


@exercises.command()
@click.argument("exercise_id", type=int)
@click.pass_context
@async_command
async def show(ctx, exercise_id: int):
    """Show one catalog exercise."""
    exercise = await ExerciseRepository(get_db(ctx)).get(exercise_id)
    if not exercise:
        echo_error(f"Exercise ID {exercise_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo(f"{exercise.name} (ID: {exercise.id})")
    click.echo("-" * 40)
    click.echo(f"Muscle:    {exercise.target_muscle}")
    click.echo(f"Equipment: {', '.join(exercise.equipment)}")
    click.echo(f"Tier:      {_tier_label(exercise.difficulty_tier)}")
    if exercise.science_note:
        click.echo()
        click.echo(exercise.science_note)


@exercises.command()
@click.argument("exercise_id", type=int)
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx, exercise_id: int, force: bool):
    """Remove an exercise from the catalog."""
    repo = ExerciseRepository(get_db(ctx))

    exercise = await repo.get(exercise_id)
    if not exercise:
        echo_error(f"Exercise ID {exercise_id} not found")
        ctx.exit(1)

    if not force:
        click.echo(f"Exercise: {exercise.name}")
        if not click.confirm("Remove this exercise from the catalog?"):
            echo_info("Cancelled")
            return

    await repo.delete(exercise_id)
    echo_success(f"Exercise {exercise_id} deleted")

"""Generate plan command."""

from pathlib import Path

import click

from ..clients.questionnaire import ConstraintsQuestionnaire
from ..db import ExerciseRepository
from ..errors import FormaError
from ..generators.blueprint import BlueprintGenerator
from ..models.plan import MAX_DAYS, MIN_DAYS, UserConstraints
from ..services.planner import PlanService
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, get_db, get_settings


@click.command()
@click.option(
    "--goal",
    "-g",
    "goals",
    multiple=True,
    help="Training goal (repeat for a hybrid plan, e.g. -g hypertrophy -g strength)",
)
@click.option("--duration", "-d", type=int, help="Session length in minutes")
@click.option("--equipment", "-e", help='Comma separated equipment, e.g. "Dumbbell, Bodyweight"')
@click.option(
    "--days",
    "-n",
    type=click.IntRange(MIN_DAYS, MAX_DAYS),
    help=f"Training days per week ({MIN_DAYS}-{MAX_DAYS})",
)
@click.option("--pdf", "pdf_path", type=click.Path(dir_okay=False, path_type=Path), help="Write the PDF blueprint here")
@click.option("--clipboard", "-c", is_flag=True, help="Copy the text blueprint to the clipboard")
@click.option("--interactive/--no-interactive", default=True, help="Prompt for missing options")
@click.pass_context
@async_command
async def generate(
    ctx: click.Context,
    goals: tuple[str, ...],
    duration: int | None,
    equipment: str | None,
    days: int | None,
    pdf_path: Path | None,
    clipboard: bool,
    interactive: bool,
):
    """Generate a workout plan from the catalog.

    Options that are not given are asked for interactively.

    Examples:

        # Fully interactive
        forma generate

        # Hybrid plan, 4 days, written to PDF
        forma generate -g hypertrophy -g strength -d 60 -e "Barbell, Dumbbell" -n 4 --pdf plan.pdf
    """
    ensure_initialized(ctx)
    settings = get_settings(ctx)

    try:
        if interactive:
            constraints = await ConstraintsQuestionnaire().collect(
                goals=list(goals), duration=duration, equipment=equipment, days=days
            )
        else:
            constraints = UserConstraints.from_dict(
                {
                    "goals": list(goals),
                    "duration": f"{duration or 45} minutes",
                    "equipment": equipment or "Bodyweight",
                    "days": days or 4,
                }
            )
    except FormaError as e:
        echo_error(e.message)
        ctx.exit(1)

    echo_info(f"Goals: {', '.join(constraints.goals)}")
    echo_info(f"Equipment: {constraints.equipment}")
    echo_info(f"{constraints.days} days, {constraints.duration}")
    click.echo()

    service = PlanService.from_settings(settings, ExerciseRepository(get_db(ctx)))

    try:
        plan = await service.generate(constraints)
    except FormaError as e:
        echo_error(f"Failed to generate plan: {e.message}")
        ctx.exit(1)

    generator = BlueprintGenerator()
    content = generator.generate_text(plan)

    echo_success(f"Plan generated ({plan.exercise_count()} exercises)")
    click.echo()
    click.echo("=" * 60)
    click.echo(content)
    click.echo("=" * 60)

    if pdf_path:
        pdf_path.write_bytes(generator.render_pdf(plan))
        echo_success(f"Blueprint written to {pdf_path}")

    if clipboard:
        import pyperclip

        try:
            pyperclip.copy(content)
        except pyperclip.PyperclipException as e:
            echo_error(f"Could not copy to clipboard: {e}")
            ctx.exit(1)
        echo_success("Copied to clipboard!")

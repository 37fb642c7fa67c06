"""Initialize project command."""

import click

from ..db import init_db, seed_exercises
from .base import async_command, echo_info, echo_success, echo_warning, get_db, get_settings


@click.command()
@click.pass_context
@async_command
async def init(ctx: click.Context):
    """Initialize the forma data directory and catalog.

    Creates the SQLite database with the exercise schema and seeds the
    starter catalog. Safe to run again: existing names are not re-added.
    """
    settings = get_settings(ctx)
    db_path = get_db(ctx)

    echo_info(f"Initializing forma in {settings.data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    count = await seed_exercises(db_path)
    echo_success(f"Exercise catalog populated ({count} new exercises)")

    if not settings.credential_pool():
        click.echo()
        echo_warning("No API keys found. Set GEMINI_API_KEY_1 (and optionally _2, _3)")
        click.echo("in your environment or a .env file before generating plans.")

    click.echo()
    click.echo("forma is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo('  forma generate --goal hypertrophy --equipment "Dumbbell, Bodyweight"')
    click.echo("  forma serve")

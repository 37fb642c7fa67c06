"""Neural Ingest command."""

import mimetypes
from pathlib import Path

import click

from ..db import ExerciseRepository
from ..errors import FormaError
from ..services.ingest import IngestService
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, get_db, get_settings


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
@async_command
async def ingest(ctx: click.Context, file: Path):
    """Extract exercises from a PDF, CSV or text FILE into the catalog.

    Exercises whose name is already in the catalog are skipped.

    Example:

        forma ingest ~/Downloads/program_guide.pdf
    """
    ensure_initialized(ctx)

    service = IngestService.from_settings(get_settings(ctx), ExerciseRepository(get_db(ctx)))
    content_type, _ = mimetypes.guess_type(file.name)

    echo_info(f"Ingesting {file.name}...")
    try:
        result = await service.ingest_document(file.name, content_type, file.read_bytes())
    except FormaError as e:
        echo_error(e.message)
        ctx.exit(1)

    if result.message:
        echo_info(result.message)
    else:
        echo_success(f"Inserted {result.count} exercises ({result.duplicates} duplicates skipped)")
        for name in result.exercises:
            click.echo(f"  + {name}")

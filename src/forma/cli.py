"""CLI entry point for forma."""

import click

from . import __version__
from .commands import exercises, generate, hash_params, ingest, init, serve
from .config import load_settings
from .logging_setup import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="forma")
@click.option("--env-file", type=click.Path(dir_okay=False), help="Load settings from this .env file")
@click.pass_context
def main(ctx: click.Context, env_file: str | None):
    """forma: AI-architected workout blueprints.

    Builds weekly training plans from your goals, session length and
    equipment using a curated exercise catalog and a generative model.

    Example usage:

        # Create the catalog
        forma init

        # Generate a plan interactively
        forma generate

        # Add exercises from a document
        forma ingest guide.pdf

        # Run the web app
        forma serve
    """
    settings = load_settings(env_file)
    configure_logging(settings.log_level)
    ctx.obj = settings


main.add_command(init)
main.add_command(generate)
main.add_command(ingest)
main.add_command(exercises)
main.add_command(hash_params)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()

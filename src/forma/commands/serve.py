"""Web server command."""

import click

from .base import echo_warning, ensure_initialized, get_settings


@click.command()
@click.option("--host", default="127.0.0.1", show_default=True, help="Interface to bind")
@click.option("--port", "-p", default=8000, show_default=True, type=int)
@click.option("--reload", is_flag=True, help="Restart on code changes (settings are re-read from the environment)")
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Run the planner and admin console under uvicorn.

    Examples:

        forma serve

        forma serve --host 0.0.0.0 --port 3000
    """
    ensure_initialized(ctx)
    settings = get_settings(ctx)

    import uvicorn

    from ..web import create_app

    if not settings.credential_pool():
        echo_warning("No GEMINI_API_KEY_* set; plan generation will fail.")
    if not settings.admin_pin:
        echo_warning("FORMA_ADMIN_PIN is not set; the admin console cannot be unlocked.")

    click.echo(click.style(f"forma listening on http://{host}:{port}", fg="green"))
    click.echo(f"  Admin console: http://{host}:{port}/admin")
    click.echo("Press Ctrl+C to stop.")

    if reload:
        uvicorn.run("forma.web:create_app", host=host, port=port, reload=True, factory=True)
    else:
        uvicorn.run(create_app(settings), host=host, port=port)

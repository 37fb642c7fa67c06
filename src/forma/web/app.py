"""FastAPI application for the forma web interface."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .. import __version__
from ..agents.client import ClientFactory
from ..config import Settings, load_settings
from ..db.engine import get_db_path, init_db, seed_exercises
from ..errors import FormaError
from ..logging_setup import configure_logging
from .routers import admin, catalog, plans

logger = logging.getLogger(__name__)

# Template and static file paths
TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    db_path = app.state.db_path
    if not db_path.exists():
        await init_db(db_path)
        await seed_exercises(db_path)
    logger.info("forma ready (catalog at %s)", db_path)
    yield


def create_app(
    settings: Settings | None = None,
    client_factory: ClientFactory | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Configuration (loaded from the environment when omitted)
        client_factory: Override for the model client (used by tests)
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="forma",
        description="AI-architected workout blueprints",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.db_path = get_db_path(settings.data_dir)
    app.state.client_factory = client_factory

    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    app.state.templates = Jinja2Templates(directory=TEMPLATES_DIR)

    @app.exception_handler(FormaError)
    async def forma_error_handler(request: Request, exc: FormaError):
        if exc.status_code >= 500:
            logger.error("%s: %s", type(exc).__name__, exc.message)
        return JSONResponse(exc.to_dict(), status_code=exc.status_code)

    app.include_router(plans.router)
    app.include_router(admin.router)
    app.include_router(catalog.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app

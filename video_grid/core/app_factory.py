"""Application factory for creating and configuring the FastAPI app."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from video_grid import __version__
from video_grid.config import get_settings
from video_grid.core.lifespan import lifespan
from video_grid.core.middleware import setup_middleware
from video_grid.middleware.error_handlers import register_error_handlers
from video_grid.routers import health_router, layout_router, view_router

STATIC_DIR = Path(__file__).parent.parent / "static"


def custom_openapi(app: FastAPI):
    """Generate OpenAPI schema without the HTML fragment routes."""
    if app.openapi_schema:
        return app.openapi_schema

    from fastapi.openapi.utils import get_openapi

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        license_info=app.license_info,
    )

    # Tile endpoints are HTML fragments for HTMX, not useful in API docs
    paths_to_remove = [path for path in openapi_schema.get("paths", {}) if path.startswith("/tiles/")]
    for path in paths_to_remove:
        del openapi_schema["paths"][path]

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Video Grid API",
        description="""
        **Video Grid** - Fit a changing number of video tiles into the window

        ## Layout
        - `POST /api/layout/fit` - Stateless grid fit
        - `POST /api/layout/measure` - Report the tile container size
        - `POST /api/layout/videos/add`, `/videos/remove` - Change the tile count
        - `POST /api/layout/panels/chat/toggle`, `/panels/bottom-bar/toggle` - Panels

        ## Health
        - `/health` - Basic health check
        - `/health/ready` - Readiness probe
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    setup_middleware(app, settings)

    register_error_handlers(app)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # View routes (HTML page and grid fragments) - no prefix
    app.include_router(view_router.router, tags=["views"])

    app.include_router(health_router.router, tags=["health"])

    app.include_router(layout_router.router, prefix="/api/layout", tags=["layout"])

    app.openapi = lambda: custom_openapi(app)

    return app

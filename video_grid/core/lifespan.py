"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from video_grid import __version__
from video_grid.config import get_settings
from video_grid.logging_config import get_logger, log_with_context
from video_grid.state_managers import LayoutStateManager

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are re-raised so cleanup still runs.
    """
    app.state.startup_time = time.time()
    app.state.request_count = 0

    settings = get_settings()
    log_with_context(
        logger,
        "info",
        "Starting Video Grid application",
        version=__version__,
        gap_px=settings.gap_px,
        aspect_ratio=settings.aspect_ratio,
        min_tile_height_px=settings.min_tile_height_px,
        event_type="app_startup",
    )

    app.state.layout_state_manager = LayoutStateManager(settings)
    await app.state.layout_state_manager.initialize()
    log_with_context(
        logger,
        "info",
        "State managers initialized",
        event_type="state_managers_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Video Grid application",
            event_type="app_shutdown",
        )

        await app.state.layout_state_manager.cleanup()
        app.state.layout_state_manager = None
        log_with_context(
            logger,
            "info",
            "State managers cleaned up",
            event_type="state_managers_cleanup",
        )

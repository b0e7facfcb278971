"""Middleware configuration."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter
from slowapi.util import get_remote_address

from video_grid.config import Settings
from video_grid.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

# Browsers on the local machine or LAN, on the configured port
CORS_ORIGIN_PATTERN = r"http://(localhost|127\.0\.0\.1|192\.168\.\d+\.\d+):{port}"


def setup_middleware(app: FastAPI, settings: Settings) -> Limiter:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
        settings: Application settings

    Returns:
        Limiter instance for rate limiting
    """
    origin_pattern = CORS_ORIGIN_PATTERN.format(port=settings.api_port)
    log_with_context(
        logger,
        "info",
        "Configuring CORS middleware with regex pattern",
        event_type="security_config",
        pattern=origin_pattern,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=origin_pattern,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    limiter = Limiter(key_func=get_remote_address)
    app.state.limiter = limiter

    @app.middleware("http")
    async def count_requests(request, call_next):
        """Count total requests for the readiness endpoint."""
        app.state.request_count = getattr(app.state, "request_count", 0) + 1
        response = await call_next(request)
        return response

    return limiter

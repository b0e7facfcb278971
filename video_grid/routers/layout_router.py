"""Layout API routes with support for JSON and HTML responses.

Every stateful route accepts `format=html` so HTMX buttons can swap the
rendered fragment directly; `format=json` returns the LayoutSnapshot.
"""

from typing import Literal

from fastapi import APIRouter, Depends, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from video_grid.config import Settings, get_settings
from video_grid.dependencies import get_layout_state_manager
from video_grid.models.layout import LayoutRequest, LayoutResult, LayoutSnapshot, MeasurementUpdate
from video_grid.services.grid_fitter import fit
from video_grid.state_managers import LayoutStateManager
from video_grid.views.template_renderer import TemplateRenderer

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

ResponseFormat = Literal["json", "html"]


def _stage_or_snapshot(request: Request, snapshot: LayoutSnapshot, settings: Settings, format: ResponseFormat):
    if format == "html":
        return TemplateRenderer.render_stage(request, snapshot, settings)
    return snapshot


@router.post(
    "/fit",
    response_model=LayoutResult,
    summary="Fit a grid",
    description="""
    Stateless grid fit for the given item count and container size.

    Returns the column-bound or row-bound arrangement with the largest tile
    height, or `too_small` when no arrangement reaches the minimum tile height.
    An unmeasured container (missing or zero size) returns the initial
    single-column arrangement.
    """,
)
async def fit_layout(layout_request: LayoutRequest):
    """Evaluate one grid fit without touching the page state."""
    return fit(layout_request)


@router.get("/state", response_model=LayoutSnapshot)
async def get_layout_state(
    request: Request,
    manager: LayoutStateManager = Depends(get_layout_state_manager),
    settings: Settings = Depends(get_settings),
    format: ResponseFormat = Query(default="json", description="Response format"),
):
    """Get the current layout state."""
    snapshot = await manager.get_snapshot()
    return _stage_or_snapshot(request, snapshot, settings, format)


@router.post(
    "/measure",
    response_model=LayoutSnapshot,
    summary="Report container size",
    description="""
    Records the tile container's content-box size and refits the grid.

    A missing or zero dimension keeps the previous arrangement.

    **Rate Limited:** `MEASURE_RATE_LIMIT` (default 600/minute)
    """,
)
@limiter.limit(lambda: get_settings().measure_rate_limit)
async def measure_container(
    request: Request,
    measurement: MeasurementUpdate,
    manager: LayoutStateManager = Depends(get_layout_state_manager),
    settings: Settings = Depends(get_settings),
    format: ResponseFormat = Query(default="json", description="Response format"),
):
    """Update the container measurement.

    Args:
        request: FastAPI request object
        measurement: Container width and height in pixels
        format: 'json' for the snapshot, 'html' for the grid fragment

    Returns:
        JSON LayoutSnapshot or HTML grid fragment
    """
    snapshot = await manager.update_measurement(measurement.width, measurement.height)
    if format == "html":
        return TemplateRenderer.render_grid(request, snapshot, settings)
    return snapshot


@router.post("/videos/add", response_model=LayoutSnapshot)
async def add_video(
    request: Request,
    manager: LayoutStateManager = Depends(get_layout_state_manager),
    settings: Settings = Depends(get_settings),
    format: ResponseFormat = Query(default="json", description="Response format"),
):
    """Add a video tile."""
    snapshot = await manager.add_video()
    return _stage_or_snapshot(request, snapshot, settings, format)


@router.post("/videos/remove", response_model=LayoutSnapshot)
async def remove_video(
    request: Request,
    manager: LayoutStateManager = Depends(get_layout_state_manager),
    settings: Settings = Depends(get_settings),
    format: ResponseFormat = Query(default="json", description="Response format"),
):
    """Remove a video tile. At least one tile always remains."""
    snapshot = await manager.remove_video()
    return _stage_or_snapshot(request, snapshot, settings, format)


@router.post("/panels/chat/toggle", response_model=LayoutSnapshot)
async def toggle_chat(
    request: Request,
    manager: LayoutStateManager = Depends(get_layout_state_manager),
    settings: Settings = Depends(get_settings),
    format: ResponseFormat = Query(default="json", description="Response format"),
):
    """Show or hide the chat panel."""
    snapshot = await manager.toggle_chat()
    return _stage_or_snapshot(request, snapshot, settings, format)


@router.post("/panels/bottom-bar/toggle", response_model=LayoutSnapshot)
async def toggle_bottom_bar(
    request: Request,
    manager: LayoutStateManager = Depends(get_layout_state_manager),
    settings: Settings = Depends(get_settings),
    format: ResponseFormat = Query(default="json", description="Response format"),
):
    """Show or hide the bottom bar."""
    snapshot = await manager.toggle_bottom_bar()
    return _stage_or_snapshot(request, snapshot, settings, format)

"""Page/view routes for serving HTML pages and grid fragments."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from video_grid.config import Settings, get_settings
from video_grid.dependencies import get_layout_state_manager
from video_grid.state_managers import LayoutStateManager
from video_grid.views.template_renderer import TemplateRenderer

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    manager: LayoutStateManager = Depends(get_layout_state_manager),
    settings: Settings = Depends(get_settings),
):
    """Render the video grid page."""
    snapshot = await manager.get_snapshot()
    return TemplateRenderer.render_index(request, snapshot, settings)


@router.get("/tiles/stage", response_class=HTMLResponse)
async def stage_fragment(
    request: Request,
    manager: LayoutStateManager = Depends(get_layout_state_manager),
    settings: Settings = Depends(get_settings),
):
    """Render the stage fragment."""
    snapshot = await manager.get_snapshot()
    return TemplateRenderer.render_stage(request, snapshot, settings)


@router.get("/tiles/grid", response_class=HTMLResponse)
async def grid_fragment(
    request: Request,
    manager: LayoutStateManager = Depends(get_layout_state_manager),
    settings: Settings = Depends(get_settings),
):
    """Render the grid contents fragment."""
    snapshot = await manager.get_snapshot()
    return TemplateRenderer.render_grid(request, snapshot, settings)

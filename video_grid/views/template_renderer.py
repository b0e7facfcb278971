"""Template rendering utilities for HTML views."""

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from video_grid.config import Settings
from video_grid.models.layout import LayoutSnapshot
from video_grid.services.tile_styles import video_labels

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)


class TemplateRenderer:
    """Handles rendering of Jinja2 templates for all video grid views."""

    @staticmethod
    def _context(snapshot: LayoutSnapshot, settings: Settings) -> dict:
        return {
            "snapshot": snapshot,
            "too_small": snapshot.is_too_small,
            "constraints": snapshot.constraints,
            "videos": video_labels(snapshot.item_count),
            "gap_px": f"{settings.gap_px:g}",
        }

    @staticmethod
    def render_index(request: Request, snapshot: LayoutSnapshot, settings: Settings) -> HTMLResponse:
        """Render the full video grid page."""
        return templates.TemplateResponse(request, "index.html", TemplateRenderer._context(snapshot, settings))

    @staticmethod
    def render_stage(request: Request, snapshot: LayoutSnapshot, settings: Settings) -> HTMLResponse:
        """Render the stage fragment: tile container, chat panel and bottom bar.

        Args:
            request: FastAPI request object
            snapshot: Current layout state
            settings: Settings instance

        Returns:
            HTMLResponse with rendered stage
        """
        return templates.TemplateResponse(request, "tiles/stage.html", TemplateRenderer._context(snapshot, settings))

    @staticmethod
    def render_grid(request: Request, snapshot: LayoutSnapshot, settings: Settings) -> HTMLResponse:
        """Render the tiles, or the expand-your-window notice when too small.

        Args:
            request: FastAPI request object
            snapshot: Current layout state
            settings: Settings instance

        Returns:
            HTMLResponse with rendered grid contents
        """
        return templates.TemplateResponse(request, "tiles/grid.html", TemplateRenderer._context(snapshot, settings))

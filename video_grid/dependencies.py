"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from video_grid.exceptions import LayoutStateUnavailableException
from video_grid.state_managers import LayoutStateManager


async def get_layout_state_manager(request: Request) -> LayoutStateManager:
    """
    Get the layout state manager from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared LayoutStateManager instance.

    Raises:
        LayoutStateUnavailableException: If the layout state manager is not initialized.
    """
    manager: LayoutStateManager | None = getattr(request.app.state, "layout_state_manager", None)

    if manager is None:
        raise LayoutStateUnavailableException("Layout state manager not initialized.")

    return manager

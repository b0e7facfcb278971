"""State managers for handling application-wide mutable state.

This module provides thread-safe state management using asyncio.Lock
for async operations. All state managers inherit from StateManager ABC.
"""

import asyncio
from abc import ABC, abstractmethod

from video_grid.config import Settings
from video_grid.logging_config import get_logger, log_with_context
from video_grid.models.layout import (
    INITIAL_RESULT,
    MAX_ITEM_COUNT,
    FitResult,
    LayoutRequest,
    LayoutResult,
    LayoutSnapshot,
)
from video_grid.services.grid_fitter import fit
from video_grid.services.tile_styles import build_tile_constraints

logger = get_logger(__name__)


class StateManager(ABC):
    """Base class for all state managers.

    State managers provide thread-safe access to mutable application state.
    All subclasses must implement lifecycle methods.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the state manager (called during app startup)."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Cleanup resources (called during app shutdown)."""
        pass


class LayoutStateManager(StateManager):
    """Holds the video grid page state and refits the grid on every change.

    Item count and container measurement feed the grid fitter. While the
    container is unmeasured the last result is kept rather than recomputed.
    Panel toggles only flip visibility; the browser re-measures the container
    afterwards.
    """

    def __init__(self, settings: Settings):
        """Initialize the layout state manager.

        Args:
            settings: Source of gap, aspect ratio and minimum tile height
        """
        self._settings = settings
        self._lock = asyncio.Lock()
        self._reset()

    def _reset(self) -> None:
        self._item_count: int = 1
        self._container_width: float | None = None
        self._container_height: float | None = None
        self._show_chat: bool = False
        self._show_bottom_bar: bool = False
        self._result: LayoutResult = INITIAL_RESULT

    async def initialize(self) -> None:
        """Initialize the layout state manager."""
        async with self._lock:
            self._reset()

    async def cleanup(self) -> None:
        """Cleanup resources."""
        async with self._lock:
            self._reset()

    def _refit(self) -> None:
        """Re-run the grid fitter on the current inputs. Caller holds the lock."""
        request = LayoutRequest(
            item_count=self._item_count,
            container_width=self._container_width,
            container_height=self._container_height,
            gap_px=self._settings.gap_px,
            aspect_ratio=self._settings.aspect_ratio,
            min_tile_height_px=self._settings.min_tile_height_px,
        )
        result = fit(request, previous=self._result)
        if result != self._result:
            log_with_context(
                logger,
                "debug",
                "Grid layout changed",
                item_count=self._item_count,
                container_width=self._container_width,
                container_height=self._container_height,
                result=result.kind,
                orientation=result.orientation.value if isinstance(result, FitResult) else None,
                divisor=result.divisor if isinstance(result, FitResult) else None,
                event_type="layout_changed",
            )
        self._result = result

    def _snapshot(self) -> LayoutSnapshot:
        constraints = None
        if isinstance(self._result, FitResult):
            constraints = build_tile_constraints(self._result, self._settings.gap_px, self._settings.aspect_ratio)
        return LayoutSnapshot(
            item_count=self._item_count,
            container_width=self._container_width,
            container_height=self._container_height,
            show_chat=self._show_chat,
            show_bottom_bar=self._show_bottom_bar,
            result=self._result,
            constraints=constraints,
        )

    async def get_snapshot(self) -> LayoutSnapshot:
        """Get the current layout state.

        Returns:
            Snapshot of inputs, panel visibility, result and tile constraints
        """
        async with self._lock:
            return self._snapshot()

    async def add_video(self) -> LayoutSnapshot:
        """Add one tile (up to MAX_ITEM_COUNT) and refit.

        Returns:
            Updated snapshot
        """
        async with self._lock:
            self._item_count = min(self._item_count + 1, MAX_ITEM_COUNT)
            self._refit()
            return self._snapshot()

    async def remove_video(self) -> LayoutSnapshot:
        """Remove one tile (never below one) and refit.

        Returns:
            Updated snapshot
        """
        async with self._lock:
            self._item_count = max(self._item_count - 1, 1)
            self._refit()
            return self._snapshot()

    async def toggle_chat(self) -> LayoutSnapshot:
        """Show or hide the chat panel.

        Returns:
            Updated snapshot
        """
        async with self._lock:
            self._show_chat = not self._show_chat
            return self._snapshot()

    async def toggle_bottom_bar(self) -> LayoutSnapshot:
        """Show or hide the bottom bar.

        Returns:
            Updated snapshot
        """
        async with self._lock:
            self._show_bottom_bar = not self._show_bottom_bar
            return self._snapshot()

    async def update_measurement(self, width: float | None, height: float | None) -> LayoutSnapshot:
        """Record the container's content-box size and refit.

        Args:
            width: Container width in pixels, None if not measured
            height: Container height in pixels, None if not measured

        Returns:
            Updated snapshot
        """
        async with self._lock:
            self._container_width = width
            self._container_height = height
            self._refit()
            return self._snapshot()

"""Tests for FastAPI dependencies."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from video_grid.dependencies import get_layout_state_manager
from video_grid.exceptions import LayoutStateUnavailableException


@pytest.mark.asyncio
async def test_get_layout_state_manager(layout_manager):
    request = MagicMock()
    request.app.state = SimpleNamespace(layout_state_manager=layout_manager)

    assert await get_layout_state_manager(request) is layout_manager


@pytest.mark.asyncio
async def test_get_layout_state_manager_missing():
    """A missing manager is reported as unavailable."""
    request = MagicMock()
    request.app.state = SimpleNamespace()

    with pytest.raises(LayoutStateUnavailableException):
        await get_layout_state_manager(request)

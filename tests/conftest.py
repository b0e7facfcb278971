"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from video_grid.config import Settings
from video_grid.main import app as fastapi_app
from video_grid.models.layout import LayoutRequest
from video_grid.state_managers import LayoutStateManager


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client


@pytest.fixture
def default_settings():
    """Settings with the stock layout constants."""
    return Settings(_env_file=None)


@pytest.fixture
def layout_manager(default_settings):
    """Fresh LayoutStateManager using the stock layout constants."""
    return LayoutStateManager(default_settings)


@pytest.fixture
def make_request():
    """Build a LayoutRequest with the stock constants unless overridden."""

    def _make(item_count: int, width: float | None, height: float | None, **overrides) -> LayoutRequest:
        return LayoutRequest(item_count=item_count, container_width=width, container_height=height, **overrides)

    return _make

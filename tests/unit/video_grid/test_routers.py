"""Unit tests for router endpoints."""

import pytest
from fastapi.testclient import TestClient

from video_grid.main import app


class TestFitEndpoint:
    """Tests for the stateless fit endpoint."""

    def test_fit_four_items(self, test_client):
        response = test_client.post(
            "/api/layout/fit",
            json={"item_count": 4, "container_width": 800, "container_height": 600},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "fit"
        assert data["orientation"] == "column-bound"
        assert data["divisor"] == 2
        assert data["tile_height"] == pytest.approx(221.625)

    def test_fit_too_small(self, test_client):
        response = test_client.post(
            "/api/layout/fit",
            json={"item_count": 2, "container_width": 50, "container_height": 50},
        )

        assert response.status_code == 200
        assert response.json() == {"kind": "too_small"}

    def test_fit_unmeasured_returns_initial(self, test_client):
        response = test_client.post("/api/layout/fit", json={"item_count": 3})

        assert response.status_code == 200
        assert response.json() == {"kind": "fit", "orientation": "column-bound", "divisor": 1, "tile_height": None}

    def test_fit_custom_constants(self, test_client):
        response = test_client.post(
            "/api/layout/fit",
            json={
                "item_count": 1,
                "container_width": 1000,
                "container_height": 60,
                "min_tile_height_px": 61,
            },
        )

        assert response.json() == {"kind": "too_small"}

    @pytest.mark.parametrize(
        "body",
        [
            {"item_count": 0, "container_width": 800, "container_height": 600},
            {"item_count": 20_000_000, "container_width": 1920, "container_height": 1080},
            {"item_count": 2, "container_width": -1, "container_height": 600},
            {"item_count": 2, "container_width": 800, "container_height": 600, "aspect_ratio": 0},
        ],
    )
    def test_fit_validation(self, test_client, body):
        response = test_client.post("/api/layout/fit", json=body)

        assert response.status_code == 422


class TestStatefulEndpoints:
    """Tests for the stateful layout endpoints."""

    def test_state_json(self, test_client):
        response = test_client.get("/api/layout/state")

        assert response.status_code == 200
        data = response.json()
        assert data["item_count"] == 1
        assert data["show_chat"] is False
        assert data["result"]["kind"] == "fit"
        assert data["constraints"]["aspect_ratio"] == "1.777778"

    def test_measure_json(self, test_client):
        response = test_client.post("/api/layout/measure", json={"width": 1000, "height": 60})

        assert response.status_code == 200
        data = response.json()
        assert data["container_width"] == 1000
        assert data["result"] == {"kind": "fit", "orientation": "row-bound", "divisor": 1, "tile_height": 60.0}
        assert data["constraints"]["max_height"] == "calc((100% - 0px) / 1)"

    def test_measure_html_too_small(self, test_client):
        """A too-small container renders the expand notice instead of tiles."""
        response = test_client.post("/api/layout/measure?format=html", json={"width": 50, "height": 50})

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Please Expand Your Window" in response.text
        assert "Video 1" not in response.text

    def test_measure_rejects_negative(self, test_client):
        response = test_client.post("/api/layout/measure", json={"width": -10, "height": 50})

        assert response.status_code == 422

    def test_add_and_remove(self, test_client):
        assert test_client.post("/api/layout/videos/add").json()["item_count"] == 2
        assert test_client.post("/api/layout/videos/add").json()["item_count"] == 3
        assert test_client.post("/api/layout/videos/remove").json()["item_count"] == 2

    def test_remove_keeps_one(self, test_client):
        response = test_client.post("/api/layout/videos/remove")

        assert response.json()["item_count"] == 1

    def test_add_html_renders_stage(self, test_client):
        response = test_client.post("/api/layout/videos/add?format=html")

        assert response.status_code == 200
        assert 'id="stage"' in response.text
        assert "Video 2" in response.text

    def test_toggle_chat(self, test_client):
        response = test_client.post("/api/layout/panels/chat/toggle?format=html")

        assert "Hide Chat" in response.text
        assert "chat-panel" in response.text
        assert test_client.post("/api/layout/panels/chat/toggle").json()["show_chat"] is False

    def test_toggle_bottom_bar(self, test_client):
        response = test_client.post("/api/layout/panels/bottom-bar/toggle?format=html")

        assert "Hide Bottom Bar" in response.text
        assert "bottom-bar" in response.text
        assert test_client.post("/api/layout/panels/bottom-bar/toggle").json()["show_bottom_bar"] is False

    def test_state_unavailable_without_lifespan(self):
        """Without startup there is no layout state to serve."""
        client = TestClient(app)

        response = client.get("/api/layout/state")

        assert response.status_code == 503
        assert response.json()["error"]["code"] == "LAYOUT_STATE_UNAVAILABLE"


class TestViewRouter:
    """Tests for HTML views."""

    def test_index(self, test_client):
        response = test_client.get("/")

        assert response.status_code == 200
        assert "<!DOCTYPE html>" in response.text
        assert "Add Video" in response.text
        assert "Show Chat" in response.text
        assert "Video 1" in response.text
        assert "max-width: calc((100% - 0px) / 1)" in response.text

    def test_grid_fragment(self, test_client):
        test_client.post("/api/layout/measure", json={"width": 1600, "height": 900})
        test_client.post("/api/layout/videos/add")

        response = test_client.get("/tiles/grid")

        assert response.status_code == 200
        assert response.text.count('class="tile') == 2

    def test_stage_fragment(self, test_client):
        response = test_client.get("/tiles/stage")

        assert response.status_code == 200
        assert 'id="video-grid"' in response.text
        assert "gap: 12px" in response.text

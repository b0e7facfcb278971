"""Unit tests for configuration."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from video_grid.config import Settings, get_settings, reset_settings
from video_grid.exceptions import ConfigurationException, ErrorCode


def test_settings_defaults():
    """Test Settings model has correct defaults."""
    settings = Settings(_env_file=None)

    assert settings.api_host == "127.0.0.1"
    assert settings.api_port == 8000
    assert settings.log_level == "INFO"
    assert settings.gap_px == 12
    assert settings.aspect_ratio == pytest.approx(16 / 9)
    assert settings.min_tile_height_px == 60
    assert settings.measure_rate_limit == "600/minute"


def test_settings_env_loading():
    """Test settings can load from environment."""
    with patch.dict(
        "os.environ",
        {
            "GAP_PX": "8",
            "ASPECT_RATIO": "1.3333",
            "MIN_TILE_HEIGHT_PX": "90",
            "LOG_LEVEL": "debug",
            "API_PORT": "9000",
        },
    ):
        settings = Settings(_env_file=None)

    assert settings.gap_px == 8
    assert settings.aspect_ratio == pytest.approx(1.3333)
    assert settings.min_tile_height_px == 90
    assert settings.log_level == "DEBUG"
    assert settings.api_port == 9000


@pytest.mark.parametrize(
    "fields",
    [
        {"gap_px": -1},
        {"aspect_ratio": 0},
        {"min_tile_height_px": -10},
        {"api_port": 70000},
        {"log_level": "verbose"},
        {"api_host": "   "},
        {"measure_rate_limit": "lots"},
    ],
)
def test_settings_validation(fields):
    """Out-of-range values are rejected."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **fields)


def test_get_settings_singleton():
    """get_settings returns the same instance until reset."""
    reset_settings()
    try:
        first = get_settings()
        assert get_settings() is first
    finally:
        reset_settings()


def test_get_settings_invalid_env():
    """Invalid environment values surface as ConfigurationException."""
    reset_settings()
    try:
        with patch.dict("os.environ", {"ASPECT_RATIO": "-1"}):
            with pytest.raises(ConfigurationException) as exc_info:
                get_settings()
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID
        assert "aspect_ratio" in exc_info.value.details["errors"]
    finally:
        reset_settings()

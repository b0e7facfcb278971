from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from video_grid.exceptions import ConfigurationException, ErrorCode
from video_grid.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent  # video-grid/

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a default so the app starts without a .env file.
    The layout constants feed every grid fit the app performs.
    """

    # API server settings
    api_host: str = Field(min_length=1, default="127.0.0.1", description="API server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")
    log_level: str = Field(default="INFO", description="Root log level")

    # Layout constants
    gap_px: float = Field(ge=0, default=12, description="Gap between tiles in pixels")
    aspect_ratio: float = Field(gt=0, default=16 / 9, description="Target tile aspect ratio (width / height)")
    min_tile_height_px: float = Field(ge=0, default=60, description="Smallest acceptable tile height in pixels")

    # Container measurements arrive from a resize observer
    measure_rate_limit: str = Field(
        pattern=r"^\d+/(second|minute|hour)$",
        default="600/minute",
        description="Rate limit for the measurement endpoint",
    )

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,  # Validate defaults too
    )

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log_level and ensure it names a logging level."""
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Returns:
        Cached Settings instance

    Raises:
        ConfigurationException: If environment or .env values fail validation
    """
    global _settings_instance
    if _settings_instance is None:
        try:
            _settings_instance = Settings()
        except ValidationError as e:
            log_with_context(
                logger,
                "error",
                "Invalid configuration",
                error=str(e),
                event_type="config_invalid",
            )
            raise ConfigurationException(
                "Invalid configuration",
                code=ErrorCode.CONFIG_INVALID,
                details={"errors": [err["loc"][0] for err in e.errors() if err["loc"]]},
            ) from e
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached Settings instance so the next call re-reads the environment."""
    global _settings_instance
    _settings_instance = None

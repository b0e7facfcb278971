"""Video Grid models"""

from video_grid.models.base_models import DetailedHealthResponse, HealthResponse
from video_grid.models.layout import (
    INITIAL_RESULT,
    MAX_ITEM_COUNT,
    CandidateArrangement,
    FitResult,
    LayoutRequest,
    LayoutResult,
    LayoutSnapshot,
    MeasurementUpdate,
    Orientation,
    TileConstraints,
    TooSmallResult,
)

__all__ = [
    "DetailedHealthResponse",
    "HealthResponse",
    "INITIAL_RESULT",
    "MAX_ITEM_COUNT",
    "CandidateArrangement",
    "FitResult",
    "LayoutRequest",
    "LayoutResult",
    "LayoutSnapshot",
    "MeasurementUpdate",
    "Orientation",
    "TileConstraints",
    "TooSmallResult",
]

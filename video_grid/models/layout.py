"""Pydantic models for grid layout requests, results and snapshots."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field

DEFAULT_GAP_PX = 12.0
DEFAULT_ASPECT_RATIO = 16 / 9
DEFAULT_MIN_TILE_HEIGHT_PX = 60.0
MAX_ITEM_COUNT = 10_000


class Orientation(str, Enum):
    """Which dimension bounds the tile size."""

    COLUMN_BOUND = "column-bound"
    ROW_BOUND = "row-bound"


class LayoutRequest(BaseModel):
    """Inputs for one grid fit.

    Container dimensions are None until the container has been measured.
    """

    item_count: int = Field(..., ge=1, le=MAX_ITEM_COUNT, description="Number of tiles to place")
    container_width: float | None = Field(default=None, ge=0, description="Container content-box width in pixels")
    container_height: float | None = Field(default=None, ge=0, description="Container content-box height in pixels")
    gap_px: float = Field(default=DEFAULT_GAP_PX, ge=0, description="Gap between tiles in pixels")
    aspect_ratio: float = Field(default=DEFAULT_ASPECT_RATIO, gt=0, description="Tile aspect ratio (width / height)")
    min_tile_height_px: float = Field(
        default=DEFAULT_MIN_TILE_HEIGHT_PX, ge=0, description="Smallest acceptable tile height in pixels"
    )

    @property
    def is_measured(self) -> bool:
        """True once both container dimensions are known and non-zero."""
        return bool(self.container_width) and bool(self.container_height)


class CandidateArrangement(BaseModel):
    """One tight columns x rows grid and the tile height it yields."""

    columns: int = Field(..., ge=1)
    rows: int = Field(..., ge=1)
    tile_height: float
    orientation: Orientation

    @property
    def divisor(self) -> int:
        """Column count when column-bound, row count when row-bound."""
        return self.columns if self.orientation == Orientation.COLUMN_BOUND else self.rows


class FitResult(BaseModel):
    """A chosen arrangement."""

    kind: Literal["fit"] = "fit"
    orientation: Orientation
    divisor: int = Field(..., ge=1)
    tile_height: float | None = Field(default=None, description="Resulting tile height; None before the first fit")


class TooSmallResult(BaseModel):
    """No arrangement reaches the minimum tile height."""

    kind: Literal["too_small"] = "too_small"


LayoutResult = Annotated[FitResult | TooSmallResult, Field(discriminator="kind")]

# Result shown before the container has ever been measured
INITIAL_RESULT = FitResult(orientation=Orientation.COLUMN_BOUND, divisor=1)


class MeasurementUpdate(BaseModel):
    """Container content-box size reported by the browser."""

    width: float | None = Field(default=None, ge=0, description="Container width in pixels")
    height: float | None = Field(default=None, ge=0, description="Container height in pixels")


class TileConstraints(BaseModel):
    """Per-tile sizing derived from a FitResult."""

    fill_width: bool
    fill_height: bool
    aspect_ratio: str
    max_width: str | None = None
    max_height: str | None = None

    @property
    def style(self) -> str:
        """Inline CSS declarations for one tile."""
        declarations = [f"aspect-ratio: {self.aspect_ratio}"]
        if self.max_width:
            declarations.append(f"max-width: {self.max_width}")
        if self.max_height:
            declarations.append(f"max-height: {self.max_height}")
        return "; ".join(declarations)


class LayoutSnapshot(BaseModel):
    """Current layout state as seen by the page."""

    item_count: int = Field(..., ge=1)
    container_width: float | None = None
    container_height: float | None = None
    show_chat: bool = False
    show_bottom_bar: bool = False
    result: LayoutResult
    constraints: TileConstraints | None = Field(default=None, description="None when the result is too small")

    @property
    def is_too_small(self) -> bool:
        return isinstance(self.result, TooSmallResult)

"""Translate fit results into per-tile CSS sizing constraints."""

from video_grid.models.layout import FitResult, Orientation, TileConstraints


def _px(value: float) -> str:
    return f"{value:g}px"


def _share_of_container(gap_px: float, divisor: int) -> str:
    """CSS length for one of `divisor` equal slots separated by gaps."""
    return f"calc((100% - {_px(gap_px * (divisor - 1))}) / {divisor})"


def build_tile_constraints(result: FitResult, gap_px: float, aspect_ratio: float) -> TileConstraints:
    """Build the sizing a wrapping flex container needs for each tile.

    Column-bound tiles fill the width and are capped at one column's share;
    row-bound tiles fill the height and are capped at one row's share. The
    aspect ratio fixes the other dimension.

    Args:
        result: Chosen arrangement
        gap_px: Gap between tiles in pixels
        aspect_ratio: Tile aspect ratio (width / height)

    Returns:
        TileConstraints for every tile in the grid
    """
    column_bound = result.orientation == Orientation.COLUMN_BOUND
    share = _share_of_container(gap_px, result.divisor)
    return TileConstraints(
        fill_width=column_bound,
        fill_height=not column_bound,
        aspect_ratio=f"{aspect_ratio:.6f}",
        max_width=share if column_bound else None,
        max_height=None if column_bound else share,
    )


def video_labels(count: int) -> list[str]:
    """Placeholder labels for the tiles: Video 1 .. Video N."""
    return [f"Video {index + 1}" for index in range(count)]

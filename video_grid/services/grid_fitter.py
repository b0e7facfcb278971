"""Grid fitting: pick the tile arrangement with the largest tile height.

Only tight grids are enumerated, one per column count: a grid is tight when
neither its last row nor its last column could be dropped while still holding
every item. Each tight grid is sized against the container and classified as
column-bound (tile width is the limit) or row-bound (tile height is the limit).
"""

import math

from video_grid.models.layout import (
    INITIAL_RESULT,
    CandidateArrangement,
    FitResult,
    LayoutRequest,
    LayoutResult,
    Orientation,
    TooSmallResult,
)


def is_tight(item_count: int, columns: int, rows: int) -> bool:
    """Check that no full row or column of the grid could be removed."""
    if columns * (rows - 1) >= item_count:
        return False
    if (columns - 1) * rows >= item_count:
        return False
    return True


def enumerate_candidates(request: LayoutRequest) -> list[CandidateArrangement]:
    """Size every tight grid for the request's container.

    Grids whose gaps leave negative room for tiles are skipped, and enumeration
    stops at the first column count whose gaps exceed the container width.
    Candidates come back in ascending column order.

    Args:
        request: Layout inputs; container dimensions must be measured

    Returns:
        Feasible candidates, possibly empty
    """
    item_count = request.item_count
    container_width = request.container_width or 0.0
    container_height = request.container_height or 0.0
    gap = request.gap_px

    candidates: list[CandidateArrangement] = []
    for columns in range(1, item_count + 1):
        # Tile width only shrinks as columns grow, so no later column count fits either
        width = (container_width - gap * (columns - 1)) / columns
        if width < 0:
            break

        rows = math.ceil(item_count / columns)
        if not is_tight(item_count, columns, rows):
            continue

        height = (container_height - gap * (rows - 1)) / rows
        if height < 0:
            continue

        if height > 0:
            relative = (width / height) / request.aspect_ratio
        else:
            # Zero-height cell: infinitely wide unless it has no width either
            relative = math.inf if width > 0 else 0.0

        if relative > 1:
            candidates.append(
                CandidateArrangement(
                    columns=columns, rows=rows, tile_height=height, orientation=Orientation.ROW_BOUND
                )
            )
        else:
            candidates.append(
                CandidateArrangement(
                    columns=columns,
                    rows=rows,
                    tile_height=width / request.aspect_ratio,
                    orientation=Orientation.COLUMN_BOUND,
                )
            )
    return candidates


def fit(request: LayoutRequest, previous: LayoutResult | None = None) -> LayoutResult:
    """Choose the arrangement with the largest tile height.

    An unmeasured container (absent or zero width/height) is not ready yet, so
    the previous result is handed back unchanged; without one, the initial
    single-column result is returned.

    Ties keep the candidate with fewer columns. A best tile height exactly equal
    to the minimum still fits.

    Args:
        request: Layout inputs
        previous: Result to keep while the container is unmeasured

    Returns:
        FitResult with orientation and divisor, or TooSmallResult
    """
    if not request.is_measured:
        return previous if previous is not None else INITIAL_RESULT

    candidates = enumerate_candidates(request)
    if not candidates:
        return TooSmallResult()

    # max() keeps the first of equal heights
    best = max(candidates, key=lambda candidate: candidate.tile_height)
    if best.tile_height < request.min_tile_height_px:
        return TooSmallResult()

    return FitResult(orientation=best.orientation, divisor=best.divisor, tile_height=best.tile_height)

"""Grid partitioning of the inner board area."""

from __future__ import annotations

import math

from cloverhunt.core.models import GridGeometry


class InvalidDimensionsError(ValueError):
    """Raised when the area to partition has no positive extent."""


def partition(inner_width: float, inner_height: float, count: int) -> GridGeometry:
    """Split the area into a near-square grid with at least ``count`` cells.

    Column count follows the area's aspect ratio so cells stay close to square;
    row count is derived from it, which always rounds up to cover ``count``.
    """
    if inner_width <= 0 or inner_height <= 0:
        raise InvalidDimensionsError(
            f"Cannot partition a {inner_width}x{inner_height} area."
        )
    if count < 1:
        raise ValueError("count must be >= 1")

    cols = max(1, math.ceil(math.sqrt(count * inner_width / inner_height)))
    rows = math.ceil(count / cols)
    return GridGeometry(
        rows=rows,
        cols=cols,
        cell_width=inner_width / cols,
        cell_height=inner_height / rows,
    )


def capacity_grid(inner_width: float, inner_height: float, min_cell_size: float = 1.0) -> GridGeometry:
    """Return the densest grid whose cells are at least ``min_cell_size`` per side.

    A side shorter than ``min_cell_size`` still gets one cell spanning it.
    """
    if min_cell_size <= 0:
        raise ValueError("min_cell_size must be > 0")
    if inner_width <= 0 or inner_height <= 0:
        raise InvalidDimensionsError(
            f"Cannot partition a {inner_width}x{inner_height} area."
        )
    cols = max(1, math.floor(inner_width / min_cell_size))
    rows = max(1, math.floor(inner_height / min_cell_size))
    return GridGeometry(
        rows=rows,
        cols=cols,
        cell_width=inner_width / cols,
        cell_height=inner_height / rows,
    )


def max_capacity(inner_width: float, inner_height: float, min_cell_size: float = 1.0) -> int:
    """Return how many cells of at least ``min_cell_size`` pixels fit the area."""
    if min_cell_size <= 0:
        raise ValueError("min_cell_size must be > 0")
    if inner_width <= 0 or inner_height <= 0:
        return 0
    return capacity_grid(inner_width, inner_height, min_cell_size).capacity

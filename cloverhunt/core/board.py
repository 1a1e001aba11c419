"""Board-space helpers over a generated layout: cells, occupancy, hit-testing."""

from __future__ import annotations

import numpy as np

from cloverhunt.core.models import Cell, GridGeometry, Layout, PlacedItem


def cell_of(item: PlacedItem, geometry: GridGeometry, padding: float) -> Cell:
    """Return the grid cell that contains the item centre."""
    center_x, center_y = item.center
    col = int((center_x - padding) // geometry.cell_width)
    row = int((center_y - padding) // geometry.cell_height)
    return Cell(
        row=min(max(row, 0), geometry.rows - 1),
        col=min(max(col, 0), geometry.cols - 1),
    )


def occupancy_grid(layout: Layout) -> np.ndarray:
    """Count items per grid cell as a ``rows x cols`` array."""
    geometry = layout.geometry
    if geometry is None:
        return np.zeros((0, 0), dtype=np.int16)
    grid = np.zeros((geometry.rows, geometry.cols), dtype=np.int16)
    if layout.is_empty:
        return grid
    cells = [cell_of(item, geometry, layout.padding) for item in layout]
    rows = np.fromiter((cell.row for cell in cells), dtype=np.intp, count=len(cells))
    cols = np.fromiter((cell.col for cell in cells), dtype=np.intp, count=len(cells))
    np.add.at(grid, (rows, cols), 1)
    return grid


def item_at(layout: Layout, px: float, py: float) -> PlacedItem | None:
    """Return the topmost item under a board-space point."""
    for item in reversed(layout.items):
        if item.contains(px, py):
            return item
    return None

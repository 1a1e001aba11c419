"""Cell subset sampling and per-cell item placement."""

from __future__ import annotations

from dataclasses import dataclass

from cloverhunt.core.models import (
    MAX_ROTATION_DEGREES,
    BoardRect,
    Cell,
    GridGeometry,
    SizeRange,
)
from cloverhunt.core.random_source import RandomSource

# Anchor band inside a cell, as fractions of the cell extent.
JITTER_LOW = 0.2
JITTER_HIGH = 0.8


@dataclass(frozen=True, slots=True)
class Placement:
    """Position and size drawn for one cell."""

    x: float
    y: float
    size: float
    rotation: float


def sample_cells(rows: int, cols: int, count: int, rng: RandomSource) -> list[Cell]:
    """Pick ``count`` distinct cells uniformly at random."""
    total = rows * cols
    if rows < 0 or cols < 0:
        raise ValueError("rows and cols must be >= 0")
    if not 0 <= count <= total:
        raise ValueError(f"count must be within [0, {total}], got {count}")

    cells = [Cell(row=row, col=col) for row in range(rows) for col in range(cols)]
    for i in range(len(cells) - 1, 0, -1):
        j = rng.randrange(i + 1)
        cells[i], cells[j] = cells[j], cells[i]
    return cells[:count]


def place_in_cell(
    cell: Cell,
    geometry: GridGeometry,
    padding: float,
    size_range: SizeRange,
    board: BoardRect,
    rng: RandomSource,
) -> Placement:
    """Draw a size and a jittered position for an item inside ``cell``."""
    inner_width, inner_height = board.inner(padding)
    size = min(rng.uniform(size_range.min, size_range.max), inner_width, inner_height)

    origin_x, origin_y = geometry.cell_origin(cell, padding)
    anchor_x = origin_x + rng.uniform(JITTER_LOW, JITTER_HIGH) * geometry.cell_width
    anchor_y = origin_y + rng.uniform(JITTER_LOW, JITTER_HIGH) * geometry.cell_height
    rotation = rng.uniform(-MAX_ROTATION_DEGREES, MAX_ROTATION_DEGREES)

    half = size / 2
    return Placement(
        x=_clamp(anchor_x - half, padding, board.width - padding - size),
        y=_clamp(anchor_y - half, padding, board.height - padding - size),
        size=size,
        rotation=rotation,
    )


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)

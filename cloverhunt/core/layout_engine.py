"""Board layout generation: grid, cell sampling, placement and target."""

from __future__ import annotations

import logging

from cloverhunt.core.grid import capacity_grid, partition
from cloverhunt.core.models import BoardRect, Layout, PlacedItem, SizeRange
from cloverhunt.core.random_source import RandomSource, SeededRandomSource
from cloverhunt.core.sampler import place_in_cell, sample_cells
from cloverhunt.core.target import mark_target

logger = logging.getLogger(__name__)


def layout(
    rect: BoardRect,
    padding: float,
    count: int,
    size_range: SizeRange,
    rng: RandomSource | None = None,
    *,
    min_cell_size: float = 1.0,
) -> Layout:
    """Scatter ``count`` items over the board with exactly one target.

    A board with no inner area, or a non-positive count, yields an empty
    layout. Requests beyond what the area can host are clamped to capacity.
    """
    if padding < 0:
        raise ValueError("padding must be >= 0")
    source = rng if rng is not None else SeededRandomSource()
    inner_width, inner_height = rect.inner(padding)
    if inner_width <= 0 or inner_height <= 0 or count <= 0:
        logger.debug(
            "layout_empty width=%s height=%s padding=%s count=%s",
            rect.width,
            rect.height,
            padding,
            count,
        )
        return Layout(rect=rect, padding=padding)

    densest = capacity_grid(inner_width, inner_height, min_cell_size)
    if count > densest.capacity:
        logger.warning(
            "layout_oversized_request requested=%s capacity=%s",
            count,
            densest.capacity,
            extra={"requested": count, "capacity": densest.capacity},
        )
        count = densest.capacity
        geometry = densest
    else:
        geometry = partition(inner_width, inner_height, count)
        # Near capacity the aspect-biased grid can overshoot a side.
        if geometry.cols > densest.cols or geometry.rows > densest.rows:
            geometry = densest

    placed: list[PlacedItem] = []
    for item_id, cell in enumerate(sample_cells(geometry.rows, geometry.cols, count, source)):
        placement = place_in_cell(cell, geometry, padding, size_range, rect, source)
        placed.append(
            PlacedItem(
                id=item_id,
                x=placement.x,
                y=placement.y,
                size=placement.size,
                rotation=placement.rotation,
            )
        )

    items = mark_target(placed, source)
    logger.debug(
        "layout_ready items=%s rows=%s cols=%s",
        len(items),
        geometry.rows,
        geometry.cols,
    )
    return Layout(rect=rect, padding=padding, items=items, geometry=geometry)


def reshuffle(
    previous: Layout,
    size_range: SizeRange,
    rng: RandomSource | None = None,
    *,
    min_cell_size: float = 1.0,
) -> Layout:
    """Build a fresh layout for the same board and item count as ``previous``."""
    return layout(
        previous.rect,
        previous.padding,
        len(previous),
        size_range,
        rng,
        min_cell_size=min_cell_size,
    )

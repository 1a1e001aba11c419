"""Board-layout core: grid partitioning, cell sampling and target selection."""

from .board import cell_of, item_at, occupancy_grid
from .grid import InvalidDimensionsError, capacity_grid, max_capacity, partition
from .layout_engine import layout, reshuffle
from .models import BoardRect, Cell, GridGeometry, Layout, PlacedItem, SizeRange
from .random_source import RandomSource, SeededRandomSource
from .sampler import place_in_cell, sample_cells
from .target import mark_target

__all__ = [
    "BoardRect",
    "Cell",
    "GridGeometry",
    "InvalidDimensionsError",
    "Layout",
    "PlacedItem",
    "RandomSource",
    "SeededRandomSource",
    "SizeRange",
    "capacity_grid",
    "cell_of",
    "item_at",
    "layout",
    "mark_target",
    "max_capacity",
    "occupancy_grid",
    "partition",
    "place_in_cell",
    "reshuffle",
    "sample_cells",
]

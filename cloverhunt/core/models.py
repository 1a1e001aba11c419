"""Core domain models used by the board-layout algorithm."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

DEFAULT_PADDING = 16.0
DEFAULT_MIN_SIZE = 36.0
DEFAULT_MAX_SIZE = 64.0
MAX_ROTATION_DEGREES = 12.0


@dataclass(frozen=True, slots=True)
class BoardRect:
    """Pixel size of the playable area as measured by the host."""

    width: float
    height: float

    def inner(self, padding: float) -> tuple[float, float]:
        """Return the area left after shrinking every side by padding."""
        return self.width - 2 * padding, self.height - 2 * padding


@dataclass(frozen=True, slots=True)
class SizeRange:
    """Pixel diameter bounds for a single token."""

    min: float
    max: float

    def __post_init__(self) -> None:
        if self.min <= 0:
            raise ValueError("SizeRange.min must be > 0")
        if self.min > self.max:
            raise ValueError("SizeRange.min must be <= SizeRange.max")


DEFAULT_SIZE_RANGE = SizeRange(DEFAULT_MIN_SIZE, DEFAULT_MAX_SIZE)


@dataclass(frozen=True, slots=True)
class Cell:
    """Grid coordinate."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class GridGeometry:
    """Grid partition of the inner board area."""

    rows: int
    cols: int
    cell_width: float
    cell_height: float

    @property
    def capacity(self) -> int:
        return self.rows * self.cols

    def cell_origin(self, cell: Cell, padding: float) -> tuple[float, float]:
        """Return the board-space top-left corner of a cell."""
        return padding + cell.col * self.cell_width, padding + cell.row * self.cell_height


@dataclass(frozen=True, slots=True)
class PlacedItem:
    """One token placed on the board."""

    id: int
    x: float
    y: float
    size: float
    rotation: float = 0.0
    is_target: bool = False

    @property
    def center(self) -> tuple[float, float]:
        half = self.size / 2
        return self.x + half, self.y + half

    def contains(self, px: float, py: float) -> bool:
        """Return whether a board-space point is inside the item box."""
        return self.x <= px <= self.x + self.size and self.y <= py <= self.y + self.size


@dataclass(frozen=True, slots=True)
class Layout:
    """Immutable set of placed items for one board state."""

    rect: BoardRect
    padding: float
    items: tuple[PlacedItem, ...] = ()
    geometry: GridGeometry | None = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[PlacedItem]:
        return iter(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def target(self) -> PlacedItem | None:
        """Return the target item, or None for an empty layout."""
        for item in self.items:
            if item.is_target:
                return item
        return None

    def item_by_id(self, item_id: int) -> PlacedItem | None:
        """Find an item of this layout by id."""
        if 0 <= item_id < len(self.items) and self.items[item_id].id == item_id:
            return self.items[item_id]
        for item in self.items:
            if item.id == item_id:
                return item
        return None

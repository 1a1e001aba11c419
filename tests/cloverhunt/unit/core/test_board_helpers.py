from cloverhunt.core.board import cell_of, item_at, occupancy_grid
from cloverhunt.core.grid import partition
from cloverhunt.core.models import BoardRect, Cell, Layout, PlacedItem


def _manual_layout() -> Layout:
    geometry = partition(268, 168, 10)
    items = (
        PlacedItem(id=0, x=20.0, y=20.0, size=30.0),
        PlacedItem(id=1, x=40.0, y=30.0, size=30.0, is_target=True),
        PlacedItem(id=2, x=230.0, y=140.0, size=30.0),
    )
    return Layout(rect=BoardRect(300, 200), padding=16, items=items, geometry=geometry)


def test_cell_of_uses_item_centre() -> None:
    board_layout = _manual_layout()
    geometry = board_layout.geometry
    assert geometry is not None
    assert cell_of(board_layout.items[0], geometry, 16) == Cell(0, 0)
    assert cell_of(board_layout.items[1], geometry, 16) == Cell(0, 0)
    assert cell_of(board_layout.items[2], geometry, 16) == Cell(2, 3)


def test_occupancy_grid_counts_items_per_cell() -> None:
    grid = occupancy_grid(_manual_layout())
    assert grid.shape == (3, 4)
    assert grid[0, 0] == 2
    assert grid[2, 3] == 1
    assert int(grid.sum()) == 3


def test_occupancy_grid_empty_layout() -> None:
    assert occupancy_grid(Layout(rect=BoardRect(0, 0), padding=16)).shape == (0, 0)


def test_item_at_prefers_topmost_item() -> None:
    board_layout = _manual_layout()
    overlap = item_at(board_layout, 45.0, 35.0)
    assert overlap is not None and overlap.id == 1
    only_first = item_at(board_layout, 25.0, 25.0)
    assert only_first is not None and only_first.id == 0
    assert item_at(board_layout, 150.0, 100.0) is None


def test_layout_lookup_helpers() -> None:
    board_layout = _manual_layout()
    assert board_layout.target is not None and board_layout.target.id == 1
    assert board_layout.item_by_id(2) is board_layout.items[2]
    assert board_layout.item_by_id(7) is None
    assert board_layout.item_by_id(-1) is None
    assert [item.id for item in board_layout] == [0, 1, 2]

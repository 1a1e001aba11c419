import logging

import pytest

from cloverhunt.core.board import occupancy_grid
from cloverhunt.core.layout_engine import layout, reshuffle
from cloverhunt.core.models import BoardRect, SizeRange
from cloverhunt.core.random_source import SeededRandomSource


def _assert_layout_invariants(board_layout, rect: BoardRect, padding: float, size_range: SizeRange) -> None:
    assert [item.id for item in board_layout] == list(range(len(board_layout)))
    assert sum(item.is_target for item in board_layout) == 1
    for item in board_layout:
        assert size_range.min <= item.size < size_range.max
        assert padding <= item.x
        assert item.x + item.size <= rect.width - padding + 1e-9
        assert padding <= item.y
        assert item.y + item.size <= rect.height - padding + 1e-9


def test_layout_concrete_board_scenario(seeded_rng) -> None:
    rect = BoardRect(300, 200)
    size_range = SizeRange(20, 40)
    board_layout = layout(rect, 16, 10, size_range, seeded_rng)

    assert len(board_layout) == 10
    assert board_layout.geometry is not None
    assert (board_layout.geometry.rows, board_layout.geometry.cols) == (3, 4)
    _assert_layout_invariants(board_layout, rect, 16, size_range)
    for item in board_layout:
        assert 16 <= item.x <= 284 - item.size
        assert 16 <= item.y <= 184 - item.size
    assert board_layout.target is not None


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 1337])
@pytest.mark.parametrize(
    ("width", "height", "count"),
    [(960, 640, 90), (640, 960, 150), (375, 250, 240), (1200, 300, 45)],
)
def test_layout_invariants_hold_across_boards(seed: int, width: float, height: float, count: int) -> None:
    rect = BoardRect(width, height)
    size_range = SizeRange(36, 64)
    board_layout = layout(rect, 16, count, size_range, SeededRandomSource(seed))
    assert len(board_layout) == count
    _assert_layout_invariants(board_layout, rect, 16, size_range)


def test_layout_places_one_item_per_cell(seeded_rng) -> None:
    # Sizes stay below 40% of a cell, so no clamp moves a centre out of its cell.
    board_layout = layout(BoardRect(800, 600), 16, 48, SizeRange(10, 30), seeded_rng)
    grid = occupancy_grid(board_layout)
    assert grid.shape == (6, 9)
    assert int(grid.sum()) == 48
    assert int(grid.max()) == 1


def test_layout_is_reproducible_with_same_seed() -> None:
    rect = BoardRect(960, 640)
    first = layout(rect, 16, 90, SizeRange(36, 64), SeededRandomSource(99))
    second = layout(rect, 16, 90, SizeRange(36, 64), SeededRandomSource(99))
    assert first == second


def test_layout_differs_across_calls_on_shared_stream(seeded_rng) -> None:
    rect = BoardRect(960, 640)
    first = layout(rect, 16, 90, SizeRange(36, 64), seeded_rng)
    second = layout(rect, 16, 90, SizeRange(36, 64), seeded_rng)
    assert first.items != second.items


@pytest.mark.parametrize(
    ("rect", "padding"),
    [(BoardRect(0, 0), 16), (BoardRect(100, 32), 16), (BoardRect(20, 400), 10), (BoardRect(-5, 100), 0)],
)
def test_layout_degenerate_board_is_empty(rect: BoardRect, padding: float, seeded_rng) -> None:
    board_layout = layout(rect, padding, 50, SizeRange(20, 40), seeded_rng)
    assert board_layout.is_empty
    assert len(board_layout) == 0
    assert board_layout.target is None
    assert board_layout.geometry is None


@pytest.mark.parametrize("count", [0, -3])
def test_layout_non_positive_count_is_empty(count: int, seeded_rng) -> None:
    assert layout(BoardRect(300, 200), 16, count, SizeRange(20, 40), seeded_rng).is_empty


def test_layout_clamps_oversized_request_to_capacity(seeded_rng, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="cloverhunt.core.layout_engine"):
        board_layout = layout(BoardRect(100, 100), 16, 100000, SizeRange(20, 40), seeded_rng)

    assert board_layout.geometry is not None
    assert board_layout.geometry.capacity == 68 * 68
    assert len(board_layout) == board_layout.geometry.capacity
    assert sum(item.is_target for item in board_layout) == 1
    assert any("layout_oversized_request" in record.getMessage() for record in caplog.records)


def test_layout_oversized_fractional_board_fills_densest_grid(seeded_rng) -> None:
    board_layout = layout(BoardRect(100.5, 100), 16, 100000, SizeRange(20, 40), seeded_rng)

    geometry = board_layout.geometry
    assert geometry is not None
    assert (geometry.rows, geometry.cols) == (68, 68)
    assert geometry.cell_width >= 1.0
    assert len(board_layout) == geometry.capacity == 4624
    assert sum(item.is_target for item in board_layout) == 1


def test_layout_at_capacity_avoids_cells_below_min_size(seeded_rng, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="cloverhunt.core.layout_engine"):
        board_layout = layout(BoardRect(100.5, 100), 16, 4624, SizeRange(20, 40), seeded_rng)

    geometry = board_layout.geometry
    assert geometry is not None
    assert (geometry.rows, geometry.cols) == (68, 68)
    assert len(board_layout) == 4624
    assert not caplog.records


def test_layout_sub_pixel_inner_side_still_places_items(seeded_rng) -> None:
    rect = BoardRect(32.5, 100)
    board_layout = layout(rect, 16, 5, SizeRange(20, 40), seeded_rng)

    assert len(board_layout) == 5
    assert sum(item.is_target for item in board_layout) == 1
    for item in board_layout:
        assert item.size == pytest.approx(0.5)
        assert item.x == pytest.approx(16.0)
        assert 16 <= item.y <= 84 - item.size + 1e-9


def test_layout_honors_min_cell_size(seeded_rng) -> None:
    board_layout = layout(
        BoardRect(300, 200), 16, 10000, SizeRange(4, 8), seeded_rng, min_cell_size=20.0
    )
    assert len(board_layout) == 13 * 8


def test_layout_rejects_negative_padding(seeded_rng) -> None:
    with pytest.raises(ValueError):
        layout(BoardRect(300, 200), -1, 10, SizeRange(20, 40), seeded_rng)


def test_layout_without_rng_uses_fresh_source() -> None:
    board_layout = layout(BoardRect(300, 200), 16, 10, SizeRange(20, 40))
    assert len(board_layout) == 10
    assert board_layout.target is not None


def test_reshuffle_keeps_board_and_count(seeded_rng) -> None:
    first = layout(BoardRect(960, 640), 16, 90, SizeRange(36, 64), seeded_rng)
    second = reshuffle(first, SizeRange(36, 64), seeded_rng)
    assert second.rect == first.rect
    assert second.padding == first.padding
    assert len(second) == 90
    assert second.items != first.items

# tests/unit/test_grid.py

import numpy as np
import pytest

from naval_aoe.board import (
    BoardError,
    BoardGrid,
    CellMarkers,
    EffectOverlay,
    ShapeMismatch,
    Ship,
    compose,
    format_grid,
    format_mask,
    place_ships,
)
from naval_aoe.board.masks import build_cross_mask
from tests.test_utils import make_board, make_overlay, parse_grid


def test_new_board_is_water() -> None:
    board = BoardGrid(10)
    assert board.grid.shape == (10, 10)
    assert not board.grid.any()


@pytest.mark.parametrize(
    "ship, expected",
    [
        (Ship(2, 1, 3, True), [(2, 1), (2, 2), (2, 3)]),
        (Ship(5, 7, 4, False), [(5, 7), (6, 7), (7, 7), (8, 7)]),
        (Ship(8, 2), [(8, 2)]),
    ],
)
def test_ship_cells(ship: Ship, expected) -> None:
    assert ship.cells() == expected


def test_place_ships_clips_at_edge() -> None:
    board = BoardGrid(10)
    placed = place_ships(board, [Ship(7, 9, 5, False), Ship(0, 8, 4, True)])
    assert placed == 3 + 2
    assert board.is_occupied(9, 9)
    assert board.is_occupied(0, 9)
    assert not board.is_occupied(10, 9)
    assert int((board.grid == 3).sum()) == 5


def test_overlay_starts_unaffected() -> None:
    overlay = EffectOverlay(10)
    assert overlay.grid.dtype == bool
    assert overlay.count() == 0


def test_compose_without_overlay_shows_board() -> None:
    board = make_board([(2, 2)])
    grid = compose(board, make_overlay())
    expected = np.zeros((10, 10), dtype=np.int8)
    expected[2, 2] = 3
    assert np.array_equal(grid, expected)


def test_compose_affected_area_wins_over_ship() -> None:
    board = make_board([(2, 2), (9, 9)])
    overlay = make_overlay()
    overlay.mark(2, 2)
    overlay.mark(0, 0)
    grid = compose(board, overlay)
    assert grid[2, 2] == 5
    assert grid[0, 0] == 5
    assert grid[9, 9] == 3
    assert grid[5, 5] == 0


def test_compose_never_touches_board() -> None:
    board = make_board([(4, 4)])
    before = board.clone_state()
    overlay = make_overlay()
    overlay.mark(4, 4)
    compose(board, overlay)
    assert np.array_equal(board.grid, before)


def test_compose_custom_markers() -> None:
    markers = CellMarkers(water=1, ship=2, aoe=9)
    board = BoardGrid(3, markers)
    place_ships(board, [Ship(0, 0)])
    overlay = EffectOverlay(3)
    overlay.mark(1, 1)
    assert compose(board, overlay).tolist() == [[2, 1, 1], [1, 9, 1], [1, 1, 1]]


def test_compose_rejects_mismatched_sizes() -> None:
    with pytest.raises(ShapeMismatch) as exc_info:
        compose(BoardGrid(10), EffectOverlay(8))
    assert isinstance(exc_info.value, BoardError)
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.overlay_shape == (8, 8)


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (10, 3), (3, 10), (-10, -10)])
def test_mark_ignores_off_board_cells(row: int, col: int) -> None:
    overlay = EffectOverlay(10)
    assert overlay.mark(row, col) is False
    assert overlay.count() == 0


def test_mark_sets_in_bounds_cell() -> None:
    overlay = EffectOverlay(10)
    assert overlay.mark(9, 0) is True
    assert overlay.mark(9, 0) is True
    assert overlay.count() == 1


def test_format_grid_has_no_trailing_space() -> None:
    board = make_board([(0, 9)])
    text = format_grid(compose(board, make_overlay()))
    lines = text.split("\n")
    assert len(lines) == 10
    assert lines[0] == "0 0 0 0 0 0 0 0 0 3"
    assert all(not line.endswith(" ") for line in lines)
    assert parse_grid(text)[0][9] == 3


def test_format_mask_uses_zero_and_one() -> None:
    assert format_mask(build_cross_mask(3)) == "0 1 0\n1 1 1\n0 1 0"

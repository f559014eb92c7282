import numpy as np
import pytest

from board import Board, OccupiedCellError, OutOfRange
from tile import Side, Tile


def sample_board():
    return Board.from_values([
        [0, 0, 0, 2],
        [0, 4, 0, 0],
        [8, 0, 0, 0],
        [0, 0, 16, 0],
    ])


def test_from_values_uses_screen_order():
    board = sample_board()
    assert board.size == 4
    # top row of the grid is row 3
    assert board.tile(3, 3) == Tile(2, 3, 3)
    assert board.tile(1, 2) == Tile(4, 1, 2)
    assert board.tile(0, 1) == Tile(8, 0, 1)
    assert board.tile(2, 0) == Tile(16, 2, 0)
    assert board.tile(0, 0) is None


def test_stored_tiles_know_their_cell():
    board = sample_board()
    for col in range(board.size):
        for row in range(board.size):
            tile = board.tile(col, row)
            if tile is not None:
                assert (tile.col, tile.row) == (col, row)


@pytest.mark.parametrize('col,row', [(-1, 0), (0, -1), (4, 0), (0, 4), (10, 10)])
def test_tile_out_of_range(col, row):
    with pytest.raises(OutOfRange):
        sample_board().tile(col, row)


def test_out_of_range_is_an_index_error():
    assert issubclass(OutOfRange, IndexError)


def test_add_tile_on_occupied_cell():
    board = Board(4)
    board.add_tile(Tile(2, 1, 1))
    with pytest.raises(OccupiedCellError):
        board.add_tile(Tile(4, 1, 1))
    assert board.tile(1, 1).value == 2


def test_add_tile_outside_board():
    with pytest.raises(OutOfRange):
        Board(3).add_tile(Tile(2, 3, 0))


def test_clear_empties_every_cell():
    board = sample_board()
    board.set_viewing_perspective(Side.EAST)
    board.clear()
    assert all(tile is None for tile in board)
    assert board.viewing_perspective is Side.NORTH


def test_move_slide():
    board = Board(4)
    tile = Tile(2, 0, 0)
    board.add_tile(tile)
    assert board.move(0, 3, tile) is False
    assert board.tile(0, 0) is None
    assert board.tile(0, 3) == Tile(2, 0, 3)


def test_move_merge():
    board = Board(4)
    bottom, top = Tile(4, 2, 0), Tile(4, 2, 3)
    board.add_tile(bottom)
    board.add_tile(top)
    assert board.move(2, 3, bottom) is True
    assert board.tile(2, 0) is None
    assert board.tile(2, 3) == Tile(8, 2, 3)


def test_move_unequal_merge_is_rejected():
    board = Board(4)
    a, b = Tile(2, 0, 0), Tile(4, 0, 1)
    board.add_tile(a)
    board.add_tile(b)
    with pytest.raises(ValueError):
        board.move(0, 1, a)
    # nothing changed
    assert board.tile(0, 0) == a
    assert board.tile(0, 1) == b


def test_move_onto_own_cell_is_noop():
    board = Board(4)
    tile = Tile(2, 1, 2)
    board.add_tile(tile)
    assert board.move(1, 2, tile) is False
    assert board.tile(1, 2) is tile


def test_move_uses_viewing_perspective():
    board = Board(4)
    tile = Tile(2, 2, 1)
    board.add_tile(tile)
    board.set_viewing_perspective(Side.WEST)
    # seen from the west, board (2, 1) is logical (1, 1)
    assert board.tile(1, 1) is tile
    # the top of the view is the west edge
    board.move(1, 3, tile)
    board.set_viewing_perspective(Side.NORTH)
    assert board.tile(0, 1) == Tile(2, 0, 1)
    assert board.tile(2, 1) is None


@pytest.mark.parametrize('side', list(Side))
def test_perspective_round_trip_leaves_queries_unchanged(side):
    board = sample_board()
    before = [board.tile(c, r) for c in range(4) for r in range(4)]
    board.set_viewing_perspective(side)
    board.set_viewing_perspective(Side.NORTH)
    assert [board.tile(c, r) for c in range(4) for r in range(4)] == before


def test_iteration_is_finite_and_restartable():
    board = sample_board()
    first = list(board)
    second = list(board)
    assert len(first) == 16
    assert first == second
    # top row first, left to right
    assert first[3] == Tile(2, 3, 3)
    assert first[15] is None
    assert first[14] == Tile(16, 2, 0)


def test_empty_cells():
    board = Board.from_values([
        [2, 2],
        [0, 4],
    ])
    assert board.empty_cells() == [(0, 0)]


def test_to_array():
    grid = sample_board().to_array()
    expected = np.array([
        [0, 0, 0, 2],
        [0, 4, 0, 0],
        [8, 0, 0, 0],
        [0, 0, 16, 0],
    ], dtype=np.int32)
    assert grid.dtype == np.int32
    np.testing.assert_array_equal(grid, expected)


def test_structural_equality():
    assert sample_board() == sample_board()
    other = sample_board()
    other.add_tile(Tile(2, 0, 0))
    assert sample_board() != other


def test_str_renders_rows_top_first():
    lines = str(Board.from_values([[2, 0], [0, 1024]])).splitlines()
    assert lines == ["|   2|    |", "|    |1024|"]


def test_invalid_size():
    with pytest.raises(ValueError):
        Board(0)
    with pytest.raises(ValueError):
        Board.from_values([[2, 0], [0]])

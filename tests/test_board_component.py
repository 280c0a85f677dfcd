import random

import pytest

from fairylink.components.board import Board
from fairylink.components.position import Position


def make_board(rows, cols, types, seed=42):
    return Board(rows=rows, cols=cols, tile_type_count=types, rng=random.Random(seed))


@pytest.mark.parametrize("rows,cols,types", [(6, 6, 12), (8, 8, 18), (10, 10, 24), (3, 3, 4), (2, 5, 40), (1, 1, 3)])
def test_initialize_places_every_type_an_even_number_of_times(rows, cols, types):
    board = make_board(rows, cols, types)
    board.initialize()
    counts = board.type_counts()
    assert all(count % 2 == 0 for count in counts.values())
    expected_tiles = rows * cols - (rows * cols) % 2
    assert board.active_count() == expected_tiles
    assert all(1 <= type_id <= types for type_id in counts)


def test_initialize_spreads_pairs_across_types():
    board = make_board(6, 6, 12)
    board.initialize()
    counts = board.type_counts()
    # 18 pairs over 12 types: the first six types get a second pair.
    assert sorted(counts) == list(range(1, 13))
    assert [counts[t] for t in range(1, 7)] == [4] * 6
    assert [counts[t] for t in range(7, 13)] == [2] * 6


def test_initialize_uses_only_needed_types_on_small_board():
    board = make_board(2, 2, 10)
    board.initialize()
    assert board.type_counts() == {1: 2, 2: 2}


def test_odd_board_leaves_last_cell_empty():
    board = make_board(3, 3, 4)
    board.initialize()
    assert board.get_tile(3, 3) is None
    assert board.is_empty(3, 3)


def test_border_cells_are_always_empty():
    board = make_board(4, 5, 6)
    board.initialize()
    for pos in board.grid.border_positions():
        assert board.get_tile(pos.row, pos.col) is None
        assert board.is_empty(pos.row, pos.col)


def test_out_of_range_queries_degrade_quietly():
    board = make_board(2, 2, 2)
    board.initialize()
    assert board.get_tile(-1, 0) is None
    assert board.get_tile(4, 1) is None
    assert not board.is_empty(-1, 0)
    assert not board.is_empty(0, 10)
    generation = board.generation
    board.remove_tile(7, 7)
    assert board.generation == generation


def test_remove_tile_bumps_generation_only_when_something_was_removed():
    board = Board.from_layout([[1, 0, 1]])
    before = board.generation
    board.remove_tile(1, 2)
    assert board.generation == before
    board.remove_tile(1, 1)
    assert board.generation == before + 1
    assert board.is_empty(1, 1)
    assert board.active_positions() == [Position(1, 3)]


def test_game_complete_after_all_tiles_removed():
    board = Board.from_layout([[1, 1]])
    assert not board.is_game_complete()
    board.remove_tile(1, 1)
    board.remove_tile(1, 2)
    assert board.is_game_complete()
    assert not board.has_available_moves()


def test_shuffle_keeps_positions_and_type_counts():
    board = make_board(6, 6, 12, seed=5)
    board.initialize()
    for pos in board.active_positions()[:10]:
        board.remove_tile(pos.row, pos.col)
    positions = board.active_positions()
    counts = board.type_counts()
    board.shuffle_board()
    assert board.active_positions() == positions
    assert board.type_counts() == counts


def test_place_tile_only_on_playable_cells():
    board = Board(rows=2, cols=2, tile_type_count=2)
    assert board.place_tile(1, 1, 2)
    assert board.get_tile(1, 1).type_id == 2
    assert not board.place_tile(0, 1, 2)
    assert not board.place_tile(1, 1, 0)


def test_from_layout_maps_rows_to_physical_coordinates():
    board = Board.from_layout([[1, 0], [0, 2]])
    assert (board.rows, board.cols, board.tile_type_count) == (2, 2, 2)
    assert board.get_tile(1, 1).type_id == 1
    assert board.get_tile(2, 2).type_id == 2
    assert board.get_tile(1, 2) is None


@pytest.mark.parametrize("rows,cols,types", [(0, 4, 2), (4, 0, 2), (-1, 3, 2), (2, 2, 0)])
def test_invalid_construction_raises(rows, cols, types):
    with pytest.raises(ValueError):
        Board(rows=rows, cols=cols, tile_type_count=types)


def test_from_layout_rejects_ragged_rows():
    with pytest.raises(ValueError):
        Board.from_layout([[1, 1], [1]])


def test_can_connect_rejects_same_position_and_mismatched_types():
    board = Board.from_layout([[1, 2, 1]])
    a, b, c = Position(1, 1), Position(1, 2), Position(1, 3)
    assert not board.can_connect(a, a)
    assert not board.can_connect(a, b)
    assert board.can_connect(a, c)
    assert not board.can_connect(Position(0, 0), a)


def test_stuck_two_by_two_board():
    board = Board.from_layout([[1, 2], [2, 1]])
    assert not board.can_connect(Position(1, 1), Position(2, 2))
    assert not board.can_connect(Position(1, 2), Position(2, 1))
    assert not board.has_available_moves()
    assert board.find_available_move() is None


def test_one_by_two_board_plays_to_completion():
    board = make_board(1, 2, 1)
    board.initialize()
    assert board.type_counts() == {1: 2}
    move = board.find_available_move()
    assert move is not None
    first, second, path = move
    assert (first, second) == (Position(1, 1), Position(1, 2))
    assert path == [Position(1, 1), Position(1, 2)]
    board.remove_tile(first.row, first.col)
    board.remove_tile(second.row, second.col)
    assert board.is_game_complete()


def test_find_available_move_scans_row_major():
    board = Board.from_layout([[2, 1, 1, 2]])
    first, second, _ = board.find_available_move()
    # (1,1) pairs with (1,4) around the border before (1,2)-(1,3) is considered.
    assert (first, second) == (Position(1, 1), Position(1, 4))

from fairylink.components.grid import Grid
from fairylink.components.position import Position
from fairylink.components.tile import Tile


def test_position_is_hashable_value():
    a = Position(1, 2)
    assert a == Position(1, 2)
    assert len({a, Position(1, 2), Position(2, 1)}) == 2
    assert a.as_tuple() == (1, 2)
    assert a.same_row(Position(1, 5))
    assert a.same_col(Position(4, 2))
    assert not a.same_row(Position(2, 2))


def test_tile_defaults_to_active():
    tile = Tile(type_id=3)
    assert tile.active
    assert tile.type_id == 3


def test_grid_dimensions_include_border_ring():
    grid = Grid(3, 4)
    assert (grid.physical_rows, grid.physical_cols) == (5, 6)
    border = list(grid.border_positions())
    # 2 full rows plus 2 side columns of the inner rows
    assert len(border) == 2 * 6 + 2 * 3
    assert all(grid.is_border(p.row, p.col) for p in border)
    assert not grid.is_border(1, 1)


def test_grid_refuses_border_and_out_of_range_writes():
    grid = Grid(2, 2)
    assert not grid.put(0, 0, Tile(1))
    assert not grid.put(3, 1, Tile(1))
    assert not grid.put(-1, 1, Tile(1))
    assert not grid.put(1, 9, Tile(1))
    assert grid.put(1, 1, Tile(1))
    assert grid.get(1, 1) == Tile(1)


def test_grid_out_of_range_reads_are_none():
    grid = Grid(2, 2)
    assert grid.get(-1, 0) is None
    assert grid.get(4, 4) is None
    assert grid.index(4, 0) is None
    assert grid.index(1, 1) == 1 * 4 + 1
    grid.clear(10, 10)


def test_playable_positions_are_row_major():
    grid = Grid(2, 3)
    assert list(grid.playable_positions()) == [
        Position(1, 1), Position(1, 2), Position(1, 3),
        Position(2, 1), Position(2, 2), Position(2, 3),
    ]

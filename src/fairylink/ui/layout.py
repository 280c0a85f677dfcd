from typing import Optional, Tuple

from fairylink.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    MIN_TILE_SIZE,
    TOP_MARGIN,
)

Geometry = Tuple[int, float, float]


def compute_board_geometry(window_width: int, window_height: int, physical_rows: int, physical_cols: int) -> Geometry:
    """Return (tile_size, start_x, start_y) for a board including its border ring.

    Shared by rendering and input so a click always maps to the cell drawn under it.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    avail_h = window_height - BOTTOM_MARGIN - TOP_MARGIN
    max_board_h = avail_h * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / physical_cols
    tile_by_h = max_board_h / physical_rows
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = physical_cols * tile_size
    total_height = physical_rows * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN + max(0.0, (avail_h - total_height) / 2)
    return tile_size, start_x, start_y


def cell_origin(row: int, col: int, geometry: Geometry, physical_rows: int) -> Tuple[float, float]:
    """Bottom-left pixel of a cell; physical row 0 is drawn at the top."""
    tile_size, start_x, start_y = geometry
    x = start_x + col * tile_size
    y = start_y + (physical_rows - 1 - row) * tile_size
    return x, y


def cell_center(row: int, col: int, geometry: Geometry, physical_rows: int) -> Tuple[float, float]:
    tile_size = geometry[0]
    x, y = cell_origin(row, col, geometry, physical_rows)
    return x + tile_size / 2, y + tile_size / 2


def cell_at(x: float, y: float, geometry: Geometry, physical_rows: int, physical_cols: int) -> Optional[Tuple[int, int]]:
    """Map a window point to a physical (row, col), or None when it misses the board."""
    tile_size, start_x, start_y = geometry
    if x < start_x or x >= start_x + physical_cols * tile_size:
        return None
    if y < start_y or y >= start_y + physical_rows * tile_size:
        return None
    col = int((x - start_x) // tile_size)
    row = physical_rows - 1 - int((y - start_y) // tile_size)
    if 0 <= row < physical_rows and 0 <= col < physical_cols:
        return row, col
    return None

from __future__ import annotations

from typing import Iterator, List, Optional

from fairylink.components.position import Position
from fairylink.components.tile import Tile


class Grid:
    """Padded tile storage with a permanently empty border ring.

    Two coordinate spaces share one storage list:

    * physical ``(row, col)`` with ``0 <= row <= rows + 1`` and
      ``0 <= col <= cols + 1``; row 0, row ``rows + 1``, col 0 and col
      ``cols + 1`` form the border ring.
    * playable cells are the physical cells ``1..rows`` x ``1..cols``.

    ``index`` is the only place that turns a coordinate into a storage slot.
    """

    __slots__ = ("rows", "cols", "physical_rows", "physical_cols", "_cells")

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self.physical_rows = rows + 2
        self.physical_cols = cols + 2
        self._cells: List[Optional[Tile]] = [None] * (self.physical_rows * self.physical_cols)

    def index(self, row: int, col: int) -> int | None:
        if not self.in_bounds(row, col):
            return None
        return row * self.physical_cols + col

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.physical_rows and 0 <= col < self.physical_cols

    def is_border(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            return False
        return row in (0, self.physical_rows - 1) or col in (0, self.physical_cols - 1)

    def is_playable(self, row: int, col: int) -> bool:
        return 1 <= row <= self.rows and 1 <= col <= self.cols

    def get(self, row: int, col: int) -> Tile | None:
        idx = self.index(row, col)
        if idx is None:
            return None
        return self._cells[idx]

    def put(self, row: int, col: int, tile: Tile | None) -> bool:
        """Store ``tile`` on a playable cell. Border and out-of-range writes are refused."""
        if not self.is_playable(row, col):
            return False
        self._cells[row * self.physical_cols + col] = tile
        return True

    def clear(self, row: int, col: int) -> None:
        idx = self.index(row, col)
        if idx is not None:
            self._cells[idx] = None

    def clear_all(self) -> None:
        self._cells = [None] * (self.physical_rows * self.physical_cols)

    def playable_positions(self) -> Iterator[Position]:
        """Row-major walk over playable cells."""
        for row in range(1, self.rows + 1):
            for col in range(1, self.cols + 1):
                yield Position(row, col)

    def border_positions(self) -> Iterator[Position]:
        for row in range(self.physical_rows):
            for col in range(self.physical_cols):
                if self.is_border(row, col):
                    yield Position(row, col)

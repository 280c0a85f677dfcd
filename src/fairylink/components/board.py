from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from fairylink.components.grid import Grid
from fairylink.components.position import Position
from fairylink.components.tile import Tile
from fairylink.pathing.path_finder import Path, PathFinder

logger = logging.getLogger(__name__)

Move = Tuple[Position, Position, Path]


@dataclass(slots=True)
class Board:
    """Playable grid padded by an always-empty border ring.

    Coordinates passed to every method are physical: the playable area is
    rows 1..rows and cols 1..cols, the border ring sits at 0 and rows+1 /
    cols+1. Every mutation bumps ``generation`` so path lookups cached under an
    earlier layout are discarded.
    """
    rows: int
    cols: int
    tile_type_count: int
    rng: random.Random = field(default_factory=random.Random, repr=False)
    path_finder: PathFinder = field(default_factory=PathFinder, repr=False)
    grid: Grid = field(init=False, repr=False)
    generation: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"Board needs at least one row and column, got {self.rows}x{self.cols}")
        if self.tile_type_count < 1:
            raise ValueError(f"tile_type_count must be >= 1, got {self.tile_type_count}")
        self.grid = Grid(self.rows, self.cols)

    @classmethod
    def from_layout(
        cls,
        layout: Sequence[Sequence[int]],
        tile_type_count: int | None = None,
        *,
        rng: random.Random | None = None,
    ) -> "Board":
        """Build a board from rows of playable type ids (0 leaves the cell empty)."""
        if not layout or not layout[0]:
            raise ValueError("layout must contain at least one row and column")
        cols = len(layout[0])
        if any(len(row) != cols for row in layout):
            raise ValueError("layout rows must all have the same length")
        highest = max((value for row in layout for value in row), default=0)
        count = tile_type_count if tile_type_count is not None else max(1, highest)
        board = cls(rows=len(layout), cols=cols, tile_type_count=count, rng=rng or random.Random())
        for r, row_values in enumerate(layout, start=1):
            for c, type_id in enumerate(row_values, start=1):
                if type_id:
                    board.grid.put(r, c, Tile(type_id=type_id))
        board._touch()
        return board

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Fill the playable cells with shuffled pairs; the border stays empty."""
        self.grid.clear_all()
        types = self._pair_multiset()
        self.rng.shuffle(types)
        for pos, type_id in zip(self.grid.playable_positions(), types):
            self.grid.put(pos.row, pos.col, Tile(type_id=type_id))
        self._touch()
        logger.info(
            "board initialized %dx%d with %d tiles over %d types",
            self.rows, self.cols, len(types), len(set(types)),
        )

    def _pair_multiset(self) -> List[int]:
        total_tiles = self.rows * self.cols
        if total_tiles % 2:
            total_tiles -= 1
        needed_pairs = total_tiles // 2
        if needed_pairs == 0:
            return []
        available = min(self.tile_type_count, needed_pairs)
        types: List[int] = []
        if needed_pairs > available:
            base, remainder = divmod(needed_pairs, available)
            for type_id in range(1, available + 1):
                pairs = base + (1 if type_id <= remainder else 0)
                types.extend([type_id] * (pairs * 2))
        else:
            for type_id in range(1, needed_pairs + 1):
                types.extend((type_id, type_id))
        return types

    def shuffle_board(self) -> None:
        """Redistribute the active types across the same active positions."""
        positions = self.active_positions()
        types = [self.grid.get(pos.row, pos.col).type_id for pos in positions]
        self.rng.shuffle(types)
        for pos, type_id in zip(positions, types):
            self.grid.put(pos.row, pos.col, Tile(type_id=type_id))
        self._touch()
        logger.info("board shuffled (%d active tiles)", len(positions))

    def place_tile(self, row: int, col: int, type_id: int) -> bool:
        """Put a tile on a playable cell; border and out-of-range cells are refused."""
        if type_id < 1:
            return False
        placed = self.grid.put(row, col, Tile(type_id=type_id))
        if placed:
            self._touch()
        return placed

    def remove_tile(self, row: int, col: int) -> None:
        if not self.grid.in_bounds(row, col):
            return
        if self.grid.get(row, col) is None:
            return
        self.grid.clear(row, col)
        self._touch()

    def _touch(self) -> None:
        self.generation += 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def physical_rows(self) -> int:
        return self.grid.physical_rows

    @property
    def physical_cols(self) -> int:
        return self.grid.physical_cols

    def get_tile(self, row: int, col: int) -> Tile | None:
        return self.grid.get(row, col)

    def is_empty(self, row: int, col: int) -> bool:
        """True when a path may cross the cell. Out-of-range cells are never passable."""
        if not self.grid.in_bounds(row, col):
            return False
        if self.grid.is_border(row, col):
            return True
        tile = self.grid.get(row, col)
        return tile is None or not tile.active

    def active_positions(self) -> List[Position]:
        positions: List[Position] = []
        for pos in self.grid.playable_positions():
            tile = self.grid.get(pos.row, pos.col)
            if tile is not None and tile.active:
                positions.append(pos)
        return positions

    def active_count(self) -> int:
        return len(self.active_positions())

    def type_counts(self) -> Dict[int, int]:
        counts: Counter[int] = Counter()
        for pos in self.active_positions():
            counts[self.grid.get(pos.row, pos.col).type_id] += 1
        return dict(counts)

    def is_game_complete(self) -> bool:
        return not self.active_positions()

    # ------------------------------------------------------------------
    # Connectivity
    # ------------------------------------------------------------------

    def can_connect(self, pos1: Position, pos2: Position) -> bool:
        if pos1 == pos2:
            return False
        tile1 = self.get_tile(pos1.row, pos1.col)
        tile2 = self.get_tile(pos2.row, pos2.col)
        if tile1 is None or tile2 is None or not tile1.active or not tile2.active:
            return False
        if tile1.type_id != tile2.type_id:
            return False
        return self.path_finder.find_path(self, pos1, pos2) is not None

    def find_path(self, start: Position, end: Position) -> Optional[Path]:
        return self.path_finder.find_path(self, start, end)

    def find_available_move(self) -> Optional[Move]:
        """First connectable same-typed pair in row-major pair order."""
        positions = self.active_positions()
        for i, first in enumerate(positions):
            first_type = self.grid.get(first.row, first.col).type_id
            for second in positions[i + 1:]:
                if self.grid.get(second.row, second.col).type_id != first_type:
                    continue
                path = self.path_finder.find_path(self, first, second)
                if path is not None:
                    return first, second, path
        return None

    def has_available_moves(self) -> bool:
        return self.find_available_move() is not None

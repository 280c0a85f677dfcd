"""Bend-limited connectivity search between two tiles of the same type.

A legal connection is an axis-aligned path with at most two bends whose
intermediate cells are all passable (empty playable cells or the border ring).
Searches run straight -> one corner -> two corners and the first hit wins.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from fairylink.components.position import Position
from fairylink.pathing.path_cache import PathCache

if TYPE_CHECKING:
    from fairylink.components.board import Board

logger = logging.getLogger(__name__)

Path = List[Position]

# Two-corner candidates are limited to a (2 * radius + 1)^2 box around each endpoint.
CANDIDATE_RADIUS = 2


class PathFinder:
    def __init__(self, cache: PathCache | None = None, *, candidate_radius: int = CANDIDATE_RADIUS):
        self.cache = cache if cache is not None else PathCache()
        self.candidate_radius = candidate_radius

    def find_path(self, board: Board, start: Position, end: Position) -> Optional[Path]:
        """Return the connecting path from ``start`` to ``end`` or None."""
        if start == end:
            return None
        start_type = self._active_type(board, start)
        end_type = self._active_type(board, end)
        if start_type is None or end_type is None or start_type != end_type:
            return None

        cached = self.cache.get(start, end, board.generation)
        if cached is not None:
            logger.debug("path cache hit %s -> %s", start, end)
            return cached

        path = (
            self.find_straight_path(board, start, end)
            or self.find_one_corner_path(board, start, end)
            or self.find_two_corner_path(board, start, end)
        )
        if path is not None:
            self.cache.put(start, end, path, board.generation)
        return path

    # ------------------------------------------------------------------
    # Searches
    # ------------------------------------------------------------------

    def find_straight_path(self, board: Board, start: Position, end: Position) -> Optional[Path]:
        if start == end:
            return None
        if start.same_row(end):
            if self._row_clear(board, start.row, start.col, end.col):
                return self._build_straight(start, end)
        elif start.same_col(end):
            if self._col_clear(board, start.col, start.row, end.row):
                return self._build_straight(start, end)
        return None

    def find_one_corner_path(self, board: Board, start: Position, end: Position) -> Optional[Path]:
        for corner in (Position(start.row, end.col), Position(end.row, start.col)):
            path = self._corner_path(board, start, end, corner)
            if path is not None:
                return path
        return None

    def find_two_corner_path(self, board: Board, start: Position, end: Position) -> Optional[Path]:
        candidates = self._candidate_cells(board, start, end)
        for first in candidates:
            leg1 = self.find_straight_path(board, start, first)
            if leg1 is None:
                continue
            for second in candidates:
                if first == second:
                    continue
                leg2 = self.find_straight_path(board, first, second)
                if leg2 is None:
                    continue
                leg3 = self.find_straight_path(board, second, end)
                if leg3 is None:
                    continue
                return merge_paths(leg1, leg2, leg3)
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _corner_path(self, board: Board, start: Position, end: Position, corner: Position) -> Optional[Path]:
        if not board.is_empty(corner.row, corner.col):
            return None
        leg1 = self.find_straight_path(board, start, corner)
        if leg1 is None:
            return None
        leg2 = self.find_straight_path(board, corner, end)
        if leg2 is None:
            return None
        return merge_paths(leg1, leg2)

    def _candidate_cells(self, board: Board, start: Position, end: Position) -> List[Position]:
        # Start's box first, then end's box; order matters for which path is reported.
        seen: set[Position] = set()
        cells: List[Position] = []
        radius = self.candidate_radius
        max_row = board.grid.physical_rows - 1
        max_col = board.grid.physical_cols - 1
        for center in (start, end):
            for row in range(max(0, center.row - radius), min(max_row, center.row + radius) + 1):
                for col in range(max(0, center.col - radius), min(max_col, center.col + radius) + 1):
                    pos = Position(row, col)
                    if pos in seen or not board.is_empty(row, col):
                        continue
                    seen.add(pos)
                    cells.append(pos)
        return cells

    @staticmethod
    def _active_type(board: Board, pos: Position) -> int | None:
        tile = board.get_tile(pos.row, pos.col)
        if tile is None or not tile.active:
            return None
        return tile.type_id

    @staticmethod
    def _row_clear(board: Board, row: int, col_a: int, col_b: int) -> bool:
        lo, hi = min(col_a, col_b), max(col_a, col_b)
        return all(board.is_empty(row, col) for col in range(lo + 1, hi))

    @staticmethod
    def _col_clear(board: Board, col: int, row_a: int, row_b: int) -> bool:
        lo, hi = min(row_a, row_b), max(row_a, row_b)
        return all(board.is_empty(row, col) for row in range(lo + 1, hi))

    @staticmethod
    def _build_straight(start: Position, end: Position) -> Path:
        if start.row == end.row:
            step = 1 if end.col >= start.col else -1
            return [Position(start.row, col) for col in range(start.col, end.col + step, step)]
        step = 1 if end.row >= start.row else -1
        return [Position(row, start.col) for row in range(start.row, end.row + step, step)]


def merge_paths(*legs: Path) -> Path:
    """Join consecutive legs, dropping the repeated joint cell of each leg."""
    merged: Path = list(legs[0])
    for leg in legs[1:]:
        merged.extend(leg[1:])
    return merged


def count_bends(path: Path) -> int:
    """Number of direction changes along ``path``."""
    bends = 0
    previous = None
    for a, b in zip(path, path[1:]):
        direction = (b.row - a.row, b.col - a.col)
        if previous is not None and direction != previous:
            bends += 1
        previous = direction
    return bends

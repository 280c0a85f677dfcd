from __future__ import annotations

import logging
from typing import Tuple

from esper import World

from fairylink.components.board import Board
from fairylink.components.tile_palette import TilePalette
from fairylink.constants import SOLVABLE_MAX_ATTEMPTS

logger = logging.getLogger(__name__)


def get_board(world: World) -> Board | None:
    for _, board in world.get_component(Board):
        return board
    return None


def get_palette(world: World) -> TilePalette:
    for _, palette in world.get_component(TilePalette):
        return palette
    raise RuntimeError("TilePalette not found")


def board_dimensions(world: World) -> Tuple[int, int] | None:
    """Physical (rows, cols) of the board, border ring included."""
    board = get_board(world)
    if board is None:
        return None
    return board.physical_rows, board.physical_cols


def is_solvable(board: Board) -> bool:
    """A board counts as solvable when it is already clear or has a legal move."""
    return board.is_game_complete() or board.has_available_moves()


def ensure_solvable(board: Board, *, max_attempts: int = SOLVABLE_MAX_ATTEMPTS) -> int:
    """Populate ``board`` from scratch until at least one move exists.

    Each attempt initializes the board and, when stuck, shuffles once before
    starting over. Returns the number of attempts used.
    """
    for attempt in range(1, max_attempts + 1):
        board.initialize()
        if is_solvable(board):
            return attempt
        board.shuffle_board()
        if is_solvable(board):
            return attempt
        logger.warning("fresh board had no moves after shuffle (attempt %d), re-initializing", attempt)
    raise RuntimeError(f"Unable to produce a solvable {board.rows}x{board.cols} board in {max_attempts} attempts")


def reshuffle_until_solvable(board: Board, *, max_attempts: int = SOLVABLE_MAX_ATTEMPTS) -> bool:
    """Shuffle the remaining tiles; fall back to a full re-initialize when still stuck.

    Returns True when the fallback re-initialize was needed.
    """
    board.shuffle_board()
    if is_solvable(board):
        return False
    logger.warning("shuffle left the board stuck, re-initializing")
    ensure_solvable(board, max_attempts=max_attempts)
    return True

"""Selection state machine that turns two tile picks into a match attempt.

IDLE -> FIRST_PICKED -> EVALUATING -> (IDLE | AWAITING_CLEAR)

Results are returned synchronously and mirrored on the event bus so the
presentation layer decides how long to show the path before calling
``finish_clear`` (AnimationSystem does this through EVENT_ANIMATION_COMPLETE).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from esper import World

from fairylink.components.animation_hint import HintHighlight
from fairylink.components.board import Board
from fairylink.components.position import Position
from fairylink.components.selection_state import MovePhase, SelectionState
from fairylink.constants import MOUSE_BUTTON_RIGHT
from fairylink.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_CLEARED,
    EVENT_BOARD_READY,
    EVENT_BOARD_RESHUFFLED,
    EVENT_BOARD_STUCK,
    EVENT_HINT_FOUND,
    EVENT_HINT_REQUEST,
    EVENT_HINT_UNAVAILABLE,
    EVENT_MATCH_FOUND,
    EVENT_MATCH_REJECTED,
    EVENT_MOUSE_PRESS,
    EVENT_TILE_CLICK,
    EVENT_TILE_DESELECTED,
    EVENT_TILE_SELECTED,
    EventBus,
)
from fairylink.systems.board_ops import get_board
from fairylink.utils.game_state import get_selection_state

logger = logging.getLogger(__name__)


class MoveOutcome(Enum):
    IGNORED = auto()
    SELECTED = auto()
    DESELECTED = auto()
    NO_MATCH = auto()
    MATCH = auto()


class BoardStatus(Enum):
    CONTINUE = auto()
    CLEARED = auto()
    STUCK = auto()


@dataclass(slots=True)
class MoveResult:
    outcome: MoveOutcome
    first: Position | None = None
    second: Position | None = None
    path: List[Position] = field(default_factory=list)
    status: BoardStatus | None = None
    reason: str | None = None


@dataclass(slots=True)
class Hint:
    first: Position
    second: Position
    path: List[Position]


class MoveEngineSystem:
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_HINT_REQUEST, self.on_hint_request)
        self.event_bus.subscribe(EVENT_ANIMATION_COMPLETE, self.on_animation_complete)
        self.event_bus.subscribe(EVENT_BOARD_READY, self.on_board_reset)
        self.event_bus.subscribe(EVENT_BOARD_RESHUFFLED, self.on_board_reset)

    @property
    def state(self) -> SelectionState:
        return get_selection_state(self.world)

    @property
    def phase(self) -> MovePhase:
        return self.state.phase

    @property
    def selected(self) -> Position | None:
        return self.state.first

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get("row")
        col = kwargs.get("col")
        if row is None or col is None:
            return
        self.click(Position(int(row), int(col)))

    def on_mouse_press(self, sender, **kwargs):
        # Right-click always drops the current selection.
        if kwargs.get("button") != MOUSE_BUTTON_RIGHT:
            return
        self._deselect(reason="right_click")

    def on_hint_request(self, sender, **kwargs):
        self.request_hint()

    def on_animation_complete(self, sender, **kwargs):
        if kwargs.get("kind") == "path":
            self.finish_clear()

    def on_board_reset(self, sender, **kwargs):
        self.reset()

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def click(self, pos: Position) -> MoveResult:
        """Dispatch a tile click according to the current phase."""
        board = get_board(self.world)
        if board is None or not self._has_active_tile(board, pos):
            return MoveResult(MoveOutcome.IGNORED, first=self.selected)
        if self.phase == MovePhase.AWAITING_CLEAR:
            self.finish_clear()
        if self.phase == MovePhase.FIRST_PICKED:
            return self.select_second(pos)
        return self.select_first(pos)

    def select_first(self, pos: Position) -> MoveResult:
        board = get_board(self.world)
        state = self.state
        if board is None or state.phase != MovePhase.IDLE or not self._has_active_tile(board, pos):
            return MoveResult(MoveOutcome.IGNORED, first=state.first)
        state.first = pos
        state.phase = MovePhase.FIRST_PICKED
        self.event_bus.emit(EVENT_TILE_SELECTED, row=pos.row, col=pos.col)
        return MoveResult(MoveOutcome.SELECTED, first=pos)

    def select_second(self, pos: Position) -> MoveResult:
        board = get_board(self.world)
        state = self.state
        first = state.first
        if board is None or state.phase != MovePhase.FIRST_PICKED or first is None:
            return MoveResult(MoveOutcome.IGNORED, first=first)
        if pos == first:
            self._deselect(reason="same_tile")
            return MoveResult(MoveOutcome.DESELECTED, first=first)

        state.phase = MovePhase.EVALUATING
        tile1 = board.get_tile(first.row, first.col)
        tile2 = board.get_tile(pos.row, pos.col)
        path: Optional[List[Position]] = None
        if tile1 is None or tile2 is None or tile1.type_id != tile2.type_id:
            reason = "type_mismatch"
        else:
            path = board.find_path(first, pos)
            reason = "no_path"
        if path is None:
            logger.debug("no match between %s and %s (%s)", first, pos, reason)
            self._deselect(reason="no_match")
            self.event_bus.emit(EVENT_MATCH_REJECTED, first=first, second=pos, reason=reason)
            return MoveResult(MoveOutcome.NO_MATCH, first=first, second=pos, reason=reason)

        type_id = tile1.type_id
        board.remove_tile(first.row, first.col)
        board.remove_tile(pos.row, pos.col)
        state.first = None
        state.phase = MovePhase.AWAITING_CLEAR
        self.event_bus.emit(EVENT_MATCH_FOUND, first=first, second=pos, path=list(path), type_id=type_id)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="match", positions=[first, pos])
        self.event_bus.emit(EVENT_ANIMATION_START, kind="path", items=list(path))

        status = self._board_status(board)
        if status == BoardStatus.CLEARED:
            logger.info("board cleared")
            self.event_bus.emit(EVENT_BOARD_CLEARED)
        elif status == BoardStatus.STUCK:
            remaining = board.active_count()
            logger.info("no moves left with %d tiles remaining", remaining)
            self.event_bus.emit(EVENT_BOARD_STUCK, remaining=remaining)
        return MoveResult(MoveOutcome.MATCH, first=first, second=pos, path=list(path), status=status)

    def finish_clear(self) -> None:
        state = self.state
        if state.phase == MovePhase.AWAITING_CLEAR:
            state.phase = MovePhase.IDLE

    def reset(self) -> None:
        self._deselect(reason="reset")
        self.state.phase = MovePhase.IDLE

    def request_hint(self) -> Hint | None:
        if any(True for _ in self.world.get_component(HintHighlight)):
            return None
        board = get_board(self.world)
        self._deselect(reason="hint")
        move = board.find_available_move() if board is not None else None
        if move is None:
            self.event_bus.emit(EVENT_HINT_UNAVAILABLE)
            return None
        first, second, path = move
        self.event_bus.emit(EVENT_HINT_FOUND, first=first, second=second, path=list(path))
        self.event_bus.emit(EVENT_ANIMATION_START, kind="hint", items=[first, second])
        return Hint(first=first, second=second, path=list(path))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _deselect(self, reason: str) -> None:
        state = self.state
        prev = state.first
        if state.phase in (MovePhase.FIRST_PICKED, MovePhase.EVALUATING):
            state.phase = MovePhase.IDLE
        state.first = None
        if prev is not None:
            self.event_bus.emit(EVENT_TILE_DESELECTED, reason=reason, prev_row=prev.row, prev_col=prev.col)

    @staticmethod
    def _has_active_tile(board: Board, pos: Position) -> bool:
        tile = board.get_tile(pos.row, pos.col)
        return tile is not None and tile.active

    @staticmethod
    def _board_status(board: Board) -> BoardStatus:
        if board.is_game_complete():
            return BoardStatus.CLEARED
        if not board.has_available_moves():
            return BoardStatus.STUCK
        return BoardStatus.CONTINUE

from __future__ import annotations

import logging
import random

from esper import World

from fairylink.components.board import Board
from fairylink.constants import BOARD_PRESETS, DEFAULT_PRESET_INDEX, PATH_CACHE_MAX_ENTRIES, BoardPreset
from fairylink.events.bus import (
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_READY,
    EVENT_BOARD_RESHUFFLE_REQUEST,
    EVENT_BOARD_RESHUFFLED,
    EVENT_GAME_RESTART_REQUEST,
    EVENT_NEW_BOARD_REQUEST,
    EventBus,
)
from fairylink.pathing.path_cache import PathCache
from fairylink.pathing.path_finder import PathFinder
from fairylink.systems.board_ops import ensure_solvable, reshuffle_until_solvable

logger = logging.getLogger(__name__)

_DEFAULT = BOARD_PRESETS[DEFAULT_PRESET_INDEX]


class BoardSystem:
    """Owns the board entity and every whole-board mutation (populate, reshuffle, rebuild)."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        rows: int = _DEFAULT.rows,
        cols: int = _DEFAULT.cols,
        tile_type_count: int = _DEFAULT.tile_type_count,
        *,
        populate: bool = True,
    ):
        self.world = world
        self.event_bus = event_bus
        self.board_entity = self.world.create_entity()
        self.world.add_component(self.board_entity, self._new_board(rows, cols, tile_type_count))
        self.event_bus.subscribe(EVENT_BOARD_RESHUFFLE_REQUEST, self.on_reshuffle_request)
        self.event_bus.subscribe(EVENT_GAME_RESTART_REQUEST, self.on_restart_request)
        self.event_bus.subscribe(EVENT_NEW_BOARD_REQUEST, self.on_new_board_request)
        if populate:
            self.populate(reason="init")

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def _new_board(self, rows: int, cols: int, tile_type_count: int) -> Board:
        rng = getattr(self.world, "random", None)
        if not isinstance(rng, random.Random):
            rng = random.Random()
        return Board(
            rows=rows,
            cols=cols,
            tile_type_count=tile_type_count,
            rng=rng,
            path_finder=PathFinder(PathCache(max_entries=PATH_CACHE_MAX_ENTRIES)),
        )

    def populate(self, reason: str = "init") -> None:
        board = self.board
        attempts = ensure_solvable(board)
        logger.info("board ready after %d attempt(s) (%s)", attempts, reason)
        self.event_bus.emit(
            EVENT_BOARD_READY,
            rows=board.rows,
            cols=board.cols,
            tile_type_count=board.tile_type_count,
            reason=reason,
        )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason=reason, positions=board.active_positions())

    def rebuild(self, preset: BoardPreset) -> None:
        self.world.add_component(
            self.board_entity,
            self._new_board(preset.rows, preset.cols, preset.tile_type_count),
        )
        self.populate(reason="new_board")

    def reshuffle(self, reason: str = "request") -> bool:
        board = self.board
        if board.is_game_complete():
            return False
        reinitialized = reshuffle_until_solvable(board)
        self.event_bus.emit(EVENT_BOARD_RESHUFFLED, reinitialized=reinitialized, reason=reason)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="reshuffle", positions=board.active_positions())
        return reinitialized

    def on_reshuffle_request(self, sender, **kwargs):
        self.reshuffle(reason=kwargs.get("reason", "request"))

    def on_restart_request(self, sender, **kwargs):
        self.populate(reason="restart")

    def on_new_board_request(self, sender, **kwargs):
        preset = kwargs.get("preset")
        if not isinstance(preset, BoardPreset):
            return
        self.rebuild(preset)

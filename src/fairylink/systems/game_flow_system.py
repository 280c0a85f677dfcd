"""High-level coordinator for game mode transitions and the play clock."""
from __future__ import annotations

import logging
from typing import Callable, Tuple

from esper import World

from fairylink.components.game_state import GameMode
from fairylink.constants import BOARD_PRESETS
from fairylink.events.bus import (
    EVENT_BOARD_CLEARED,
    EVENT_BOARD_READY,
    EVENT_BOARD_RESHUFFLED,
    EVENT_BOARD_STUCK,
    EVENT_MENU_PRESET_SELECTED,
    EVENT_NEW_BOARD_REQUEST,
    EVENT_PAUSE_TOGGLE_REQUEST,
    EVENT_RETURN_TO_MENU_REQUEST,
    EVENT_TICK,
    EventBus,
)
from fairylink.menu.factory import spawn_main_menu
from fairylink.utils.game_state import format_clock, get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Moves between menu, play, pause and the two end states."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        menu_size_provider: Callable[[], Tuple[int, int]] | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._menu_size_provider = menu_size_provider

        self.event_bus.subscribe(EVENT_MENU_PRESET_SELECTED, self._on_preset_selected)
        self.event_bus.subscribe(EVENT_BOARD_READY, self._on_board_ready)
        self.event_bus.subscribe(EVENT_BOARD_CLEARED, self._on_board_cleared)
        self.event_bus.subscribe(EVENT_BOARD_STUCK, self._on_board_stuck)
        self.event_bus.subscribe(EVENT_BOARD_RESHUFFLED, self._on_board_reshuffled)
        self.event_bus.subscribe(EVENT_PAUSE_TOGGLE_REQUEST, self._on_pause_toggle)
        self.event_bus.subscribe(EVENT_RETURN_TO_MENU_REQUEST, self._on_return_to_menu)
        self.event_bus.subscribe(EVENT_TICK, self._on_tick)

    @property
    def mode(self) -> GameMode | None:
        state = get_game_state(self.world)
        return state.mode if state else None

    @property
    def elapsed(self) -> float:
        state = get_game_state(self.world)
        return state.elapsed if state else 0.0

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def _on_preset_selected(self, sender, **payload) -> None:
        index = payload.get("preset_index")
        if not isinstance(index, int) or not 0 <= index < len(BOARD_PRESETS):
            return
        state = get_game_state(self.world)
        if state is not None:
            state.preset_index = index
        preset = BOARD_PRESETS[index]
        logger.info("starting %s", preset.name)
        # BoardSystem answers with EVENT_BOARD_READY, which switches to PLAYING.
        self.event_bus.emit(EVENT_NEW_BOARD_REQUEST, preset=preset)

    def _on_board_ready(self, sender, **payload) -> None:
        state = get_game_state(self.world)
        if state is None:
            return
        # The board built at startup sits behind the menu until a preset is chosen.
        if state.mode == GameMode.MENU and payload.get("reason") == "init":
            return
        state.elapsed = 0.0
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)

    def _on_board_cleared(self, sender, **payload) -> None:
        logger.info("board cleared in %s", format_clock(self.elapsed))
        set_game_mode(self.world, self.event_bus, GameMode.COMPLETE)

    def _on_board_stuck(self, sender, **payload) -> None:
        set_game_mode(self.world, self.event_bus, GameMode.STUCK)

    def _on_board_reshuffled(self, sender, **payload) -> None:
        if self.mode == GameMode.STUCK:
            set_game_mode(self.world, self.event_bus, GameMode.PLAYING)

    def _on_pause_toggle(self, sender, **payload) -> None:
        mode = self.mode
        if mode == GameMode.PLAYING:
            set_game_mode(self.world, self.event_bus, GameMode.PAUSED)
        elif mode == GameMode.PAUSED:
            set_game_mode(self.world, self.event_bus, GameMode.PLAYING)

    def _on_return_to_menu(self, sender, **payload) -> None:
        if self.mode == GameMode.MENU:
            return
        set_game_mode(self.world, self.event_bus, GameMode.MENU)
        if self._menu_size_provider is not None:
            width, height = self._menu_size_provider()
            spawn_main_menu(self.world, width, height)

    def _on_tick(self, sender, **payload) -> None:
        state = get_game_state(self.world)
        if state is None or state.mode != GameMode.PLAYING:
            return
        dt = payload.get("dt", 1/60)
        try:
            state.elapsed += float(dt)
        except (TypeError, ValueError):
            return

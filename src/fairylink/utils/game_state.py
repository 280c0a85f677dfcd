from __future__ import annotations

from esper import World

from fairylink.components.game_state import GameMode, GameState
from fairylink.components.selection_state import SelectionState
from fairylink.events.bus import EVENT_GAME_MODE_CHANGED, EventBus


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None


def get_selection_state(world: World) -> SelectionState:
    for _, selection in world.get_component(SelectionState):
        return selection
    selection = SelectionState()
    world.create_entity(selection)
    return selection


def set_game_mode(world: World, event_bus: EventBus, mode: GameMode) -> None:
    """Update the global game mode and emit a change event when it differs."""
    state = get_game_state(world)
    if state is None:
        world.create_entity(GameState(mode=mode))
        event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=None, new_mode=mode)
        return
    previous_mode = state.mode
    if previous_mode == mode:
        return
    state.mode = mode
    event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=previous_mode, new_mode=mode)


def format_clock(seconds: float) -> str:
    """Render elapsed seconds as MM:SS."""
    total = max(0, int(seconds))
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"

import random

from esper import World

from fairylink.events.bus import EventBus
from fairylink.components.game_state import GameMode, GameState
from fairylink.components.selection_state import SelectionState
from fairylink.components.tile_palette import TilePalette, build_palette
from fairylink.constants import DEFAULT_PRESET_INDEX, MAX_TILE_TYPES


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.MENU,
    *,
    preset_index: int = DEFAULT_PRESET_INDEX,
    rng: random.Random | None = None,
) -> World:
    """Create the world with its singleton resources; systems attach the board later."""
    world = World()
    setattr(world, "random", rng or random.Random())

    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode, preset_index=preset_index))
    world.add_component(state_entity, SelectionState())

    world.create_entity(TilePalette(colors=build_palette(MAX_TILE_TYPES)))
    return world

import random

from fairylink.components.board import Board
from fairylink.components.game_state import GameMode
from fairylink.components.position import Position as P
from fairylink.events.bus import (
    EVENT_BOARD_RESHUFFLE_REQUEST,
    EVENT_GAME_MODE_CHANGED,
    EVENT_GAME_RESTART_REQUEST,
    EVENT_MENU_PRESET_SELECTED,
    EVENT_PAUSE_TOGGLE_REQUEST,
    EVENT_RETURN_TO_MENU_REQUEST,
    EVENT_TICK,
    EventBus,
)
from fairylink.menu.components import MenuButton
from fairylink.systems.animation import AnimationSystem
from fairylink.systems.board import BoardSystem
from fairylink.systems.game_flow_system import GameFlowSystem
from fairylink.systems.move_engine import MoveEngineSystem
from fairylink.utils.game_state import get_game_state
from fairylink.world import create_world


def build(initial_mode=GameMode.PLAYING, layout=None):
    bus = EventBus()
    world = create_world(bus, initial_mode=initial_mode, rng=random.Random(99))
    flow = GameFlowSystem(world, bus, menu_size_provider=lambda: (1200, 800))
    board_system = BoardSystem(world, bus)
    if layout is not None:
        world.add_component(board_system.board_entity, Board.from_layout(layout, rng=random.Random(3)))
    AnimationSystem(world, bus)
    engine = MoveEngineSystem(world, bus)
    return bus, world, flow, board_system, engine


def test_initial_board_stays_behind_menu():
    _, world, flow, _, _ = build(initial_mode=GameMode.MENU)
    assert flow.mode == GameMode.MENU


def test_preset_selection_builds_board_and_starts_play():
    bus, world, flow, board_system, _ = build(initial_mode=GameMode.MENU)
    changes = []
    bus.subscribe(EVENT_GAME_MODE_CHANGED, lambda sender, **kw: changes.append(kw['new_mode']))
    bus.emit(EVENT_MENU_PRESET_SELECTED, preset_index=1)
    assert flow.mode == GameMode.PLAYING
    assert changes == [GameMode.PLAYING]
    assert (board_system.board.rows, board_system.board.cols) == (8, 8)
    assert get_game_state(world).preset_index == 1


def test_invalid_preset_index_is_ignored():
    bus, _, flow, board_system, _ = build(initial_mode=GameMode.MENU)
    bus.emit(EVENT_MENU_PRESET_SELECTED, preset_index=7)
    bus.emit(EVENT_MENU_PRESET_SELECTED)
    assert flow.mode == GameMode.MENU
    assert board_system.board.rows == 6


def test_clock_runs_only_while_playing():
    bus, _, flow, _, _ = build()
    bus.emit(EVENT_TICK, dt=1.5)
    assert flow.elapsed == 1.5
    bus.emit(EVENT_PAUSE_TOGGLE_REQUEST)
    assert flow.mode == GameMode.PAUSED
    bus.emit(EVENT_TICK, dt=10.0)
    assert flow.elapsed == 1.5
    bus.emit(EVENT_PAUSE_TOGGLE_REQUEST)
    assert flow.mode == GameMode.PLAYING
    bus.emit(EVENT_TICK, dt=0.5)
    assert flow.elapsed == 2.0


def test_clearing_the_board_completes_the_game():
    bus, _, flow, _, engine = build(layout=[[1, 1]])
    bus.emit(EVENT_TICK, dt=3.0)
    engine.click(P(1, 1))
    engine.click(P(1, 2))
    assert flow.mode == GameMode.COMPLETE
    bus.emit(EVENT_TICK, dt=3.0)
    assert flow.elapsed == 3.0


def test_restart_after_completion_resets_clock():
    bus, _, flow, board_system, engine = build(layout=[[1, 1]])
    bus.emit(EVENT_TICK, dt=3.0)
    engine.click(P(1, 1))
    engine.click(P(1, 2))
    bus.emit(EVENT_GAME_RESTART_REQUEST)
    assert flow.mode == GameMode.PLAYING
    assert flow.elapsed == 0.0
    assert board_system.board.active_count() == 2


def test_stuck_board_waits_for_reshuffle():
    bus, _, flow, board_system, engine = build(layout=[[1, 2, 3], [2, 1, 3]])
    engine.click(P(1, 3))
    engine.click(P(2, 3))
    assert flow.mode == GameMode.STUCK
    bus.emit(EVENT_PAUSE_TOGGLE_REQUEST)
    assert flow.mode == GameMode.STUCK
    bus.emit(EVENT_BOARD_RESHUFFLE_REQUEST, reason='stuck')
    assert flow.mode == GameMode.PLAYING
    assert board_system.board.has_available_moves()


def test_return_to_menu_spawns_menu():
    bus, world, flow, _, _ = build()
    bus.emit(EVENT_PAUSE_TOGGLE_REQUEST)
    bus.emit(EVENT_RETURN_TO_MENU_REQUEST)
    assert flow.mode == GameMode.MENU
    buttons = [button for _, button in world.get_component(MenuButton)]
    assert sorted(b.preset_index for b in buttons) == [0, 1, 2]
    bus.emit(EVENT_RETURN_TO_MENU_REQUEST)
    assert len(list(world.get_component(MenuButton))) == 3

"""Entry point for the Fairy Link tile-matching game.

Sets up ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run

from fairylink.components.game_state import GameMode
from fairylink.constants import BACKGROUND_COLOR, DEBUG_MODE, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from fairylink.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EVENT_TICK, EventBus
from fairylink.menu.factory import spawn_main_menu
from fairylink.menu.input_system import MenuInputSystem
from fairylink.menu.render_system import MenuRenderSystem
from fairylink.systems.animation import AnimationSystem
from fairylink.systems.board import BoardSystem
from fairylink.systems.game_flow_system import GameFlowSystem
from fairylink.systems.input import InputSystem
from fairylink.systems.move_engine import MoveEngineSystem
from fairylink.systems.render import RenderSystem
from fairylink.utils.game_state import get_game_state
from fairylink.world import create_world


class FairyLinkWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, initial_mode=GameMode.MENU)

        # Progression systems
        self.game_flow_system = GameFlowSystem(
            self.world,
            self.event_bus,
            menu_size_provider=lambda: (self.width, self.height),
        )
        spawn_main_menu(self.world, self.width, self.height)

        # Menu systems
        self.menu_input_system = MenuInputSystem(self.world, self.event_bus)
        self.menu_render_system = MenuRenderSystem(self.world, self)

        # Board and animation systems
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus)
        self.move_engine = MoveEngineSystem(self.world, self.event_bus)

        # Interface systems
        self.input_system = InputSystem(self.event_bus, self, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self)

        self.background_color = BACKGROUND_COLOR

    def on_draw(self):
        self.clear()
        state = get_game_state(self.world)
        if state and state.mode == GameMode.MENU:
            self.menu_render_system.process()
            return
        self.render_system.process()

    def on_update(self, delta_time: float):
        state = get_game_state(self.world)
        # Paths and hints keep timing out on the end screens so the last match is shown.
        if state and state.mode not in (GameMode.MENU, GameMode.PAUSED):
            self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        state = get_game_state(self.world)
        if state and state.mode == GameMode.MENU:
            self.menu_input_system.handle_mouse_press(x, y, button)
            return
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button, modifiers=modifiers)

    def on_key_press(self, symbol: int, modifiers: int):
        state = get_game_state(self.world)
        if not state:
            return
        if state.mode == GameMode.MENU:
            self.menu_input_system.handle_key_press(symbol, modifiers)
            return
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(
        level=logging.DEBUG if DEBUG_MODE else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    FairyLinkWindow()
    run()


if __name__ == "__main__":
    main()

"""Input handling for the ECS-driven main menu."""
from esper import World

from fairylink.components.game_state import GameMode
from fairylink.constants import BOARD_PRESETS, DEFAULT_PRESET_INDEX, KEY_ENTER, KEY_NUM_1
from fairylink.events.bus import EVENT_MENU_PRESET_SELECTED, EventBus
from fairylink.menu.components import MenuButton
from fairylink.menu.factory import clear_main_menu
from fairylink.utils.game_state import get_game_state


class MenuInputSystem:
    """Processes input while the game is in menu mode.

    The window routes presses here directly in MENU mode rather than through
    the bus, so a click that starts a game is never also read as a tile click.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self._event_bus = event_bus

    def handle_mouse_press(self, x: float, y: float, button: int) -> None:
        """Start the preset whose button was clicked."""
        if not self._in_menu():
            return
        for _, menu_button in self.world.get_component(MenuButton):
            if not menu_button.enabled:
                continue
            if self._point_inside_button(x, y, menu_button):
                self._select(menu_button.preset_index)
                return

    def handle_key_press(self, symbol: int, modifiers: int) -> None:
        """Number keys pick a preset; Enter picks the default one."""
        if not self._in_menu():
            return
        if symbol == KEY_ENTER:
            self._select(DEFAULT_PRESET_INDEX)
            return
        index = symbol - KEY_NUM_1
        if 0 <= index < len(BOARD_PRESETS):
            self._select(index)

    def _in_menu(self) -> bool:
        state = get_game_state(self.world)
        return state is not None and state.mode == GameMode.MENU

    def _select(self, preset_index: int) -> None:
        clear_main_menu(self.world)
        self._event_bus.emit(EVENT_MENU_PRESET_SELECTED, preset_index=preset_index)

    @staticmethod
    def _point_inside_button(x: float, y: float, button: MenuButton) -> bool:
        half_w = button.width / 2
        half_h = button.height / 2
        return (
            button.x - half_w <= x <= button.x + half_w
            and button.y - half_h <= y <= button.y + half_h
        )

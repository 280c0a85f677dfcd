from esper import World

from fairylink.components.game_state import GameMode
from fairylink.constants import (
    KEY_ESCAPE,
    KEY_HINT,
    KEY_PAUSE,
    KEY_RESTART,
    KEY_SHUFFLE,
    MOUSE_BUTTON_LEFT,
)
from fairylink.events.bus import (
    EVENT_BOARD_RESHUFFLE_REQUEST,
    EVENT_GAME_RESTART_REQUEST,
    EVENT_HINT_REQUEST,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_PRESS,
    EVENT_PAUSE_TOGGLE_REQUEST,
    EVENT_RETURN_TO_MENU_REQUEST,
    EVENT_TILE_CLICK,
    EventBus,
)
from fairylink.systems.board_ops import board_dimensions
from fairylink.ui.layout import cell_at, compute_board_geometry
from fairylink.utils.game_state import get_game_state


class InputSystem:
    """Translates raw mouse and keyboard events into board and flow requests."""

    def __init__(self, event_bus: EventBus, window, world: World):
        self.event_bus = event_bus
        self.window = window
        self.world = world
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Right-click deselection is handled by the move engine on the raw event.
        if button != MOUSE_BUTTON_LEFT:
            return
        if self._mode() != GameMode.PLAYING:
            return
        dims = board_dimensions(self.world)
        if dims is None:
            return
        physical_rows, physical_cols = dims
        geometry = compute_board_geometry(self.window.width, self.window.height, physical_rows, physical_cols)
        cell = cell_at(float(x), float(y), geometry, physical_rows, physical_cols)
        if cell is None:
            return
        row, col = cell
        self.event_bus.emit(EVENT_TILE_CLICK, row=row, col=col)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol is None:
            return
        self.handle_key_press(int(symbol), kwargs.get('modifiers', 0))

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> None:
        mode = self._mode()
        if mode == GameMode.PLAYING:
            if symbol == KEY_HINT:
                self.event_bus.emit(EVENT_HINT_REQUEST)
            elif symbol == KEY_RESTART:
                self.event_bus.emit(EVENT_GAME_RESTART_REQUEST)
            elif symbol in (KEY_PAUSE, KEY_ESCAPE):
                self.event_bus.emit(EVENT_PAUSE_TOGGLE_REQUEST)
        elif mode == GameMode.PAUSED:
            if symbol == KEY_PAUSE:
                self.event_bus.emit(EVENT_PAUSE_TOGGLE_REQUEST)
            elif symbol == KEY_RESTART:
                self.event_bus.emit(EVENT_GAME_RESTART_REQUEST)
            elif symbol == KEY_ESCAPE:
                self.event_bus.emit(EVENT_RETURN_TO_MENU_REQUEST)
        elif mode == GameMode.STUCK:
            if symbol == KEY_SHUFFLE:
                self.event_bus.emit(EVENT_BOARD_RESHUFFLE_REQUEST, reason="stuck")
            elif symbol == KEY_RESTART:
                self.event_bus.emit(EVENT_GAME_RESTART_REQUEST)
            elif symbol == KEY_ESCAPE:
                self.event_bus.emit(EVENT_RETURN_TO_MENU_REQUEST)
        elif mode == GameMode.COMPLETE:
            if symbol == KEY_RESTART:
                self.event_bus.emit(EVENT_GAME_RESTART_REQUEST)
            elif symbol == KEY_ESCAPE:
                self.event_bus.emit(EVENT_RETURN_TO_MENU_REQUEST)

    def _mode(self):
        state = get_game_state(self.world)
        return state.mode if state else None

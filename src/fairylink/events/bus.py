from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems alive even when nobody holds the system.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_KEY_PRESS = "key_press"                      # payload: symbol, modifiers
EVENT_TILE_CLICK = "tile_click"                    # payload: row, col (physical coordinates)


# ============================================================================
# SELECTION & MATCHING
# ============================================================================
EVENT_TILE_SELECTED = "tile_selected"              # payload: row, col
EVENT_TILE_DESELECTED = "tile_deselected"          # payload: reason=str, prev_row, prev_col
EVENT_MATCH_FOUND = "match_found"                  # payload: first=Position, second=Position, path=list[Position], type_id=int
EVENT_MATCH_REJECTED = "match_rejected"            # payload: first=Position, second=Position, reason=str
EVENT_HINT_REQUEST = "hint_request"                # payload: None
EVENT_HINT_FOUND = "hint_found"                    # payload: first=Position, second=Position, path=list[Position]
EVENT_HINT_UNAVAILABLE = "hint_unavailable"        # payload: None


# ============================================================================
# BOARD LIFECYCLE
# ============================================================================
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str, positions=list[Position]
EVENT_BOARD_READY = "board_ready"                  # payload: rows, cols, tile_type_count, reason=str
EVENT_BOARD_CLEARED = "board_cleared"              # payload: None
EVENT_BOARD_STUCK = "board_stuck"                  # payload: remaining=int
EVENT_BOARD_RESHUFFLE_REQUEST = "board_reshuffle_request"  # payload: reason=str
EVENT_BOARD_RESHUFFLED = "board_reshuffled"        # payload: reinitialized=bool
EVENT_GAME_RESTART_REQUEST = "game_restart_request"        # payload: None
EVENT_NEW_BOARD_REQUEST = "new_board_request"      # payload: preset=BoardPreset


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"          # payload: kind=str, items=list[Position]
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, items=list[Position]


# ============================================================================
# GAME FLOW & MENU
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_PAUSE_TOGGLE_REQUEST = "pause_toggle_request"    # payload: None
EVENT_RETURN_TO_MENU_REQUEST = "return_to_menu_request"  # payload: None
EVENT_MENU_PRESET_SELECTED = "menu_preset_selected"  # payload: preset_index=int

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BoardPreset:
    """Board size and variety offered on the main menu."""
    rows: int
    cols: int
    name: str
    tile_type_count: int


BOARD_PRESETS = (
    BoardPreset(6, 6, "6×6 Easy", 12),
    BoardPreset(8, 8, "8×8 Normal", 18),
    BoardPreset(10, 10, "10×10 Hard", 24),
)
DEFAULT_PRESET_INDEX = 0

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 800
WINDOW_TITLE = "Fairy Link"

TILE_SIZE = 55
MIN_TILE_SIZE = 20
BOTTOM_MARGIN = 20
TOP_MARGIN = 70

# The padded board (border ring included) may not exceed these fractions of the window.
BOARD_MAX_WIDTH_PCT = 0.75
BOARD_MAX_HEIGHT_PCT = 0.90

# Gap between tile squares, in pixels.
TILE_PADDING = 4

# Seconds a matched path stays on screen before the selection engine goes idle again.
PATH_DISPLAY_SECONDS = 0.5
# Seconds a hinted pair stays highlighted.
HINT_DISPLAY_SECONDS = 2.0

PATH_CACHE_MAX_ENTRIES = 512
SOLVABLE_MAX_ATTEMPTS = 1000

# Palette covers type ids 1..MAX_TILE_TYPES.
MAX_TILE_TYPES = 30

# Arcade/pyglet key symbols; kept as ints so systems need not import arcade.
KEY_HINT = 104        # arcade.key.H
KEY_RESTART = 114     # arcade.key.R
KEY_SHUFFLE = 115     # arcade.key.S
KEY_PAUSE = 112       # arcade.key.P
KEY_ESCAPE = 65307    # arcade.key.ESCAPE
KEY_ENTER = 65293     # arcade.key.ENTER
KEY_NUM_1 = 49        # arcade.key.KEY_1

MOUSE_BUTTON_LEFT = 1
MOUSE_BUTTON_RIGHT = 4

BACKGROUND_COLOR = (24, 28, 48)
BORDER_CELL_COLOR = (34, 40, 64)
SELECTION_COLOR = (255, 255, 255)
HINT_COLOR = (255, 215, 0)
PATH_COLOR = (255, 180, 200)

DEBUG_MODE = False

"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto

from fairylink.constants import DEFAULT_PRESET_INDEX


class GameMode(Enum):
    """High-level game modes that drive which systems run."""
    MENU = auto()
    PLAYING = auto()
    PAUSED = auto()
    COMPLETE = auto()
    STUCK = auto()


@dataclass
class GameState:
    """Singleton component storing the active mode, preset and play clock."""
    mode: GameMode = GameMode.MENU
    preset_index: int = DEFAULT_PRESET_INDEX
    elapsed: float = 0.0

"""Components used by the main menu ECS subsystem."""
from dataclasses import dataclass


@dataclass
class MenuButton:
    """Clickable preset button; ``preset_index`` points into BOARD_PRESETS."""
    label: str
    preset_index: int
    x: float
    y: float
    width: float = 280.0
    height: float = 64.0
    enabled: bool = True


@dataclass
class MenuTitle:
    text: str
    x: float
    y: float


@dataclass
class MenuBackground:
    """Background styling data for the menu screen."""
    color: tuple[int, int, int] = (20, 30, 50)


@dataclass
class MenuTag:
    """Marker component so menu entities can be cleaned up together."""
    pass

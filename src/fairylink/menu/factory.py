"""Factory helpers for creating the main menu entities."""
from esper import World

from fairylink.constants import BOARD_PRESETS, WINDOW_TITLE
from fairylink.menu.components import MenuBackground, MenuButton, MenuTag, MenuTitle

BUTTON_SPACING = 84.0


def clear_main_menu(world: World) -> None:
    """Remove every entity tagged as part of the menu UI."""
    for ent in [ent for ent, _ in world.get_component(MenuTag)]:
        world.delete_entity(ent, immediate=True)


def spawn_main_menu(world: World, width: int, height: int) -> None:
    """Create the menu background, title and one button per board preset."""
    clear_main_menu(world)
    center_x = width / 2
    center_y = height / 2

    world.create_entity(MenuBackground(), MenuTag())
    world.create_entity(MenuTitle(WINDOW_TITLE, center_x, center_y + 200.0), MenuTag())

    # Presets stack downward from just above the middle of the window.
    top_y = center_y + BUTTON_SPACING * (len(BOARD_PRESETS) - 1) / 2
    for index, preset in enumerate(BOARD_PRESETS):
        world.create_entity(
            MenuButton(
                label=f"{index + 1}. {preset.name}",
                preset_index=index,
                x=center_x,
                y=top_y - index * BUTTON_SPACING,
            ),
            MenuTag(),
        )

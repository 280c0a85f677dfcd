from typing import List

from esper import World

from fairylink.components.animation_hint import HintHighlight
from fairylink.components.animation_path import PathAnimation
from fairylink.components.duration import Duration
from fairylink.components.position import Position
from fairylink.constants import HINT_DISPLAY_SECONDS, PATH_DISPLAY_SECONDS


class AnimationFactory:
    def __init__(self, world: World):
        self.world = world

    def create_path(self, path: List[Position], duration: float = PATH_DISPLAY_SECONDS) -> int:
        ent = self.world.create_entity()
        self.world.add_component(ent, PathAnimation(path=list(path)))
        self.world.add_component(ent, Duration(duration))
        return ent

    def create_hint(self, positions: List[Position], duration: float = HINT_DISPLAY_SECONDS) -> int:
        ent = self.world.create_entity()
        self.world.add_component(ent, HintHighlight(positions=list(positions)))
        self.world.add_component(ent, Duration(duration))
        return ent

from typing import List

from esper import World

from fairylink.animation_factory import AnimationFactory
from fairylink.components.animation_hint import HintHighlight
from fairylink.components.animation_path import PathAnimation
from fairylink.components.duration import Duration
from fairylink.components.position import Position
from fairylink.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_READY,
    EVENT_BOARD_RESHUFFLED,
    EVENT_TICK,
    EventBus,
)


class AnimationSystem:
    """Times the transient path display and hint highlight; each is its own entity."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.factory = AnimationFactory(world)
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_ANIMATION_START, self.on_animation_start)
        event_bus.subscribe(EVENT_BOARD_CHANGED, self.on_board_changed)
        event_bus.subscribe(EVENT_BOARD_READY, self.on_board_reset)
        event_bus.subscribe(EVENT_BOARD_RESHUFFLED, self.on_board_reset)

    def on_animation_start(self, sender, **kwargs):
        kind = kwargs.get('kind')
        items = kwargs.get('items') or []
        if kind == 'path':
            # The engine already left AWAITING_CLEAR for the previous path before this match.
            self._drop_all(PathAnimation)
            self.factory.create_path(items)
        elif kind == 'hint':
            self._drop_all(HintHighlight)
            self.factory.create_hint(items)

    def on_board_changed(self, sender, **kwargs):
        positions = set(kwargs.get('positions') or [])
        if kwargs.get('reason') != 'match':
            self._drop_all(HintHighlight)
            return
        for ent, hint in list(self.world.get_component(HintHighlight)):
            if positions.intersection(hint.positions):
                self._delete_animation_entity(ent, HintHighlight)

    def on_board_reset(self, sender, **kwargs):
        self._finish_all(PathAnimation, 'path')
        self._drop_all(HintHighlight)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 1/60)
        for ent, anim in list(self.world.get_component(PathAnimation)):
            anim.elapsed += dt
            if anim.elapsed >= self._duration(ent):
                path = list(anim.path)
                self._delete_animation_entity(ent, PathAnimation)
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='path', items=path)
        for ent, hint in list(self.world.get_component(HintHighlight)):
            hint.elapsed += dt
            if hint.elapsed >= self._duration(ent):
                positions = list(hint.positions)
                self._delete_animation_entity(ent, HintHighlight)
                self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='hint', items=positions)

    def active_path(self) -> List[Position]:
        for _, anim in self.world.get_component(PathAnimation):
            return list(anim.path)
        return []

    def _duration(self, ent: int) -> float:
        try:
            return self.world.component_for_entity(ent, Duration).value
        except KeyError:
            return 0.0

    def _finish_all(self, comp_type, kind: str) -> None:
        for ent, anim in list(self.world.get_component(comp_type)):
            items = list(anim.path)
            self._delete_animation_entity(ent, comp_type)
            self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind=kind, items=items)

    def _drop_all(self, comp_type) -> None:
        for ent, _ in list(self.world.get_component(comp_type)):
            self._delete_animation_entity(ent, comp_type)

    def _delete_animation_entity(self, ent: int, comp_type) -> None:
        """Remove the animation entity right away so the next lookup no longer sees it."""
        if self.world.entity_exists(ent) and self.world.has_component(ent, comp_type):
            self.world.delete_entity(ent, immediate=True)

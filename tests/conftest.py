import os
import random
import sys

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from fairylink.components.game_state import GameMode
from fairylink.events.bus import EventBus
from fairylink.world import create_world


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def world(bus):
    return create_world(bus, initial_mode=GameMode.PLAYING, rng=random.Random(1234))


@pytest.fixture
def capture(bus):
    """Record payloads emitted on the bus: ``capture('event_name')`` returns the list."""
    recorded: dict[str, list[dict]] = {}

    def _listen(name: str) -> list[dict]:
        events = recorded.setdefault(name, [])
        bus.subscribe(name, lambda sender, **payload: events.append(payload))
        return events

    return _listen

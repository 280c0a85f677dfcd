from dataclasses import dataclass
from enum import Enum, auto

from fairylink.components.position import Position


class MovePhase(Enum):
    IDLE = auto()
    FIRST_PICKED = auto()
    EVALUATING = auto()
    AWAITING_CLEAR = auto()


@dataclass(slots=True)
class SelectionState:
    """Where the selection engine is in a move attempt."""
    phase: MovePhase = MovePhase.IDLE
    first: Position | None = None

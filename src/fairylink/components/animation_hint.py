from dataclasses import dataclass, field
from typing import List

from fairylink.components.position import Position

@dataclass(slots=True)
class HintHighlight:
    """Highlight on a connectable pair while a hint is showing."""
    positions: List[Position] = field(default_factory=list)
    elapsed: float = 0.0

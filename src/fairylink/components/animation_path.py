from dataclasses import dataclass, field
from typing import List

from fairylink.components.position import Position

@dataclass(slots=True)
class PathAnimation:
    """Transient display of the path that connected the last matched pair."""
    path: List[Position] = field(default_factory=list)
    elapsed: float = 0.0

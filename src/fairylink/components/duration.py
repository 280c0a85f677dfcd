from dataclasses import dataclass

@dataclass(slots=True)
class Duration:
    """Seconds an animation entity stays alive."""
    value: float

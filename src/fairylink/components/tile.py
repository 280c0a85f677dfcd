from dataclasses import dataclass

@dataclass(slots=True)
class Tile:
    """Per-cell tile value.

    type_id: 1..N where N is the board's configured tile type count.
    active: True while the tile is on the board. Removal clears the cell, so a
    stored tile is normally active.
    """
    type_id: int
    active: bool = True

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable physical grid coordinate; usable as a dict/set key."""
    row: int
    col: int

    def as_tuple(self) -> tuple[int, int]:
        return self.row, self.col

    def same_row(self, other: "Position") -> bool:
        return self.row == other.row

    def same_col(self, other: "Position") -> bool:
        return self.col == other.col

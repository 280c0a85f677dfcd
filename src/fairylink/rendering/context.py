from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from esper import World

from fairylink.components.animation_hint import HintHighlight
from fairylink.components.animation_path import PathAnimation
from fairylink.components.board import Board
from fairylink.components.position import Position
from fairylink.ui.layout import cell_center, compute_board_geometry

BoardPos = Tuple[int, int]


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    world: World
    window_width: int
    window_height: int
    tile_size: int
    board_left: float
    board_bottom: float
    board_width: float
    board_height: float
    physical_rows: int
    physical_cols: int
    cell_centers: Dict[BoardPos, Tuple[float, float]]
    selected: BoardPos | None = None
    hint_positions: Set[BoardPos] = field(default_factory=set)
    path_points: List[Tuple[float, float]] = field(default_factory=list)

    @property
    def board_top(self) -> float:
        return self.board_bottom + self.board_height

    @property
    def board_right(self) -> float:
        return self.board_left + self.board_width


def build_render_context(
    world: World,
    window_width: int,
    window_height: int,
    board: Board,
    *,
    selected: Position | None = None,
) -> RenderContext:
    """Populate a RenderContext for the current frame."""
    physical_rows = board.physical_rows
    physical_cols = board.physical_cols
    geometry = compute_board_geometry(window_width, window_height, physical_rows, physical_cols)
    tile_size, board_left, board_bottom = geometry

    centers: Dict[BoardPos, Tuple[float, float]] = {}
    for row in range(physical_rows):
        for col in range(physical_cols):
            centers[(row, col)] = cell_center(row, col, geometry, physical_rows)

    hint_positions: Set[BoardPos] = set()
    for _, hint in world.get_component(HintHighlight):
        hint_positions.update(pos.as_tuple() for pos in hint.positions)

    path_points: List[Tuple[float, float]] = []
    for _, anim in world.get_component(PathAnimation):
        path_points = [centers[pos.as_tuple()] for pos in anim.path if pos.as_tuple() in centers]
        break

    return RenderContext(
        world=world,
        window_width=window_width,
        window_height=window_height,
        tile_size=tile_size,
        board_left=board_left,
        board_bottom=board_bottom,
        board_width=tile_size * physical_cols,
        board_height=tile_size * physical_rows,
        physical_rows=physical_rows,
        physical_cols=physical_cols,
        cell_centers=centers,
        selected=selected.as_tuple() if selected is not None else None,
        hint_positions=hint_positions,
        path_points=path_points,
    )

from __future__ import annotations

from typing import TYPE_CHECKING

from fairylink.constants import BORDER_CELL_COLOR, HINT_COLOR, PATH_COLOR, SELECTION_COLOR

if TYPE_CHECKING:
    from fairylink.components.board import Board
    from fairylink.components.tile_palette import TilePalette
    from fairylink.rendering.context import RenderContext


class BoardRenderer:
    """Draws the padded grid, tiles, selection and hint outlines, and the match path."""

    def __init__(self, padding: int = 4):
        self._padding = padding

    def render(self, arcade, ctx: RenderContext, board: Board, palette: TilePalette) -> None:
        size = ctx.tile_size
        inner = size - self._padding
        half = inner / 2
        font_size = max(8, int(size * 0.32))

        for (row, col), (cx, cy) in ctx.cell_centers.items():
            if board.grid.is_border(row, col):
                arcade.draw_lbwh_rectangle_filled(cx - half, cy - half, inner, inner, BORDER_CELL_COLOR)
                continue
            tile = board.get_tile(row, col)
            if tile is None or not tile.active:
                continue
            arcade.draw_lbwh_rectangle_filled(cx - half, cy - half, inner, inner, palette.color_for(tile.type_id))
            arcade.draw_text(
                str(tile.type_id),
                cx,
                cy,
                palette.text_color_for(tile.type_id),
                font_size,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )

        for pos in ctx.hint_positions:
            center = ctx.cell_centers.get(pos)
            if center is None:
                continue
            cx, cy = center
            arcade.draw_lbwh_rectangle_outline(cx - half, cy - half, inner, inner, HINT_COLOR, border_width=4)

        if ctx.selected is not None and ctx.selected in ctx.cell_centers:
            cx, cy = ctx.cell_centers[ctx.selected]
            arcade.draw_lbwh_rectangle_outline(cx - half, cy - half, inner, inner, SELECTION_COLOR, border_width=3)

        if len(ctx.path_points) >= 2:
            arcade.draw_line_strip(ctx.path_points, PATH_COLOR, 4)
            for x, y in (ctx.path_points[0], ctx.path_points[-1]):
                arcade.draw_circle_outline(x, y, size * 0.2, PATH_COLOR, 3)

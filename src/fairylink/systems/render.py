from esper import World

from fairylink.components.game_state import GameMode
from fairylink.components.position import Position
from fairylink.constants import BOARD_PRESETS, TILE_PADDING
from fairylink.events.bus import EVENT_TILE_DESELECTED, EVENT_TILE_SELECTED, EventBus
from fairylink.rendering.board_renderer import BoardRenderer
from fairylink.rendering.context import RenderContext, build_render_context
from fairylink.systems.board_ops import get_board, get_palette
from fairylink.utils.game_state import format_clock, get_game_state

HUD_HELP = "H: hint   R: restart   P: pause   Esc: menu   Right-click: deselect"

OVERLAY_TEXT = {
    GameMode.PAUSED: ("Paused", "P: resume   R: restart   Esc: menu"),
    GameMode.STUCK: ("No moves left", "S: reshuffle   R: restart   Esc: menu"),
}


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_TILE_SELECTED, self.on_tile_selected)
        self.event_bus.subscribe(EVENT_TILE_DESELECTED, self.on_tile_deselected)
        self.selected = None
        self.last_context: RenderContext | None = None
        self._board_renderer = BoardRenderer(padding=TILE_PADDING)

    def on_tile_selected(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        self.selected = Position(int(row), int(col))

    def on_tile_deselected(self, sender, **kwargs):
        self.selected = None

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True

        state = get_game_state(self.world)
        board = get_board(self.world)
        if state is None or state.mode == GameMode.MENU or board is None:
            self.last_context = None
            return

        # A selection only survives while its tile is still on the board.
        if self.selected is not None and board.get_tile(self.selected.row, self.selected.col) is None:
            self.selected = None
        ctx = build_render_context(
            self.world,
            self.window.width,
            self.window.height,
            board,
            selected=self.selected,
        )
        self.last_context = ctx
        if headless:
            return

        self._board_renderer.render(arcade, ctx, board, get_palette(self.world))
        self._render_hud(arcade, ctx)
        self._render_overlay(arcade, ctx, state)

    def hud_lines(self):
        """Text shown along the top of the board view."""
        state = get_game_state(self.world)
        board = get_board(self.world)
        if state is None or board is None:
            return []
        preset_name = BOARD_PRESETS[state.preset_index].name if 0 <= state.preset_index < len(BOARD_PRESETS) else ""
        return [
            f"{preset_name}   Time {format_clock(state.elapsed)}   Tiles left {board.active_count()}",
            HUD_HELP,
        ]

    def _render_hud(self, arcade, ctx: RenderContext) -> None:
        lines = self.hud_lines()
        y = ctx.window_height - 24
        for index, line in enumerate(lines):
            arcade.draw_text(
                line,
                ctx.window_width / 2,
                y - index * 24,
                arcade.color.WHITE if index == 0 else arcade.color.LIGHT_GRAY,
                18 if index == 0 else 12,
                anchor_x="center",
                anchor_y="center",
                bold=index == 0,
            )

    def _render_overlay(self, arcade, ctx: RenderContext, state) -> None:
        if state.mode == GameMode.COMPLETE:
            title, detail = "Board cleared!", f"Time used {format_clock(state.elapsed)}   R: play again   Esc: menu"
        elif state.mode in OVERLAY_TEXT:
            title, detail = OVERLAY_TEXT[state.mode]
        else:
            return
        arcade.draw_lrbt_rectangle_filled(0, ctx.window_width, 0, ctx.window_height, (0, 0, 0, 160))
        center_x = ctx.window_width / 2
        center_y = ctx.window_height / 2
        arcade.draw_text(title, center_x, center_y + 24, arcade.color.WHITE, 36,
                         anchor_x="center", anchor_y="center", bold=True)
        arcade.draw_text(detail, center_x, center_y - 28, arcade.color.LIGHT_GRAY, 16,
                         anchor_x="center", anchor_y="center")

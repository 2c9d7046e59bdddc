from __future__ import annotations

from unictris.game import GameConfig, GameEngine, Intent, TetrominoKind
from unictris.visualization.palette import PALETTE, color_for_value
from unictris.visualization.renderer import Renderer


def test_palette_covers_every_cell_value():
    for v in range(8):
        assert color_for_value(v) == PALETTE[v]
    assert color_for_value(99) == (200, 200, 200)


def test_panel_lines_report_engine_state():
    game = GameEngine(GameConfig(random_seed=0))
    game.board.reset()
    game.spawn(TetrominoKind.J, 2, 0)
    game.apply(Intent.PAUSE)

    lines = Renderer()._panel_lines(game)

    assert lines == ["Score : 0", "Level : 1", "Shape : 3.2", "PAUSED"]


def test_window_size_fits_board_and_panel():
    renderer = Renderer(cell_size=10, margin=5, panel_width=50)
    assert renderer.window_size(10, 20) == (5 * 3 + 100 + 50, 5 * 2 + 200)

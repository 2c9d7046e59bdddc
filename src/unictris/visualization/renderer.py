from __future__ import annotations

from typing import Optional

import numpy as np
import pygame

from unictris.game import GameEngine
from .palette import BACKGROUND, PANEL_TEXT, color_for_value


class Renderer:
    """Draws the board and a score/level side panel. Reads the engine only."""

    def __init__(self, cell_size: int = 28, margin: int = 20, panel_width: int = 200) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, board_width: int, board_height: int) -> tuple[int, int]:
        width = self.margin * 3 + board_width * self.cell_size + self.panel_width
        height = self.margin * 2 + board_height * self.cell_size
        return width, height

    def _grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for y in range(h):
            for x in range(w):
                rect = pygame.Rect(
                    x * self.cell_size,
                    y * self.cell_size,
                    self.cell_size - 1,
                    self.cell_size - 1,
                )
                pygame.draw.rect(surf, color_for_value(int(state[y, x])), rect)
        return surf

    def _panel_lines(self, game: GameEngine) -> list[str]:
        lines = [
            f"Score : {game.score}",
            f"Level : {game.level}",
        ]
        tet = game.tetromino
        if tet is not None:
            lines.append(f"Shape : {int(tet.kind)}.{tet.orientation}")
        if game.paused:
            lines.append("PAUSED")
        if game.game_over:
            lines.append("GAME OVER")
        return lines

    def draw(self, screen: pygame.Surface, game: GameEngine) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 28)
        state = game.get_state()
        screen.fill(BACKGROUND)
        screen.blit(self._grid_surface(state), (self.margin, self.margin))

        panel_x = self.margin * 2 + state.shape[1] * self.cell_size
        for i, line in enumerate(self._panel_lines(game)):
            text = self._font.render(line, True, PANEL_TEXT)
            screen.blit(text, (panel_x, self.margin + i * 30))
        pygame.display.flip()

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import pygame

from falling_blocks.game import GameSnapshot, GameState


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (0, 240, 240),  # I
        2: (240, 240, 0),  # O
        3: (160, 0, 240),  # T
        4: (0, 240, 0),    # S
        5: (240, 0, 0),    # Z
        6: (0, 0, 240),    # J
        7: (240, 160, 0),  # L
    }
    return palette.get(abs(v), (200, 200, 200))


class Renderer:
    def __init__(self, cell_size: int = 28, margin: int = 20, panel_width: int = 180) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.panel_width = panel_width
        self._font: Optional[pygame.font.Font] = None

    def window_size(self, rows: int, cols: int) -> Tuple[int, int]:
        width = self.margin * 3 + cols * self.cell_size + self.panel_width
        height = self.margin * 2 + rows * self.cell_size
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
                pygame.draw.rect(surf, _color_for_value(int(state[y, x])), rect)
        return surf

    def _draw_preview(self, screen: pygame.Surface, shape: np.ndarray, value: int, x0: int, y0: int) -> None:
        size = self.cell_size // 2
        for py in range(shape.shape[0]):
            for px in range(shape.shape[1]):
                if shape[py, px]:
                    rect = pygame.Rect(x0 + px * size, y0 + py * size, size - 1, size - 1)
                    pygame.draw.rect(screen, _color_for_value(value), rect)

    def _draw_panel(self, screen: pygame.Surface, snapshot: GameSnapshot, next_shape: Optional[np.ndarray], x0: int) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 24)
        lines = [
            f"Score: {snapshot.score:,}",
            f"Level: {snapshot.level}",
            f"Lines: {snapshot.lines_cleared}",
            "Next:",
        ]
        y = self.margin
        for txt in lines:
            screen.blit(self._font.render(txt, True, (230, 230, 230)), (x0, y))
            y += 24
        if next_shape is not None and snapshot.next_piece is not None:
            self._draw_preview(screen, next_shape, int(snapshot.next_piece), x0, y + 4)
        y += self.cell_size * 2 + 16

        help_lines = ["Left/Right: move", "Down: drop", "Up/Space: rotate", "P: pause", "Enter/N: new game"]
        for txt in help_lines:
            screen.blit(self._font.render(txt, True, (150, 150, 160)), (x0, y))
            y += 20

        banner = None
        if snapshot.over:
            banner = ("Game Over", (255, 100, 100))
        elif snapshot.state is GameState.PAUSED:
            banner = ("Paused", (255, 220, 120))
        elif snapshot.state is GameState.IDLE:
            banner = ("Press Enter to start", (120, 220, 140))
        if banner is not None:
            screen.blit(self._font.render(banner[0], True, banner[1]), (x0, y + 12))

    def draw(
        self,
        screen: pygame.Surface,
        state: np.ndarray,
        snapshot: Optional[GameSnapshot] = None,
        next_shape: Optional[np.ndarray] = None,
    ) -> None:
        grid_surf = self._grid_surface(state)
        screen.fill((10, 10, 14))
        screen.blit(grid_surf, (self.margin, self.margin))
        if snapshot is not None:
            x0 = self.margin * 2 + state.shape[1] * self.cell_size
            self._draw_panel(screen, snapshot, next_shape, x0)
        pygame.display.flip()

from __future__ import annotations

from typing import Dict, Optional, Tuple

import numpy as np
import pygame

from naval_aoe.board.rules import CellMarkers


Color = Tuple[int, int, int]


def build_palette(markers: Optional[CellMarkers] = None) -> Dict[int, Color]:
    markers = markers or CellMarkers()
    water, ship, aoe = markers.values()
    return {
        water: (20, 60, 110),
        ship: (150, 150, 160),
        aoe: (240, 120, 30),
    }


class Renderer:
    def __init__(self, cell_size: int = 30, margin: int = 20, markers: Optional[CellMarkers] = None) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.palette = build_palette(markers)

    def color_for_value(self, v: int) -> Color:
        return self.palette.get(v, (200, 200, 200))

    def window_size(self, state: np.ndarray) -> Tuple[int, int]:
        h, w = state.shape
        return (w * self.cell_size + self.margin * 2, h * self.cell_size + self.margin * 2)

    def cell_rect(self, row: int, col: int) -> pygame.Rect:
        """Cell area inside the grid surface, leaving a one-pixel gutter."""
        return pygame.Rect(col * self.cell_size, row * self.cell_size, self.cell_size - 1, self.cell_size - 1)

    def grid_surface(self, state: np.ndarray) -> pygame.Surface:
        h, w = state.shape
        surf = pygame.Surface((w * self.cell_size, h * self.cell_size))
        surf.fill((30, 30, 36))
        for (row, col), value in np.ndenumerate(state):
            surf.fill(self.color_for_value(int(value)), self.cell_rect(row, col))
        return surf

    def draw(self, screen: pygame.Surface, state: np.ndarray) -> None:
        screen.fill((10, 10, 14))
        screen.blit(self.grid_surface(state), (self.margin, self.margin))
        pygame.display.flip()

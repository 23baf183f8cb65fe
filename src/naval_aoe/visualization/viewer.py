from __future__ import annotations

from typing import Optional

import numpy as np
import pygame

from naval_aoe.board import EXAMPLE_CONFIG, render
from naval_aoe.board.rules import CellMarkers
from .renderer import Renderer


def run(
    state: Optional[np.ndarray] = None,
    markers: Optional[CellMarkers] = None,
    max_frames: Optional[int] = None,
) -> int:
    """Show a composed grid until the window is closed or ESC is pressed.

    ``max_frames`` stops the loop after that many frames. Returns the
    number of frames drawn.
    """
    if state is None:
        state = render(EXAMPLE_CONFIG)
    pygame.init()
    try:
        clock = pygame.time.Clock()
        renderer = Renderer(cell_size=32, markers=markers)
        screen = pygame.display.set_mode(renderer.window_size(state))
        pygame.display.set_caption("Naval AOE")

        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            if not running:
                break
            renderer.draw(screen, state)
            frames += 1
            if max_frames is not None and frames >= max_frames:
                break
            clock.tick(30)
    finally:
        pygame.quit()
    return frames


if __name__ == "__main__":  # pragma: no cover
    run()

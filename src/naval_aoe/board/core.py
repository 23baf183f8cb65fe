from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Dict, Optional, TextIO, Tuple

import numpy as np

from .errors import ShapeMismatch
from .grid import BoardGrid, EffectOverlay, Ship, place_ships
from .masks import DEFAULT_MASK_SIZE, Mask, ShapeKind, build_masks
from .rules import CellMarkers
from .stamping import StampRequest, stamp_all


EXAMPLE_SHIPS: Tuple[Ship, ...] = (
    Ship(row=2, col=1, length=3, horizontal=True),
    Ship(row=5, col=7, length=4, horizontal=False),
    Ship(row=8, col=2, length=1),
)

EXAMPLE_STAMPS: Tuple[StampRequest, ...] = (
    StampRequest(ShapeKind.CONE, 1, 3),
    StampRequest(ShapeKind.CROSS, 5, 5),
    StampRequest(ShapeKind.DIAMOND, 7, 2),
)


@dataclass
class RenderConfig:
    board_size: int = 10
    mask_size: int = DEFAULT_MASK_SIZE
    ships: Tuple[Ship, ...] = ()
    stamps: Tuple[StampRequest, ...] = ()
    markers: CellMarkers = field(default_factory=CellMarkers)
    strict: bool = False


EXAMPLE_CONFIG = RenderConfig(ships=EXAMPLE_SHIPS, stamps=EXAMPLE_STAMPS)


def compose(board: BoardGrid, overlay: EffectOverlay, markers: Optional[CellMarkers] = None) -> np.ndarray:
    """Board values with the AOE marker written over every affected cell."""
    markers = markers or board.markers
    if board.grid.shape != overlay.grid.shape:
        raise ShapeMismatch(board.grid.shape, overlay.grid.shape)
    return np.where(overlay.grid, markers.aoe, board.grid).astype(np.int8)


def format_grid(grid: np.ndarray) -> str:
    return "\n".join(" ".join(str(int(v)) for v in row) for row in grid)


def format_mask(mask: np.ndarray) -> str:
    return format_grid(mask.astype(np.int8))


def print_grid(grid: np.ndarray, stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    stream.write(format_grid(grid) + "\n")


class AoeScene:
    """Board, masks and overlay for one rendering pass."""

    def __init__(self, config: Optional[RenderConfig] = None) -> None:
        self.config = config or RenderConfig()
        self.board = BoardGrid(self.config.board_size, self.config.markers)
        self.overlay = EffectOverlay(self.config.board_size)
        self.masks: Dict[ShapeKind, Mask] = build_masks(self.config.mask_size)
        place_ships(self.board, self.config.ships)

    def apply_stamps(self) -> int:
        return stamp_all(self.overlay, self.config.stamps, self.masks, strict=self.config.strict)

    def get_state(self) -> np.ndarray:
        return compose(self.board, self.overlay, self.config.markers)


def render(config: Optional[RenderConfig] = None) -> np.ndarray:
    scene = AoeScene(config or EXAMPLE_CONFIG)
    scene.apply_stamps()
    return scene.get_state()

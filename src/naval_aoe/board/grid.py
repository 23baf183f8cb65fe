from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np

from .rules import CellMarkers


Coordinate = Tuple[int, int]


@dataclass(frozen=True)
class Ship:
    row: int
    col: int
    length: int = 1
    horizontal: bool = True

    def cells(self) -> List[Coordinate]:
        if self.horizontal:
            return [(self.row, self.col + i) for i in range(self.length)]
        return [(self.row + i, self.col) for i in range(self.length)]


class BoardGrid:
    """Square occupancy grid holding marker values.

    Cells start as water; ``place`` writes the ship marker. Rows index
    first, so ``grid[row, col]``.
    """

    def __init__(self, size: int = 10, markers: CellMarkers | None = None) -> None:
        self.size = int(size)
        self.markers = markers or CellMarkers()
        self.grid = np.full((self.size, self.size), self.markers.water, dtype=np.int8)

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def place(self, cells: Iterable[Coordinate]) -> int:
        """Mark in-bounds cells as occupied and return how many were written."""
        placed = 0
        for row, col in cells:
            if not self.is_inside(row, col):
                continue
            self.grid[row, col] = self.markers.ship
            placed += 1
        return placed

    def is_occupied(self, row: int, col: int) -> bool:
        return self.is_inside(row, col) and self.grid[row, col] == self.markers.ship

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()


class EffectOverlay:
    """Boolean affected-area layer kept apart from the board."""

    def __init__(self, size: int = 10) -> None:
        self.size = int(size)
        self.grid = np.zeros((self.size, self.size), dtype=bool)

    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def mark(self, row: int, col: int) -> bool:
        """Mark one cell. Off-board coordinates are ignored, never wrapped."""
        if not self.is_inside(row, col):
            return False
        self.grid[row, col] = True
        return True

    def count(self) -> int:
        return int(self.grid.sum())

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()


def place_ships(board: BoardGrid, ships: Iterable[Ship]) -> int:
    """Write every ship onto the board, clipping segments past the edge."""
    return sum(board.place(ship.cells()) for ship in ships)

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CellMarkers:
    water: int = 0
    ship: int = 3
    aoe: int = 5

    def values(self) -> tuple[int, int, int]:
        return (self.water, self.ship, self.aoe)

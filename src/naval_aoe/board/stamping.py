from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

import numpy as np

from .errors import OutOfRange
from .grid import EffectOverlay
from .masks import ShapeKind


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StampRequest:
    kind: ShapeKind
    row: int
    col: int


def stamp(
    overlay: EffectOverlay,
    origin_row: int,
    origin_col: int,
    mask: np.ndarray,
    strict: bool = False,
) -> int:
    """Center ``mask`` on the origin and mark covered overlay cells.

    Cells that fall off the board are dropped. Returns the number of mask
    cells that landed on the board (already-marked cells included).
    With ``strict`` an origin that lands nothing raises ``OutOfRange``.
    """
    size = mask.shape[0]
    mid = size // 2
    landed = 0
    clipped = 0
    for r in range(size):
        for c in range(size):
            if not mask[r, c]:
                continue
            br = origin_row + (r - mid)
            bc = origin_col + (c - mid)
            if overlay.mark(br, bc):
                landed += 1
            else:
                clipped += 1
    if landed == 0 and strict:
        raise OutOfRange(origin_row, origin_col, overlay.size)
    logger.debug(
        "Stamped %dx%d mask at (%d, %d): %d landed, %d clipped",
        size, size, origin_row, origin_col, landed, clipped,
    )
    return landed


def stamp_all(
    overlay: EffectOverlay,
    requests: Iterable[StampRequest],
    masks: Mapping[ShapeKind, np.ndarray],
    strict: bool = False,
) -> int:
    """Apply every request, or none of them when a strict stamp fails."""
    scratch = EffectOverlay(overlay.size)
    total = 0
    for request in requests:
        total += stamp(scratch, request.row, request.col, masks[request.kind], strict=strict)
    overlay.grid |= scratch.grid
    return total

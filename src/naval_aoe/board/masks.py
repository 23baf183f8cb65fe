from __future__ import annotations

import logging
from enum import IntEnum
from typing import Callable, Dict

import numpy as np

from .errors import InvalidDimension


logger = logging.getLogger(__name__)

DEFAULT_MASK_SIZE = 7


class ShapeKind(IntEnum):
    CONE = 1
    CROSS = 2
    DIAMOND = 3


Mask = np.ndarray
MaskBuilder = Callable[[int], Mask]


def _check_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidDimension(size)
    if size <= 0 or size % 2 == 0:
        raise InvalidDimension(size)
    return int(size)


def _empty_mask(size: int) -> Mask:
    return np.zeros((size, size), dtype=bool)


def _freeze(mask: Mask) -> Mask:
    mask.setflags(write=False)
    return mask


def build_cone_mask(size: int = DEFAULT_MASK_SIZE) -> Mask:
    """Downward cone: apex on row 0, half-width grows by one per row.

    Columns outside the mask are clipped, so for larger sizes the lower
    rows fill the full width.
    """
    size = _check_size(size)
    mask = _empty_mask(size)
    apex = size // 2
    for r in range(size):
        c_start = max(apex - r, 0)
        c_end = min(apex + r, size - 1)
        mask[r, c_start : c_end + 1] = True
    return _freeze(mask)


def build_cross_mask(size: int = DEFAULT_MASK_SIZE) -> Mask:
    size = _check_size(size)
    mask = _empty_mask(size)
    mid = size // 2
    mask[mid, :] = True
    mask[:, mid] = True
    return _freeze(mask)


def build_diamond_mask(size: int = DEFAULT_MASK_SIZE) -> Mask:
    """Cells within Manhattan distance ``size // 2`` of the center."""
    size = _check_size(size)
    mid = size // 2
    rows, cols = np.ogrid[:size, :size]
    mask = (np.abs(rows - mid) + np.abs(cols - mid)) <= mid
    return _freeze(mask)


MASK_BUILDERS: Dict[ShapeKind, MaskBuilder] = {
    ShapeKind.CONE: build_cone_mask,
    ShapeKind.CROSS: build_cross_mask,
    ShapeKind.DIAMOND: build_diamond_mask,
}


def build_mask(kind: ShapeKind, size: int = DEFAULT_MASK_SIZE) -> Mask:
    mask = MASK_BUILDERS[ShapeKind(kind)](size)
    logger.debug("Built %s mask %dx%d with %d cells", ShapeKind(kind).name, size, size, int(mask.sum()))
    return mask


def build_masks(size: int = DEFAULT_MASK_SIZE) -> Dict[ShapeKind, Mask]:
    """Build one mask per shape kind."""
    return {kind: build_mask(kind, size) for kind in ShapeKind}

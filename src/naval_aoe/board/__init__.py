"""Board module for the naval AOE renderer.

Exports the board layers and the mask pipeline:
- BoardGrid / EffectOverlay: occupancy grid and affected-area layer
- ShapeKind and the mask builders: cone, cross and diamond stencils
- stamp: centers a mask on an origin, clipping at the board edge
- compose / format_grid: merge both layers for display
"""

from .core import (
    EXAMPLE_CONFIG,
    AoeScene,
    RenderConfig,
    compose,
    format_grid,
    format_mask,
    print_grid,
    render,
)
from .errors import BoardError, InvalidDimension, OutOfRange, ShapeMismatch
from .grid import BoardGrid, EffectOverlay, Ship, place_ships
from .masks import MASK_BUILDERS, ShapeKind, build_mask, build_masks
from .rules import CellMarkers
from .stamping import StampRequest, stamp, stamp_all

__all__ = [
    "AoeScene",
    "BoardError",
    "BoardGrid",
    "CellMarkers",
    "EXAMPLE_CONFIG",
    "EffectOverlay",
    "InvalidDimension",
    "MASK_BUILDERS",
    "OutOfRange",
    "RenderConfig",
    "ShapeKind",
    "ShapeMismatch",
    "Ship",
    "StampRequest",
    "build_mask",
    "build_masks",
    "compose",
    "format_grid",
    "format_mask",
    "place_ships",
    "print_grid",
    "render",
    "stamp",
    "stamp_all",
]

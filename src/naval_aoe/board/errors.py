from __future__ import annotations


class BoardError(Exception):
    """Base class for board and overlay errors."""


class InvalidDimension(BoardError, ValueError):
    """Mask side length is even, non-positive or not an integer."""

    def __init__(self, size: object) -> None:
        super().__init__(f"mask size must be a positive odd integer, got {size!r}")
        self.size = size


class OutOfRange(BoardError):
    """A stamp whose mask lands entirely outside the board."""

    def __init__(self, origin_row: int, origin_col: int, board_size: int) -> None:
        super().__init__(
            f"origin ({origin_row}, {origin_col}) places the whole mask outside "
            f"the {board_size}x{board_size} board"
        )
        self.origin_row = origin_row
        self.origin_col = origin_col
        self.board_size = board_size


class ShapeMismatch(BoardError, ValueError):
    """Board and overlay layers have different dimensions."""

    def __init__(self, board_shape: tuple, overlay_shape: tuple) -> None:
        super().__init__(f"board {board_shape} and overlay {overlay_shape} differ in shape")
        self.board_shape = board_shape
        self.overlay_shape = overlay_shape

"""
Board geometry - conversion between pixels and tiles.
NO UI DEPENDENCIES.
"""
import math
from dataclasses import dataclass
from typing import Tuple

from .constants import (
    ROWS, COLS, MIN_BOARD_WIDTH, MIN_BOARD_HEIGHT,
    HIT_THRESHOLD_FRACTION, MIN_HIT_THRESHOLD
)
from .errors import InvariantViolation


def tile_size(board_width: float, board_height: float) -> Tuple[float, float]:
    """Return (tile_w, tile_h) for the given board, clamped to the minimum size."""
    return (max(MIN_BOARD_WIDTH, board_width) / COLS, max(MIN_BOARD_HEIGHT, board_height) / ROWS)


@dataclass(frozen=True)
class BoardGeometry:
    """
    Pixel mapping for the lane grid.

    Coordinate system:
    - (0, 0) is the top-left corner of the board
    - x increases to the right, toward the attackers' spawn edge
    - y increases downward; row 0 is the top lane
    """
    width: float
    height: float

    @classmethod
    def for_board(cls, width: float, height: float) -> 'BoardGeometry':
        """Geometry for a measured board, clamped to the minimum size."""
        return cls(max(MIN_BOARD_WIDTH, width), max(MIN_BOARD_HEIGHT, height))

    @property
    def tile_w(self) -> float:
        return self.width / COLS

    @property
    def tile_h(self) -> float:
        return self.height / ROWS

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if a tile address is on the grid."""
        return 0 <= row < ROWS and 0 <= col < COLS

    def column_at(self, x: float) -> int:
        """Column index containing pixel x. May be off the grid."""
        return math.floor(x / self.tile_w)

    def to_tile(self, x: float, y: float) -> Tuple[int, int]:
        """Return (row, col) containing the pixel. May be off the grid."""
        return (math.floor(y / self.tile_h), self.column_at(x))

    def tile_center(self, row: int, col: int) -> Tuple[float, float]:
        """Return the (x, y) pixel center of a tile."""
        if not self.in_bounds(row, col):
            raise InvariantViolation(f"Tile ({row}, {col}) is outside the grid")
        return (col * self.tile_w + self.tile_w * 0.5,
                row * self.tile_h + self.tile_h * 0.5)

    def tile_left(self, col: int) -> float:
        """Left pixel edge of a column."""
        return col * self.tile_w

    def hit_threshold(self) -> float:
        """Horizontal separation under which a projectile hits an attacker."""
        return max(MIN_HIT_THRESHOLD, self.tile_w * HIT_THRESHOLD_FRACTION)

    def resized(self, width: float, height: float) -> 'BoardGeometry':
        """New geometry for a resized board. Entities keep their own coordinates."""
        return BoardGeometry.for_board(width, height)

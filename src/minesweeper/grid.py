"""
Grid module for Minesweeper game.

Describes the dimensions of a board. A grid is a value type: two grids
are equal when their widths and heights are equal, in that order.
"""
from dataclasses import dataclass


# ============================================================================
# Grid Data Class
# ============================================================================

@dataclass(frozen=True)
class Grid:
    """
    Width and height of a Minesweeper board.

    Attributes:
        width: Number of columns (x axis).
        height: Number of rows (y axis).
    """

    width: int = 9
    height: int = 9

    def __post_init__(self) -> None:
        """Validate dimensions after initialization."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Grid dimensions must be positive")

    @property
    def cells(self) -> int:
        """Total number of cells on the grid."""
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= x < self.width and 0 <= y < self.height


DEFAULT_GRID = Grid(9, 9)

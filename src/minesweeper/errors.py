"""
Exceptions raised by the Minesweeper engine.
"""
from typing import Optional

from .grid import Grid


class MinesweeperError(Exception):
    """Base class for all Minesweeper errors."""


class GameAlreadyStarted(MinesweeperError, RuntimeError):
    """Raised when configuring a game after play() has run."""

    def __init__(self, message: str = "Game has already started") -> None:
        super().__init__(message)


class OutOfBounds(MinesweeperError, IndexError):
    """Raised when coordinates fall outside the grid."""

    def __init__(self, x: int, y: int, grid: Optional[Grid] = None) -> None:
        self.x = x
        self.y = y
        self.grid = grid
        if grid is None:
            message = f"Position ({x}, {y}) is out of bounds"
        else:
            message = (
                f"Position ({x}, {y}) is out of bounds for "
                f"{grid.width}x{grid.height} grid"
            )
        super().__init__(message)

"""
Block module for Minesweeper game.

Represents a single cell on the board: its kind (unknown, flagged,
bomb or number) and, for numbered cells, the neighboring bomb tally.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellKind(Enum):
    """Possible kinds of a cell."""

    UNKNOWN = auto()
    FLAGGED = auto()
    BOMB = auto()
    NUMBER = auto()


# ============================================================================
# Block Data Class
# ============================================================================

@dataclass
class Block:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        node: Current kind of the cell.
        value: Count of bombs in neighboring cells (1-8), only
            meaningful when node is NUMBER.
    """

    node: CellKind = CellKind.UNKNOWN
    value: int = 0

    def set_block(self, kind: CellKind) -> None:
        """Overwrite the cell kind, leaving the tally untouched."""
        self.node = kind

    @property
    def is_unknown(self) -> bool:
        return self.node == CellKind.UNKNOWN

    @property
    def is_flagged(self) -> bool:
        return self.node == CellKind.FLAGGED

    @property
    def is_bomb(self) -> bool:
        return self.node == CellKind.BOMB

    @property
    def is_number(self) -> bool:
        return self.node == CellKind.NUMBER

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Unknown cell
            -2: Flagged cell
            1-8: Numbered cell with its bomb tally
            9: Bomb
        """
        if self.node == CellKind.UNKNOWN:
            return -1
        if self.node == CellKind.FLAGGED:
            return -2
        if self.node == CellKind.BOMB:
            return 9
        return self.value

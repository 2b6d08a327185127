"""
Board module for Minesweeper game.

Implements the game board with bomb placement and neighbor tallies.
Blocks are indexed [x][y], x along the width and y along the height.
"""
import logging
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Set, Tuple

import numpy as np

from .block import Block, CellKind
from .difficulty import Difficulty, bomb_count
from .errors import OutOfBounds
from .grid import Grid, DEFAULT_GRID


logger = logging.getLogger(__name__)

Blocks = List[List[Block]]

# Moore neighborhood, excluding the cell itself
NEIGHBOR_OFFSETS = tuple(
    (delta_x, delta_y)
    for delta_x in (-1, 0, 1)
    for delta_y in (-1, 0, 1)
    if (delta_x, delta_y) != (0, 0)
)


# ============================================================================
# Position Stepping
# ============================================================================

def shift_position(grid: Grid, x: int, y: int) -> Tuple[int, int]:
    """
    Advance to the next position on the grid, wrapping around.

    Steps along y first; past the last row y wraps to 0 and x advances,
    and past the last column x wraps to 0 as well.

    Args:
        grid: Grid being traversed.
        x: Current column.
        y: Current row.

    Returns:
        Next (x, y) position.
    """
    y += 1
    if y >= grid.height:
        y = 0
        x += 1
        if x >= grid.width:
            x = 0
    return x, y


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid and the dense collection of blocks, places bombs
    and derives the numeric tallies around them.
    """

    grid: Grid = field(default_factory=lambda: DEFAULT_GRID)
    _blocks: Blocks = field(default_factory=list, repr=False)
    _bombs: Set[Tuple[int, int]] = field(default_factory=set, repr=False)

    def __post_init__(self) -> None:
        """Initialize the blocks after dataclass creation."""
        self.allocate(self.grid)

    # ========================================================================
    # Allocation (Low-level)
    # ========================================================================

    def allocate(self, grid: Grid) -> None:
        """
        Create a fresh width x height collection of unknown blocks.

        Any previous blocks and bomb layout are discarded.
        """
        self.grid = grid
        self._blocks = [
            [Block() for _ in range(grid.height)]
            for _ in range(grid.width)
        ]
        self._bombs = set()

    # ========================================================================
    # Population (Mid-level)
    # ========================================================================

    def place_bombs(
        self,
        difficulty: Difficulty,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        """
        Place bombs by sweeping the grid with wrap-around steps.

        Starting from a random cell, each bomb is dropped a random number
        of cells further along the sweep order (flat index x * height + y,
        wrapping at the end of the grid). Cells already holding a bomb
        are stepped over, so every bomb lands on a distinct cell.

        Args:
            difficulty: Difficulty level selecting the bomb density.
            rng: Random generator (a fresh one if omitted).
        """
        if rng is None:
            rng = np.random.default_rng()

        target = bomb_count(self.grid, difficulty)
        cells = self.grid.cells
        height = self.grid.height
        index = int(rng.integers(cells))

        while len(self._bombs) < target:
            index = (index + int(rng.integers(1, cells + 1))) % cells
            x, y = divmod(index, height)
            while (x, y) in self._bombs:
                x, y = shift_position(self.grid, x, y)
            self.place_bomb(x, y)
            index = x * height + y

        logger.debug(
            "Placed %d bombs on %dx%d grid (%s)",
            target, self.grid.width, self.grid.height, difficulty.value,
        )

    def place_bomb(self, x: int, y: int) -> None:
        """
        Put a bomb at a position and mark its block BOMB.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        block = self.get_block(x, y)
        self._bombs.add((x, y))
        block.set_block(CellKind.BOMB)

    def compute_tallies(self) -> None:
        """
        Count bombs around every cell that does not hold one.

        Cells touching at least one bomb become NUMBER with the count as
        value. Cells with no adjacent bomb stay as they are.
        """
        for x in range(self.grid.width):
            for y in range(self.grid.height):
                if (x, y) in self._bombs:
                    continue
                count = self._count_adjacent_bombs(x, y)
                if count:
                    block = self._blocks[x][y]
                    block.value = count
                    block.set_block(CellKind.NUMBER)

    def _count_adjacent_bombs(self, x: int, y: int) -> int:
        """Count bombs adjacent to a specific cell."""
        return sum(
            1 for position in self.neighbors(x, y) if position in self._bombs
        )

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Tuple[int, int]]:
        """In-bounds (x, y) positions of the up to 8 cells around a cell."""
        return [
            (x + delta_x, y + delta_y)
            for delta_x, delta_y in NEIGHBOR_OFFSETS
            if self.grid.contains(x + delta_x, y + delta_y)
        ]

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def blocks(self) -> Blocks:
        """Blocks indexed [x][y]."""
        return self._blocks

    @property
    def bombs(self) -> FrozenSet[Tuple[int, int]]:
        """Positions of all placed bombs."""
        return frozenset(self._bombs)

    def get_block(self, x: int, y: int) -> Block:
        """
        Get block at position.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        if not self.grid.contains(x, y):
            raise OutOfBounds(x, y, self.grid)
        return self._blocks[x][y]

    def positions(self, kind: CellKind) -> List[Tuple[int, int]]:
        """Get all positions whose block is of the given kind."""
        return [
            (x, y)
            for x in range(self.grid.width)
            for y in range(self.grid.height)
            if self._blocks[x][y].node == kind
        ]

    def count(self, kind: CellKind) -> int:
        """Count blocks of the given kind."""
        return len(self.positions(kind))

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            Array of shape (width, height) indexed [x, y] where:
                -1 = unknown
                -2 = flagged
                1-8 = numbered with bomb tally
                9 = bomb
        """
        obs = np.zeros((self.grid.width, self.grid.height), dtype=np.int8)
        for x in range(self.grid.width):
            for y in range(self.grid.height):
                obs[x, y] = self._blocks[x][y].to_observation()
        return obs

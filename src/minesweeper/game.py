"""
Game module for Minesweeper.

Wraps a board in a lifecycle: the grid and difficulty may be changed
until play() populates the board, after which they are fixed.
"""
import logging
from typing import Optional, Union

import numpy as np

from .block import Block, CellKind
from .board import Board, Blocks
from .difficulty import Difficulty, DEFAULT_DIFFICULTY
from .errors import GameAlreadyStarted
from .grid import Grid, DEFAULT_GRID


logger = logging.getLogger(__name__)


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    Minesweeper game state machine.

    A game starts unstarted. While unstarted the grid and difficulty can
    be changed freely; play() places the bombs and locks both.
    Flagging is allowed in either state.
    """

    def __init__(
        self,
        grid: Optional[Grid] = None,
        difficulty: Difficulty = DEFAULT_DIFFICULTY,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize an unstarted game.

        Args:
            grid: Board dimensions (default: 9x9).
            difficulty: Initial difficulty level.
            seed: Random seed for reproducible bomb layouts.
        """
        self._board = Board(grid or DEFAULT_GRID)
        self._difficulty = Difficulty(difficulty)
        self._started = False
        self._rng = np.random.default_rng(seed)

    # ========================================================================
    # Configuration
    # ========================================================================

    def set_grid(self, width: int, height: int) -> None:
        """
        Replace the grid and reallocate the board.

        Raises:
            GameAlreadyStarted: If play() has already run.
            ValueError: If either dimension is not positive.
        """
        if self._started:
            raise GameAlreadyStarted("Cannot change the grid of a started game")
        self._board.allocate(Grid(width, height))
        logger.debug("Grid set to %dx%d", width, height)

    def set_difficulty(self, level: Union[Difficulty, str]) -> None:
        """
        Record the difficulty used when bombs are placed.

        Args:
            level: Difficulty member or its value (e.g. "easy").

        Raises:
            GameAlreadyStarted: If play() has already consumed it.
            ValueError: If the level is not a known difficulty.
        """
        if self._started:
            raise GameAlreadyStarted(
                "Cannot change the difficulty of a started game"
            )
        self._difficulty = Difficulty(level)
        logger.debug("Difficulty set to %s", self._difficulty.value)

    # ========================================================================
    # Game Actions
    # ========================================================================

    def play(self) -> None:
        """
        Start the game: place bombs and compute tallies.

        Raises:
            GameAlreadyStarted: If the game was already started.
        """
        if self._started:
            raise GameAlreadyStarted()
        self._started = True
        self._board.place_bombs(self._difficulty, self._rng)
        self._board.compute_tallies()
        logger.debug(
            "Game started on %dx%d grid", self.grid.width, self.grid.height
        )

    def flag(self, x: int, y: int) -> None:
        """
        Flag the block at a position.

        Raises:
            OutOfBounds: If the position is outside the grid.
        """
        self._board.get_block(x, y).set_block(CellKind.FLAGGED)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def grid(self) -> Grid:
        return self._board.grid

    @property
    def blocks(self) -> Blocks:
        """Blocks indexed [x][y]."""
        return self._board.blocks

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def started(self) -> bool:
        """Check if play() has run."""
        return self._started

    def get_block(self, x: int, y: int) -> Block:
        """Get block at position, raising OutOfBounds if invalid."""
        return self._board.get_block(x, y)


def new_game(grid: Optional[Grid] = None) -> Game:
    """Create an unstarted game, on the default grid if none is given."""
    return Game(grid)

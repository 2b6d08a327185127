"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Block, Board, Difficulty, Game, Grid


SAMPLE_GRID_WIDTH = 10
SAMPLE_GRID_HEIGHT = 20


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def sample_grid() -> Grid:
    """A non-square grid so axis mix-ups show up."""
    return Grid(SAMPLE_GRID_WIDTH, SAMPLE_GRID_HEIGHT)


@pytest.fixture
def square_grid() -> Grid:
    """Create a 5x5 grid."""
    return Grid(5, 5)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def blank_game() -> Game:
    """Create a game on the default grid."""
    return Game()


@pytest.fixture
def sample_game(sample_grid: Grid) -> Game:
    """Create an unstarted 10x20 game."""
    return Game(sample_grid, seed=42)


@pytest.fixture
def started_game(sample_grid: Grid) -> Game:
    """Create a 10x20 EASY game that has been played."""
    game = Game(sample_grid, seed=7)
    game.set_difficulty(Difficulty.EASY)
    game.play()
    return game


# ============================================================================
# Board and Block Fixtures
# ============================================================================

@pytest.fixture
def sample_board(sample_grid: Grid) -> Board:
    """Create an unpopulated 10x20 board."""
    return Board(sample_grid)


@pytest.fixture
def unknown_block() -> Block:
    """Create an unknown block."""
    return Block()

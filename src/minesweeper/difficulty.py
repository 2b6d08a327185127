"""
Difficulty levels and their bomb densities.
"""
import math
from enum import Enum
from types import MappingProxyType

from .grid import Grid


class Difficulty(Enum):
    """Named difficulty settings."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


EASY_MULTIPLIER = 0.1
MEDIUM_MULTIPLIER = 0.15
HARD_MULTIPLIER = 0.2

# Fraction of the grid's cells that hold a bomb
DENSITY_MULTIPLIERS = MappingProxyType({
    Difficulty.EASY: EASY_MULTIPLIER,
    Difficulty.MEDIUM: MEDIUM_MULTIPLIER,
    Difficulty.HARD: HARD_MULTIPLIER,
})

DEFAULT_DIFFICULTY = Difficulty.EASY


def density_multiplier(difficulty: Difficulty) -> float:
    """Get the bomb density for a difficulty level."""
    return DENSITY_MULTIPLIERS[difficulty]


def bomb_count(grid: Grid, difficulty: Difficulty) -> int:
    """
    Number of bombs to place on a grid.

    Args:
        grid: Board dimensions.
        difficulty: Difficulty level selecting the density.

    Returns:
        floor(width * height * multiplier).
    """
    return math.floor(grid.width * grid.height * density_multiplier(difficulty))

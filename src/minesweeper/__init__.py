"""
Minesweeper board engine.

Provides grid sizing, difficulty-scaled bomb placement, neighbor
tallies and the game lifecycle that locks the grid once play starts.
"""
from .grid import Grid, DEFAULT_GRID
from .block import Block, CellKind
from .difficulty import (
    Difficulty,
    DENSITY_MULTIPLIERS,
    DEFAULT_DIFFICULTY,
    EASY_MULTIPLIER,
    MEDIUM_MULTIPLIER,
    HARD_MULTIPLIER,
    bomb_count,
    density_multiplier,
)
from .errors import MinesweeperError, GameAlreadyStarted, OutOfBounds
from .board import Board, shift_position
from .game import Game, new_game
from .render import render_board

__all__ = [
    "Grid",
    "DEFAULT_GRID",
    "Block",
    "CellKind",
    "Difficulty",
    "DENSITY_MULTIPLIERS",
    "DEFAULT_DIFFICULTY",
    "EASY_MULTIPLIER",
    "MEDIUM_MULTIPLIER",
    "HARD_MULTIPLIER",
    "bomb_count",
    "density_multiplier",
    "MinesweeperError",
    "GameAlreadyStarted",
    "OutOfBounds",
    "Board",
    "shift_position",
    "Game",
    "new_game",
    "render_board",
]

"""
Debug text dump of a board.
"""
from .block import CellKind
from .board import Board


SYMBOLS = {
    CellKind.BOMB: "*",
    CellKind.UNKNOWN: " ",
    CellKind.FLAGGED: "F",
}


def render_board(board: Board) -> str:
    """
    Render board as a text grid, one line per x.

    Bombs show as '*', unknown cells as blanks, flags as 'F' and
    numbered cells as their tally.
    """
    lines = []
    for row in board.blocks:
        row_str = ""
        for block in row:
            row_str += SYMBOLS.get(block.node, str(block.value))
            row_str += " "
        lines.append(row_str.rstrip())
    return "\n".join(lines)

"""Move validation ahead of placement."""

from Battle_TicTacToe_AI.Board import O, X
from Battle_TicTacToe_AI.engine.errors import AlreadyMarked, InvalidMarker, OutOfBounds


def check_move(move, board, mark):
    """
    Validate a move against marker, bounds, and occupancy.
    Raises InvalidMarker/OutOfBounds/AlreadyMarked on invalid moves.
    """
    if mark not in (X, O):
        raise InvalidMarker("Invalid marker! Either X or O")

    row, col = move
    if not board.in_bounds(row, col):
        raise OutOfBounds(f"Move ({row}, {col}) out of bounds")
    if not board.is_empty(row, col):
        raise AlreadyMarked(f"Cell ({row}, {col}) has already been marked")

    return True

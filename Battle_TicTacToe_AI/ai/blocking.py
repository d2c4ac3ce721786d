"""Threat detection and blocking candidates around the opponent's last mark."""

from Battle_TicTacToe_AI.Board import Coord
from Battle_TicTacToe_AI.engine.lines import DIRECTIONS

RADIUS = 2


def window(board, row, col, dr, dc, radius=RADIUS):
    """In-bounds cells within `radius` of (row, col) along (dr, dc), pivot excluded."""
    cells = set()
    for k in range(-radius, radius + 1):
        if k == 0:
            continue
        r, c = row + k * dr, col + k * dc
        if board.in_bounds(r, c):
            cells.add(Coord(r, c))
    return cells


def threatened(cells, opponent_marks):
    return not cells.isdisjoint(opponent_marks)


def candidate_pool(board, last_move, opponent_marks, own_marks, radius=RADIUS):
    """
    Union of the open cells near `last_move` along every direction where another
    opponent mark sits within `radius`. The pivot and anything already marked
    never appear in the result.
    """
    row, col = last_move
    pool = set()
    for dr, dc in DIRECTIONS.values():
        cells = window(board, row, col, dr, dc, radius)
        if threatened(cells, opponent_marks):
            pool |= cells - opponent_marks
    pool.discard(Coord(row, col))
    pool -= own_marks
    return pool

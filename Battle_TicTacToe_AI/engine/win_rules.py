"""Win detection by pattern matching over the lines through the last move.

A line is viewed from the perspective of the mark being checked: own marks
become "1", the opponent's "2", empty cells "0". On a 3x3 board every line has
length 3, so only the bare three can ever match. On larger boards four in a row
capped on one end by the opponent wins, while a three boxed in by the opponent
does not.
"""

from Battle_TicTacToe_AI.Board import EMPTY
from Battle_TicTacToe_AI.engine.lines import lines_through

THREE = "111"
CAPPED_FOURS = ("21111", "11112")
BLOCKED_THREE = "21112"
BLOCKED_AT_START = "2111"
BLOCKED_AT_END = "1112"


def line_view(line, mark):
    """Translate a line of cell values into a "0/1/2" string for `mark`."""
    translate = {mark: "1", -mark: "2", EMPTY: "0"}
    return "".join(translate[v] for v in line)


def check_line(mark, line):
    view = line_view(line, mark)

    # XXXXO / OXXXX
    if any(pat in view for pat in CAPPED_FOURS):
        return True
    # OXXXO anywhere, OXXX at the start, XXXO at the end
    if BLOCKED_THREE in view or view.startswith(BLOCKED_AT_START) or view.endswith(BLOCKED_AT_END):
        return False
    return THREE in view


def check_winning(board, mark, row, col):
    """True if `mark` wins on any line through (row, col). Call right after each placement."""
    return any(check_line(mark, line) for line in lines_through(board, row, col))

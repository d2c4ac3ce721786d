"""Line extraction: the row, column and both diagonals through a pivot cell."""

# (dr, dc) step, walking in reading order along each line
DIRECTIONS = {
    "row": (0, 1),
    "column": (1, 0),
    "diagonal": (1, 1),       # top-left to bottom-right
    "anti_diagonal": (1, -1),  # top-right to bottom-left
}


def line_with_index(board, row, col, dr, dc):
    """Return line values along direction and the index of (row, col) within that line."""
    line = []
    r, c = row, col
    # move to start of line
    while board.in_bounds(r - dr, c - dc):
        r -= dr
        c -= dc
    idx = 0
    while board.in_bounds(r, c):
        line.append(board.cells[r][c])
        if r == row and c == col:
            idx = len(line) - 1
        r += dr
        c += dc
    return line, idx


def lines_through(board, row, col):
    """Return the four lines (row/column/diagonal/anti-diagonal) passing through (row, col)."""
    return [line_with_index(board, row, col, dr, dc)[0] for dr, dc in DIRECTIONS.values()]

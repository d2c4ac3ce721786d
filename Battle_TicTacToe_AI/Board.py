"""Board state container: NxN grid of marks plus the fill counter."""

from typing import NamedTuple

from Battle_TicTacToe_AI.engine.errors import AlreadyMarked, InvalidMarker, InvalidSize, OutOfBounds

EMPTY = 0
X = -1  # human, moves first
O = 1   # bot

MIN_SIZE = 3
MAX_SIZE = 7

SYMBOLS = {X: "X", O: "O", EMPTY: "."}


class Coord(NamedTuple):
    row: int
    col: int


class Board:
    def __init__(self, size=3):
        if not isinstance(size, int) or not MIN_SIZE <= size <= MAX_SIZE:
            raise InvalidSize(f"board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size!r}")
        # Store cells as -1 (X), 0 (empty), 1 (O)
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]
        self.move_count = 0
        self.history = []

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] == EMPTY

    def get(self, row, col):
        if not self.in_bounds(row, col):
            raise OutOfBounds(f"({row}, {col}) is outside a {self.size}x{self.size} board")
        return self.cells[row][col]

    def place(self, row, col, mark):
        """Place a mark; raise if the marker is invalid, out of bounds, or occupied."""
        if mark not in (X, O):
            raise InvalidMarker("mark must be -1 (X) or 1 (O)")
        if not self.in_bounds(row, col):
            raise OutOfBounds(f"({row}, {col}) is outside a {self.size}x{self.size} board")
        if self.cells[row][col] != EMPTY:
            raise AlreadyMarked(f"({row}, {col}) has already been marked")
        self.cells[row][col] = mark
        self.move_count += 1
        self.history.append(Coord(row, col))

    def is_full(self):
        return self.move_count == self.size * self.size

    def empty_cells(self):
        return [
            Coord(r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.cells[r][c] == EMPTY
        ]

    def snapshot(self):
        """Read-only copy of the grid for rendering."""
        return tuple(tuple(row) for row in self.cells)

    def __str__(self):
        return "\n".join(" ".join(SYMBOLS[v] for v in row) for row in self.cells)

"""Text renderer and size picker for playing in a terminal."""

from Battle_TicTacToe_AI.Board import MAX_SIZE, MIN_SIZE, O, SYMBOLS, X
from Battle_TicTacToe_AI.TicTacToeGame import DRAW, WIN


class ConsoleView:
    BANNERS = {
        X: "You won!",
        O: "The bot won!",
    }

    def __init__(self, writer=None, reader=None):
        self.writer = writer or print
        self.reader = reader or input

    def render(self, snapshot, outcome=None):
        size = len(snapshot)
        self.writer("   " + " ".join(str(c) for c in range(size)))
        for r, row in enumerate(snapshot):
            self.writer(f"{r:>2} " + " ".join(SYMBOLS[v] for v in row))

        if outcome is None:
            return
        if outcome.status == WIN:
            self.writer(self.BANNERS[outcome.winner])
        elif outcome.status == DRAW:
            self.writer("It's a draw!")

    def message(self, text):
        self.writer(text)

    def ask_size(self):
        """Keep asking until the player picks a supported board size."""
        while True:
            raw = self.reader(f"Select a board size ({MIN_SIZE}-{MAX_SIZE}): ").strip()
            try:
                size = int(raw[:1]) if raw[1:].lower().startswith("x") else int(raw)
            except ValueError:
                self.writer(f"'{raw}' is not a number")
                continue
            if MIN_SIZE <= size <= MAX_SIZE:
                return size
            self.writer(f"Board size must be between {MIN_SIZE} and {MAX_SIZE}")

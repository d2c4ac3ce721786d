"""Abstract player interface for human or bot controllers."""

from Battle_TicTacToe_AI.Board import Coord


class Player:
    def __init__(self, mark):
        self.mark = mark

    def next_move(self, board, last_move=None):
        """Return Coord(row, col) for the next move. `last_move` is the opponent's latest mark."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, mark, prompt="Enter move as 'row col' (0-indexed): ", reader=None):
        super().__init__(mark)
        self.prompt = prompt
        self.reader = reader or input

    def next_move(self, board, last_move=None):
        """Text-input player; raises ValueError on malformed input."""
        raw = self.reader(self.prompt).strip()
        try:
            row_str, col_str = raw.split()
            return Coord(int(row_str), int(col_str))
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc

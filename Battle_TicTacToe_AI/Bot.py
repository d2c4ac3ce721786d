"""Reactive bot: blocks runs forming around the human's last mark, otherwise plays randomly."""

import random

from Battle_TicTacToe_AI.Board import Coord
from Battle_TicTacToe_AI.Player import Player
from Battle_TicTacToe_AI.ai import blocking
from Battle_TicTacToe_AI.utils.logger import silent


class Bot(Player):
    def __init__(self, mark, size, rng=None, logger=silent):
        super().__init__(mark)
        self.size = size
        self.rng = rng if rng is not None else random.Random()
        self.logger = logger
        # Disjoint views of the board, kept current through observe()
        self.empty = {Coord(r, c) for r in range(size) for c in range(size)}
        self.own_marks = set()
        self.opponent_marks = set()

    def observe(self, coord, mark):
        """Record a placement made on the board by either side."""
        coord = Coord(*coord)
        self.empty.discard(coord)
        if mark == self.mark:
            self.own_marks.add(coord)
        else:
            self.opponent_marks.add(coord)

    def next_move(self, board, last_move=None):
        if not self.own_marks or last_move is None:
            return self._pick(self.empty)

        pool = blocking.candidate_pool(board, last_move, self.opponent_marks, self.own_marks)
        self.logger(f"My possible moves are: {sorted(pool)}")
        if not pool:
            return self._pick(self.empty)
        return self._pick(pool)

    def _pick(self, cells):
        if not cells:
            raise ValueError("No empty cells left for the bot")
        return self.rng.choice(sorted(cells))

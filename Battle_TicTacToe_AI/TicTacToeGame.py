"""Game controller: applies the human move, answers with the bot, reports the outcome."""

import threading
from dataclasses import dataclass, replace
from typing import Optional

from Battle_TicTacToe_AI.Board import Board, Coord, O, X, SYMBOLS
from Battle_TicTacToe_AI.Bot import Bot
from Battle_TicTacToe_AI.engine import referee, win_rules
from Battle_TicTacToe_AI.engine.errors import GameFinished
from Battle_TicTacToe_AI.utils.logger import log_event

CONTINUE = "continue"
WIN = "win"
DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    status: str
    winner: Optional[int] = None
    bot_move: Optional[Coord] = None

    @classmethod
    def cont(cls, bot_move=None):
        return cls(CONTINUE, bot_move=bot_move)

    @classmethod
    def win(cls, mark, bot_move=None):
        return cls(WIN, winner=mark, bot_move=bot_move)

    @classmethod
    def draw(cls, bot_move=None):
        return cls(DRAW, bot_move=bot_move)

    @property
    def is_terminal(self) -> bool:
        return self.status != CONTINUE


class TicTacToeGame:
    def __init__(self, board_size, rng=None, logger=log_event):
        self.board = Board(size=board_size)
        self.logger = logger
        self.bot = Bot(O, board_size, rng=rng, logger=logger)
        self.outcome = Outcome.cont()
        self._lock = threading.Lock()
        self.logger(f"New game of size {board_size} was created")

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def is_over(self) -> bool:
        return self.outcome.is_terminal

    def snapshot(self):
        return self.board.snapshot()

    def mark(self, row, col, marker=X) -> Outcome:
        """
        Mark (row, col) for `marker` and, when the human moved without ending the
        game, let the bot answer within the same call.
        Raises OutOfBounds/AlreadyMarked without touching the board.
        """
        with self._lock:
            if self.outcome.is_terminal:
                raise GameFinished("The game is over; start a new one")

            outcome = self._apply(Coord(row, col), marker)
            if outcome is None and marker == X:
                bot_move = self.bot.next_move(self.board, last_move=Coord(row, col))
                outcome = replace(self._apply(bot_move, O) or Outcome.cont(), bot_move=bot_move)
            self.outcome = outcome or Outcome.cont()
            return self.outcome

    def _apply(self, move, marker):
        """Place one mark; return a terminal Outcome or None."""
        referee.check_move(move, self.board, marker)
        self.board.place(*move, marker)
        self.bot.observe(move, marker)
        self.logger(f"Player {SYMBOLS[marker]} has marked ({move.row}, {move.col})")

        won = win_rules.check_winning(self.board, marker, *move)
        if self.board.is_full() and not won:
            self.logger("Result: Draw (board full)")
            return Outcome.draw()
        if won:
            self.logger(f"Player {SYMBOLS[marker]} won!")
            return Outcome.win(marker)
        return None


def create_game(size, rng=None, logger=log_event):
    """Build a game for a size x size board; raises InvalidSize outside 3..7."""
    return TicTacToeGame(size, rng=rng, logger=logger)

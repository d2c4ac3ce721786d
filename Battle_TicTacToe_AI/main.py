"""Entry point for Battle TicTacToe AI. Load config, build the game, run the console loop."""

import random

from Battle_TicTacToe_AI.Board import X
from Battle_TicTacToe_AI.Player import HumanPlayer
from Battle_TicTacToe_AI.TicTacToeGame import create_game
from Battle_TicTacToe_AI.gui.console_view import ConsoleView
from Battle_TicTacToe_AI.utils.cli import parse_args
from Battle_TicTacToe_AI.utils.logger import make_logger
from Battle_TicTacToe_AI.utils.settings import load_settings


def play(game, human, view):
    """Drive one game to its end. Returns the terminal Outcome."""
    view.render(game.snapshot())
    while True:
        try:
            move = human.next_move(game.board)
            outcome = game.mark(*move)
        except ValueError as exc:
            # OutOfBounds / AlreadyMarked / bad input: ask again
            view.message(str(exc))
            continue

        if outcome.bot_move is not None:
            view.message(f"Bot played {tuple(outcome.bot_move)}")
        view.render(game.snapshot(), outcome)
        if outcome.is_terminal:
            return outcome


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    board_size = args.board_size or settings.get("board_size")
    seed = args.seed if args.seed is not None else settings.get("seed")
    logger = make_logger(settings.get("log_moves", True) and not args.quiet)

    view = ConsoleView()
    if board_size is None:
        board_size = view.ask_size()

    game = create_game(board_size, rng=random.Random(seed), logger=logger)
    outcome = play(game, HumanPlayer(X), view)
    return outcome


if __name__ == "__main__":
    main()

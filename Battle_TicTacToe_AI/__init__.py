"""Battle_TicTacToe_AI package exports."""

from .Board import Board, Coord, EMPTY, O, X
from .Player import Player, HumanPlayer
from .Bot import Bot
from .TicTacToeGame import TicTacToeGame, Outcome, create_game

# Subpackages for rule engine, bot heuristics, console view, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "Coord",
    "EMPTY",
    "O",
    "X",
    "Player",
    "HumanPlayer",
    "Bot",
    "TicTacToeGame",
    "Outcome",
    "create_game",
    "ai",
    "engine",
    "gui",
    "utils",
]

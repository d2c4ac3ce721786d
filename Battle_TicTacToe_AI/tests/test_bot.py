"""Bot move selection: random opening, blocking pool, and fallback."""

import random

from Battle_TicTacToe_AI.Board import Board, Coord, O, X
from Battle_TicTacToe_AI.Bot import Bot
from Battle_TicTacToe_AI.ai import blocking


def _setup(size, moves):
    """Place (row, col, mark) moves on a fresh board and let a bot observe them."""
    b = Board(size=size)
    bot = Bot(O, size, rng=random.Random(0))
    for r, c, mark in moves:
        b.place(r, c, mark)
        bot.observe((r, c), mark)
    return b, bot


def test_window_stays_in_bounds_and_skips_pivot():
    b = Board(size=5)
    assert blocking.window(b, 0, 0, 0, 1) == {Coord(0, 1), Coord(0, 2)}
    assert blocking.window(b, 0, 0, 1, 0) == {Coord(1, 0), Coord(2, 0)}
    assert blocking.window(b, 2, 2, 1, -1) == {Coord(0, 4), Coord(1, 3), Coord(3, 1), Coord(4, 0)}
    assert blocking.window(b, 0, 4, 1, 1) == set()


def test_observe_keeps_sets_disjoint():
    b, bot = _setup(3, [(0, 0, X), (1, 1, O)])
    assert bot.opponent_marks == {Coord(0, 0)}
    assert bot.own_marks == {Coord(1, 1)}
    assert len(bot.empty) == 7
    assert not bot.empty & (bot.own_marks | bot.opponent_marks)


def test_first_move_reaches_every_empty_cell():
    b, bot = _setup(3, [(1, 1, X)])
    seen = {bot.next_move(b, last_move=Coord(1, 1)) for _ in range(500)}
    assert seen == set(b.empty_cells())


def test_pool_blocks_along_threatened_row_only():
    b, bot = _setup(5, [(2, 1, X), (0, 4, O), (2, 2, X)])
    pool = blocking.candidate_pool(b, Coord(2, 2), bot.opponent_marks, bot.own_marks)
    assert pool == {Coord(2, 0), Coord(2, 3), Coord(2, 4)}


def test_bot_move_always_in_pool_and_unmarked():
    b, bot = _setup(5, [(2, 1, X), (0, 4, O), (2, 2, X)])
    expected = {Coord(2, 0), Coord(2, 3), Coord(2, 4)}
    for _ in range(100):
        mv = bot.next_move(b, last_move=Coord(2, 2))
        assert mv in expected
        assert b.is_empty(*mv)


def test_pool_excludes_own_and_opponent_cells():
    b, bot = _setup(5, [(2, 1, X), (2, 3, O), (2, 2, X)])
    pool = blocking.candidate_pool(b, Coord(2, 2), bot.opponent_marks, bot.own_marks)
    assert pool == {Coord(2, 0), Coord(2, 4)}


def test_diagonal_threat_two_cells_away():
    b, bot = _setup(5, [(0, 0, X), (4, 0, O), (2, 2, X)])
    pool = blocking.candidate_pool(b, Coord(2, 2), bot.opponent_marks, bot.own_marks)
    assert pool == {Coord(1, 1), Coord(3, 3), Coord(4, 4)}


def test_no_threat_falls_back_to_any_empty_cell():
    b, bot = _setup(5, [(0, 1, X), (4, 4, O), (2, 2, X)])
    assert blocking.candidate_pool(b, Coord(2, 2), bot.opponent_marks, bot.own_marks) == set()
    seen = {bot.next_move(b, last_move=Coord(2, 2)) for _ in range(300)}
    assert seen <= set(b.empty_cells())
    assert len(seen) > 3


def test_seeded_bots_agree():
    moves = [(2, 1, X), (0, 4, O), (2, 2, X)]
    b1, bot1 = _setup(5, moves)
    b2, bot2 = _setup(5, moves)
    bot1.rng = random.Random(42)
    bot2.rng = random.Random(42)
    picks1 = [bot1.next_move(b1, Coord(2, 2)) for _ in range(10)]
    picks2 = [bot2.next_move(b2, Coord(2, 2)) for _ in range(10)]
    assert picks1 == picks2

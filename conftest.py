"""
Pytest fixtures for TicTacToe tests.
"""

import random

import pytest

from tictactoe.board import Board, Owner
from tictactoe.game_state import Game


def game_from_rows(rows, to_move=None) -> Game:
    """
    Build a game from marker rows, e.g. ["XO.", ".X.", "..O"].

    Whose turn it is follows from the marker counts unless given.
    """
    board = Board.from_rows(rows)
    if to_move is None:
        counts = board.to_rows()
        x_count = sum(row.count("X") for row in counts)
        o_count = sum(row.count("O") for row in counts)
        to_move = Owner.PLAYER_X if x_count == o_count else Owner.PLAYER_O
    return Game(board=board, current_player=to_move)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator so AI choices repeat between runs."""
    return random.Random(1234)


@pytest.fixture
def game() -> Game:
    """A new game, X to move."""
    return Game.new()


@pytest.fixture
def make_game():
    """Factory building a game from marker rows."""
    return game_from_rows


@pytest.fixture
def drawn_game() -> Game:
    """A full board with no line for either player."""
    return game_from_rows([
        "XOX",
        "XOO",
        "OXX",
    ])

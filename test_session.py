"""
Tests for GameSession and the console front end.
"""

import io
import random

import pytest

import main
from tictactoe.ai_player import Difficulty
from tictactoe.board import Owner
from tictactoe.session import (
    INVALID_DIFFICULTY,
    INVALID_MOVE,
    NO_MOVE_AVAILABLE,
    GameSession,
)

DRAW_MOVES = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


@pytest.fixture
def session() -> GameSession:
    return GameSession(rng=random.Random(99))


class TestGameSession:
    """Tests for the session facade."""

    def test_new_session(self, session):
        assert session.get_board() == b"........."
        assert session.get_state() == "Player X moves"
        assert not session.game_over()
        assert session.last_error is None

    def test_do_move(self, session):
        assert session.do_move(0, 0)
        assert session.get_board() == b"X........"
        assert session.get_state() == "Player O moves"

        assert session.do_move(2, 2)
        assert session.get_board() == b"X.......O"

    def test_rejected_move(self, session):
        session.do_move(1, 1)
        assert not session.do_move(1, 1)
        assert session.last_error == INVALID_MOVE
        assert session.get_board() == b"....X...."

    def test_out_of_bounds_move(self, session):
        assert not session.do_move(3, 0)
        assert session.last_error == INVALID_MOVE
        assert session.get_board() == b"........."

    @pytest.mark.parametrize("row, col", [(True, False), (0, True), (1.0, 1), ("1", "1")])
    def test_non_integer_move(self, session, row, col):
        assert not session.do_move(row, col)
        assert session.last_error == INVALID_MOVE
        assert session.get_board() == b"........."

    def test_x_wins(self, session):
        for row, col in [(0, 0), (1, 1), (0, 1), (2, 1), (0, 2)]:
            assert session.do_move(row, col)
        assert session.get_state() == "Player X wins"
        assert session.game_over()
        assert session.winner() is Owner.PLAYER_X
        assert not session.do_move(2, 2)

    def test_draw(self, session):
        for row, col in DRAW_MOVES:
            assert session.do_move(row, col)
        assert session.get_board() == b"XOXXOOOXX"
        assert session.get_state() == "Tie"
        assert session.game_over()

    @pytest.mark.parametrize("difficulty", [0, 1, 2, 3, Difficulty.HARD, "easy"])
    def test_ai_move(self, session, difficulty):
        assert session.do_ai_move(difficulty)
        assert session.get_board().count(b"X") == 1
        assert session.get_state() == "Player O moves"

    @pytest.mark.parametrize("difficulty", [4, 99, -1, "expert", None, "\u00b2", True])
    def test_ai_move_bad_difficulty(self, session, difficulty):
        session.do_move(0, 0)
        assert not session.do_ai_move(difficulty)
        assert session.last_error == INVALID_DIFFICULTY
        assert session.get_board() == b"X........"

    def test_ai_move_on_full_board(self, session):
        for row, col in DRAW_MOVES:
            session.do_move(row, col)
        assert not session.do_ai_move(0)
        assert session.last_error == NO_MOVE_AVAILABLE
        assert session.get_board() == b"XOXXOOOXX"

    def test_ai_blocks_through_session(self, session):
        session.do_move(0, 0)
        session.do_move(1, 1)
        session.do_move(0, 1)
        assert session.do_ai_move(Difficulty.MEDIUM)
        assert session.get_board()[2:3] == b"O"

    def test_restart(self, session):
        session.do_move(0, 0)
        session.do_move(0, 0)
        session.restart()
        assert session.get_board() == b"........."
        assert session.last_error is None


class TestConsoleGame:
    """Tests for the console front end (main.py)."""

    def run_console(self, text, **kwargs):
        output = io.StringIO()
        game = main.ConsoleGame(input_stream=io.StringIO(text), output_stream=output, **kwargs)
        game.start()
        return game, output.getvalue()

    def test_quit(self):
        game, output = self.run_console("q\n")
        assert "Game quit by user." in output
        assert game.session.game.board.occupied_count() == 0

    def test_bad_input(self):
        _, output = self.run_console("hello\n5 5\nq\n")
        assert "Please type a row and a column" in output
        assert "Cannot play (5, 5)" in output

    def test_ai_replies(self):
        game, _ = self.run_console("0 0\nq\n", difficulty=Difficulty.HARD)
        assert game.session.get_board() == b"X...O...."

    def test_ai_first(self):
        game, _ = self.run_console("q\n", human_player=Owner.PLAYER_O)
        assert game.session.get_board() == b"....X...."

    def test_restart(self):
        game, output = self.run_console("1 1\nr\nq\n")
        assert "Game reset!" in output
        assert game.session.game.board.occupied_count() == 0

    def test_play_to_the_end(self):
        moves = "".join(f"{r} {c}\n" for r in range(3) for c in range(3))
        game, output = self.run_console(moves + "n\n", difficulty=Difficulty.HARD)
        assert "GAME OVER!" in output
        assert "You won!" not in output
        assert game.session.game_over()

    def test_main_entry_point(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
        assert main.main(["--difficulty", "easy"]) == 0
        out = capsys.readouterr().out
        assert "Difficulty: EASY" in out
        assert "Goodbye!" in out

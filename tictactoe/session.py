"""
Game session for TicTacToe front ends.

Wraps a single Game and answers with plain values (bools, bytes, strings)
so a front end never has to deal with the core's types or exceptions.
"""

import logging
import random
from typing import Optional

from .ai_player import AIPlayer, InvalidDifficultyError
from .board import Owner
from .config import GameConfig
from .game_state import Game, StateKind
from .move_validator import InvalidMoveError

log = logging.getLogger(__name__)


# Reasons a call was rejected, stored in GameSession.last_error
INVALID_MOVE = "InvalidMove"
INVALID_DIFFICULTY = "InvalidDifficulty"
NO_MOVE_AVAILABLE = "NoMoveAvailable"

STATUS_TEXT = {
    StateKind.PLAYER_X_MOVE: GameConfig.STATUS_X_MOVE,
    StateKind.PLAYER_O_MOVE: GameConfig.STATUS_O_MOVE,
    StateKind.PLAYER_X_WIN: GameConfig.STATUS_X_WIN,
    StateKind.PLAYER_O_WIN: GameConfig.STATUS_O_WIN,
    StateKind.DRAW: GameConfig.STATUS_DRAW,
}


class GameSession:
    """
    One play session: a game plus the calls a front end needs.

    Not thread safe. Use one session per player/connection.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng
        self.game = Game.new()
        self.last_error: Optional[str] = None

    def restart(self):
        """Throw the current game away and start a new one."""
        self.game = Game.new()
        self.last_error = None
        log.debug("Session restarted")

    def do_move(self, row: int, column: int) -> bool:
        """
        Place the current player's marker at (row, column).

        Returns:
            True if the move was accepted.
        """
        try:
            self.game.submit_move((row, column))
        except InvalidMoveError as e:
            self.last_error = INVALID_MOVE
            log.info("Move (%s, %s) rejected: %s", row, column, e.message)
            return False

        self.last_error = None
        return True

    def do_ai_move(self, difficulty) -> bool:
        """
        Let the AI choose a move and play it.

        Args:
            difficulty: Difficulty, its number (0 easy, 1 medium, 2 hard,
                3 unbeatable) or its name.

        Returns:
            True if a move was played. False for an unknown difficulty
            or when no move is available; last_error tells which.
        """
        try:
            ai = AIPlayer(difficulty, rng=self.rng)
        except InvalidDifficultyError as e:
            self.last_error = INVALID_DIFFICULTY
            log.info("%s", e)
            return False

        move = ai.get_move(self.game)
        if move is None:
            self.last_error = NO_MOVE_AVAILABLE
            log.info("AI has no move available")
            return False

        return self.do_move(move.row, move.column)

    def get_board(self) -> bytes:
        """One marker byte per cell (X, O or .), row-major."""
        return "".join(owner.marker for _, owner in self.game.iterate_cells()).encode("ascii")

    def get_state(self) -> str:
        """Human-readable game status."""
        return STATUS_TEXT[self.game.state().kind]

    def game_over(self) -> bool:
        """Is the game over? (no more moves possible)"""
        return self.game.is_over()

    def winner(self) -> Optional[Owner]:
        return self.game.state().winner

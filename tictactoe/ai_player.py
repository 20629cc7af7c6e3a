"""
AI player for TicTacToe.
Chooses a move for whoever is to play, with a strategy per difficulty:

- EASY: random empty cell
- MEDIUM: win if possible, else block, else random
- HARD: full Minimax search (never loses)
- UNBEATABLE: same as HARD
"""

import logging
import random
from enum import IntEnum
from typing import Optional, Tuple

from .board import Board, Owner, Position
from .config import GameConfig
from .game_state import Game
from .win_checker import WinChecker

log = logging.getLogger(__name__)


class InvalidDifficultyError(ValueError):
    """The difficulty selector is not one of the known levels."""

    def __init__(self, value):
        super().__init__(f"Unknown difficulty: {value!r}")
        self.value = value


class Difficulty(IntEnum):
    """AI difficulty levels. Values are the numbers front ends send."""
    EASY = 0        # Random moves
    MEDIUM = 1      # Win / block, otherwise random
    HARD = 2        # Full minimax
    UNBEATABLE = 3  # Alias of HARD

    @classmethod
    def parse(cls, value) -> "Difficulty":
        """
        Convert a selector to a Difficulty.

        Accepts a Difficulty, its number (0-3) or its name ("hard", "HARD").

        Raises:
            InvalidDifficultyError: for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidDifficultyError(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise InvalidDifficultyError(value) from None
        if isinstance(value, str):
            name = value.strip().upper()
            if name in cls.__members__:
                return cls[name]
            if name.isdecimal():
                try:
                    return cls(int(name))
                except ValueError:
                    raise InvalidDifficultyError(value) from None
        raise InvalidDifficultyError(value)


class AIPlayer:
    """
    An AI that plays TicTacToe at a given difficulty.

    It plays for whichever player is to move and never changes the game
    it is given. Nothing is remembered between calls except a random
    generator and a counter of evaluated positions (for debugging).
    """

    def __init__(self, difficulty=Difficulty.HARD, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            difficulty: Difficulty, or a number/name Difficulty.parse() accepts.
            rng: Random generator for EASY/MEDIUM and tie breaks.

        Raises:
            InvalidDifficultyError: if the difficulty is not recognised.
        """
        self.difficulty = Difficulty.parse(difficulty)
        self.rng = rng if rng is not None else random.Random()
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

        self._strategies = {
            Difficulty.EASY: self._easy_move,
            Difficulty.MEDIUM: self._medium_move,
            Difficulty.HARD: self._best_move,
            Difficulty.UNBEATABLE: self._best_move,
        }

    def get_move(self, game: Game) -> Optional[Position]:
        """
        Choose a move for the player whose turn it is.

        Args:
            game: Current game. Not modified.

        Returns:
            Position of an empty cell, or None if the game is over.
        """
        if game.is_over():
            return None

        valid_moves = game.empty_cells()
        if not valid_moves:
            return None

        # Work on a copy so the caller's board is never touched
        board = game.board.copy()
        move = self._strategies[self.difficulty](board, game.current_player)
        log.debug("%s AI (%s) chose %s", game.current_player.marker,
                  self.difficulty.name, tuple(move))
        return move

    def _easy_move(self, board: Board, player: Owner) -> Position:
        """Get a random empty cell."""
        return self.rng.choice(board.empty_cells())

    def _medium_move(self, board: Board, player: Owner) -> Position:
        """Win now if possible, else block the opponent, else random."""
        winning = self.win_checker.find_winning_moves(board, player)
        if winning:
            return self.rng.choice(winning)

        blocking = self.win_checker.find_winning_moves(board, player.opposite())
        if blocking:
            return self.rng.choice(blocking)

        return self._easy_move(board, player)

    def _best_move(self, board: Board, player: Owner) -> Position:
        """Get the best move with Minimax."""
        self.positions_evaluated = 0
        valid_moves = board.empty_cells()

        # Special case: if only one move, just take it
        if len(valid_moves) == 1:
            return valid_moves[0]

        # Special case: on an empty board the center is as good as any move
        center = Position(board.size // 2, board.size // 2)
        if board.occupied_count() == 0:
            return center

        best_score, best_move = self._minimax(board, player, player)

        log.debug("AI evaluated %d positions. Best move: %s (score: %s)",
                  self.positions_evaluated, tuple(best_move), best_score)
        return best_move

    def _minimax(
        self,
        board: Board,
        to_move: Owner,
        ai: Owner,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> Tuple[float, Optional[Position]]:
        """
        Minimax algorithm with alpha-beta pruning.

        Moves are tried in place on `board` and undone before returning.

        Args:
            board: Position to evaluate.
            to_move: Player to move in this position.
            ai: The player the AI is maximizing for.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            (score, move). A win scores WIN_SCORE plus the empty cells left,
            so faster wins and slower losses are preferred. move is None
            at terminal positions.
        """
        self.positions_evaluated += 1

        # Check terminal states
        winner = self.win_checker.check_winner(board)
        valid_moves = board.empty_cells()

        if winner is not None:
            score = GameConfig.WIN_SCORE + len(valid_moves)
            return (score if winner is ai else -score), None
        if not valid_moves:
            return 0, None  # Draw

        is_maximizing = to_move is ai
        best_score = float('-inf') if is_maximizing else float('inf')
        best_move = None

        for position in valid_moves:
            board[position] = to_move
            score, _ = self._minimax(board, to_move.opposite(), ai, alpha, beta)
            board[position] = Owner.NONE

            if is_maximizing:
                if score > best_score:
                    best_score, best_move = score, position
                alpha = max(alpha, score)
            else:
                if score < best_score:
                    best_score, best_move = score, position
                beta = min(beta, score)

            if beta <= alpha:
                break  # Prune

        return best_score, best_move

    def get_move_suggestion(self, game: Game) -> str:
        """
        Get a human-readable move suggestion.

        Returns:
            A string describing the suggested move.
        """
        move = self.get_move(game)

        if move is None:
            return "No moves available!"

        return f"Place {game.current_player.marker} at position ({move.row}, {move.column})"


# The AI opponent, by its other name
Opponent = AIPlayer


def get_move(game: Game, difficulty, rng: Optional[random.Random] = None) -> Optional[Position]:
    """
    Choose a move for the player to move at the given difficulty.

    Returns:
        Position, or None when there is no move (game over / board full).

    Raises:
        InvalidDifficultyError: if the difficulty is not recognised.
    """
    return AIPlayer(difficulty, rng=rng).get_move(game)

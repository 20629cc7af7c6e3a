"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from .board import Owner, Position

if TYPE_CHECKING:
    from .game_state import Game


class InvalidMoveError(ValueError):
    """
    A move was rejected: off the board, on an occupied cell,
    or after the game ended. The board is left unchanged.
    """

    def __init__(self, position, message: str):
        super().__init__(message)
        self.position = position
        self.message = message


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Position must be on the board
    3. Can only place on empty cells
    """

    def validate_move(self, game: "Game", position: Position) -> ValidationResult:
        """
        Validate a move for the player whose turn it is.

        Args:
            game: Current game.
            position: Cell to place a marker on.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game.is_over():
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        size = game.board.size
        if not position.is_on_board(size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {tuple(position)}. Must be 0-{size - 1}."
            )

        owner = game.board[position]
        if owner is not Owner.NONE:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {tuple(position)} is already occupied by {owner.marker}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game: "Game") -> List[Position]:
        """
        Get all valid moves for the current player.

        Returns:
            List of Positions in row-major order, empty once the game is over.
        """
        if game.is_over():
            return []
        return game.board.empty_cells()

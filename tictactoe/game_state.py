"""
Game state management for TicTacToe.
Tracks the board and whose turn it is, and works out the game state.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .board import Board, Owner, Position
from .move_validator import InvalidMoveError, MoveValidator
from .win_checker import Line, WinChecker

log = logging.getLogger(__name__)


class StateKind(Enum):
    """Tag of the current game state."""
    PLAYER_X_MOVE = "x_move"
    PLAYER_O_MOVE = "o_move"
    PLAYER_X_WIN = "x_win"
    PLAYER_O_WIN = "o_win"
    DRAW = "draw"


_WIN_KINDS = {
    Owner.PLAYER_X: StateKind.PLAYER_X_WIN,
    Owner.PLAYER_O: StateKind.PLAYER_O_WIN,
}

_MOVE_KINDS = {
    Owner.PLAYER_X: StateKind.PLAYER_X_MOVE,
    Owner.PLAYER_O: StateKind.PLAYER_O_MOVE,
}


@dataclass(frozen=True)
class State:
    """
    The state of a game.

    winning_line holds the 3 Positions of the line for a win, None otherwise.
    """
    kind: StateKind
    winning_line: Optional[Line] = None

    @property
    def is_terminal(self) -> bool:
        return self.kind in (StateKind.PLAYER_X_WIN, StateKind.PLAYER_O_WIN, StateKind.DRAW)

    @property
    def winner(self) -> Optional[Owner]:
        if self.kind is StateKind.PLAYER_X_WIN:
            return Owner.PLAYER_X
        if self.kind is StateKind.PLAYER_O_WIN:
            return Owner.PLAYER_O
        return None


def _as_position(value) -> Position:
    try:
        row, col = value
    except (TypeError, ValueError):
        raise InvalidMoveError(value, f"Not a (row, column) pair: {value!r}") from None
    return Position(row, col)


class Game:
    """
    A game of TicTacToe.

    X always moves first and turns alternate after every accepted move.
    The board only changes through submit_move(), and nothing is accepted
    once the game has been won or drawn.
    """

    def __init__(self, board: Optional[Board] = None, current_player: Owner = Owner.PLAYER_X):
        """
        Args:
            board: Starting board (default: empty). The game keeps its own copy.
            current_player: Player to move.
        """
        self._board = board.copy() if board is not None else Board()

        # Current player's turn
        self.current_player = current_player

        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    def __repr__(self) -> str:
        return f"Game(board={self._board!r}, current_player={self.current_player})"

    @property
    def board(self) -> Board:
        """Read-only view of the board. Cells change only through submit_move()."""
        return self._board.read_only()

    @classmethod
    def new(cls) -> "Game":
        """Create a game with an empty board, X to move."""
        return cls()

    def submit_move(self, position) -> State:
        """
        Place the current player's marker.

        Args:
            position: Position or (row, col) pair.

        Returns:
            The state after the move.

        Raises:
            InvalidMoveError: position off the board, cell occupied,
                or the game is already over.
        """
        position = _as_position(position)
        result = self.validator.validate_move(self, position)
        if not result.is_valid:
            log.debug("Rejected move %s: %s", tuple(position), result.error_message)
            raise InvalidMoveError(position, result.error_message)

        mover = self.current_player
        self._board[position] = mover
        self.current_player = mover.opposite()

        state = self.state()
        log.debug("%s played %s -> %s", mover.marker, tuple(position), state.kind.value)
        return state

    def state(self) -> State:
        """
        Work out the current state from the board.

        Checks the winning lines first, then a full board (draw),
        otherwise it is the current player's move.
        """
        line = self.win_checker.get_winning_line(self._board)
        if line is not None:
            return State(_WIN_KINDS[self._board[line[0]]], line)

        if self._board.is_full():
            return State(StateKind.DRAW)

        return State(_MOVE_KINDS[self.current_player])

    def is_over(self) -> bool:
        """Has the game been won or drawn?"""
        return self.state().is_terminal

    def iterate_cells(self) -> Iterator[Tuple[Position, Owner]]:
        """(Position, Owner) for every cell, in row-major order."""
        return iter(self._board)

    def empty_cells(self) -> List[Position]:
        return self._board.empty_cells()

    def copy(self) -> "Game":
        """Create an independent copy of the game."""
        return Game(board=self._board, current_player=self.current_player)

    def render(self) -> str:
        """Text picture of the board with row/column numbers."""
        size = self._board.size
        header = "  " + " ".join(str(col) for col in range(size))
        lines = [header]
        for row, markers in enumerate(self._board.to_rows()):
            lines.append(f"{row} " + " ".join(markers))
        return "\n".join(lines)

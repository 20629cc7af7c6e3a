"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import List, Optional, Tuple

import numpy as np

from .board import Board, Owner, Position
from .config import GameConfig

Line = Tuple[Position, ...]


def build_winning_lines(size: int = GameConfig.BOARD_SIZE) -> List[Line]:
    """
    All lines that win the game on a size x size board.

    Order: rows, then columns, then the two diagonals.
    """
    rows = [tuple(Position(r, c) for c in range(size)) for r in range(size)]
    cols = [tuple(Position(r, c) for r in range(size)) for c in range(size)]
    diagonals = [
        tuple(Position(i, i) for i in range(size)),
        tuple(Position(i, size - 1 - i) for i in range(size)),
    ]
    return rows + cols + diagonals


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same owner in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (8 for a 3x3 board)
    WINNING_LINES = build_winning_lines()

    # Row and column index arrays, shape (lines, size), for fancy indexing
    _LINE_ROWS = np.array([[p.row for p in line] for line in WINNING_LINES])
    _LINE_COLS = np.array([[p.column for p in line] for line in WINNING_LINES])

    def _line_values(self, board: Board) -> np.ndarray:
        """Owner codes of every winning line, one row per line."""
        return board.grid[self._LINE_ROWS, self._LINE_COLS]

    def _winning_index(self, board: Board) -> Optional[int]:
        values = self._line_values(board)
        complete = (values == values[:, :1]).all(axis=1) & (values[:, 0] != Owner.NONE.value)
        hits = np.flatnonzero(complete)
        if hits.size == 0:
            return None
        return int(hits[0])

    def check_winner(self, board: Board) -> Optional[Owner]:
        """
        Check if there's a winner.

        Args:
            board: The game board.

        Returns:
            The winning Owner, or None if no winner yet.
        """
        index = self._winning_index(board)
        if index is None:
            return None
        return board[self.WINNING_LINES[index][0]]

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a tuple of Positions, or None.
        """
        index = self._winning_index(board)
        if index is None:
            return None
        return self.WINNING_LINES[index]

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled and nobody has a line.
        """
        if self.check_winner(board) is not None:
            return False
        return board.is_full()

    def find_winning_moves(self, board: Board, owner: Owner) -> List[Position]:
        """
        Find the empty cells that would complete a line for `owner`.

        Args:
            board: The game board.
            owner: The player to check for.

        Returns:
            Distinct Positions in row-major order (empty if there are none).
        """
        values = self._line_values(board)
        size = board.size
        mine = (values == owner.value).sum(axis=1)
        empty = (values == Owner.NONE.value).sum(axis=1)
        moves = set()
        for index in np.flatnonzero((mine == size - 1) & (empty == 1)):
            for position in self.WINNING_LINES[index]:
                if board[position] is Owner.NONE:
                    moves.add(position)
        return sorted(moves)

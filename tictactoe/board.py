"""
Board for TicTacToe.
Cells, owners and positions of the 3x3 grid.
"""

from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

import numpy as np

from .config import GameConfig


class Owner(Enum):
    """Who occupies a cell."""
    NONE = 0
    PLAYER_X = 1
    PLAYER_O = 2

    def opposite(self) -> "Owner":
        """Get the other player. NONE stays NONE."""
        if self is Owner.PLAYER_X:
            return Owner.PLAYER_O
        if self is Owner.PLAYER_O:
            return Owner.PLAYER_X
        return Owner.NONE

    @property
    def marker(self) -> str:
        """Single character shown for this owner."""
        return _MARKERS[self]

    @classmethod
    def from_marker(cls, marker: str) -> "Owner":
        """Get the owner for a marker character ('X', 'O' or '.')."""
        for owner, char in _MARKERS.items():
            if char == marker.upper():
                return owner
        if marker in (" ", "_", "-"):
            return cls.NONE
        raise ValueError(f"Unknown marker {marker!r}")


_MARKERS = {
    Owner.NONE: GameConfig.MARKER_EMPTY,
    Owner.PLAYER_X: GameConfig.MARKER_X,
    Owner.PLAYER_O: GameConfig.MARKER_O,
}


def _is_index(value) -> bool:
    # bool is an int subclass but would index numpy as a mask
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


class Position(NamedTuple):
    """A (row, column) cell coordinate."""
    row: int
    column: int

    def is_on_board(self, size: int = GameConfig.BOARD_SIZE) -> bool:
        """Check the coordinate is inside a size x size grid."""
        return (
            _is_index(self.row) and _is_index(self.column)
            and 0 <= self.row < size and 0 <= self.column < size
        )


class Board:
    """
    The grid of cells.

    Stored as a numpy array of owner codes (0 empty, 1 X, 2 O).
    Indexing takes a Position (or any (row, col) pair) and returns an Owner.
    """

    def __init__(self, size: int = GameConfig.BOARD_SIZE, grid: Optional[np.ndarray] = None):
        self.size = size
        if grid is None:
            self.grid = np.zeros((size, size), dtype=np.int8)
        else:
            self.grid = np.array(grid, dtype=np.int8).reshape(size, size)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """
        Build a board from marker strings, one per row.

        Example:
            Board.from_rows(["XO.", ".X.", "..O"])
        """
        codes = [[Owner.from_marker(char).value for char in row] for row in rows]
        return cls(size=len(codes), grid=np.array(codes))

    def __getitem__(self, position: Tuple[int, int]) -> Owner:
        row, col = position
        return Owner(int(self.grid[row, col]))

    def __setitem__(self, position: Tuple[int, int], owner: Owner):
        row, col = position
        self.grid[row, col] = owner.value

    def __iter__(self) -> Iterator[Tuple[Position, Owner]]:
        # Row-major: (0,0), (0,1), ... (2,2)
        for row in range(self.size):
            for col in range(self.size):
                yield Position(row, col), Owner(int(self.grid[row, col]))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __repr__(self) -> str:
        return f"Board({self.to_rows()!r})"

    def positions(self) -> List[Position]:
        """All positions in row-major order."""
        return [Position(row, col) for row in range(self.size) for col in range(self.size)]

    def empty_cells(self) -> List[Position]:
        """
        Get all empty cells on the board.

        Returns:
            List of Positions in row-major order.
        """
        return [Position(int(row), int(col)) for row, col in np.argwhere(self.grid == Owner.NONE.value)]

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.grid))

    def is_full(self) -> bool:
        return not (self.grid == Owner.NONE.value).any()

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(size=self.size, grid=self.grid.copy())

    def read_only(self) -> "Board":
        """
        A view of this board that cannot be written to.

        Shares the cells with this board, so later moves show through.
        Writing a cell raises ValueError. copy() of the view is writable.
        """
        view = Board.__new__(Board)
        view.size = self.size
        view.grid = self.grid.view()
        view.grid.flags.writeable = False
        return view

    def to_rows(self) -> List[str]:
        """Marker strings, one per row."""
        return ["".join(Owner(int(code)).marker for code in row) for row in self.grid]

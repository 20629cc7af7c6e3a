"""
Game configuration for TicTacToe.
Board dimensions, AI scoring and the text shown by the front ends.
"""

import logging


class GameConfig:
    """
    Configuration class for the game core.
    Everything here is a plain constant - change them here, not in the code.
    """

    # ==================== BOARD SETTINGS ====================
    # Standard 3x3 grid. Only 3 is supported.
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # ==================== AI SETTINGS ====================
    # Base score of a won/lost position for minimax.
    # Remaining empty cells are added on top so faster wins score higher.
    WIN_SCORE = 10

    # Difficulty used by the console front end when none is given
    DEFAULT_DIFFICULTY = "hard"

    # ==================== DISPLAY SETTINGS ====================
    # Character per owner, used when the board crosses to a front end
    MARKER_X = "X"
    MARKER_O = "O"
    MARKER_EMPTY = "."

    # Status text per game state
    STATUS_X_MOVE = "Player X moves"
    STATUS_O_MOVE = "Player O moves"
    STATUS_X_WIN = "Player X wins"
    STATUS_O_WIN = "Player O wins"
    STATUS_DRAW = "Tie"

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

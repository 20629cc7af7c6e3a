"""
TicTacToe game core.
Handles the board, game rules and the AI opponent.
"""

__version__ = "1.0.0"

from .ai_player import AIPlayer, Difficulty, InvalidDifficultyError, Opponent, get_move
from .board import Board, Owner, Position
from .config import GameConfig
from .game_state import Game, State, StateKind
from .move_validator import InvalidMoveError, MoveValidator, ValidationResult
from .session import GameSession
from .win_checker import WinChecker

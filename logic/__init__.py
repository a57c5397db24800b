"""
Logic module for TicTacToe.
Handles board state, move history, and the rules.
"""

from .config import GameConfig
from .game_state import (
    GameError,
    InvalidDimensionError,
    BoardSizeError,
    CellIndexError,
    HistoryIndexError,
    Mark,
    GameHistory,
    empty_board,
    place_mark,
    append_snapshot,
    jump_to,
    reset_history,
    player_for_move,
)
from .win_checker import WinChecker, GameOutcome, Outcome, evaluate
from .move_validator import MoveValidator, ValidationResult, is_legal_move
from .game import GameSession, HistoryEntry

__version__ = "1.0.0"

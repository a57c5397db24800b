"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .game_state import Board, check_board, check_index
from .win_checker import WinChecker


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
    2. Can only place on cells that exist
    3. Can only place on empty cells
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(
        self,
        board: Board,
        dimension: int,
        index: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            dimension: Board size N.
            index: Cell to place the mark in (0 to N*N-1).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        check_board(board, dimension)

        # Check if game is over
        if self.win_checker.evaluate(board, dimension).is_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        size = dimension * dimension
        if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < size):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-{size - 1}."
            )

        # Check if cell is empty
        if not board[index].is_empty:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def is_legal_move(self, board: Board, dimension: int, index: int) -> bool:
        """
        True if the game is still going and the cell is empty.

        Raises:
            CellIndexError: if index is off the board.
        """
        check_board(board, dimension)
        check_index(index, dimension)
        return self.validate_move(board, dimension, index).is_valid

    def get_valid_moves(self, board: Board, dimension: int) -> List[int]:
        """
        Get all cells the current player may play.

        Returns:
            List of cell indices, empty once the game is over.
        """
        if self.win_checker.evaluate(board, dimension).is_over:
            return []

        return [index for index, cell in enumerate(board) if cell.is_empty]


def is_legal_move(board: Board, dimension: int, index: int) -> bool:
    """Check a move with a fresh MoveValidator."""
    return MoveValidator().is_legal_move(board, dimension, index)

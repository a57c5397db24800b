"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass

import numpy as np

from .game_state import Board, Mark, check_board, check_dimension


# A line is the board indices checked together for a shared mark
Line = Tuple[int, ...]


class Outcome(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    DRAW = "draw"
    WON = "won"


@dataclass(frozen=True)
class GameOutcome:
    """Result of evaluating a board."""
    status: Outcome
    mark: Optional[Mark] = None     # Winning mark, only set when WON
    winning_line: Line = ()         # Indices of the winning line, only set when WON

    @property
    def is_over(self) -> bool:
        return self.status is not Outcome.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status is Outcome.DRAW

    @property
    def is_won(self) -> bool:
        return self.status is Outcome.WON


IN_PROGRESS = GameOutcome(Outcome.IN_PROGRESS)
DRAW = GameOutcome(Outcome.DRAW)


class WinChecker:
    """
    Checks for win conditions in TicTacToe on an NxN board.

    Win condition: N marks of the same player in a row
    (horizontally, vertically, or along one of the two main diagonals)
    """

    def winning_lines(self, dimension: int) -> List[Line]:
        """
        All lines that can win, in check order.

        Rows first, then columns, then the top-left to bottom-right
        diagonal, then the top-right to bottom-left diagonal.

        Args:
            dimension: Board size N.

        Returns:
            2N + 2 lines of N indices each.
        """
        check_dimension(dimension)
        grid = np.arange(dimension * dimension).reshape(dimension, dimension)

        lines = [tuple(int(i) for i in row) for row in grid]
        lines += [tuple(int(i) for i in col) for col in grid.T]
        lines.append(tuple(int(i) for i in grid.diagonal()))
        lines.append(tuple(int(i) for i in np.fliplr(grid).diagonal()))
        return lines

    def evaluate(self, board: Board, dimension: int) -> GameOutcome:
        """
        Work out where the game stands.

        Recomputed from scratch on every call, nothing is cached.

        Args:
            board: The board to check.
            dimension: Board size N.

        Returns:
            WON with the first winning line found, DRAW if the board is
            full with no winner, IN_PROGRESS otherwise.
        """
        check_board(board, dimension)

        for line in self.winning_lines(dimension):
            mark = self._check_line(board, line)
            if mark is not None:
                return GameOutcome(Outcome.WON, mark=mark, winning_line=line)

        if all(not cell.is_empty for cell in board):
            return DRAW

        return IN_PROGRESS

    def _check_line(self, board: Board, line: Line) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The mark filling the whole line, None otherwise.
        """
        first = board[line[0]]
        if first.is_empty:
            return None  # Empty cell, no winner on this line

        if all(board[index] is first for index in line):
            return first

        return None

    def check_winner(self, board: Board, dimension: int) -> Optional[Mark]:
        """Get the winning mark, or None if no winner yet."""
        return self.evaluate(board, dimension).mark

    def get_winning_line(self, board: Board, dimension: int) -> Optional[Line]:
        """Get the winning line if there is one."""
        outcome = self.evaluate(board, dimension)
        return outcome.winning_line if outcome.is_won else None

    def check_draw(self, board: Board, dimension: int) -> bool:
        """A draw is a full board with no winner."""
        return self.evaluate(board, dimension).is_draw


def evaluate(board: Board, dimension: int) -> GameOutcome:
    """Evaluate a board with a fresh WinChecker."""
    return WinChecker().evaluate(board, dimension)

"""
Game session for TicTacToe.
Ties the history, win checker and move validator together for a front end.
"""

from typing import List, Set
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameError, GameHistory, Board, Mark, place_mark
from .move_validator import MoveValidator
from .win_checker import WinChecker, GameOutcome


@dataclass
class HistoryEntry:
    """One row of the move list."""
    move: int               # Move number (0 = game start)
    description: str        # "game start" or "move #n"
    is_current: bool        # True for the move being viewed

    @property
    def label(self) -> str:
        if self.is_current:
            return f"You are here at {self.description}"
        return f"Go to {self.description}"


class GameSession:
    """
    One game as seen by the UI or the console.

    Game flow:
    1. Read the current board and status
    2. Click a cell -> play() checks it is legal and records the new board
    3. Click a history entry -> jump_to() views an older board
    4. Playing from an older board throws away the moves after it
    5. Moving the size slider -> resize() starts over on a new board
    """

    def __init__(self, dimension: int = GameConfig.DEFAULT_DIMENSION, fixed_size: bool = False):
        """
        Start a new game.

        Args:
            dimension: Board size N.
            fixed_size: If True, the board is locked to the classic 3x3.
        """
        self.fixed_size = fixed_size
        if fixed_size and dimension != GameConfig.FIXED_DIMENSION:
            raise GameError(
                f"Fixed-size game is always {GameConfig.FIXED_DIMENSION}x{GameConfig.FIXED_DIMENSION}"
            )

        self.history = GameHistory(dimension=dimension)
        self.win_checker = WinChecker()
        self.validator = MoveValidator(self.win_checker)
        self.ascending = True

    @property
    def dimension(self) -> int:
        return self.history.dimension

    @property
    def board(self) -> Board:
        return self.history.current_board

    @property
    def current_player(self) -> Mark:
        return self.history.current_player

    @property
    def outcome(self) -> GameOutcome:
        """Status of the board being viewed, recomputed every time."""
        return self.win_checker.evaluate(self.board, self.dimension)

    def play(self, index: int) -> bool:
        """
        Place the current player's mark.

        Args:
            index: Cell to play (0 to N*N-1).

        Returns:
            True if the move was made, False if it was not legal.
        """
        if not self.validator.is_legal_move(self.board, self.dimension, index):
            return False

        next_board = place_mark(self.board, index, self.current_player)
        self.history.append(next_board)
        return True

    def jump_to(self, move: int) -> int:
        """View the board after the given move."""
        return self.history.jump_to(move)

    def resize(self, dimension: int):
        """Start over on a board of a new size."""
        if self.fixed_size and dimension != GameConfig.FIXED_DIMENSION:
            raise GameError(
                f"Board size is fixed at {GameConfig.FIXED_DIMENSION}x{GameConfig.FIXED_DIMENSION}"
            )
        self.history.reset(dimension)

    def reset(self):
        """Start over on the same board size."""
        self.history.reset()

    def toggle_order(self) -> bool:
        """Flip the move list between ascending and descending."""
        self.ascending = not self.ascending
        return self.ascending

    def status_text(self) -> str:
        outcome = self.outcome
        if outcome.is_draw:
            return "Draw"
        if outcome.is_won:
            return f"Winner: {outcome.mark.value}"
        return f"Next player: {self.current_player.value}"

    def winning_cells(self) -> Set[int]:
        """Cells to highlight on the board."""
        return set(self.outcome.winning_line)

    def history_entries(self) -> List[HistoryEntry]:
        """The move list in the selected order."""
        entries = [
            HistoryEntry(
                move=move,
                description="game start" if move == 0 else f"move #{move}",
                is_current=move == self.history.current_move
            )
            for move in range(len(self.history.snapshots))
        ]
        if not self.ascending:
            entries.reverse()
        return entries

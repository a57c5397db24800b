"""
Game state management for TicTacToe.
Tracks board snapshots, the move being viewed, and whose turn it is.
"""

from enum import Enum
from typing import Optional, List, Tuple, Iterable
from dataclasses import dataclass, field

from .config import GameConfig


class GameError(Exception):
    """Base class for game contract violations."""


class InvalidDimensionError(GameError, ValueError):
    """Board size outside the supported range."""


class BoardSizeError(GameError, ValueError):
    """Board length does not match its dimension."""


class CellIndexError(GameError, IndexError):
    """Cell index outside the board."""


class HistoryIndexError(GameError, IndexError):
    """Move number outside the recorded history."""


class Mark(Enum):
    """What a cell can hold."""
    X = GameConfig.X_SYMBOL
    O = GameConfig.O_SYMBOL
    EMPTY = GameConfig.EMPTY_SYMBOL

    @property
    def is_empty(self) -> bool:
        return self is Mark.EMPTY

    def opposite(self) -> "Mark":
        """Get the opposite player's mark."""
        if self is Mark.EMPTY:
            raise ValueError("EMPTY has no opposite")
        return Mark.O if self is Mark.X else Mark.X


# A board is an immutable row-major tuple of marks
Board = Tuple[Mark, ...]


def check_dimension(dimension: int) -> int:
    """
    Make sure a board size is supported.

    Raises:
        InvalidDimensionError: if dimension is not an int in the allowed range.
    """
    if isinstance(dimension, bool) or not isinstance(dimension, int):
        raise InvalidDimensionError(f"Board size must be an integer, got {dimension!r}")
    if not (GameConfig.MIN_DIMENSION <= dimension <= GameConfig.MAX_DIMENSION):
        raise InvalidDimensionError(
            f"Invalid board size {dimension}. "
            f"Must be {GameConfig.MIN_DIMENSION}-{GameConfig.MAX_DIMENSION}."
        )
    return dimension


def check_board(board: Board, dimension: int) -> Board:
    """Make sure a board has exactly dimension*dimension cells."""
    check_dimension(dimension)
    if len(board) != dimension * dimension:
        raise BoardSizeError(
            f"Board has {len(board)} cells, expected {dimension * dimension} "
            f"for a {dimension}x{dimension} game"
        )
    return board


def check_index(index: int, dimension: int) -> int:
    """Make sure a cell index lies on the board."""
    size = dimension * dimension
    if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < size):
        raise CellIndexError(f"Invalid cell {index!r}. Must be 0-{size - 1}.")
    return index


def empty_board(dimension: int) -> Board:
    """Create a board with every cell empty."""
    check_dimension(dimension)
    return (Mark.EMPTY,) * (dimension * dimension)


def cell_index(row: int, col: int, dimension: int) -> int:
    """Convert (row, col) to a flat board index."""
    if not (0 <= row < dimension and 0 <= col < dimension):
        raise CellIndexError(
            f"Invalid position ({row}, {col}). Must be 0-{dimension - 1}."
        )
    return row * dimension + col


def cell_position(index: int, dimension: int) -> Tuple[int, int]:
    """Convert a flat board index to (row, col)."""
    check_index(index, dimension)
    return divmod(index, dimension)


def place_mark(board: Board, index: int, mark: Mark) -> Board:
    """
    Return a copy of the board with mark placed at index.
    The original board is left untouched.
    """
    if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < len(board)):
        raise CellIndexError(f"Invalid cell {index!r}. Must be 0-{len(board) - 1}.")
    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def format_board(board: Board, dimension: int, highlight: Iterable[int] = ()) -> str:
    """
    Draw the board as a text grid.

    Highlighted cells are wrapped in brackets, e.g. [X].
    """
    check_board(board, dimension)
    highlight = set(highlight)
    segment = "───"

    header = "    " + "   ".join(str(col) for col in range(dimension))
    lines = [header, "  ┌" + "┬".join([segment] * dimension) + "┐"]

    for row in range(dimension):
        cells = []
        for col in range(dimension):
            index = row * dimension + col
            symbol = board[index].value
            cells.append(f"[{symbol}]" if index in highlight else f" {symbol} ")
        lines.append(f"{row} │" + "│".join(cells) + "│")
        if row < dimension - 1:
            lines.append("  ├" + "┼".join([segment] * dimension) + "┤")

    lines.append("  └" + "┴".join([segment] * dimension) + "┘")
    return "\n".join(lines)


# ==================== HISTORY ====================

def reset_history(dimension: int) -> Tuple[List[Board], int]:
    """Start a fresh history holding only the empty board."""
    return [empty_board(dimension)], 0


def append_snapshot(
    history: List[Board],
    current_move: int,
    next_board: Board
) -> Tuple[List[Board], int]:
    """
    Record a new board after the move currently being viewed.

    Every snapshot after current_move is dropped before next_board is
    pushed, so playing from an earlier point overwrites the old future.
    No legality check happens here.

    Returns:
        (new_history, new_current_move)
    """
    if not 0 <= current_move < len(history):
        raise HistoryIndexError(
            f"Invalid move {current_move}. History has {len(history)} snapshots."
        )
    new_history = list(history[:current_move + 1])
    new_history.append(next_board)
    return new_history, len(new_history) - 1


def jump_to(history: List[Board], move: int) -> int:
    """Validate a move number to view; returns it unchanged."""
    if isinstance(move, bool) or not isinstance(move, int) or not (0 <= move < len(history)):
        raise HistoryIndexError(
            f"Invalid move {move!r}. Must be 0-{len(history) - 1}."
        )
    return move


def player_for_move(move: int) -> Mark:
    """X plays on even moves, O on odd ones."""
    return Mark.X if move % 2 == 0 else Mark.O


@dataclass
class GameHistory:
    """
    The complete history of a TicTacToe game.

    Tracks:
    - The board size
    - One board snapshot per move (snapshot 0 is the empty board)
    - Which snapshot is currently being viewed
    """

    dimension: int = GameConfig.DEFAULT_DIMENSION
    snapshots: List[Board] = field(default_factory=list)
    current_move: int = 0

    def __post_init__(self):
        check_dimension(self.dimension)
        if not self.snapshots:
            self.snapshots, self.current_move = reset_history(self.dimension)
        for board in self.snapshots:
            check_board(board, self.dimension)
        jump_to(self.snapshots, self.current_move)

    @property
    def current_board(self) -> Board:
        """The board at the move being viewed."""
        return self.snapshots[self.current_move]

    @property
    def current_player(self) -> Mark:
        """Whose turn it is at the move being viewed."""
        return player_for_move(self.current_move)

    @property
    def move_count(self) -> int:
        """Number of moves recorded (not counting the empty start board)."""
        return len(self.snapshots) - 1

    @property
    def is_at_latest(self) -> bool:
        return self.current_move == len(self.snapshots) - 1

    def append(self, next_board: Board) -> int:
        """
        Record next_board after the current move.

        Args:
            next_board: The board after the move. Must already be validated.

        Returns:
            The new current move number.
        """
        check_board(next_board, self.dimension)
        self.snapshots, self.current_move = append_snapshot(
            self.snapshots, self.current_move, next_board
        )
        return self.current_move

    def jump_to(self, move: int) -> int:
        """View the board as it was after the given move."""
        self.current_move = jump_to(self.snapshots, move)
        return self.current_move

    def reset(self, dimension: Optional[int] = None):
        """Throw away all moves and start over, optionally at a new size."""
        if dimension is None:
            dimension = self.dimension
        # Raises on a bad size before any field changes
        snapshots, current_move = reset_history(dimension)
        self.dimension = dimension
        self.snapshots = snapshots
        self.current_move = current_move

    def copy(self) -> "GameHistory":
        """Create a copy of the history. Snapshots are immutable so they are shared."""
        return GameHistory(
            dimension=self.dimension,
            snapshots=list(self.snapshots),
            current_move=self.current_move
        )

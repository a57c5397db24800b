"""
Test script for TicTacToe logic modules.
Run this to verify the rules and history work before playing.
"""

import sys

from logic.config import GameConfig
from logic.game import GameSession
from logic.game_state import (
    Mark, GameHistory, GameError, InvalidDimensionError, BoardSizeError,
    CellIndexError, HistoryIndexError, empty_board, place_mark, append_snapshot,
    jump_to, reset_history, player_for_move, cell_index, cell_position,
)
from logic.move_validator import MoveValidator, is_legal_move
from logic.win_checker import WinChecker, Outcome, evaluate


X, O, E = Mark.X, Mark.O, Mark.EMPTY


def board_with(dimension, x_cells=(), o_cells=()):
    """Build a board with X and O at the given indices."""
    board = empty_board(dimension)
    for index in x_cells:
        board = place_mark(board, index, X)
    for index in o_cells:
        board = place_mark(board, index, O)
    return board


def test_winning_lines():
    """Test line enumeration order and shape."""
    print("\n=== Testing Winning Lines ===")
    checker = WinChecker()

    assert checker.winning_lines(3) == [
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    ]

    for n in GameConfig.dimensions():
        lines = checker.winning_lines(n)
        assert len(lines) == 2 * n + 2
        assert all(len(line) == n for line in lines)
        assert lines[-2] == tuple(k * (n + 1) for k in range(n))
        assert lines[-1] == tuple((k + 1) * (n - 1) for k in range(n))
    print("  ✓ Winning lines OK")


def test_evaluate_in_progress():
    """Test boards with no winner and empty cells."""
    print("\n=== Testing Evaluate (in progress) ===")
    for n in GameConfig.dimensions():
        assert evaluate(empty_board(n), n).status is Outcome.IN_PROGRESS

    outcome = evaluate(board_with(3, x_cells=[0, 4], o_cells=[1]), 3)
    assert outcome.status is Outcome.IN_PROGRESS
    assert outcome.mark is None
    assert outcome.winning_line == ()
    assert not outcome.is_over
    print("  ✓ In progress OK")


def test_evaluate_row_win():
    """Moves 0,4,1,3,2 give X the top row."""
    print("\n=== Testing Evaluate (row win) ===")
    session = GameSession(dimension=3)
    for index in [0, 4, 1, 3, 2]:
        assert session.play(index)

    outcome = session.outcome
    assert outcome.status is Outcome.WON
    assert outcome.mark is X
    assert outcome.winning_line == (0, 1, 2)
    assert session.status_text() == "Winner: X"
    assert session.winning_cells() == {0, 1, 2}
    print("  ✓ Row win OK")


def test_evaluate_draw():
    """A full board with no line is a draw."""
    print("\n=== Testing Evaluate (draw) ===")
    board = (X, O, X, X, O, O, O, X, X)
    outcome = evaluate(board, 3)
    assert outcome.status is Outcome.DRAW
    assert outcome.is_over
    assert outcome.mark is None

    # Reach the same board by playing it out
    session = GameSession(dimension=3)
    for index in [0, 1, 2, 4, 3, 5, 7, 6, 8]:
        assert session.play(index)
    assert session.board == board
    assert session.status_text() == "Draw"
    assert session.winning_cells() == set()
    print("  ✓ Draw OK")


def test_evaluate_large_boards():
    """Column win on 4x4 and anti-diagonal win on 5x5."""
    print("\n=== Testing Evaluate (4x4, 5x5) ===")
    outcome = evaluate(board_with(4, x_cells=[1, 5, 9, 13], o_cells=[0, 2, 3]), 4)
    assert outcome.is_won
    assert outcome.mark is X
    assert outcome.winning_line == (1, 5, 9, 13)

    outcome = evaluate(board_with(5, x_cells=[0, 1, 2, 3, 10], o_cells=[4, 8, 12, 16, 20]), 5)
    assert outcome.is_won
    assert outcome.mark is O
    assert outcome.winning_line == (4, 8, 12, 16, 20)

    # Four in a row is not enough on 5x5
    outcome = evaluate(board_with(5, x_cells=[0, 1, 2, 3]), 5)
    assert outcome.status is Outcome.IN_PROGRESS
    print("  ✓ Large boards OK")


def test_evaluate_check_order():
    """When several lines are full the first in check order wins."""
    print("\n=== Testing Evaluate (check order) ===")
    # Row 0 beats column 0
    outcome = evaluate(board_with(3, x_cells=[0, 1, 2, 3, 6]), 3)
    assert outcome.winning_line == (0, 1, 2)

    # Column 0 beats the diagonal
    outcome = evaluate(board_with(3, x_cells=[0, 3, 6, 4, 8]), 3)
    assert outcome.winning_line == (0, 3, 6)

    # Diagonal beats anti-diagonal
    outcome = evaluate(board_with(3, x_cells=[0, 4, 8, 2, 6]), 3)
    assert outcome.winning_line == (0, 4, 8)
    print("  ✓ Check order OK")


def test_evaluate_idempotent():
    """Evaluating twice gives the same answer."""
    print("\n=== Testing Evaluate (idempotent) ===")
    checker = WinChecker()
    board = board_with(4, x_cells=[0, 5, 10, 15], o_cells=[1, 2, 3])
    first = checker.evaluate(board, 4)
    second = checker.evaluate(board, 4)
    assert first == second
    assert checker.check_winner(board, 4) is X
    assert checker.get_winning_line(board, 4) == (0, 5, 10, 15)
    assert not checker.check_draw(board, 4)
    print("  ✓ Idempotent OK")


def test_contract_checks():
    """Bad sizes, boards and indices fail loudly."""
    print("\n=== Testing Contract Checks ===")
    for bad in (2, 6, 0, -3, True, "3", 3.0):
        try:
            empty_board(bad)
        except InvalidDimensionError:
            pass
        else:
            raise AssertionError(f"dimension {bad!r} was accepted")

    try:
        evaluate(empty_board(3), 4)
    except BoardSizeError:
        pass
    else:
        raise AssertionError("board/dimension mismatch was accepted")

    for bad in (-1, 9, 100):
        try:
            is_legal_move(empty_board(3), 3, bad)
        except CellIndexError:
            pass
        else:
            raise AssertionError(f"index {bad} was accepted")

    try:
        cell_index(3, 0, 3)
    except CellIndexError:
        pass
    else:
        raise AssertionError("row 3 was accepted on 3x3")

    assert cell_index(1, 2, 3) == 5
    assert cell_position(5, 3) == (1, 2)
    assert issubclass(CellIndexError, IndexError)
    assert issubclass(InvalidDimensionError, ValueError)
    print("  ✓ Contract checks OK")


def test_move_validator():
    """Test legal and illegal moves."""
    print("\n=== Testing Move Validator ===")
    validator = MoveValidator()
    board = board_with(3, x_cells=[4])

    assert validator.is_legal_move(board, 3, 0)
    assert not validator.is_legal_move(board, 3, 4)

    result = validator.validate_move(board, 3, 4)
    assert not result.is_valid
    assert result.error_message == "Cell 4 is already occupied by X"

    result = validator.validate_move(board, 3, 9)
    assert not result.is_valid
    assert result.error_message == "Invalid cell 9. Must be 0-8."

    won = board_with(3, x_cells=[0, 1, 2], o_cells=[3, 4])
    assert not validator.is_legal_move(won, 3, 8)
    assert validator.validate_move(won, 3, 8).error_message == "Game is already over!"
    assert validator.get_valid_moves(won, 3) == []

    assert validator.get_valid_moves(board, 3) == [0, 1, 2, 3, 5, 6, 7, 8]
    print("  ✓ Move validator OK")


def test_place_mark_copies():
    """Placing a mark never changes the original board."""
    print("\n=== Testing Place Mark ===")
    board = empty_board(3)
    new_board = place_mark(board, 4, X)
    assert board[4] is E
    assert new_board[4] is X
    assert new_board is not board

    for bad in (-1, 9, 1.0, True, "4"):
        try:
            place_mark(board, bad, X)
        except CellIndexError:
            pass
        else:
            raise AssertionError(f"place_mark accepted index {bad!r}")
    print("  ✓ Place mark OK")


def test_history_functions():
    """Test the pure history functions."""
    print("\n=== Testing History Functions ===")
    history, current = reset_history(4)
    assert current == 0
    assert history == [empty_board(4)]
    assert len(history[0]) == 16

    first = place_mark(history[0], 0, X)
    new_history, new_current = append_snapshot(history, current, first)
    assert new_current == 1
    assert len(history) == 1  # input left alone
    assert new_history[jump_to(new_history, len(new_history) - 1)] == first

    for bad in (-1, 2):
        try:
            jump_to(new_history, bad)
        except HistoryIndexError:
            pass
        else:
            raise AssertionError(f"jump to {bad} was accepted")

    assert player_for_move(0) is X
    assert player_for_move(1) is O
    assert player_for_move(6) is X
    assert X.opposite() is O and O.opposite() is X
    try:
        E.opposite()
    except ValueError:
        pass
    else:
        raise AssertionError("EMPTY had an opposite")
    print("  ✓ History functions OK")


def test_branch_and_truncate():
    """Playing from an old move throws away the moves after it."""
    print("\n=== Testing Branch and Truncate ===")
    history = GameHistory(dimension=3)
    boards = [history.current_board]
    for index, mark in [(0, X), (1, O), (2, X)]:
        boards.append(place_mark(boards[-1], index, mark))
        history.append(boards[-1])
    assert history.move_count == 3
    assert history.is_at_latest

    history.jump_to(1)
    assert history.current_board == boards[1]
    assert history.current_player is O
    assert not history.is_at_latest
    assert len(history.snapshots) == 4  # jumping keeps the future

    branch = place_mark(history.current_board, 5, O)
    assert history.append(branch) == 2
    assert history.snapshots == [boards[0], boards[1], branch]
    assert history.current_board[1] is E
    print("  ✓ Branch and truncate OK")


def test_history_reset():
    """Reset always leaves a single empty board."""
    print("\n=== Testing History Reset ===")
    history = GameHistory(dimension=3)
    history.append(place_mark(history.current_board, 0, X))

    for n in GameConfig.dimensions():
        history.reset(n)
        assert history.dimension == n
        assert history.snapshots == [empty_board(n)]
        assert history.current_move == 0

    try:
        history.reset(6)
    except InvalidDimensionError:
        pass
    else:
        raise AssertionError("reset to 6 was accepted")
    assert history.dimension == 5  # state untouched

    clone = history.copy()
    clone.append(place_mark(clone.current_board, 0, X))
    assert history.move_count == 0
    print("  ✓ History reset OK")


def test_game_session():
    """Test the session used by the UI and console."""
    print("\n=== Testing Game Session ===")
    session = GameSession()
    assert session.dimension == GameConfig.DEFAULT_DIMENSION
    assert session.status_text() == "Next player: X"

    assert session.play(4)
    assert session.status_text() == "Next player: O"
    assert not session.play(4)  # occupied
    assert session.history.move_count == 1

    assert session.play(0)
    labels = [entry.label for entry in session.history_entries()]
    assert labels == ["Go to game start", "Go to move #1", "You are here at move #2"]

    assert session.toggle_order() is False
    labels = [entry.label for entry in session.history_entries()]
    assert labels == ["You are here at move #2", "Go to move #1", "Go to game start"]

    session.jump_to(0)
    assert session.status_text() == "Next player: X"
    assert session.play(8)
    assert session.history.move_count == 1
    assert session.board[8] is X and session.board[4] is E

    session.resize(5)
    assert session.dimension == 5
    assert len(session.board) == 25
    assert session.history.move_count == 0
    print("  ✓ Game session OK")


def test_fixed_size_session():
    """The classic game cannot be resized."""
    print("\n=== Testing Fixed-Size Session ===")
    session = GameSession(fixed_size=True)
    try:
        session.resize(4)
    except GameError:
        pass
    else:
        raise AssertionError("fixed game was resized")
    assert session.dimension == 3

    session.resize(3)  # same size is a plain reset

    try:
        GameSession(dimension=5, fixed_size=True)
    except GameError:
        pass
    else:
        raise AssertionError("fixed game started at 5x5")
    print("  ✓ Fixed-size session OK")


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Logic Tests")
    print("="*60)

    tests = {
        "Winning Lines": test_winning_lines,
        "Evaluate (in progress)": test_evaluate_in_progress,
        "Evaluate (row win)": test_evaluate_row_win,
        "Evaluate (draw)": test_evaluate_draw,
        "Evaluate (4x4, 5x5)": test_evaluate_large_boards,
        "Evaluate (check order)": test_evaluate_check_order,
        "Evaluate (idempotent)": test_evaluate_idempotent,
        "Contract Checks": test_contract_checks,
        "Move Validator": test_move_validator,
        "Place Mark": test_place_mark_copies,
        "History Functions": test_history_functions,
        "Branch and Truncate": test_branch_and_truncate,
        "History Reset": test_history_reset,
        "Game Session": test_game_session,
        "Fixed-Size Session": test_fixed_size_session,
    }

    results = {}
    for name, test in tests.items():
        try:
            test()
            results[name] = True
        except AssertionError as e:
            print(f"  ✗ {name} FAILED: {e}")
            results[name] = False

    print("\n" + "="*60)
    print("   Test Results")
    print("="*60)

    all_passed = True
    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")
        if not passed:
            all_passed = False

    print("="*60)

    if all_passed:
        print("\n🎉 All tests passed! Ready to play TicTacToe.\n")
        return 0
    else:
        print("\n⚠ Some tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())

"""
Main entry point for time-travel TicTacToe.

This script ties together:
- Logic (board history, move validation, win checking)
- The Tkinter UI (default)
- A console mode for playing in a terminal (--no-ui)

Run this script to play TicTacToe!
"""

from typing import List

from board_image import save_board_image
from logic.config import GameConfig
from logic.game import GameSession
from logic.game_state import GameError, cell_index, format_board


HELP_TEXT = """Commands:
  <cell>        play a cell by index (0 = top-left)
  <row> <col>   play a cell by position
  jump <n>      view the board after move n (0 = game start)
  history       show the move list
  order         flip the move list order
  size <n>      start over on an n x n board
  reset         start over on the same board
  save <path>   save the board as a PNG image
  help          show this help
  quit          leave the game"""


class ConsoleGame:
    """
    Console controller for TicTacToe.

    Game flow:
    1. Show the board and whose turn it is
    2. Read a command (play a cell, jump through history, resize...)
    3. Print the result
    4. Repeat until the player quits
    """

    def __init__(self, dimension: int = GameConfig.DEFAULT_DIMENSION, fixed_size: bool = False):
        self.session = GameSession(dimension=dimension, fixed_size=fixed_size)
        self.is_running = False

    def render(self) -> str:
        """Board plus status line."""
        board = format_board(
            self.session.board,
            self.session.dimension,
            highlight=self.session.winning_cells()
        )
        return f"{board}\n{self.session.status_text()}"

    def render_history(self) -> str:
        return "\n".join(
            f"  {'>' if entry.is_current else ' '} {entry.label}"
            for entry in self.session.history_entries()
        )

    def handle_command(self, line: str) -> str:
        """
        Run one command.

        Args:
            line: What the player typed.

        Returns:
            Text to show the player.
        """
        parts = line.strip().lower().split()
        if not parts:
            return ""

        command, args = parts[0], parts[1:]
        try:
            if command in ("quit", "q", "exit"):
                self.is_running = False
                return "Quitting..."
            if command in ("help", "?"):
                return HELP_TEXT
            if command == "history":
                return self.render_history()
            if command == "order":
                self.session.toggle_order()
                return self.render_history()
            if command == "jump":
                self.session.jump_to(self._single_int(args, "jump <n>"))
                return self.render()
            if command == "size":
                self.session.resize(self._single_int(args, "size <n>"))
                return self.render()
            if command == "reset":
                self.session.reset()
                return self.render()
            if command == "save":
                if not args:
                    return "Usage: save <path>"
                path = save_board_image(self.session, line.strip().split(maxsplit=1)[1])
                return f"Saved to {path}"
            return self._play(parts)
        except (GameError, ValueError, OSError) as e:
            return f"Error: {e}"

    def _single_int(self, args: List[str], usage: str) -> int:
        if len(args) != 1:
            raise ValueError(f"Usage: {usage}")
        return int(args[0])

    def _play(self, parts: List[str]) -> str:
        """Play a cell given as an index or as row and column."""
        try:
            numbers = [int(p) for p in parts]
        except ValueError:
            return f"Unknown command '{parts[0]}'. Type 'help' for commands."

        if len(numbers) == 1:
            index = numbers[0]
        elif len(numbers) == 2:
            index = cell_index(numbers[0], numbers[1], self.session.dimension)
        else:
            return "Enter a cell index or a row and column."

        validator = self.session.validator
        result = validator.validate_move(self.session.board, self.session.dimension, index)
        if not result.is_valid:
            return result.error_message

        self.session.play(index)
        return self.render()

    def run(self):
        """Read commands from stdin until the player quits."""
        self.is_running = True
        print(self.render())
        print("Type 'help' for commands.\n")

        while self.is_running:
            try:
                line = input(f"{self.session.current_player.value}> ")
            except EOFError:
                break
            output = self.handle_command(line)
            if output:
                print(output)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Time-travel TicTacToe")
    parser.add_argument(
        "--size",
        type=int,
        choices=GameConfig.dimensions(),
        default=GameConfig.DEFAULT_DIMENSION,
        help="Starting board size"
    )
    parser.add_argument(
        "--fixed",
        action="store_true",
        help="Play the classic 3x3 game (no resizing)"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()
    if args.fixed and args.size != GameConfig.FIXED_DIMENSION:
        parser.error(f"--fixed only supports --size {GameConfig.FIXED_DIMENSION}")

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(dimension=args.size, fixed_size=args.fixed)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(dimension=args.size, fixed_size=args.fixed)
    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
